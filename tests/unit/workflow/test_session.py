"""Unit tests for the Session retry loop."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from sprint_tasks.config import Config, ConfigStore
from sprint_tasks.jira import AuthenticationError, RequestFailedError, Sprint
from sprint_tasks.prompts import ScriptedInput
from sprint_tasks.workflow import (
    AuthRetriesExhaustedError,
    NoActiveSprintError,
    RetryPolicy,
    Session,
    SessionState,
)

VALID_TOKEN = "valid-token"


class FakeJira:
    """Client factory accepting only VALID_TOKEN."""

    def __init__(self, sprints: list[Sprint] | None = None) -> None:
        self.sprints = [Sprint(id=42)] if sprints is None else sprints
        self.clients: list[MagicMock] = []
        self.tokens_seen: list[str] = []

    def __call__(self, config: Config) -> MagicMock:
        self.tokens_seen.append(config.api_token)
        client = MagicMock()
        if config.api_token == VALID_TOKEN:
            client.list_active_sprints.return_value = self.sprints
        else:
            client.list_active_sprints.side_effect = AuthenticationError(
                "fetch sprint", 401, "Unauthorized"
            )
        self.clients.append(client)
        return client


@pytest.fixture
def store(config_path: Path) -> ConfigStore:
    return ConfigStore(ScriptedInput([]), path=config_path)


def _watch_persist(store: ConfigStore) -> MagicMock:
    spy = MagicMock(wraps=store.persist)
    store.persist = spy  # type: ignore[method-assign]
    return spy


@pytest.mark.unit
class TestRun:
    """Tests for Session.run."""

    def test_valid_token_dispatches_once(self, config: Config, store: ConfigStore) -> None:
        config.api_token = VALID_TOKEN
        fake = FakeJira()
        persist = _watch_persist(store)
        session = Session(config, store, client_factory=fake)

        result = session.run(lambda client, sprint: sprint.id)

        assert result == 42
        assert session.attempts == 1
        assert session.state is SessionState.DONE
        persist.assert_not_called()
        fake.clients[0].close.assert_called()

    def test_operation_runs_in_dispatching_state(
        self, config: Config, store: ConfigStore
    ) -> None:
        """The operation sees the resolved sprint while DISPATCHING."""
        config.api_token = VALID_TOKEN
        session = Session(config, store, client_factory=FakeJira())
        observed = []

        session.run(lambda client, sprint: observed.append((session.state, session.sprint)))

        assert observed == [(SessionState.DISPATCHING, Sprint(id=42))]
        assert session.state is SessionState.DONE

    @pytest.mark.parametrize("bad_tokens", [1, 3])
    def test_retries_until_valid_token(
        self, config: Config, store: ConfigStore, bad_tokens: int
    ) -> None:
        """N rejected tokens lead to N+1 attempts and N config rewrites."""
        replacements = [f"bad-{i}" for i in range(1, bad_tokens)] + [VALID_TOKEN]
        store.input_source = ScriptedInput(replacements)
        fake = FakeJira()
        persist = _watch_persist(store)
        session = Session(config, store, client_factory=fake)

        session.run(lambda client, sprint: None)

        assert session.attempts == bad_tokens + 1
        assert persist.call_count == bad_tokens
        assert fake.tokens_seen == ["old-token", *replacements]
        assert store.load().api_token == VALID_TOKEN

    def test_operation_gets_client_of_successful_attempt(
        self, config: Config, store: ConfigStore
    ) -> None:
        store.input_source = ScriptedInput([VALID_TOKEN])
        fake = FakeJira()
        seen = []
        session = Session(config, store, client_factory=fake)

        session.run(lambda client, sprint: seen.append((client, sprint)))

        assert seen == [(fake.clients[1], Sprint(id=42))]
        fake.clients[0].close.assert_called()
        fake.clients[1].close.assert_called()

    def test_retry_policy_bounds_attempts(self, config: Config, store: ConfigStore) -> None:
        store.input_source = ScriptedInput(["still-bad"])
        session = Session(
            config, store, client_factory=FakeJira(), retry_policy=RetryPolicy(max_attempts=2)
        )

        with pytest.raises(AuthRetriesExhaustedError) as exc_info:
            session.run(lambda client, sprint: None)

        assert exc_info.value.attempts == 2

    def test_other_status_is_fatal(self, config: Config, store: ConfigStore) -> None:
        """Non-401 failures are not retried and nothing is persisted."""
        client = MagicMock()
        client.list_active_sprints.side_effect = RequestFailedError(
            "fetch sprint", 404, "Not Found"
        )
        persist = _watch_persist(store)
        session = Session(config, store, client_factory=lambda c: client)

        with pytest.raises(RequestFailedError):
            session.run(lambda c, s: None)

        assert session.attempts == 1
        persist.assert_not_called()
        client.close.assert_called_once()

    def test_no_active_sprint(self, config: Config, store: ConfigStore) -> None:
        config.api_token = VALID_TOKEN
        session = Session(config, store, client_factory=FakeJira(sprints=[]))

        with pytest.raises(NoActiveSprintError):
            session.run(lambda c, s: None)

    def test_401_during_operation_not_retried(self, config: Config, store: ConfigStore) -> None:
        """Only sprint resolution triggers credential re-entry."""
        config.api_token = VALID_TOKEN
        session = Session(config, store, client_factory=FakeJira())

        def operation(client: MagicMock, sprint: Sprint) -> None:
            raise AuthenticationError("fetch sprint issues", 401, "Unauthorized")

        with pytest.raises(AuthenticationError):
            session.run(operation)

        assert session.attempts == 1
        assert session.state is SessionState.DONE


@pytest.mark.unit
class TestRetryPolicy:
    """Tests for RetryPolicy.allows."""

    def test_unbounded_by_default(self) -> None:
        assert RetryPolicy().allows(10_000)

    def test_bounded(self) -> None:
        policy = RetryPolicy(max_attempts=3)

        assert policy.allows(2)
        assert not policy.allows(3)
