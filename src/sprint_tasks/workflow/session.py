"""Session - Retry loop around sprint resolution with token re-entry."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from sprint_tasks.jira import AuthenticationError, JiraClient
from sprint_tasks.workflow.exceptions import AuthRetriesExhaustedError
from sprint_tasks.workflow.models import RetryPolicy, SessionState
from sprint_tasks.workflow.sprint import SprintResolver

if TYPE_CHECKING:
    from sprint_tasks.config import Config, ConfigStore
    from sprint_tasks.jira import Sprint

    ClientFactory = Callable[[Config], JiraClient]

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Session:
    """Drives one invocation through the sprint-resolution state machine.

    RESOLVING -> DISPATCHING on success, RESOLVING -> AWAITING_CREDENTIAL on
    HTTP 401, AWAITING_CREDENTIAL -> RESOLVING once a new token is persisted,
    DISPATCHING -> DONE after the operation returns or raises. Any other
    failure propagates out of run().
    """

    def __init__(
        self,
        config: Config,
        store: ConfigStore,
        client_factory: ClientFactory = JiraClient.from_config,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        """Initialize the session.

        Args:
            config: Current config; its token is replaced on auth failure.
            store: ConfigStore used to prompt for and persist a new token.
            client_factory: Builds a JiraClient from the current config.
            retry_policy: Bound on resolution attempts. Unbounded by default.
        """
        self.config = config
        self.store = store
        self.client_factory = client_factory
        self.retry_policy = retry_policy or RetryPolicy()
        self.state = SessionState.RESOLVING
        self.attempts = 0
        self.sprint: Sprint | None = None

    def run(self, operation: Callable[[JiraClient, Sprint], T]) -> T:
        """Resolve the active sprint, then run operation(client, sprint).

        Returns:
            Whatever operation returns.

        Raises:
            AuthRetriesExhaustedError: If the retry policy runs out.
            NoActiveSprintError: If the board has no active sprint.
            RequestFailedError: On any non-401 failure during resolution.
        """
        self.state = SessionState.RESOLVING

        while True:
            if self.state is SessionState.AWAITING_CREDENTIAL:
                self.config = self.store.rotate_token(self.config)
                self.state = SessionState.RESOLVING
                continue

            self.attempts += 1
            # Header is recomputed from the current token on every attempt
            client = self.client_factory(self.config)
            try:
                sprint = SprintResolver(client).resolve(self.config.board_id)
            except AuthenticationError:
                client.close()
                logger.warning("Sprint resolution rejected credentials (attempt %d)", self.attempts)
                if not self.retry_policy.allows(self.attempts):
                    raise AuthRetriesExhaustedError(self.attempts) from None
                self.state = SessionState.AWAITING_CREDENTIAL
            except Exception:
                client.close()
                raise
            else:
                self.sprint = sprint
                self.state = SessionState.DISPATCHING
                return self._dispatch(client, sprint, operation)

    def _dispatch(
        self,
        client: JiraClient,
        sprint: Sprint,
        operation: Callable[[JiraClient, Sprint], T],
    ) -> T:
        """Run operation with the client that resolved sprint, then close it."""
        try:
            return operation(client, sprint)
        finally:
            client.close()
            self.state = SessionState.DONE
            logger.debug("Session done after %d resolution attempt(s)", self.attempts)
