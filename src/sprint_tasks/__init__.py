"""sprint-tasks - List and create Jira tasks in a board's active sprint."""

__version__ = "0.1.0"
