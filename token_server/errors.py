"""Exceptions raised while issuing room tokens."""


class TokenIssueError(Exception):
    """A token could not be issued."""


class CredentialsNotConfiguredError(TokenIssueError):
    """The LiveKit API key or secret is missing or empty."""

    def __init__(self) -> None:
        super().__init__("LiveKit credentials not configured")
