"""Cache error types."""


class KeepAliveError(Exception):
    """Base error for the node cache."""

    pass


class PendingCacheError(KeepAliveError):
    """Render and mount confirmation stopped alternating."""

    def __init__(self, message: str, pending_key: str | None = None, key: str | None = None):
        super().__init__(message)
        self.pending_key = pending_key
        self.key = key
