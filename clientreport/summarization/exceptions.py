class SummarizerError(Exception):
    """Raised when a summary or answer cannot be produced."""


class RemoteUnavailableError(SummarizerError):
    """Raised when the remote provider call fails (network, timeout, non-success status)."""
