"""Exception types raised by nmprune."""


class NmpruneError(Exception):
    """Base exception for nmprune errors."""


class StartPathError(NmpruneError):
    """Raised when the scan start path cannot be resolved to a directory."""
