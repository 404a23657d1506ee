"""Errors raised while pruning splat scenes.

I/O failures are reported with the built-in OSError.
"""


class PruneError(Exception):
    """Base class for pruning failures."""


class SchemaError(PruneError, ValueError):
    """Scene attributes are missing or have inconsistent lengths."""


class UsageError(PruneError):
    """Command line was called with the wrong arguments."""
