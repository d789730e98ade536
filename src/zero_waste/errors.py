"""Exceptions raised while loading and querying a recipe catalog."""


class ZeroWasteError(Exception):
    """Base class for all errors raised by zero_waste."""


class IngestError(ZeroWasteError):
    """The CSV text could not be turned into a catalog."""


class MissingColumnError(IngestError):
    """A required header column is absent."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(f'Missing "{column}" column.')


class SourceUnavailableError(ZeroWasteError):
    """The CSV could not be read from disk or fetched over HTTP."""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Failed to load {location} ({reason})")


class UsageError(ZeroWasteError):
    """The caller supplied an unusable query."""
