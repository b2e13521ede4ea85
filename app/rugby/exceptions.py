"""Errors raised by the access-control and readiness core."""


class RugbyCoreError(Exception):
    """Base class for core computation errors."""


class InvalidRole(RugbyCoreError, ValueError):
    """A role label outside the closed role enumeration."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown role: {value!r}")


class InvalidPermission(RugbyCoreError, ValueError):
    """A permission label outside the closed permission enumeration."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown permission: {value!r}")


class InvalidTrendWindow(RugbyCoreError, ValueError):
    """A trend window other than 7, 14 or 30 days."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unsupported trend window: {value!r} (expected 7, 14 or 30 days)")


class InsufficientData(RugbyCoreError):
    """Fewer than two entries fall inside the trend window."""

    def __init__(self, window_days: int, entries_found: int):
        self.window_days = window_days
        self.entries_found = entries_found
        super().__init__(
            f"Need at least 2 entries in the last {window_days} days, found {entries_found}"
        )
