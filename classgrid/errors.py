"""Error hierarchy.

Parsing and grid building never raise; these cover the collaborators around
the core: schedule loading and the mock clock override.
"""


class ClassgridError(Exception):
    """Base exception for classgrid errors."""

    pass


class ScheduleDataError(ClassgridError):
    """Schedule file missing, unreadable, or failing schema validation."""

    pass


class ClockOverrideError(ClassgridError):
    """Mock date/time override that does not parse."""

    pass


class TimezoneError(ClassgridError):
    """Configured timezone name unknown to the tz database."""

    pass
