"""Exception hierarchy for the staffing matcher"""


class StaffingError(Exception):
    """Base class for all matcher errors"""


class InvalidInputError(StaffingError, ValueError):
    """Demand, weights or policy values that cannot be scored"""


class DataUnavailableError(StaffingError):
    """Roster or reference data could not be loaded from its provider"""
