class ReadingError(Exception):
    """
    Base exception for all reading-related domain errors.
    """
    pass


class InvalidBirthDataError(ReadingError):
    """
    Raised when birth inputs (name, date, time, place) are invalid.
    """
    pass


class InvalidMetricsError(ReadingError):
    """
    Raised when palm or face metrics are structurally unusable.
    """
    pass
