"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownFrequencyError(DomainException):
    """Payment frequency key is not in the frequency table"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown payment frequency: {value!r}")


class InvalidDateError(DomainException, ValueError):
    """Date input is malformed or of an unsupported type"""

    pass


class InvalidScheduleError(DomainException):
    """Schedule generation parameters are invalid"""

    pass
