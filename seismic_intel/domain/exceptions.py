"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class DataUnavailableError(DomainException):
    """Record store or export could not be read"""

    pass


class InvalidRecordError(DomainException):
    """Record data is malformed or violates score/metric bounds"""

    pass


class RecordNotFoundError(DomainException):
    """No record exists for the given slug"""

    pass
