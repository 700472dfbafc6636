"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownGradeError(DomainException):
    """Grade name is not in the grade profile table"""

    pass


class RecordNotFoundError(DomainException):
    """No calculation record exists with the given id"""

    pass


class ExportError(DomainException):
    """Record could not be rendered to the requested format"""

    pass
