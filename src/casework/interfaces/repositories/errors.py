"""Exceptions raised by repository implementations."""


class RepositoryError(Exception):
    """Base class for repository errors."""


class ConstraintViolationError(RepositoryError):
    """Raised when a write would break a store-level integrity constraint."""


class CaseNumberAlreadyExistsError(ConstraintViolationError):
    """Conflict: another case already holds this case number.

    Attributes:
        case_number (str): The case number that is already taken.
    """

    def __init__(self, case_number: str):
        super().__init__(f"Case number '{case_number}' is already taken.")
        self.case_number = case_number


class StoreUnavailableError(RepositoryError):
    """Raised when the backing store fails for operational reasons."""
