"""Domain-layer error definitions.

Two recoverable families are surfaced to callers:

* `InvalidArgumentError`: the caller sent something malformed or disallowed
  and must fix the input.
* `NotFoundError`: an entity that must exist does not.

Entrypoints translate these into their own responses (exit codes, HTTP
statuses, ...). Anything else escaping the service layer is unexpected.
"""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidArgumentError(DomainError):
    """Raised when caller-supplied input is malformed or not allowed."""


class NotFoundError(DomainError):
    """Raised when an entity that must exist cannot be found."""


# ============================================================================
#                           Invalid argument errors
# ============================================================================


class UnknownPropertyError(InvalidArgumentError):
    """Raised when a property name is outside the updatable allow-list."""

    def __init__(self, kind: str, property_name: str) -> None:
        super().__init__(
            f"Cannot find modifiable property '{property_name}' on {kind}."
        )
        self.kind = kind
        self.property_name = property_name


class UnparsableValueError(InvalidArgumentError):
    """Raised when a string value cannot be parsed into the expected type."""

    def __init__(self, value: str, expected: str) -> None:
        super().__init__(f"Could not parse {expected} '{value}'.")
        self.value = value
        self.expected = expected


class CaseHasTasksError(InvalidArgumentError):
    """Raised when a new case arrives with tasks already attached."""

    def __init__(self, task_count: int) -> None:
        super().__init__(
            f"New case contains {task_count} task(s); "
            "tasks must be created separately."
        )
        self.task_count = task_count


class MissingParentCaseError(InvalidArgumentError):
    """Raised when a task is created without a parent case reference."""

    def __init__(self) -> None:
        super().__init__("Task has no parent case.")


class UnknownParentCaseError(InvalidArgumentError):
    """Raised when a task is re-pointed at a case that does not exist."""

    def __init__(self, case_id: str) -> None:
        super().__init__(f"Parent case '{case_id}' does not exist.")
        self.case_id = case_id


class DuplicateCaseNumberError(InvalidArgumentError):
    """Raised when a case number is already used by another case."""

    def __init__(self, case_number: str) -> None:
        super().__init__(f"Case number '{case_number}' is already in use.")
        self.case_number = case_number


class InvalidPageRequestError(InvalidArgumentError):
    """Raised when a page request has an invalid number, size or sort."""


class UnknownSortKeyError(InvalidPageRequestError):
    """Raised when a page request sorts by a field that cannot be sorted on."""

    def __init__(self, kind: str, sort_by: str) -> None:
        super().__init__(f"Cannot sort {kind} by '{sort_by}'.")
        self.kind = kind
        self.sort_by = sort_by


# ============================================================================
#                              Not found errors
# ============================================================================


class CaseNotFoundError(NotFoundError):
    """Raised when a case id does not resolve to a case."""

    def __init__(self, case_id: str) -> None:
        super().__init__(f"Case '{case_id}' not found.")
        self.case_id = case_id


class CaseNumberNotFoundError(NotFoundError):
    """Raised when a case number does not resolve to a case."""

    def __init__(self, case_number: str) -> None:
        super().__init__(f"Case with number '{case_number}' not found.")
        self.case_number = case_number


class TaskNotFoundError(NotFoundError):
    """Raised when a task id does not resolve to a task."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task '{task_id}' not found.")
        self.task_id = task_id
