class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidDateRangeError(ValidationError):
    """Raised when a date range ends before it starts."""


class PasswordPolicyError(ValidationError):
    """Raised when a new password does not meet the policy."""


class DuplicateIdentityError(DomainError):
    """Raised when a unique identifier is already taken."""


class DuplicateEmailError(DuplicateIdentityError):
    pass


class DuplicateEmployeeIdError(DuplicateIdentityError):
    pass


class DuplicatePayrollRecordError(DuplicateIdentityError):
    pass


class NotFoundError(DomainError):
    """Raised when a record cannot be found by its key."""


class AccountNotFoundError(NotFoundError):
    pass


class InvalidStateError(DomainError):
    """Raised when an operation is not allowed in the record's current state."""


class AlreadyDecidedError(InvalidStateError):
    pass


class NoOpenCheckInError(InvalidStateError):
    pass


class InvalidTransitionError(InvalidStateError):
    def __init__(self, from_status: str, to_status: str):
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(f"Invalid transition from '{from_status}' to '{to_status}'")


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class WrongPasswordError(AuthenticationError):
    pass


class NotVerifiedError(AuthenticationError):
    pass


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""
