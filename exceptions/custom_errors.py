from typing import Optional


class UnderageNurseError(Exception):
    """Raised when a submitted date of birth gives an age below the minimum."""

    pass


class MissingFieldError(Exception):
    """Raised when a required nurse field (name, license number, date of birth) is blank."""

    pass


class InvalidSortKeyError(ValueError):
    """Raised when sorting is requested on a field that is not a sortable column."""

    pass


class InvalidPageSizeError(ValueError):
    """Raised when a page size outside the allowed set is selected."""

    pass


class ApiRequestError(Exception):
    """Raised when a call to the nurses backend fails.

    ``message`` holds the human-readable message sent by the server, or None
    when the failure carried none (network error, non-JSON body).
    """

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None, detail: str = ""):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message or ""
        super().__init__(self.detail)

    def user_message(self, fallback: str) -> str:
        return self.message or fallback


# Failures that are caught locally before anything reaches the backend
FORM_ERRORS = (
    UnderageNurseError,
    MissingFieldError,
)
