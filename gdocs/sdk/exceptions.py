class GDocsError(Exception):
    """Base class for all gdocs exceptions."""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, code: str = None, status_code: int = None):
        super().__init__(message)
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class AuthorizationError(GDocsError):
    """Raised when no usable credential can be obtained."""
    code = "AUTH_ERROR"
    status_code = 401


class ValidationError(GDocsError):
    """Base class for validation errors."""
    code = "VALIDATION_ERROR"
    status_code = 400


class MissingArgumentError(ValidationError):
    """Raised when a required tool argument is absent."""
    pass


class InvalidRangeError(ValidationError):
    """Raised when edit positions are malformed or contradictory."""
    pass


class NotFoundError(GDocsError):
    """Raised when a document reference does not resolve at the store."""
    code = "NOT_FOUND"
    status_code = 404


class RemoteApiError(GDocsError):
    """Raised for any other failure reported by the Google APIs."""
    code = "API_ERROR"
    status_code = 502


class InternalError(GDocsError):
    """Unexpected failure with no more specific classification."""
    pass
