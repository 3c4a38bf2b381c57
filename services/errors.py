"""
Catalog Errors

Exceptions raised by the service layer. Each carries the HTTP status the
API answers with; routes let them propagate to the app's error handler.
"""


class CatalogError(Exception):
    """Base class for rejected catalog operations."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(CatalogError):
    """Raised when submitted input is malformed or missing a required field."""
    status_code = 400

    def __init__(self, message, line_index=None):
        super().__init__(message)
        self.line_index = line_index

    def to_dict(self):
        payload = super().to_dict()
        if self.line_index is not None:
            payload['line_index'] = self.line_index
        return payload


class AuthError(CatalogError):
    """Raised when the admin secret is missing or wrong."""
    status_code = 401


class NotFoundError(CatalogError):
    """Raised when an operation targets an id that does not exist."""
    status_code = 404


class ConflictError(CatalogError):
    """Raised when deleting a reference entity that recipes still use."""
    status_code = 409
