from typing import Any, Optional
from fastapi import status


class EnvelopeError(Exception):
    """Base category for errors that render as a failed envelope."""

    # Opaque code placed in the envelope's ``error`` field
    error_code: int = 500

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: Optional[Any] = None,
        error_code: Optional[int] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.detail = detail
        if error_code is not None:
            self.error_code = error_code
        super().__init__(self.message)


class EnvelopeDecodeError(EnvelopeError):
    """Raised when a record or JSON document is not a valid envelope."""

    error_code = 422

    def __init__(self, errors: list):
        super().__init__(
            message=f"Invalid response envelope ({len(errors)} error(s))",
            status_code=422,
            detail=errors,
        )


class UnwrapError(EnvelopeError):
    """Raised when the payload of a failed envelope is requested."""

    def __init__(self, error_code: int):
        super().__init__(
            message=f"Called unwrap() on a failed response (error {error_code})",
            error_code=error_code,
        )
