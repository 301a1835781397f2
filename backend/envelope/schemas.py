import copy
from typing import Annotated, Any, Generic, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, ValidationError, model_validator

from envelope.exceptions import EnvelopeDecodeError, UnwrapError
from envelope.logger import logger

T = TypeVar("T")

UINT32_MAX = 0xFFFFFFFF

# Opaque application-defined code, limited to the unsigned 32-bit range
ErrorCode = Annotated[StrictInt, Field(ge=0, le=UINT32_MAX)]


class Response(BaseModel, Generic[T]):
    """
    Uniform success/failure envelope returned by query operations.

    Encoded as a record with exactly three keys: ``success``, ``data`` and
    ``error``. A success carries the payload in ``data`` and ``error=None``;
    a failure carries an opaque code in ``error`` and ``data=None``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    success: StrictBool
    data: Optional[T] = None
    error: Optional[ErrorCode] = None

    @model_validator(mode="after")
    def check_one_side(self) -> "Response[T]":
        # success is the discriminator: a payload may itself be None
        if self.success:
            if self.error is not None:
                raise ValueError("successful response must not carry an error code")
            if "data" not in self.model_fields_set:
                raise ValueError("successful response must carry data")
        else:
            if self.error is None:
                raise ValueError("failed response must carry an error code")
            if self.data is not None:
                raise ValueError("failed response must not carry data")
        return self

    @classmethod
    def ok(cls, data: T) -> "Response[T]":
        return cls(success=True, data=copy.deepcopy(data), error=None)

    @classmethod
    def err(cls, error_code: int) -> "Response[T]":
        return cls(success=False, data=None, error=error_code)

    @property
    def is_ok(self) -> bool:
        return self.success

    @property
    def is_err(self) -> bool:
        return not self.success

    def unwrap(self) -> T:
        """Returns the payload, raising UnwrapError on a failed response."""
        if not self.success:
            raise UnwrapError(self.error)
        return self.data

    def unwrap_or(self, default: T) -> T:
        return self.data if self.success else default

    def to_record(self) -> dict:
        return self.model_dump()

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Response[T]":
        try:
            return cls.model_validate(record)
        except ValidationError as e:
            raise _decode_error(cls, e) from e

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Response[T]":
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise _decode_error(cls, e) from e


def _decode_error(cls: type, exc: ValidationError) -> EnvelopeDecodeError:
    errors = exc.errors(include_url=False, include_context=False, include_input=False)
    logger.warning(f"Rejected {cls.__name__} record: {len(errors)} validation error(s)")
    return EnvelopeDecodeError(errors)
