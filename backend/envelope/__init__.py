from envelope.exceptions import EnvelopeDecodeError, EnvelopeError, UnwrapError
from envelope.schemas import UINT32_MAX, Response

__all__ = [
    "Response",
    "UINT32_MAX",
    "EnvelopeError",
    "EnvelopeDecodeError",
    "UnwrapError",
]
