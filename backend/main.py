from fastapi import FastAPI, Path, status

from envelope import config
from envelope.exceptions import EnvelopeError
from envelope.logger import logger
from envelope.response import register_exception_handlers
from envelope.schemas import Response

# Code returned when /echo is asked for a value above ECHO_MAX
ECHO_LIMIT_CODE = 413


class EchoLimitError(EnvelopeError):
    """Raised when the requested echo value exceeds the configured limit."""

    error_code = ECHO_LIMIT_CODE

    def __init__(self, value: int, limit: int):
        super().__init__(
            message=f"Value {value} exceeds the echo limit of {limit}.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )


app = FastAPI(title="query-envelope")

# Lỗi nghiệp vụ và lỗi dữ liệu đầu vào đều trả về dạng envelope
register_exception_handlers(app)


@app.get("/health", response_model=Response[dict])
def health():
    return Response[dict].ok({"status": "ok"})


@app.get("/echo/{value}", response_model=Response[int])
def echo(value: int = Path(..., ge=0)):
    """
    Answers with the path value wrapped in a success envelope.
    """
    if value > config.ECHO_MAX:
        raise EchoLimitError(value, config.ECHO_MAX)

    logger.info(f"Echo: {value}")
    return Response[int].ok(value)
