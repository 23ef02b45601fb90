from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def envelope(
    success: bool,
    message: Optional[str] = None,
    data: Any = None,
    error: Optional[str] = None,
) -> dict:
    """Build the ``{success, message, data, error}`` body, dropping empty keys."""
    body: dict[str, Any] = {"success": success}
    if message:
        body["message"] = message
    if data is not None:
        body["data"] = jsonable_encoder(data)
    if error:
        body["error"] = error
    return body


def ok(message: str, data: Any = None) -> dict:
    return envelope(True, message=message, data=data)


def error_response(status_code: int, error: str, data: Any = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(False, data=data, error=error))
