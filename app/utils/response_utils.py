from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def response_api(
    status_code: int,
    message: str,
    data: Optional[Any] = None,
    error: str = "",
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Wrap a handler result in the standard {status, message, data, error} envelope."""
    return JSONResponse(
        status_code=status_code,
        content={
            "status": status_code,
            "message": message,
            "data": jsonable_encoder(data),
            "error": error or "",
        },
        headers=headers,
    )
