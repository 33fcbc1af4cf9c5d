from __future__ import annotations

from typing import Any, Sequence

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


def _describe(errors: Sequence[Any]) -> str:
    """
    Flatten pydantic errors into one message, e.g. "JSON decode error: Expecting value"
    or "body.email: Input should be a valid string".
    """
    messages: list[str] = []
    for err in errors:
        if err.get("type") == "json_invalid":
            reason = (err.get("ctx") or {}).get("error")
            messages.append(f"{err.get('msg')}: {reason}" if reason else str(err.get("msg")))
            continue
        loc = ".".join(str(part) for part in err.get("loc", ()))
        messages.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "; ".join(messages)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """
    Map request decoding failures:
      - 404 (empty body) if a path id is not an integer, since no record can match it
      - 400 with the decode message for a malformed or mistyped JSON body
    """
    errors = exc.errors()
    if any(err.get("loc", (None,))[0] == "path" for err in errors):
        return Response(status_code=404)
    return JSONResponse(status_code=400, content={"detail": _describe(errors)})


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
