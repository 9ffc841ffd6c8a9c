"""
Exception handlers.

Domain errors are signalled in the response body with a 200 status,
e.g. {"error": "invalid url"}. Clients of this API rely on that.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shorturl_app.exceptions import InvalidURLError

NOT_FOUND_MESSAGE = "No short URL found for the given input"


async def invalid_url_handler(request: Request, exc: InvalidURLError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_200_OK, content={"error": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(InvalidURLError, invalid_url_handler)
