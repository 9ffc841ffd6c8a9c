from typing import Optional

from fastapi import APIRouter, Depends, Form, status
from fastapi.responses import RedirectResponse

from shorturl_app.api.errors import NOT_FOUND_MESSAGE
from shorturl_app.dependencies import get_url_service
from shorturl_app.schemas.url import ErrorResponse, ShortURLResponse
from shorturl_app.services.url_service import URLService

router = APIRouter(prefix="/shorturl", tags=["shorturl"])


@router.post(
    "",
    response_model=ShortURLResponse,
    responses={200: {"description": "Shortened URL, or {\"error\": \"invalid url\"}"}},
)
async def create_short_url(
    url: Optional[str] = Form(None),
    url_service: URLService = Depends(get_url_service)
):
    """
    Shorten a URL submitted as the form field `url`.
    
    Rejected URLs come back as {"error": "invalid url"} with status 200
    (see api.errors).
    """
    record = await url_service.create_short_url(url)
    return ShortURLResponse.from_record(record)


@router.get("/{short_url}", response_model=None)
async def redirect_to_original_url(
    short_url: str,
    url_service: URLService = Depends(get_url_service)
):
    """
    Redirect to the URL stored under `short_url`.
    
    The path segment must match an id exactly ("01" is not 1).
    """
    original_url = await url_service.get_original_url(short_url)
    
    if original_url is None:
        return ErrorResponse(error=NOT_FOUND_MESSAGE)
    
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
