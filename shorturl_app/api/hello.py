from fastapi import APIRouter

from shorturl_app.schemas.url import GreetingResponse

router = APIRouter(tags=["hello"])


@router.get("/hello", response_model=GreetingResponse)
def hello():
    """First API endpoint, static and stateless"""
    return GreetingResponse(greeting="hello API")
