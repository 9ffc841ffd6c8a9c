from pydantic import BaseModel, Field

from shorturl_app.models.url import URLRecord


class ShortURLResponse(BaseModel):
    """Body returned after a URL is shortened"""
    original_url: str = Field(..., description="The URL exactly as submitted")
    short_url: int = Field(..., description="Id to use with GET /api/shorturl/{short_url}")

    @classmethod
    def from_record(cls, record: URLRecord) -> "ShortURLResponse":
        return cls(original_url=record.original_url, short_url=record.id)


class ErrorResponse(BaseModel):
    """Domain errors are reported in the body with a 200 status"""
    error: str


class GreetingResponse(BaseModel):
    greeting: str


class HealthResponse(BaseModel):
    status: str
    environment: str
