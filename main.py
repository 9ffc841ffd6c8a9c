import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from shorturl_app.config import settings
from shorturl_app.logging_config import configure_logging
from shorturl_app.middleware.logging import LoggingMiddleware
from shorturl_app.api import urls, hello, views
from shorturl_app.api.errors import register_exception_handlers
from shorturl_app.schemas.url import HealthResponse

configure_logging(settings.log_level)
logger = logging.getLogger("shorturl_app")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Shortens URLs to sequential ids and redirects them back",
    debug=settings.debug
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)

register_exception_handlers(app)

# Static assets, resolved against the working directory per request
app.mount(
    "/public",
    StaticFiles(directory=settings.public_dir, check_dir=False),
    name="public",
)


@app.get("/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", environment=settings.environment)


######## Include routers
app.include_router(hello.router, prefix="/api")
app.include_router(urls.router, prefix="/api")
app.include_router(views.router)


if __name__ == "__main__":
    logger.info(f"Listening on port {settings.port}")
    uvicorn.run("main:app", host=settings.host, port=settings.port, reload=settings.debug)
