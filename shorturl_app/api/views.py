"""HTML front page, read from the views directory under the working directory."""

import os

from fastapi import APIRouter
from fastapi.responses import FileResponse

from shorturl_app.config import settings

router = APIRouter(tags=["web"])


@router.get("/", include_in_schema=False)
def index():
    return FileResponse(os.path.join(settings.views_dir, "index.html"))
