"""Shorten service routes implementation."""

import os
from fastapi import APIRouter, Request, Form, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from shortlink.common.url_builder import build_short_url
from shortlink.exceptions import EmptyURLError, StoreError

router = APIRouter()

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the form page."""
    return templates.TemplateResponse(request, "index.html")


@router.post(
    "/shorten",
    response_class=PlainTextResponse,
    responses={
        400: {"description": "url cannot be empty"},
        500: {"description": "failed to set shortened url"},
    },
    summary="Create short URL",
    description="Store a form-encoded (or query-string) `url` under a new random code and return the short URL as text.",
)
async def shorten_url(request: Request, url: str = Form("")):
    """Create a shortened URL."""
    service = request.app.state.service
    config = request.app.state.config
    logger = request.app.state.logger

    # Body field first, then the query string
    if not url:
        url = request.query_params.get("url", "")

    try:
        link = await service.create_short_link(url)
    except EmptyURLError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except StoreError as e:
        logger.error(f"failed to set shortened url: {e}")
        return PlainTextResponse(
            "failed to set shortened url",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    short_url = build_short_url(
        short_code=link.code,
        host=request.headers.get("host", ""),
        dev_mode=config.dev_mode,
    )

    return PlainTextResponse(short_url)
