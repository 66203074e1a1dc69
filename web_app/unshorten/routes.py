"""Unshorten service routes implementation."""

from urllib.parse import quote

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import PlainTextResponse

from shortlink.exceptions import EmptyCodeError, LinkNotFoundError, StoreError

router = APIRouter()


def redirect_response(location: str) -> Response:
    """302 to location, sent as the stored bytes.

    Only control characters are percent-encoded; they cannot appear in a
    header value. Everything else, non-ASCII included, goes out as UTF-8.
    """
    location = "".join(
        quote(ch) if ord(ch) < 0x20 or ord(ch) == 0x7f else ch
        for ch in location
    )
    response = Response(status_code=status.HTTP_302_FOUND)
    response.raw_headers.append((b"location", location.encode("utf-8")))
    return response


@router.get(
    "/s/{short_code}",
    responses={
        302: {"description": "Redirect to the original URL"},
        404: {"description": "url not found"},
        500: {"description": "failed to retrieve url"},
    },
    summary="Resolve short URL",
)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL."""
    service = request.app.state.service
    logger = request.app.state.logger

    try:
        original_url = await service.resolve(short_code)
    except EmptyCodeError as e:
        return PlainTextResponse(str(e), status_code=status.HTTP_400_BAD_REQUEST)
    except LinkNotFoundError:
        return PlainTextResponse("url not found", status_code=status.HTTP_404_NOT_FOUND)
    except StoreError as e:
        logger.error(f"failed to get shortened url: {e}")
        return PlainTextResponse(
            "failed to retrieve url",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return redirect_response(original_url)


# "/s/{short_code}" never matches an empty segment
@router.get("/s/", include_in_schema=False)
async def redirect_without_code(request: Request):
    return await redirect_to_url(request, "")
