"""URL building utilities for short links."""

SHORT_LINK_PREFIX = "/s"


def short_link_scheme(dev_mode: bool) -> str:
    """Scheme used for generated short links.

    Args:
        dev_mode: True when running with the development flag set

    Returns:
        "http" in development, "https" otherwise
    """
    return "http" if dev_mode else "https"


def build_short_url(
    short_code: str,
    host: str,
    dev_mode: bool = False,
) -> str:
    """Build complete short URL.

    The host is used verbatim as received in the request, port included.

    Args:
        short_code: The short code
        host: Request host (e.g., example.com or localhost:8080)
        dev_mode: Use plain http instead of https

    Returns:
        Complete short URL
    """
    scheme = short_link_scheme(dev_mode)
    return f"{scheme}://{host}{SHORT_LINK_PREFIX}/{short_code}"
