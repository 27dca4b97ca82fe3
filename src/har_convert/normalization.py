"""
Repair of partial redirect URLs.

Some HAR producers record ``response.redirectURL`` as the raw ``Location``
header value, which is often only a path (``/new/location?x=1``). Within one
entry the redirect resolves against the request's origin, so the request URL
supplies the missing scheme and authority.
"""

import logging
from typing import List

from yarl import URL

from .entities import Entry, Har, Request
from .exceptions import MalformedInputError

logger = logging.getLogger(__name__)

PARTIAL_URL_PREFIX = "/"


def is_partial_redirect(redirect_url: str) -> bool:
    """Whether the raw text of a redirect URL starts with a forward slash."""
    return redirect_url.startswith(PARTIAL_URL_PREFIX)


def parse_url(text: str, what: str, index: int) -> URL:
    """
    Parse archive URL text with yarl, validating the whole URL up front.

    yarl may check the port only when it is first read, so it is read here.

    Raises:
        MalformedInputError: If the text cannot be parsed as a URL.
    """
    try:
        url = URL(text, encoded=True)
        url.port
    except ValueError as e:
        raise MalformedInputError(
            f"Invalid {what} in entry {index}: {text!r} - {e}"
        ) from e
    return url


def authority_prefix(request: Request, index: int) -> str:
    """
    Return ``scheme://host[:port]`` of the request URL.

    Raises:
        MalformedInputError: If the entry has no request, no request URL, or a
            request URL without scheme and host.
    """
    if request is None:
        raise MalformedInputError(f"Entry {index} has no request")
    if request.url is None:
        raise MalformedInputError(f"Entry {index} has no request.url")
    url = parse_url(request.url, "request.url", index)
    try:
        return str(url.origin())
    except ValueError as e:
        raise MalformedInputError(
            f"Cannot derive scheme and host from request.url of entry {index}: "
            f"{request.url!r}"
        ) from e


def _entries(har: Har) -> List[Entry]:
    if har is None or har.log is None:
        raise MalformedInputError("Invalid HAR format: 'log' object not found.")
    if har.log.entries is None:
        raise MalformedInputError("Invalid HAR format: 'log.entries' not found.")
    return har.log.entries


def normalize_redirect_urls(har: Har) -> Har:
    """
    Rewrite partial redirect URLs of every entry into absolute URLs.

    Entries are visited in log order. An entry is rewritten when its response
    has a redirect URL whose text starts with ``/``; the new value is the
    origin of the entry's request URL followed by the redirect path. If the
    redirect URL still parses as absolute (a network-path reference such as
    ``//cdn.example.com/x``), only its path is kept so the authority is not
    duplicated. Any other entry, including one with an empty redirect URL, is
    left as is. Running this twice has the same effect as running it once.

    Args:
        har: A freshly deserialized archive. It is modified in place.

    Returns:
        The same ``har`` instance.

    Raises:
        MalformedInputError: If the archive has no log or entries, an entry is
            null, or the origin of a request cannot be derived where it is needed,
            or a URL it needs does not parse.
    """
    rewritten = 0
    for index, entry in enumerate(_entries(har)):
        if entry is None:
            raise MalformedInputError(f"Entry {index} is null")
        response = entry.response
        if response is None or response.redirect_url is None:
            continue

        redirect_url = response.redirect_url
        if not is_partial_redirect(redirect_url):
            continue

        prefix = authority_prefix(entry.request, index)
        parsed = parse_url(redirect_url, "response.redirectURL", index)
        if parsed.absolute:
            path = parsed.raw_path
        else:
            path = redirect_url

        response.redirect_url = f"{prefix}{path}"
        logger.debug(
            "Entry %d: redirect %s rewritten to %s",
            index,
            redirect_url,
            response.redirect_url,
        )
        rewritten += 1

    logger.debug("Rewrote %d partial redirect URL(s)", rewritten)
    return har
