"""
Request and response entities and the objects nested inside them.
"""
from dataclasses import dataclass
from typing import List, Optional

from .base import HarEntity, ListOf, har_field


@dataclass
class Header(HarEntity):
    name: Optional[str] = har_field("name")
    value: Optional[str] = har_field("value")
    comment: Optional[str] = har_field("comment")


@dataclass
class Cookie(HarEntity):
    """A cookie sent with a request or set by a response.

    ``expires`` is kept as the raw string, producers disagree on its format.
    """

    name: Optional[str] = har_field("name")
    value: Optional[str] = har_field("value")
    path: Optional[str] = har_field("path")
    domain: Optional[str] = har_field("domain")
    expires: Optional[str] = har_field("expires")
    http_only: Optional[bool] = har_field("httpOnly", bool)
    secure: Optional[bool] = har_field("secure", bool)
    comment: Optional[str] = har_field("comment")


@dataclass
class QueryStringParameter(HarEntity):
    name: Optional[str] = har_field("name")
    value: Optional[str] = har_field("value")
    comment: Optional[str] = har_field("comment")


@dataclass
class PostDataParameter(HarEntity):
    """A posted parameter, e.g. a form field or an uploaded file."""

    name: Optional[str] = har_field("name")
    value: Optional[str] = har_field("value")
    file_name: Optional[str] = har_field("fileName")
    content_type: Optional[str] = har_field("contentType")
    comment: Optional[str] = har_field("comment")


@dataclass
class PostData(HarEntity):
    mime_type: Optional[str] = har_field("mimeType")
    params: Optional[List[PostDataParameter]] = har_field("params", ListOf(PostDataParameter))
    text: Optional[str] = har_field("text")
    comment: Optional[str] = har_field("comment")


@dataclass
class Content(HarEntity):
    """The body of a response."""

    size: Optional[int] = har_field("size", int)
    compression: Optional[int] = har_field("compression", int)
    mime_type: Optional[str] = har_field("mimeType")
    text: Optional[str] = har_field("text")
    encoding: Optional[str] = har_field("encoding")
    comment: Optional[str] = har_field("comment")


@dataclass
class Request(HarEntity):
    """An HTTP request. ``url`` is always absolute in well-formed archives."""

    method: Optional[str] = har_field("method")
    url: Optional[str] = har_field("url")
    http_version: Optional[str] = har_field("httpVersion")
    cookies: Optional[List[Cookie]] = har_field("cookies", ListOf(Cookie))
    headers: Optional[List[Header]] = har_field("headers", ListOf(Header))
    query_string: Optional[List[QueryStringParameter]] = har_field(
        "queryString", ListOf(QueryStringParameter)
    )
    post_data: Optional[PostData] = har_field("postData", PostData)
    headers_size: Optional[int] = har_field("headersSize", int)
    body_size: Optional[int] = har_field("bodySize", int)
    comment: Optional[str] = har_field("comment")


@dataclass
class Response(HarEntity):
    """An HTTP response.

    ``redirect_url`` holds the ``Location`` target of a redirect. It keeps the
    exact text found in the archive until normalization rewrites partial
    (``/path?query``) values into absolute URLs. An empty string is kept,
    it is not the same as an absent value.
    """

    status: Optional[int] = har_field("status", int)
    status_text: Optional[str] = har_field("statusText")
    http_version: Optional[str] = har_field("httpVersion")
    cookies: Optional[List[Cookie]] = har_field("cookies", ListOf(Cookie))
    headers: Optional[List[Header]] = har_field("headers", ListOf(Header))
    content: Optional[Content] = har_field("content", Content)
    redirect_url: Optional[str] = har_field("redirectURL")
    headers_size: Optional[int] = har_field("headersSize", int)
    body_size: Optional[int] = har_field("bodySize", int)
    comment: Optional[str] = har_field("comment")
