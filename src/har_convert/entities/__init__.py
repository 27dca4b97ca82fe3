"""Entity types exposed by har_convert.entities

This module re-exports the HAR object model so users can
`from har_convert.entities import Har, Entry, Request, Response`.
"""
from .base import HarEntity, ListOf, har_field
from .entry import Cache, CacheEntry, Entry, Timings
from .har import Browser, Creator, Har, Log, Page, PageTimings
from .message import (
                      Content,
                      Cookie,
                      Header,
                      PostData,
                      PostDataParameter,
                      QueryStringParameter,
                      Request,
                      Response,
)

__all__ = [
    "HarEntity",
    "ListOf",
    "har_field",
    "Har",
    "Log",
    "Creator",
    "Browser",
    "Page",
    "PageTimings",
    "Entry",
    "Cache",
    "CacheEntry",
    "Timings",
    "Request",
    "Response",
    "Header",
    "Cookie",
    "QueryStringParameter",
    "PostData",
    "PostDataParameter",
    "Content",
]
