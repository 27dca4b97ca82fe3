from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .base import HarEntity, har_field
from .message import Request, Response


@dataclass
class CacheEntry(HarEntity):
    expires: Optional[str] = har_field("expires")
    last_access: Optional[str] = har_field("lastAccess")
    e_tag: Optional[str] = har_field("eTag")
    hit_count: Optional[int] = har_field("hitCount", int)
    comment: Optional[str] = har_field("comment")


@dataclass
class Cache(HarEntity):
    before_request: Optional[CacheEntry] = har_field("beforeRequest", CacheEntry)
    after_request: Optional[CacheEntry] = har_field("afterRequest", CacheEntry)
    comment: Optional[str] = har_field("comment")


@dataclass
class Timings(HarEntity):
    """Phase durations in milliseconds, -1 when a phase does not apply."""

    blocked: Optional[float] = har_field("blocked", float)
    dns: Optional[float] = har_field("dns", float)
    connect: Optional[float] = har_field("connect", float)
    send: Optional[float] = har_field("send", float)
    wait: Optional[float] = har_field("wait", float)
    receive: Optional[float] = har_field("receive", float)
    ssl: Optional[float] = har_field("ssl", float)
    comment: Optional[str] = har_field("comment")


@dataclass
class Entry(HarEntity):
    """
    A single recorded HTTP transaction: one request and its response.
    """

    pageref: Optional[str] = har_field("pageref")
    started_date_time: Optional[datetime] = har_field("startedDateTime", datetime)
    time: Optional[float] = har_field("time", float)  # Total time in ms
    request: Optional[Request] = har_field("request", Request)
    response: Optional[Response] = har_field("response", Response)
    cache: Optional[Cache] = har_field("cache", Cache)
    timings: Optional[Timings] = har_field("timings", Timings)
    server_ip_address: Optional[str] = har_field("serverIPAddress")
    connection: Optional[str] = har_field("connection")
    comment: Optional[str] = har_field("comment")
