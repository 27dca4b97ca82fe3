from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from .base import HarEntity, ListOf, har_field
from .entry import Entry


@dataclass
class Creator(HarEntity):
    """The application that created the archive."""

    name: Optional[str] = har_field("name")
    version: Optional[str] = har_field("version")
    comment: Optional[str] = har_field("comment")


@dataclass
class Browser(HarEntity):
    name: Optional[str] = har_field("name")
    version: Optional[str] = har_field("version")
    comment: Optional[str] = har_field("comment")


@dataclass
class PageTimings(HarEntity):
    on_content_load: Optional[float] = har_field("onContentLoad", float)
    on_load: Optional[float] = har_field("onLoad", float)
    comment: Optional[str] = har_field("comment")


@dataclass
class Page(HarEntity):
    started_date_time: Optional[datetime] = har_field("startedDateTime", datetime)
    id: Optional[str] = har_field("id")
    title: Optional[str] = har_field("title")
    page_timings: Optional[PageTimings] = har_field("pageTimings", PageTimings)
    comment: Optional[str] = har_field("comment")


@dataclass
class Log(HarEntity):
    """
    The log of an archive. ``entries`` are kept in recording order.
    """

    version: Optional[str] = har_field("version")
    creator: Optional[Creator] = har_field("creator", Creator)
    browser: Optional[Browser] = har_field("browser", Browser)
    pages: Optional[List[Page]] = har_field("pages", ListOf(Page))
    entries: Optional[List[Entry]] = har_field("entries", ListOf(Entry))
    comment: Optional[str] = har_field("comment")


@dataclass
class Har(HarEntity):
    """Root of a HAR document."""

    log: Optional[Log] = har_field("log", Log)
