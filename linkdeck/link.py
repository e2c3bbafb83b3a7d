"""Saved links and their JSON form."""

from __future__ import annotations

import datetime
import enum
import json
import uuid
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional

from linkdeck.browser import Browser

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def format_date(day: datetime.date) -> str:
    """Format a date the way links record it, e.g. ``5 March 2023``."""
    return f"{day.day} {_MONTHS[day.month - 1]} {day.year}"


@dataclass(frozen=True)
class Link:
    """A saved link; title and domain are filled in when it is validated."""

    url: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    title: Optional[str] = None
    domain: Optional[str] = None
    tags: tuple[str, ...] = ()
    priority: str = "A"
    browser: Browser = Browser.DEFAULT
    complete: bool = False
    date: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        if not isinstance(self.priority, str) or len(self.priority) != 1:
            raise ValueError(f"priority must be a single character, got {self.priority!r}")
        if not isinstance(self.browser, Browser):
            raise TypeError(f"browser must be a Browser, got {self.browser!r}")

    @classmethod
    def with_date(cls, url: str, today: Optional[datetime.date] = None) -> Link:
        """A new link stamped with today's date (or ``today`` if given)."""
        day = today if today is not None else datetime.date.today()
        return cls(url, date=format_date(day))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "url": self.url,
            "title": self.title,
            "domain": self.domain,
            "tags": list(self.tags),
            "priority": self.priority,
            "browser": self.browser.value,
            "complete": self.complete,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Link:
        if not isinstance(data, dict):
            raise ValueError("a link must be an object")
        for key in ("id", "url", "tags", "priority", "browser", "complete", "date"):
            if key not in data:
                raise ValueError(f"missing field {key!r}")
        for key in ("url", "date", "id", "browser"):
            if not isinstance(data[key], str):
                raise ValueError(f"field {key!r} must be a string")
        for key in ("title", "domain"):
            if data.get(key) is not None and not isinstance(data[key], str):
                raise ValueError(f"field {key!r} must be a string or null")
        tags = data["tags"]
        if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
            raise ValueError("field 'tags' must be a list of strings")
        if not isinstance(data["complete"], bool):
            raise ValueError("field 'complete' must be a boolean")
        return cls(
            url=data["url"],
            id=uuid.UUID(data["id"]),
            title=data.get("title"),
            domain=data.get("domain"),
            tags=tuple(tags),
            priority=data["priority"],
            browser=Browser(data["browser"]),
            complete=data["complete"],
            date=data["date"],
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> Link:
        return cls.from_dict(json.loads(text))


def links_to_json(links: Iterable[Link]) -> str:
    return json.dumps([link.to_dict() for link in links])


def links_from_json(text: str) -> list[Link]:
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a list of links")
    return [Link.from_dict(item) for item in data]


class SearchEngine(enum.Enum):
    GOOGLE = "Google"
    YOUTUBE = "Youtube"


@dataclass(frozen=True)
class Search:
    engine: SearchEngine
    search_text: str


@dataclass(frozen=True)
class Webpage:
    url: str
    description: str