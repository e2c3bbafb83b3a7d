"""Building links from the values typed into the create and edit forms."""

from __future__ import annotations

import dataclasses
import datetime
import string
import uuid
from typing import Iterable, Optional, Sequence

from linkdeck.browser import Browser
from linkdeck.link import Link


def priority_list() -> list[str]:
    """The priorities a link can be given, ``A`` to ``Z``."""
    return list(string.ascii_uppercase)


def suggest_tags(tags_input: str, known_tags: Iterable[str]) -> list[str]:
    """Known tags that match the word being typed in ``tags_input``.

    No suggestions are made while the input is empty or ends with a space.
    Matching is a case-insensitive substring test against the last word.
    """
    typed = tags_input.lower()
    if not typed or typed.endswith(" "):
        return []
    words = typed.split()
    current_word = words[-1] if words else ""
    return [tag for tag in known_tags if current_word in tag.lower()]


def complete_tag(tags_input: str, tag: str) -> str:
    """Replace the word being typed in ``tags_input`` with ``tag``."""
    words = tags_input.split()
    if words:
        words.pop()
    words.append(tag)
    return " ".join(words)


def create_link(
    url: str,
    title: str,
    tags: str,
    priority: str,
    browser: str,
    today: Optional[datetime.date] = None,
) -> Link:
    """A new, dated link from the create form's values.

    Values are trimmed; an empty title is left for validation to fill in,
    and repeated tags are kept once, in the order first given.
    ``priority`` must be a single character.
    """
    clean_priority = priority
    if len(clean_priority) != 1:
        raise ValueError(f"priority must be a single character, got {priority!r}")
    title = title.strip()
    link = Link.with_date(url.strip(), today)
    return dataclasses.replace(
        link,
        title=title or None,
        tags=tuple(dict.fromkeys(tags.strip().split())),
        priority=clean_priority,
        browser=Browser.from_name(browser.strip()),
    )


def edit_link(
    links: Sequence[Link],
    link_id: uuid.UUID,
    title: str,
    tags: str,
    priority: str,
    browser: str,
) -> list[Link]:
    """``links`` with the link ``link_id`` updated from the edit form's values.

    The url, domain, completion state and date are kept; the priority is the
    first character of ``priority``. Raises ``KeyError`` if no link has that
    id and ``ValueError`` if ``priority`` is empty.
    """
    links = list(links)
    position = next(
        (index for index, link in enumerate(links) if link.id == link_id), None
    )
    if position is None:
        raise KeyError(link_id)
    if not priority:
        raise ValueError("priority must not be empty")
    links[position] = dataclasses.replace(
        links[position],
        title=title,
        tags=tuple(tags.split()),
        priority=priority[0],
        browser=Browser.from_name(browser),
    )
    return links