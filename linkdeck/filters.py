"""Counting tags and browsers, and choosing which links to show."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterable, Mapping, Optional, TypeVar

from linkdeck.browser import Browser
from linkdeck.link import Link

K = TypeVar("K", bound=Hashable)


def count_tags(links: Iterable[Link]) -> dict[str, int]:
    """How many times each tag is used across ``links``."""
    return dict(Counter(tag for link in links for tag in link.tags))


def count_browsers(links: Iterable[Link]) -> dict[Browser, int]:
    """How many links are meant for each browser."""
    return dict(Counter(link.browser for link in links))


def toggle_filter(
    counts: Mapping[K, int], clicked: Optional[K], key: K
) -> tuple[list[K], Optional[K]]:
    """Click ``key`` in a filter list.

    Clicking the key that is already selected shows every key again;
    clicking any other key shows only that one. Returns the keys to
    display and the newly selected key.
    """
    keys = list(counts)
    if clicked is not None and clicked == key:
        return keys, None
    return [k for k in keys if k == key], key


@dataclass
class FilterState(Generic[K]):
    """A filter list: the counted keys, which are shown, and which is selected."""

    counts: dict[K, int]
    clicked: Optional[K] = None
    displayed: list[K] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.displayed and self.clicked is None:
            self.displayed = list(self.counts)

    def click(self, key: K) -> list[K]:
        """Select or deselect ``key``; return the keys now displayed."""
        self.displayed, self.clicked = toggle_filter(self.counts, self.clicked, key)
        return list(self.displayed)


def displayed_links(
    links: Iterable[Link],
    displayed_tags: Iterable[str],
    displayed_browsers: Iterable[Browser],
) -> list[Link]:
    """Links having one of the displayed tags and one of the displayed browsers.

    A link without tags is never shown. Duplicates are dropped, keeping
    the first occurrence.
    """
    links = list(links)
    by_tags = [
        link
        for tag in displayed_tags
        for link in links
        if tag in link.tags
    ]
    by_browsers = [
        link
        for browser in displayed_browsers
        for link in by_tags
        if link.browser == browser
    ]
    return list(dict.fromkeys(by_browsers))


def priorities(links: Iterable[Link]) -> list[str]:
    """The distinct priorities of ``links``, in sorted order."""
    return sorted({link.priority for link in links})


def remove_link(links: Iterable[Link], link: Link) -> list[Link]:
    """``links`` without any link equal to ``link``."""
    return [other for other in links if other != link]