"""Checking that a link's page can be reached, and filling in its details."""

from __future__ import annotations

import dataclasses
import ipaddress
from html.parser import HTMLParser
from typing import Optional
from urllib.parse import urlsplit

import requests

from linkdeck.errors import ErrorReporter, ErrorReporterBuilder, ErrorType
from linkdeck.link import Link

_TIMEOUT = 30


class LinkValidationError(Exception):
    """The link's page could not be fetched; ``reporter`` explains why."""

    def __init__(self, reporter: ErrorReporter) -> None:
        self.reporter = reporter
        super().__init__(reporter.actual_error)


class _TitleParser(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._in_title = False
        self._parts: list[str] = []
        self.title: Optional[str] = None

    def handle_starttag(self, tag: str, attrs: list) -> None:
        if tag == "title" and self.title is None:
            self._in_title = True
            self._parts = []

    def handle_endtag(self, tag: str) -> None:
        if tag == "title" and self._in_title:
            self._in_title = False
            self.title = "".join(self._parts).strip()

    def handle_data(self, data: str) -> None:
        if self._in_title:
            self._parts.append(data)


def extract_title(html: str) -> Optional[str]:
    """The text of the first ``<title>`` element, or None if there is none."""
    parser = _TitleParser()
    parser.feed(html)
    parser.close()
    if parser.title is None and parser._in_title:
        return "".join(parser._parts).strip()
    return parser.title


def _domain_of(url: str) -> str:
    host = urlsplit(url).hostname
    if not host:
        return ""
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return ""


def _not_found(actual_error: str) -> ErrorReporter:
    return ErrorReporterBuilder(
        error_title="Not Found",
        actual_error=actual_error,
        why_error=["Url is not valid", "The website is not working"],
        how_to_fix=[
            "Check if you have entered a valid url or not. "
            "An example of a valid url is https:www.github.com",
            "Make sure the website is working",
        ],
        when_error="creating a new link",
        error_type=ErrorType.WARNING,
    ).build()


def validate_link(link: Link) -> Link:
    """Fetch the link's page and return the link with its title and domain set.

    Raises ``LinkValidationError`` if the page cannot be fetched.
    """
    try:
        response = requests.get(link.url, timeout=_TIMEOUT)
    except requests.RequestException as err:
        raise LinkValidationError(_not_found(str(err))) from err

    title = link.title if link.title is not None else extract_title(response.text)
    return dataclasses.replace(
        link,
        title=title,
        domain=_domain_of(response.url),
        complete=False,
    )