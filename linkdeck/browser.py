"""Browsers a link can be opened in, and the commands that open them."""

from __future__ import annotations

import enum
import json
import subprocess
from typing import Callable, Optional


class Browser(enum.Enum):
    """A browser a link is meant to be opened in."""

    FIREFOX = "Firefox"
    CHROME = "Chrome"
    BRAVE = "Brave"
    DEFAULT = "Default"

    def __str__(self) -> str:
        if self is Browser.DEFAULT:
            return "Default Browser"
        return self.value

    @classmethod
    def names(cls) -> list[str]:
        """Names of the browsers offered to the user, in display order."""
        return ["Default", "Firefox", "Chrome", "Brave"]

    @classmethod
    def from_name(cls, name: str) -> Browser:
        """Look a browser up by name; anything unknown means the default browser."""
        return _BY_NAME.get(name, cls.DEFAULT)

    @classmethod
    def from_json(cls, text: str) -> Browser:
        """Parse a browser from its JSON form, e.g. ``"Firefox"``."""
        data = json.loads(text)
        if not isinstance(data, str):
            raise ValueError(f"expected a browser name, got {data!r}")
        try:
            return cls(data)
        except ValueError:
            raise ValueError(f"unknown browser {data!r}") from None

    def to_json(self) -> str:
        return json.dumps(self.value)

    def windows_name(self) -> Optional[str]:
        return _WINDOWS_NAMES.get(self)

    def linux_name(self) -> Optional[str]:
        return _LINUX_NAMES.get(self)

    def macos_name(self) -> Optional[str]:
        return _MACOS_NAMES.get(self)

    def open_in_windows(self, url: str) -> None:
        """Open ``url``; raises ``OSError`` if the command cannot be started."""
        name = self.windows_name()
        _run(["start", name, url] if name else ["start", url])

    def open_in_linux(self, url: str) -> None:
        """Open ``url``; raises ``OSError`` if the command cannot be started."""
        name = self.linux_name()
        _run([name, url] if name else ["open", url])

    def open_in_macos(self, url: str) -> None:
        """Open ``url``; raises ``OSError`` if the command cannot be started."""
        name = self.macos_name()
        _run(["open", "-a", name, url] if name else ["open", url])


_BY_NAME = {
    "Firefox": Browser.FIREFOX,
    "firefox": Browser.FIREFOX,
    "Chrome": Browser.CHROME,
    "chrome": Browser.CHROME,
    "Brave": Browser.BRAVE,
    "brave": Browser.BRAVE,
}

_WINDOWS_NAMES = {
    Browser.FIREFOX: "firefox",
    Browser.CHROME: "chrome",
    Browser.BRAVE: "brave",
}

_LINUX_NAMES = {
    Browser.FIREFOX: "firefox",
    Browser.CHROME: "google-chrome",
    Browser.BRAVE: "brave-browser",
}

_MACOS_NAMES = {
    Browser.FIREFOX: "Firefox",
    Browser.CHROME: "Google Chrome",
    Browser.BRAVE: "Brave Browser",
}


def _run(args: list[str]) -> None:
    subprocess.run(args, capture_output=True, check=False)


class BrowserOpenError(Exception):
    """Opening a browser failed; ``detail`` is None when it was not found."""

    def __init__(self, detail: Optional[str] = None) -> None:
        self.detail = detail
        super().__init__("Browser not found" if detail is None else detail)

    @property
    def not_found(self) -> bool:
        return self.detail is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BrowserOpenError):
            return NotImplemented
        return self.detail == other.detail

    def __hash__(self) -> int:
        return hash((BrowserOpenError, self.detail))

    def to_json(self) -> str:
        if self.detail is None:
            return json.dumps("NotFound")
        return json.dumps({"Other": self.detail})

    @classmethod
    def from_json(cls, text: str) -> BrowserOpenError:
        data = json.loads(text)
        if data == "NotFound":
            return cls()
        if isinstance(data, dict) and set(data) == {"Other"} and isinstance(data["Other"], str):
            return cls(data["Other"])
        raise ValueError(f"not a browser open error: {data!r}")


def _open_with(opener: Callable[[Browser, str], None], path: str, browser: str) -> None:
    chosen = Browser.from_json(browser)
    try:
        opener(chosen, path)
    except FileNotFoundError as err:
        raise BrowserOpenError() from err
    except OSError as err:
        raise BrowserOpenError(str(err)) from err


def open_browser_windows(path: str, browser: str) -> None:
    """Open ``path`` in the browser given as JSON, on Windows."""
    _open_with(Browser.open_in_windows, path, browser)


def open_browser_linux(path: str, browser: str) -> None:
    """Open ``path`` in the browser given as JSON, on Linux."""
    _open_with(Browser.open_in_linux, path, browser)


def open_browser_macos(path: str, browser: str) -> None:
    """Open ``path`` in the browser given as JSON, on macOS."""
    _open_with(Browser.open_in_macos, path, browser)