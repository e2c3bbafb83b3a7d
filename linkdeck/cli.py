"""Command-line front end: keep a collection of links in a JSON file."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from linkdeck.browser import (
    Browser,
    BrowserOpenError,
    open_browser_linux,
    open_browser_macos,
    open_browser_windows,
)
from linkdeck.errors import ErrorReporter
from linkdeck.filters import count_browsers, count_tags, displayed_links, priorities, remove_link
from linkdeck.forms import create_link, edit_link
from linkdeck.link import Link, links_from_json, links_to_json
from linkdeck.validate import LinkValidationError, validate_link

_ENV_FILE = "LINKDECK_FILE"
_DEFAULT_FILE = Path.home() / ".linkdeck.json"

_OPENERS: dict[str, Callable[[str, str], None]] = {
    "windows": open_browser_windows,
    "linux": open_browser_linux,
    "macos": open_browser_macos,
}


class _CliError(Exception):
    """A failure to report to the user before exiting with status 1."""


def render_error(reporter: ErrorReporter) -> str:
    """Lay out an error report as text for the terminal."""
    lines = [
        "Error occured",
        reporter.error_title,
        "",
        reporter.when_error,
        "",
        "Some reasons why the error occured",
        *(f"- {reason}" for reason in reporter.why_error),
        "",
        "How to fix the error",
        *(f"- {how}" for how in reporter.how_to_fix),
        "",
        "The actual error",
        reporter.actual_error,
    ]
    return "\n".join(lines)


def render_link(link: Link) -> str:
    """Lay out one link's details as text for the terminal."""
    lines = [
        f"ID: {link.id}",
        f"Title: {link.title or ''}",
        f"URL: {link.url}",
        f"Domain: {link.domain or ''}",
        "Tags:",
        *(f"  - {tag}" for tag in link.tags),
        f"Priority: {link.priority}",
        f"Browser: {link.browser}",
        f"Complete: {'true' if link.complete else 'false'}",
        f"Date: {link.date}",
    ]
    return "\n".join(lines)


def _data_file(option: Optional[str]) -> Path:
    if option:
        return Path(option)
    env = os.environ.get(_ENV_FILE)
    return Path(env) if env else _DEFAULT_FILE


def _load(path: Path) -> list[Link]:
    if not path.exists():
        return []
    try:
        return links_from_json(path.read_text(encoding="utf-8"))
    except (ValueError, KeyError, TypeError) as err:
        raise _CliError(f"Error: The file is corrupted ({path}): {err}") from err


def _store(path: Path, links: Sequence[Link]) -> None:
    try:
        path.write_text(links_to_json(links), encoding="utf-8")
    except OSError as err:
        raise _CliError(f"Error: could not store the links in {path}: {err}") from err


def _find(links: Sequence[Link], ref: str) -> Link:
    ref = ref.lower()
    matches = [link for link in links if str(link.id).startswith(ref)]
    if not matches:
        raise _CliError(f"Error: no link with id {ref!r}")
    if len(matches) > 1:
        raise _CliError(f"Error: id {ref!r} matches more than one link")
    return matches[0]


def _current_platform() -> str:
    if sys.platform.startswith("win"):
        return "windows"
    if sys.platform == "darwin":
        return "macos"
    return "linux"


def _cmd_list(args: argparse.Namespace, path: Path) -> int:
    links = _load(path)
    if not links:
        print("No links saved.")
        return 0
    tags = list(count_tags(links))
    browsers = list(count_browsers(links))
    if args.tag is not None:
        tags = [tag for tag in tags if tag == args.tag]
    if args.browser is not None:
        wanted = Browser.from_name(args.browser)
        browsers = [browser for browser in browsers if browser == wanted]
    shown = displayed_links(links, tags, browsers)
    blocks = []
    for priority in priorities(links):
        group = [render_link(link) for link in shown if link.priority == priority]
        blocks.append("\n\n".join([f"== {priority} ==", *group]))
    print("\n\n".join(blocks))
    return 0


def _cmd_add(args: argparse.Namespace, path: Path) -> int:
    links = _load(path)
    link = create_link(args.url, args.title, args.tags, args.priority, args.browser)
    if args.no_validate:
        new_link = link
    else:
        try:
            new_link = validate_link(link)
        except LinkValidationError as err:
            print(render_error(err.reporter), file=sys.stderr)
            if not args.force:
                print(
                    "You can still add the link to the collections. "
                    "Run again with --force to add it.",
                    file=sys.stderr,
                )
                return 1
            new_link = link
    links.append(new_link)
    _store(path, links)
    print(render_link(new_link))
    return 0


def _cmd_edit(args: argparse.Namespace, path: Path) -> int:
    links = _load(path)
    current = _find(links, args.id)
    updated = edit_link(
        links,
        current.id,
        args.title if args.title is not None else (current.title or ""),
        args.tags if args.tags is not None else " ".join(current.tags),
        args.priority if args.priority is not None else current.priority,
        args.browser if args.browser is not None else current.browser.value,
    )
    _store(path, updated)
    print(render_link(next(link for link in updated if link.id == current.id)))
    return 0


def _cmd_delete(args: argparse.Namespace, path: Path) -> int:
    links = _load(path)
    target = _find(links, args.id)
    _store(path, remove_link(links, target))
    print("Successfully deleted")
    return 0


def _cmd_open(args: argparse.Namespace, path: Path) -> int:
    link = _find(_load(path), args.id)
    platform = args.platform or _current_platform()
    try:
        _OPENERS[platform](link.url, link.browser.to_json())
    except BrowserOpenError as err:
        print(str(err), file=sys.stderr)
        return 1
    print("Successfully opened")
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="linkdeck", description="Keep and open saved links.")
    parser.add_argument("--file", help=f"data file (default: ${_ENV_FILE} or {_DEFAULT_FILE})")
    commands = parser.add_subparsers(dest="command", required=True)

    listing = commands.add_parser("list", help="show the saved links by priority")
    listing.add_argument("--tag", help="only links with this tag")
    listing.add_argument("--browser", help="only links for this browser")
    listing.set_defaults(run=_cmd_list)

    add = commands.add_parser("add", help="save a new link")
    add.add_argument("url")
    add.add_argument("--title", default="", help="title; fetched from the page if empty")
    add.add_argument("--tags", default="", help="tags separated by spaces")
    add.add_argument("--priority", default="A")
    add.add_argument("--browser", default="Default", choices=Browser.names() + ["firefox", "chrome", "brave"])
    add.add_argument("--no-validate", action="store_true", help="do not fetch the page")
    add.add_argument("--force", action="store_true", help="save the link even if the page cannot be fetched")
    add.set_defaults(run=_cmd_add)

    edit = commands.add_parser("edit", help="change a saved link")
    edit.add_argument("id", help="id of the link, or a unique prefix of it")
    edit.add_argument("--title")
    edit.add_argument("--tags")
    edit.add_argument("--priority")
    edit.add_argument("--browser")
    edit.set_defaults(run=_cmd_edit)

    delete = commands.add_parser("delete", help="remove a saved link")
    delete.add_argument("id")
    delete.set_defaults(run=_cmd_delete)

    opening = commands.add_parser("open", help="open a link in its browser")
    opening.add_argument("id")
    opening.add_argument("--platform", choices=sorted(_OPENERS))
    opening.set_defaults(run=_cmd_open)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; returns the exit status."""
    args = _parser().parse_args(argv)
    path = _data_file(args.file)
    try:
        return args.run(args, path)
    except _CliError as err:
        print(str(err), file=sys.stderr)
        return 1
    except (ValueError, KeyError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())