from unittest import mock

import pytest
import requests
import responses

from linkdeck.browser import Browser
from linkdeck.cli import main, render_error, render_link
from linkdeck.errors import ErrorReporterBuilder, ErrorType
from linkdeck.link import Link, links_from_json, links_to_json


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "links.json"


def _add(data_file, url, *extra):
    return main(["--file", str(data_file), "add", url, "--no-validate", *extra])


def test_render_error_lists_every_part():
    reporter = ErrorReporterBuilder(
        actual_error="boom",
        error_title="Not Found",
        when_error="Creating a new link",
        error_type=ErrorType.WARNING,
        why_error=["Url is not valid"],
        how_to_fix=["Make sure the website is working"],
    ).build()
    text = render_error(reporter)
    lines = text.splitlines()
    assert lines[0] == "Error occured"
    assert lines[1] == "Not Found"
    assert "The error occurred when creating a new link" in lines
    assert "- Url is not valid" in lines
    assert "- Make sure the website is working" in lines
    assert lines[-1] == "boom"


def test_render_link_shows_fields():
    link = Link("https://example.com", title="Example", tags=("a", "b"), browser=Browser.DEFAULT)
    lines = render_link(link).splitlines()
    assert f"ID: {link.id}" in lines
    assert "Title: Example" in lines
    assert "URL: https://example.com" in lines
    assert "  - a" in lines and "  - b" in lines
    assert "Browser: Default Browser" in lines
    assert "Complete: false" in lines


def test_add_without_validation_stores_link(data_file):
    rc = _add(data_file, "https://example.com", "--tags", "news tech news",
              "--priority", "B", "--browser", "firefox")
    assert rc == 0
    links = links_from_json(data_file.read_text())
    assert len(links) == 1
    assert links[0].tags == ("news", "tech")
    assert links[0].priority == "B"
    assert links[0].browser is Browser.FIREFOX
    assert links[0].title is None


def test_add_rejects_bad_priority(data_file):
    rc = _add(data_file, "https://example.com", "--priority", "AB")
    assert rc == 1
    assert not data_file.exists()


def test_add_with_validation_fills_title_and_domain(data_file):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://example.com/",
                 body="<html><head><title>Example Domain</title></head></html>")
        rc = main(["--file", str(data_file), "add", "https://example.com/"])
    assert rc == 0
    (link,) = links_from_json(data_file.read_text())
    assert link.title == "Example Domain"
    assert link.domain == "example.com"


def test_add_unreachable_page_is_refused_without_force(data_file, capsys):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://example.com/",
                 body=requests.ConnectionError("refused"))
        rc = main(["--file", str(data_file), "add", "https://example.com/"])
    assert rc == 1
    assert not data_file.exists()
    assert "Not Found" in capsys.readouterr().err


def test_add_unreachable_page_with_force_keeps_link(data_file):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://example.com/",
                 body=requests.ConnectionError("refused"))
        rc = main(["--file", str(data_file), "add", "https://example.com/", "--force"])
    assert rc == 0
    (link,) = links_from_json(data_file.read_text())
    assert link.url == "https://example.com/"
    assert link.domain is None


def test_list_groups_by_priority(data_file, capsys):
    _add(data_file, "https://example.com/b", "--tags", "x", "--priority", "B")
    _add(data_file, "https://example.com/a", "--tags", "x", "--priority", "A")
    capsys.readouterr()
    assert main(["--file", str(data_file), "list"]) == 0
    out = capsys.readouterr().out
    assert out.index("== A ==") < out.index("https://example.com/a") < out.index("== B ==")
    assert out.index("== B ==") < out.index("https://example.com/b")


def test_list_filters_by_tag(data_file, capsys):
    _add(data_file, "https://example.com/one", "--tags", "red")
    _add(data_file, "https://example.com/two", "--tags", "blue")
    capsys.readouterr()
    assert main(["--file", str(data_file), "list", "--tag", "red"]) == 0
    out = capsys.readouterr().out
    assert "https://example.com/one" in out
    assert "https://example.com/two" not in out


def test_list_hides_links_without_tags(data_file, capsys):
    _add(data_file, "https://example.com/untagged")
    capsys.readouterr()
    assert main(["--file", str(data_file), "list"]) == 0
    assert "https://example.com/untagged" not in capsys.readouterr().out


def test_corrupted_file_is_reported(data_file, capsys):
    data_file.write_text("{not json")
    assert main(["--file", str(data_file), "list"]) == 1
    assert "corrupted" in capsys.readouterr().err


def test_edit_changes_fields_and_keeps_url(data_file):
    link = Link("https://example.com", title="Old", tags=("a",), date="1 May 2023")
    data_file.write_text(links_to_json([link]))
    rc = main(["--file", str(data_file), "edit", str(link.id)[:8],
               "--title", "New", "--tags", "b c", "--priority", "C", "--browser", "Brave"])
    assert rc == 0
    (edited,) = links_from_json(data_file.read_text())
    assert edited.id == link.id
    assert edited.url == link.url
    assert edited.date == link.date
    assert edited.title == "New"
    assert edited.tags == ("b", "c")
    assert edited.priority == "C"
    assert edited.browser is Browser.BRAVE


def test_edit_unknown_id_fails(data_file):
    data_file.write_text(links_to_json([Link("https://example.com")]))
    assert main(["--file", str(data_file), "edit", "zzzz", "--title", "x"]) == 1


def test_delete_removes_link(data_file):
    keep = Link("https://example.com/keep")
    drop = Link("https://example.com/drop")
    data_file.write_text(links_to_json([keep, drop]))
    assert main(["--file", str(data_file), "delete", str(drop.id)]) == 0
    assert links_from_json(data_file.read_text()) == [keep]


def test_open_runs_browser_command(data_file):
    link = Link("https://example.com", browser=Browser.FIREFOX)
    data_file.write_text(links_to_json([link]))
    with mock.patch("subprocess.run") as run:
        rc = main(["--file", str(data_file), "open", str(link.id), "--platform", "linux"])
    assert rc == 0
    assert run.call_args.args[0] == ["firefox", "https://example.com"]


def test_open_missing_browser_reports_not_found(data_file, capsys):
    link = Link("https://example.com", browser=Browser.CHROME)
    data_file.write_text(links_to_json([link]))
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("missing")):
        rc = main(["--file", str(data_file), "open", str(link.id), "--platform", "linux"])
    assert rc == 1
    assert "Browser not found" in capsys.readouterr().err