# linkdeck

linkdeck keeps a collection of links you mean to come back to. Each link
has a priority letter, any number of tags, a browser to open it in
(Firefox, Chrome, Brave or the system default), a completion flag and the
date it was added. When you add a link, linkdeck fetches the page and
fills in its title and domain. If the page cannot be fetched, it prints a
report of what went wrong, why that might be and how to fix it, and you
can still keep the link.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing puts a `linkdeck` command on your path:

```
linkdeck --help
```

The links are kept as JSON in the file given by `--file`, or else in the
file named by the `LINKDECK_FILE` environment variable, or else in
`~/.linkdeck.json`. The `--file` option comes before the command:

```
linkdeck --file links.json list
```

The commands:

- `linkdeck add URL [--title T] [--tags "a b"] [--priority P] [--browser B] [--no-validate] [--force]`
  saves a new link, dated today. Unless `--no-validate` is given, the page
  is fetched and its title (when `--title` is empty) and domain are filled
  in. If the page cannot be fetched, the error report is printed and the
  link is only saved with `--force`. Repeated tags are kept once.
  `--browser` is one of `Default`, `Firefox`, `Chrome`, `Brave` or their
  lower-case forms.
- `linkdeck list [--tag TAG] [--browser B]` shows the links grouped under
  each priority, in sorted order. Links that have no tags are not listed.
- `linkdeck edit ID [--title T] [--tags "a b"] [--priority P] [--browser B]`
  changes a saved link; whatever is not given is kept. The url, domain,
  completion flag and date are never changed, and the page is not fetched
  again.
- `linkdeck delete ID` removes a link.
- `linkdeck open ID [--platform windows|linux|macos]` opens the link in
  its browser, using the way of starting browsers for the current platform
  unless `--platform` says otherwise.

`ID` may be the full id printed with each link or any prefix of it that
matches only one link. On an error the command prints a message and exits
with status 1.

## Using it from Python

```python
from datetime import date

from linkdeck.browser import Browser, BrowserOpenError, open_browser_linux
from linkdeck.filters import FilterState, count_tags, displayed_links, priorities
from linkdeck.forms import complete_tag, create_link, suggest_tags
from linkdeck.link import links_from_json, links_to_json
from linkdeck.validate import LinkValidationError, validate_link

link = create_link(
    "https://example.com", "", "reading python", "B", "Firefox", date.today()
)

try:
    link = validate_link(link)  # fills in title and domain
except LinkValidationError as error:
    print(error.reporter.error_title)  # "Not Found"

links = [link]
print(count_tags(links))                           # {'reading': 1, 'python': 1}
print(priorities(links))                           # ['B']
print(suggest_tags("rea", ["reading", "python"]))  # ['reading']
print(complete_tag("python rea", "reading"))       # 'python reading'

text = links_to_json(links)
assert links_from_json(text) == links

try:
    open_browser_linux(link.url, link.browser.to_json())
except BrowserOpenError as error:
    print(error.not_found, error)
```

The modules:

- `linkdeck.link` – the `Link` dataclass with its JSON form,
  `links_to_json` / `links_from_json`, and `format_date`.
- `linkdeck.browser` – the `Browser` enum, its per-platform command names
  and `open_in_windows` / `open_in_linux` / `open_in_macos`, plus the
  `open_browser_*` functions that take the browser as JSON and raise
  `BrowserOpenError` (with `not_found` set when the browser's command does
  not exist).
- `linkdeck.errors` – `ErrorReporterBuilder` and the `ErrorReporter`
  report it builds.
- `linkdeck.validate` – `validate_link` and `extract_title`.
- `linkdeck.filters` – tag and browser counts, `toggle_filter` and
  `FilterState` for narrowing to one tag or browser (a second click on the
  same one shows everything again), `displayed_links`, `priorities` and
  `remove_link`.
- `linkdeck.forms` – `create_link`, `edit_link`, `priority_list`,
  `suggest_tags` and `complete_tag`, working on the values a form holds.
- `linkdeck.inputs` – the state of form controls: `InputField` with its
  `InputOptions`, `Checkbox` and `SelectBox`.
- `linkdeck.cli` – the `linkdeck` command, with `render_link` and
  `render_error` for text output.

## What it does not do

linkdeck has no graphical window: it is used from the terminal or from
Python. `linkdeck.inputs` models the state of form controls but draws
nothing. Links cannot be marked complete from the command line; the
flag is stored and shown, and new links start as not complete.