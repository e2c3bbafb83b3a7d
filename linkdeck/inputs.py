"""State of the form inputs: text fields, checkboxes and select boxes."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Sequence


class InputType(enum.Enum):
    TEXT = "text"
    NUMBER = "number"

    def __str__(self) -> str:
        return self.value


class InputPermission(enum.Enum):
    WRITE_AND_READ = "WriteAndRead"
    READ_ONLY = "ReadOnly"
    DISABLED = "Disabled"


@dataclass(frozen=True)
class InputOptions:
    input_type: InputType = InputType.TEXT
    permission: InputPermission = InputPermission.WRITE_AND_READ


@dataclass
class InputField:
    """A text input whose value only changes when it may be written."""

    value: str = ""
    options: InputOptions = field(default_factory=InputOptions)

    def key_up(self, value: str) -> str:
        """Take the typed ``value`` if writable; return the resulting value."""
        if self.options.permission is InputPermission.WRITE_AND_READ:
            self.value = value
        return self.value

    def displayed_value(self) -> str:
        """What the input shows: nothing when disabled, else its value."""
        if self.options.permission is InputPermission.DISABLED:
            return ""
        return self.value


@dataclass
class Checkbox:
    """A checkbox that, when checked, disables the input it belongs to."""

    disabled: bool = False

    @property
    def checked(self) -> bool:
        return self.disabled

    def click(self, input_value_is_empty: bool) -> bool:
        """Toggle; checking is only allowed while the input is empty."""
        if not self.disabled:
            if input_value_is_empty:
                self.disabled = True
        else:
            self.disabled = False
        return self.disabled


class SelectBox:
    """A drop-down choice among fixed options."""

    def __init__(self, options: Sequence[str], init_value: Optional[str] = None) -> None:
        self.options = list(options)
        if init_value is None:
            if not self.options:
                raise ValueError("a select box needs at least one option")
            init_value = self.options[0]
        self.value = init_value
        self.is_open = False

    def toggle(self) -> bool:
        """Open the list if closed, close it if open; return whether it is open."""
        self.is_open = not self.is_open
        return self.is_open

    def choose(self, option: str) -> str:
        """Pick ``option`` from the list and close it."""
        if option not in self.options:
            raise ValueError(f"{option!r} is not one of the options")
        self.is_open = False
        self.value = option
        return self.value