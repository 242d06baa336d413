"""Keyboard state and translation of key presses into characters."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum


def _key_members() -> dict[str, int]:
    members = {letter: index for index, letter in enumerate(string.ascii_uppercase)}
    members.update({f"NUM{d}": 26 + d for d in range(10)})
    named = [
        "ESCAPE", "LCONTROL", "LSHIFT", "LALT", "LSYSTEM", "RCONTROL", "RSHIFT",
        "RALT", "RSYSTEM", "MENU", "LBRACKET", "RBRACKET", "SEMICOLON", "COMMA",
        "PERIOD", "QUOTE", "SLASH", "BACKSLASH", "TILDE", "EQUAL", "DASH", "SPACE",
        "ENTER", "BACKSPACE", "TAB", "PAGEUP", "PAGEDOWN", "END", "HOME", "INSERT",
        "DELETE", "ADD", "SUBTRACT", "MULTIPLY", "DIVIDE", "LEFT", "RIGHT", "UP", "DOWN",
    ]
    members.update({name: 36 + offset for offset, name in enumerate(named)})
    members.update({f"NUMPAD{d}": 75 + d for d in range(10)})
    return members


Key = IntEnum("Key", _key_members())
Key.__doc__ = "Keyboard keys that the interface distinguishes."

_SHIFTED_DIGITS = {
    Key.NUM1: "!", Key.NUM2: "@", Key.NUM3: "#", Key.NUM4: "$", Key.NUM5: "%",
    Key.NUM6: "^", Key.NUM7: "&", Key.NUM8: "*", Key.NUM9: "(", Key.NUM0: ")",
}

_SYMBOLS = {
    Key.PERIOD: (".", ">"),
    Key.COMMA: (",", "<"),
    Key.SEMICOLON: (";", ":"),
    Key.SLASH: ("/", "?"),
    Key.BACKSLASH: ("\\", "|"),
    Key.QUOTE: ("'", '"'),
    Key.EQUAL: ("=", "+"),
    Key.DASH: ("-", "_"),
    Key.LBRACKET: ("[", "{"),
    Key.RBRACKET: ("]", "}"),
}

_FIXED = {
    Key.SPACE: " ",
    Key.BACKSPACE: "`",
    Key.ENTER: "\n",
}

PASTE = "$"
"""Character produced by Control+V."""

NO_CHAR = "\0"
"""Character produced by keys that type nothing."""


def key_to_char(key: Key, shift: bool, control: bool) -> str:
    """Translate a key press into the character it types.

    Backspace gives "`", Enter gives a newline, Control+V gives "$" and keys
    that type nothing give ``"\\0"``.
    """
    if Key.A <= key <= Key.Z:
        if key == Key.V and control:
            return PASTE
        base = chr(key - Key.A + ord("a"))
        return base.upper() if shift else base
    if Key.NUM0 <= key <= Key.NUM9:
        if shift:
            return _SHIFTED_DIGITS[key]
        return chr(key - Key.NUM0 + ord("0"))
    if Key.NUMPAD0 <= key <= Key.NUMPAD9:
        return chr(key - Key.NUMPAD0 + ord("0"))
    if key in _SYMBOLS:
        plain, shifted = _SYMBOLS[key]
        return shifted if shift else plain
    return _FIXED.get(key, NO_CHAR)


@dataclass
class Keyboard:
    """Key state collected while events of one frame are polled.

    ``same_poll`` and ``used_key`` are reset by the caller at the start of
    each poll.
    """

    last_key: str = NO_CHAR
    key_pressed: bool = False
    same_poll: bool = False
    used_key: bool = False

    def handle_event(self, key: Key | None, shift: bool = False, control: bool = False) -> None:
        """Record an event; ``key`` is the pressed key, or None for any other event."""
        if key is not None:
            self.key_pressed = True
            self.last_key = key_to_char(key, shift, control)
            self.same_poll = True
        elif not self.same_poll:
            self.key_pressed = False