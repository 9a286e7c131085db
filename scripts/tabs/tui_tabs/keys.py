"""Key bindings, matching and raw terminal key decoding."""

from __future__ import annotations

from dataclasses import dataclass

from tui_tabs.models import KeyMsg

# Escape sequences xterm-compatible terminals send for the keys we name.
# Longest sequences must be tried first, see decode_keys().
ESCAPE_SEQUENCES = {
    "\x1b[1;3C": "alt+right",
    "\x1b[1;3D": "alt+left",
    "\x1b[1;3A": "alt+up",
    "\x1b[1;3B": "alt+down",
    "\x1b[1;5C": "ctrl+right",
    "\x1b[1;5D": "ctrl+left",
    "\x1b\x1b[C": "alt+right",
    "\x1b\x1b[D": "alt+left",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[Z": "shift+tab",
    "\x1b[H": "home",
    "\x1b[F": "end",
}

CONTROL_KEYS = {
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x7f": "backspace",
    "\x03": "ctrl+c",
    " ": "space",
}


@dataclass(frozen=True)
class KeyBinding:
    keys: tuple[str, ...]
    help_key: str = ""
    help_desc: str = ""
    enabled: bool = True

    @classmethod
    def new(cls, *keys: str, help_text: tuple[str, str] | None = None) -> "KeyBinding":
        if not keys:
            raise ValueError("key binding needs at least one key")
        help_key, help_desc = help_text if help_text else (keys[0], "")
        return cls(keys=tuple(keys), help_key=help_key, help_desc=help_desc)


@dataclass(frozen=True)
class KeyMap:
    tab_next: KeyBinding
    tab_prev: KeyBinding

    def bindings(self) -> list[KeyBinding]:
        return [self.tab_next, self.tab_prev]


def default_keymap() -> KeyMap:
    return KeyMap(
        tab_next=KeyBinding.new("alt+right", help_text=("alt+right", "Next tab")),
        tab_prev=KeyBinding.new("alt+left", help_text=("alt+left", "Prev tab")),
    )


def matches(msg: object, *bindings: KeyBinding) -> bool:
    if not isinstance(msg, KeyMsg):
        return False
    return any(binding.enabled and msg.key in binding.keys for binding in bindings)


def decode_keys(data: str) -> list[str]:
    """Split a chunk of terminal input into key names.

    Unknown escape sequences decode to ``"esc"`` followed by their remaining
    characters; a lone ESC followed by a printable char is read as alt+char.
    """
    keys: list[str] = []
    ordered = sorted(ESCAPE_SEQUENCES, key=len, reverse=True)
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == "\x1b":
            for seq in ordered:
                if data.startswith(seq, i):
                    keys.append(ESCAPE_SEQUENCES[seq])
                    i += len(seq)
                    break
            else:
                nxt = data[i + 1] if i + 1 < len(data) else ""
                if nxt and nxt.isprintable() and nxt != "[":
                    keys.append(f"alt+{nxt}")
                    i += 2
                else:
                    keys.append("esc")
                    i += 1
            continue
        if ch in CONTROL_KEYS:
            keys.append(CONTROL_KEYS[ch])
        elif "\x01" <= ch <= "\x1a":
            keys.append(f"ctrl+{chr(ord(ch) + 96)}")
        else:
            keys.append(ch)
        i += 1
    return keys
