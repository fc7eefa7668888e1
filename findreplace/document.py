"""Plain-text editor model with a selection cursor and search support."""

from __future__ import annotations

import enum
import re
from typing import Any, Callable

__all__ = ["Signal", "FindFlags", "TextEditor"]


class Signal:
    """A set of callbacks that are invoked together by :meth:`emit`."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., Any]] = []

    def connect(self, callback: Callable[..., Any]) -> None:
        """Register ``callback`` to be called on every emission."""
        self._slots.append(callback)

    def disconnect(self, callback: Callable[..., Any]) -> None:
        """Remove a connected callback; raises ValueError if it is not connected."""
        try:
            self._slots.remove(callback)
        except ValueError:
            raise ValueError("callback is not connected to this signal") from None

    def emit(self, *args: Any) -> None:
        """Call every connected callback with ``args``."""
        for slot in list(self._slots):
            slot(*args)

    def __len__(self) -> int:
        return len(self._slots)


class FindFlags(enum.Flag):
    """Options that control a search."""

    NONE = 0
    BACKWARD = 0x1
    CASE_SENSITIVE = 0x2
    WHOLE_WORDS = 0x4


class TextEditor:
    """A plain-text buffer with a cursor made of an anchor and a position.

    The span between anchor and position is the selection.  ``copy_available``
    is emitted with a bool whenever the editor gains or loses a selection.
    """

    def __init__(self, text: str = "") -> None:
        self.copy_available = Signal()
        self._text = text
        self._anchor = 0
        self._position = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def anchor(self) -> int:
        return self._anchor

    @property
    def position(self) -> int:
        return self._position

    @property
    def selection_start(self) -> int:
        return min(self._anchor, self._position)

    @property
    def selection_end(self) -> int:
        return max(self._anchor, self._position)

    @property
    def has_selection(self) -> bool:
        return self._anchor != self._position

    @property
    def selected_text(self) -> str:
        return self._text[self.selection_start:self.selection_end]

    @property
    def at_start(self) -> bool:
        return self._position == 0

    @property
    def at_end(self) -> bool:
        return self._position == len(self._text)

    def _set_cursor(self, anchor: int, position: int) -> None:
        had_selection = self.has_selection
        self._anchor = anchor
        self._position = position
        if had_selection != self.has_selection:
            self.copy_available.emit(self.has_selection)

    def set_text(self, text: str) -> None:
        """Replace the whole buffer and put the cursor at the start."""
        self._text = text
        self._set_cursor(0, 0)

    def select(self, anchor: int, position: int) -> None:
        """Select the span from ``anchor`` to ``position``."""
        size = len(self._text)
        if not (0 <= anchor <= size and 0 <= position <= size):
            raise ValueError(f"cursor ({anchor}, {position}) outside text of length {size}")
        self._set_cursor(anchor, position)

    def move_to_start(self) -> None:
        self._set_cursor(0, 0)

    def move_to_end(self) -> None:
        end = len(self._text)
        self._set_cursor(end, end)

    def find(self, pattern: str, flags: FindFlags = FindFlags.NONE) -> bool:
        """Search for literal ``pattern`` from the cursor and select the match."""
        if not pattern:
            return False
        return self.find_regex(re.escape(pattern), flags)

    def find_regex(self, regex: str | re.Pattern[str], flags: FindFlags = FindFlags.NONE) -> bool:
        """Search for a regular expression from the cursor and select the match.

        Case sensitivity is taken from ``flags``, overriding the pattern's own.
        Raises ``re.error`` for an invalid pattern string.
        """
        if isinstance(regex, re.Pattern):
            pattern, re_flags = regex.pattern, regex.flags
        else:
            pattern, re_flags = regex, 0
        if FindFlags.CASE_SENSITIVE in flags:
            re_flags &= ~re.IGNORECASE
        else:
            re_flags |= re.IGNORECASE
        compiled = re.compile(pattern, re_flags)
        match = self._search(compiled, flags)
        if match is None:
            return False
        self._set_cursor(match.start(), match.end())
        return True

    def _is_whole_word(self, match: re.Match[str]) -> bool:
        start, end = match.start(), match.end()
        before_ok = start == 0 or not self._text[start - 1].isalnum()
        after_ok = end == len(self._text) or not self._text[end].isalnum()
        return before_ok and after_ok

    def _accept(self, match: re.Match[str], flags: FindFlags) -> bool:
        return FindFlags.WHOLE_WORDS not in flags or self._is_whole_word(match)

    def _search(self, regex: re.Pattern[str], flags: FindFlags) -> re.Match[str] | None:
        text = self._text
        if FindFlags.BACKWARD in flags:
            for start in range(self.selection_start - 1, -1, -1):
                match = regex.match(text, start)
                if match is not None and self._accept(match, flags):
                    return match
            return None
        start = self.selection_end
        while start <= len(text):
            match = regex.search(text, start)
            if match is None:
                return None
            if self._accept(match, flags):
                return match
            start = match.start() + 1
        return None

    def insert_text(self, text: str) -> None:
        """Replace the selection (if any) with ``text``; the cursor ends after it."""
        start, end = self.selection_start, self.selection_end
        self._text = self._text[:start] + text + self._text[end:]
        new_position = start + len(text)
        self._set_cursor(new_position, new_position)