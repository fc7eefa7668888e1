"""State and behaviour of a find/replace form acting on a TextEditor."""

from __future__ import annotations

import re
from typing import Any

from .document import FindFlags, Signal, TextEditor
from .settings import Settings

__all__ = ["FindReplaceForm", "NO_MATCH_FOUND", "DEFAULT_PREFIX"]

DEFAULT_PREFIX = "FindReplaceDialog"
NO_MATCH_FOUND = "no match found"

TEXT_TO_FIND = "textToFind"
TEXT_TO_REPLACE = "textToReplace"
DOWN_RADIO = "downRadio"
UP_RADIO = "upRadio"
CASE_CHECK = "caseCheck"
WHOLE_CHECK = "wholeCheck"
REGEXP_CHECK = "regexpCheck"

_ERROR_SPAN = '<span style=" font-weight:600; color:#ff0000;">{}</span>'
_MESSAGE_SPAN = '<span style=" font-weight:600; color:green;">{}</span>'


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return bool(value)


class FindReplaceForm:
    """The find/replace form: search options, status line and actions.

    Without an associated editor, the find and replace actions only emit the
    ``find_next_requested``, ``find_prev_requested``, ``replace_requested`` and
    ``replace_all_requested`` signals so that the host can handle them.
    """

    def __init__(self) -> None:
        self.find_next_requested = Signal()
        self.find_prev_requested = Signal()
        self.replace_requested = Signal()
        self.replace_all_requested = Signal()

        self._text_to_find = ""
        self.text_to_replace = ""
        self.down = True
        self.case_sensitive = False
        self.whole_words = False
        self._regexp = False
        self.regexp_enabled = True

        self.find_enabled = False
        self.replace_enabled = False
        self.replace_all_enabled = False
        self.replace_widgets_visible = True
        self.status = ""

        self._editor: TextEditor | None = None

    @property
    def editor(self) -> TextEditor | None:
        return self._editor

    @property
    def text_to_find(self) -> str:
        return self._text_to_find

    @text_to_find.setter
    def text_to_find(self, text: str) -> None:
        if text == self._text_to_find:
            return
        self._text_to_find = text
        self.find_enabled = len(text) > 0
        self.validate_regexp(text)

    @property
    def regexp(self) -> bool:
        """True when the search term is a regular expression."""
        return self._regexp

    def _on_copy_available(self, available: bool) -> None:
        self.replace_enabled = available
        self.replace_all_enabled = available

    def set_text_edit(self, editor: TextEditor | None) -> None:
        """Associate the editor to search in, or None to detach."""
        if self._editor is not None:
            self._editor.copy_available.disconnect(self._on_copy_available)
        self._editor = editor
        if editor is not None:
            editor.copy_available.connect(self._on_copy_available)

    def hide_replace_widgets(self) -> None:
        self.replace_widgets_visible = False

    def enable_regexp_controls(self, enable: bool) -> None:
        if not enable:
            self.set_regexp(False)
        self.regexp_enabled = enable

    def set_regexp(self, selected: bool) -> None:
        """Toggle regular-expression mode, revalidating the search term."""
        if selected == self._regexp:
            return
        self._regexp = selected
        self.validate_regexp(self._text_to_find if selected else "")

    def _compile(self, pattern: str) -> re.Pattern[str]:
        return re.compile(pattern, 0 if self.case_sensitive else re.IGNORECASE)

    def validate_regexp(self, text: str) -> None:
        """Show an error if regexp mode is on and ``text`` is not a valid pattern."""
        if not self._regexp or not text:
            self.status = ""
            return
        try:
            self._compile(text)
        except re.error as exc:
            self._show_error(str(exc))
        else:
            self._show_error("")

    def _show_error(self, error: str) -> None:
        self.status = _ERROR_SPAN.format(error) if error else ""

    def _show_message(self, message: str) -> None:
        self.status = _MESSAGE_SPAN.format(message) if message else ""

    def show(self) -> None:
        """Called when the form becomes visible: clears the status line."""
        self._show_error("")
        self._show_message("")

    def find_flags(self, down: bool) -> FindFlags:
        flags = FindFlags.NONE
        if not down:
            flags |= FindFlags.BACKWARD
        if self.case_sensitive:
            flags |= FindFlags.CASE_SENSITIVE
        if self.whole_words:
            flags |= FindFlags.WHOLE_WORDS
        return flags

    def find(self, down: bool | None = None) -> bool:
        """Find the next (or previous) occurrence; the direction defaults to the form's.

        Wraps around the document; returns whether a match was selected.
        """
        if down is None:
            down = self.down
        editor = self._editor
        if editor is None:
            (self.find_next_requested if down else self.find_prev_requested).emit()
            return False

        if down and editor.at_end:
            editor.move_to_start()
        elif not down and editor.at_start:
            editor.move_to_end()

        flags = self.find_flags(down)
        if self._regexp:
            try:
                found = editor.find_regex(self._compile(self._text_to_find), flags)
            except re.error:
                found = False
        else:
            found = editor.find(self._text_to_find, flags)

        if found:
            self._show_error("")
        else:
            self._show_error(NO_MATCH_FOUND)
            # Park the cursor so the next search wraps in either direction.
            if down:
                editor.move_to_end()
            else:
                editor.move_to_start()
        return found

    def find_next(self) -> bool:
        return self.find(True)

    def find_prev(self) -> bool:
        return self.find(False)

    def replace(self) -> None:
        """Replace the current selection, then move to the next occurrence."""
        editor = self._editor
        if editor is None:
            self.replace_requested.emit()
            return
        if editor.has_selection:
            editor.insert_text(self.text_to_replace)
        self.find()

    def replace_all(self) -> int:
        """Replace from the current selection onwards; returns the count."""
        editor = self._editor
        if editor is None:
            self.replace_all_requested.emit()
            return 0
        count = 0
        while editor.has_selection:
            editor.insert_text(self.text_to_replace)
            self.find()
            count += 1
        self._show_message(f"Replaced {count} occurrence(s)")
        return count

    def write_settings(self, settings: Settings, prefix: str = DEFAULT_PREFIX) -> None:
        with settings.group(prefix):
            settings.set_value(TEXT_TO_FIND, self._text_to_find)
            settings.set_value(TEXT_TO_REPLACE, self.text_to_replace)
            settings.set_value(DOWN_RADIO, self.down)
            settings.set_value(UP_RADIO, not self.down)
            settings.set_value(CASE_CHECK, self.case_sensitive)
            settings.set_value(WHOLE_CHECK, self.whole_words)
            settings.set_value(REGEXP_CHECK, self._regexp)

    def read_settings(self, settings: Settings, prefix: str = DEFAULT_PREFIX) -> None:
        with settings.group(prefix):
            self.text_to_find = str(settings.value(TEXT_TO_FIND, ""))
            self.text_to_replace = str(settings.value(TEXT_TO_REPLACE, ""))
            # The direction buttons are exclusive: unchecking alone changes nothing.
            if _to_bool(settings.value(DOWN_RADIO, True)):
                self.down = True
            if _to_bool(settings.value(UP_RADIO, False)):
                self.down = False
            self.case_sensitive = _to_bool(settings.value(CASE_CHECK, False))
            self.whole_words = _to_bool(settings.value(WHOLE_CHECK, False))
            self.set_regexp(_to_bool(settings.value(REGEXP_CHECK, False)))