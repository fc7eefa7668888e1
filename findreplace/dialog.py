"""Find/replace and find-only dialogs built around a FindReplaceForm."""

from __future__ import annotations

from .document import FindFlags, Signal, TextEditor
from .form import FindReplaceForm
from .settings import Settings

__all__ = ["FindReplaceDialog", "FindDialog", "FindForm", "FIND_DIALOG_PREFIX"]

FIND_DIALOG_PREFIX = "FindDialog"
_FIND_REPLACE_PREFIX = "FindReplaceDialog"


class FindReplaceDialog:
    """A find/replace dialog delegating its work to a FindReplaceForm.

    The form's request signals are forwarded through the dialog's own
    ``find_next_requested``, ``find_prev_requested``, ``replace_requested``
    and ``replace_all_requested`` signals.
    """

    default_prefix = _FIND_REPLACE_PREFIX

    def __init__(self) -> None:
        self.form = FindReplaceForm()
        self.window_title = "Find/Replace"
        self.visible = False

        self.find_next_requested = Signal()
        self.find_prev_requested = Signal()
        self.replace_requested = Signal()
        self.replace_all_requested = Signal()

        self.form.find_next_requested.connect(self.find_next_requested.emit)
        self.form.find_prev_requested.connect(self.find_prev_requested.emit)
        self.form.replace_requested.connect(self.replace_requested.emit)
        self.form.replace_all_requested.connect(self.replace_all_requested.emit)

    def show(self) -> None:
        """Make the dialog visible, clearing the form's status line."""
        self.form.show()
        self.visible = True

    def close(self) -> None:
        self.visible = False

    def set_text_edit(self, editor: TextEditor | None) -> None:
        """Associate the editor to search in, or None to detach."""
        self.form.set_text_edit(editor)

    def enable_regexp_controls(self, enable: bool) -> None:
        self.form.enable_regexp_controls(enable)

    def write_settings(self, settings: Settings, prefix: str | None = None) -> None:
        """Store the form's state under ``prefix`` (the dialog's default if None)."""
        self.form.write_settings(settings, self.default_prefix if prefix is None else prefix)

    def read_settings(self, settings: Settings, prefix: str | None = None) -> None:
        """Restore the form's state from ``prefix`` (the dialog's default if None)."""
        self.form.read_settings(settings, self.default_prefix if prefix is None else prefix)

    def find_flags(self, down: bool) -> FindFlags:
        return self.form.find_flags(down)

    @property
    def regexp(self) -> bool:
        """True when regular-expression mode is selected."""
        return self.form.regexp

    @property
    def text_to_find(self) -> str:
        return self.form.text_to_find

    @text_to_find.setter
    def text_to_find(self, text: str) -> None:
        self.form.text_to_find = text

    def find(self) -> bool:
        """Find in the direction currently selected on the form."""
        return self.form.find()

    def find_next(self) -> bool:
        return self.form.find_next()

    def find_prev(self) -> bool:
        return self.form.find_prev()


class FindDialog(FindReplaceDialog):
    """A find-only dialog: a FindReplaceDialog without the replace widgets."""

    default_prefix = FIND_DIALOG_PREFIX

    def __init__(self) -> None:
        super().__init__()
        self.form.hide_replace_widgets()
        self.window_title = "Find"

    def write_settings(self, settings: Settings, prefix: str | None = None) -> None:
        super().write_settings(settings, prefix)

    def read_settings(self, settings: Settings, prefix: str | None = None) -> None:
        super().read_settings(settings, prefix)


class FindForm(FindReplaceForm):
    """A find-only form: a FindReplaceForm without the replace widgets."""

    def __init__(self) -> None:
        super().__init__()
        self.hide_replace_widgets()

    def write_settings(self, settings: Settings, prefix: str = FIND_DIALOG_PREFIX) -> None:
        super().write_settings(settings, prefix)

    def read_settings(self, settings: Settings, prefix: str = FIND_DIALOG_PREFIX) -> None:
        super().read_settings(settings, prefix)