import pytest

from findreplace.dialog import FindDialog, FindForm, FindReplaceDialog
from findreplace.document import FindFlags, TextEditor
from findreplace.settings import Settings

SAMPLE = (
    "Here's some text\nYou can use it to find\n"
    "with the Find/Replace dialog\n"
    "and do some tests. :)"
)


@pytest.fixture
def editor():
    return TextEditor(SAMPLE)


def test_find_dialog_title_and_hidden_replace_widgets():
    dialog = FindDialog()
    assert dialog.window_title == "Find"
    assert dialog.form.replace_widgets_visible is False


def test_find_replace_dialog_keeps_replace_widgets():
    dialog = FindReplaceDialog()
    assert dialog.form.replace_widgets_visible is True


def test_find_form_hides_replace_widgets():
    form = FindForm()
    assert form.replace_widgets_visible is False


@pytest.mark.parametrize("cls", [FindReplaceDialog, FindDialog])
def test_signals_forwarded_without_editor(cls):
    dialog = cls()
    calls = []
    dialog.find_next_requested.connect(lambda: calls.append("next"))
    dialog.find_prev_requested.connect(lambda: calls.append("prev"))
    dialog.replace_requested.connect(lambda: calls.append("replace"))
    dialog.replace_all_requested.connect(lambda: calls.append("all"))
    dialog.find_next()
    dialog.find_prev()
    dialog.form.replace()
    dialog.form.replace_all()
    assert calls == ["next", "prev", "replace", "all"]


def test_find_next_selects_match(editor):
    dialog = FindReplaceDialog()
    dialog.set_text_edit(editor)
    dialog.text_to_find = "text"
    assert dialog.text_to_find == "text"
    assert dialog.find_next() is True
    assert editor.selected_text == "text"


def test_find_prev_wraps_to_last_match(editor):
    dialog = FindDialog()
    dialog.set_text_edit(editor)
    dialog.text_to_find = "some"
    assert dialog.find_prev() is True
    assert editor.selected_text == "some"
    assert editor.selection_start == SAMPLE.rindex("some")


def test_find_uses_form_direction(editor):
    dialog = FindReplaceDialog()
    dialog.set_text_edit(editor)
    dialog.text_to_find = "find"
    dialog.form.down = False
    assert dialog.find() is True
    assert editor.selection_start == SAMPLE.lower().rindex("find")


def test_find_without_match_reports_status(editor):
    dialog = FindReplaceDialog()
    dialog.set_text_edit(editor)
    dialog.text_to_find = "absent-word"
    assert dialog.find_next() is False
    assert "no match found" in dialog.form.status
    assert editor.at_end


def test_find_flags_delegate_to_form():
    dialog = FindReplaceDialog()
    dialog.form.case_sensitive = True
    assert dialog.find_flags(False) == FindFlags.BACKWARD | FindFlags.CASE_SENSITIVE
    assert dialog.find_flags(True) == dialog.form.find_flags(True)


def test_enable_regexp_controls_off_clears_regexp():
    dialog = FindReplaceDialog()
    dialog.form.set_regexp(True)
    assert dialog.regexp is True
    dialog.enable_regexp_controls(False)
    assert dialog.regexp is False
    assert dialog.form.regexp_enabled is False


def test_show_clears_status_and_sets_visible():
    dialog = FindReplaceDialog()
    dialog.form.set_regexp(True)
    dialog.text_to_find = "("
    assert dialog.form.status != ""
    dialog.show()
    assert dialog.form.status == ""
    assert dialog.visible is True
    dialog.close()
    assert dialog.visible is False


def test_find_dialog_settings_use_find_dialog_prefix():
    settings = Settings()
    dialog = FindDialog()
    dialog.text_to_find = "needle"
    dialog.write_settings(settings)
    with settings.group("FindDialog"):
        assert settings.value("textToFind") == "needle"
    with settings.group("FindReplaceDialog"):
        assert settings.keys() == []


def test_find_replace_dialog_settings_default_prefix():
    settings = Settings()
    dialog = FindReplaceDialog()
    dialog.form.text_to_replace = "bar"
    dialog.write_settings(settings)
    with settings.group("FindReplaceDialog"):
        assert settings.value("textToReplace") == "bar"


def test_settings_round_trip_between_dialogs(tmp_path):
    path = tmp_path / "settings.json"
    settings = Settings(path)
    source = FindReplaceDialog()
    source.text_to_find = "alpha"
    source.form.text_to_replace = "beta"
    source.form.down = False
    source.form.case_sensitive = True
    source.form.whole_words = True
    source.form.set_regexp(True)
    source.write_settings(settings, "Custom")
    settings.sync()

    target = FindReplaceDialog()
    target.read_settings(Settings(path), "Custom")
    assert target.text_to_find == "alpha"
    assert target.form.text_to_replace == "beta"
    assert target.form.down is False
    assert target.form.case_sensitive is True
    assert target.form.whole_words is True
    assert target.regexp is True


def test_find_form_settings_round_trip():
    settings = Settings()
    form = FindForm()
    form.text_to_find = "word"
    form.whole_words = True
    form.write_settings(settings)
    other = FindForm()
    other.read_settings(settings)
    assert other.text_to_find == "word"
    assert other.whole_words is True
    with settings.group("FindDialog"):
        assert "textToFind" in settings


def test_read_settings_defaults_when_empty():
    dialog = FindDialog()
    dialog.text_to_find = "stale"
    dialog.form.down = False
    dialog.read_settings(Settings())
    assert dialog.text_to_find == ""
    assert dialog.form.down is True
    assert dialog.regexp is False


def test_replace_all_through_dialog_form(editor):
    dialog = FindReplaceDialog()
    dialog.set_text_edit(editor)
    dialog.text_to_find = "some"
    dialog.form.text_to_replace = "any"
    assert dialog.find_next() is True
    count = dialog.form.replace_all()
    assert count == SAMPLE.count("some")
    assert "some" not in editor.text
    assert editor.text == SAMPLE.replace("some", "any")


def test_set_text_edit_none_detaches(editor):
    dialog = FindReplaceDialog()
    dialog.set_text_edit(editor)
    dialog.set_text_edit(None)
    calls = []
    dialog.find_next_requested.connect(lambda: calls.append(True))
    dialog.text_to_find = "text"
    assert dialog.find_next() is False
    assert calls == [True]
    assert len(editor.copy_available) == 0