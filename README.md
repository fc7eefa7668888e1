# findreplace

This package holds the logic of a classic find/replace dialog. It has no
user interface. It contains:

- `findreplace.document`: `TextEditor`, a plain-text buffer with a cursor
  and a selection. It also has `FindFlags` and a small `Signal` class.
- `findreplace.form`: `FindReplaceForm`, which holds the search options and
  runs find and replace against an editor.
- `findreplace.dialog`: `FindReplaceDialog`, plus the find-only
  `FindDialog` and `FindForm`.
- `findreplace.settings`: `Settings`, a grouped key/value store saved as
  JSON, so the form's state can be kept between sessions.

## Installation

```
pip install findreplace
```

## Searching an editor

```python
from findreplace.document import TextEditor
from findreplace.form import FindReplaceForm

editor = TextEditor("Here's some text\nYou can use it to find\n")
form = FindReplaceForm()
form.set_text_edit(editor)

form.text_to_find = "some"
form.find_next()      # True; selects "some"
editor.selected_text  # "some"
form.find_prev()      # searches backwards
```

`find(down=None)` searches in the form's own direction (`form.down`) unless
you pass one. `find_next()` and `find_prev()` fix the direction. Each
returns whether a match was selected. If the cursor is at the end of the
text when searching down, the search starts again from the beginning. If it
is at the beginning when searching up, the search starts from the end.

When nothing matches, the form's `status` becomes an HTML span that reads
"no match found". The cursor then goes to the end of the text, or to the
start when searching backwards, so the next search wraps around.

The options are plain attributes: `case_sensitive`, `whole_words`, `down`
and `text_to_replace`. `find_flags(down)` combines them into
`FindFlags.BACKWARD`, `FindFlags.CASE_SENSITIVE` and
`FindFlags.WHOLE_WORDS`. By default, searches ignore case.

## Regular expressions

`set_regexp(True)` turns on regular-expression mode. The pattern is checked
whenever `text_to_find` changes. An invalid pattern puts the `re` error
message in `status`. `enable_regexp_controls(False)` turns the mode off and
sets `regexp_enabled` to False.

## Replacing

`replace()` replaces the current selection with `text_to_replace`, if there
is one, and then searches again. `replace_all()` replaces the selection and
searches again, repeatedly, until no selection is left. It returns the
number of replacements and sets `status` to "Replaced N occurrence(s)".

When an editor gains or loses a selection, its `copy_available` signal
updates the form's `replace_enabled` and `replace_all_enabled`.

## Working without an editor

A form with no editor attached does not search. It emits signals instead:
`find_next_requested`, `find_prev_requested`, `replace_requested` and
`replace_all_requested`. Attach handlers with `Signal.connect(callback)`.
A `FindReplaceDialog` passes these signals on through its own signals of
the same names.

## Dialogs

`FindReplaceDialog` wraps a form, which you can reach as `dialog.form`. It
has `show()`, `close()`, `window_title` and `visible`. Settings are stored
under the `FindReplaceDialog` prefix. `FindDialog` hides the replace
widgets, has the title "Find" and uses the `FindDialog` prefix. `FindForm`
is a find-only form that also uses the `FindDialog` prefix.

## Saving state

```python
from findreplace.settings import Settings

settings = Settings("findreplace.json")
form.write_settings(settings, "FindReplaceDialog")
settings.sync()

restored = FindReplaceForm()
restored.read_settings(Settings("findreplace.json"), "FindReplaceDialog")
```

`Settings(None)` keeps the values in memory only. `with settings.group(prefix):`
stores keys as `prefix/key`.

## What it does not do

The package draws no windows and handles no input. Widget state such as
visibility, enabled buttons and the status text is kept only as
attributes. A host application has to display it.