# notebrowse

A terminal browser for a folder of Markdown notes. Notes and folders are
listed in a collapsible tree on the left, and the selected note is shown
rendered as Markdown on the right. Pressing Enter on a note opens it in your
editor; when the editor exits, the tree and preview are reloaded.

## Installation

```
pip install .
```

## Usage

```
notebrowse
```

To print the version (`note version dev`):

```
notebrowse --version
```

To print the contents of the configuration file:

```
notebrowse --config
```

If the file cannot be read, an error is printed and the exit status is 1.
Both options are also accepted with a single dash (`-version`, `-config`).

### Keys

| Key                | Action                                              |
|--------------------|-----------------------------------------------------|
| `↑` / `k`          | move up                                             |
| `↓` / `j`          | move down                                           |
| `l` / `→`          | expand the selected folder                          |
| `h` / `←`          | collapse the folder (or the note's parent folder)   |
| `enter`            | edit the note, or rename the selected folder        |
| `n`                | new note in the current folder                      |
| `N`                | new folder in the current folder, then rename it    |
| `backspace`        | move the selected note or folder to the archive     |
| `tab`              | show or hide the sidebar                            |
| `q` / `ctrl+c`     | quit                                                |

The preview also scrolls with `pgup`/`pgdown`, `space`, `f`, `b` (a page),
and `d`, `u`, `ctrl+d`, `ctrl+u` (half a page).

While renaming a folder, type the new name (at most 50 characters),
Backspace deletes a character, Enter confirms and Esc cancels. An empty name
leaves the folder as it is.

New notes are named `note-YYYY-MM-DD-HHMMSS.md`. Unless `create_empty` is
set, each starts with a `# New Note` heading and a `Created:` line with the
time. A note's title in the sidebar is its first `# ` heading, or else its
file name without `.md`. Only `.md` files and folders are listed.

New folders are called `New Folder`, or `New Folder 1`, `New Folder 2`, …
if that name is taken.

Archived items are moved into the archive directory, with a timestamp in
front of their names. Any folder called `archive` is hidden from the tree.

## Configuration

The configuration file is `note/config.yaml` under `$XDG_CONFIG_HOME`
(default `~/.config`; the variable is used only if it is an absolute path).
It is created with defaults on first run, together with the notes and
archive directories. Notes live in `note/` under `$XDG_DATA_HOME` (default
`~/.local/share`).

```yaml
config_dir: /home/user/.config/note
notes_dir: /home/user/.local/share/note
archive_dir: /home/user/.local/share/note/archive
editor: /usr/bin/vi
layout:
  sidebar_width: 30
  padding:
    horizontal: 2
    vertical: 1
  heights:
    header: 1
    footer: 1
    status: 1
    help: 1
  header_gap: 1
theme:
  light: default
  dark: default
create_empty: false
```

When the file is first written, `editor` is filled in with the editor found
at that moment. If `editor` is empty, the editor is chosen from, in order:
`$NOTE_EDITOR`, `$VISUAL`, `$EDITOR`, `/usr/bin/vi`, and finally `/bin/ed`.

Keys missing from the file keep their defaults. A value of the wrong type,
or a file that is not valid YAML, stops the program with an error.

## Using it from Python

- `notebrowse.config`: `load_config()`, `save_config(cfg)`,
  `default_config()`, `config_from_dict(data, base)`, `config_to_dict(cfg)`
  and the `Config` dataclass with `calculate_heights()`, `padding()`,
  `default_dimensions()` and `resolve_editor()`. Errors are raised as
  `ConfigError`.
- `notebrowse.notes`: `NoteTree(root, archive_dir)` holds the flattened tree
  and cursor, with `refresh()`, `move_up()`, `move_down()`, `expand()`,
  `collapse()`, `create_note()`, `create_folder()`, `rename_current()`,
  `archive_current()`, `read_current()`, `sidebar_lines()` and
  `status_text()`; `extract_title(content)` returns a note's title.
- `notebrowse.app`: `App(cfg, width, height)` with `handle_key(key)`,
  `resize()`, `view()` and `run()`; `main(argv=None)` is the command.

## Limitations

- The mouse is not used.
- The `theme` settings are stored but do not change the colours; Markdown is
  always rendered with the same style.
- There is no search, and notes cannot be deleted, only archived.

## Development

```
pip install -e ".[test]"
pytest
```