"""The tree of notes and folders shown in the sidebar."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime

NOTE_SUFFIX = ".md"
NEW_FOLDER_NAME = "New Folder"
FILE_STAMP = "%Y-%m-%d-%H%M%S"
CREATED_STAMP = "%Y-%m-%d %H:%M:%S"


def extract_title(content: str) -> str:
    """Return the text of the first '# ' heading, or an empty string."""
    for line in content.split("\n"):
        if line.startswith("# "):
            return line[2:]
    return ""


@dataclass
class Note:
    path: str
    title: str
    content: str = ""
    is_dir: bool = False
    depth: int = 0
    expanded: bool = False


class NoteTree:
    """Flattened, expandable listing of markdown notes under a root folder."""

    def __init__(self, root: str, archive_dir: str) -> None:
        self.root = root
        self.archive_dir = archive_dir
        self.notes: list[Note] = []
        self.cursor = 0
        self.refresh()

    def __len__(self) -> int:
        return len(self.notes)

    def is_archive_dir(self, path: str) -> bool:
        return path == self.archive_dir or os.path.basename(path) == "archive"

    def _walk(self, directory: str, depth: int, expanded: dict[str, bool]) -> list[Note]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError:
            return []
        notes: list[Note] = []
        for entry in entries:
            path = os.path.join(directory, entry.name)
            if self.is_archive_dir(path):
                continue
            if entry.is_dir(follow_symlinks=False):
                folder = Note(
                    path=path,
                    title=entry.name,
                    is_dir=True,
                    depth=depth,
                    expanded=expanded.get(path, False),
                )
                notes.append(folder)
                if folder.expanded:
                    notes.extend(self._walk(path, depth + 1, expanded))
            elif entry.name.endswith(NOTE_SUFFIX):
                content = _read_text(path) or ""
                title = extract_title(content) or entry.name[: -len(NOTE_SUFFIX)]
                notes.append(Note(path=path, title=title, content=content, depth=depth))
        return notes

    def refresh(self) -> None:
        """Rescan the disk, keeping folders expanded that were expanded."""
        expanded = {note.path: note.expanded for note in self.notes if note.is_dir}
        self.notes = self._walk(self.root, 0, expanded)
        self.cursor = min(self.cursor, max(len(self.notes) - 1, 0))

    def current(self) -> Note | None:
        if 0 <= self.cursor < len(self.notes):
            return self.notes[self.cursor]
        return None

    def move_up(self) -> bool:
        if self.cursor > 0:
            self.cursor -= 1
            return True
        return False

    def move_down(self) -> bool:
        if self.cursor < len(self.notes) - 1:
            self.cursor += 1
            return True
        return False

    def select_path(self, path: str) -> bool:
        for index, note in enumerate(self.notes):
            if note.path == path:
                self.cursor = index
                return True
        return False

    def _parent_index(self, start: int) -> int | None:
        depth = self.notes[self.cursor].depth
        for index in range(start, -1, -1):
            note = self.notes[index]
            if note.is_dir and note.depth < depth:
                return index
        return None

    def current_directory(self) -> str:
        """Folder under the cursor, or the folder holding the note under it."""
        note = self.current()
        if note is None:
            return self.root
        if note.is_dir:
            return note.path
        parent = self._parent_index(self.cursor)
        return self.root if parent is None else self.notes[parent].path

    def expand(self) -> None:
        note = self.current()
        if note is not None and note.is_dir:
            note.expanded = True
            self.refresh()

    def collapse(self) -> None:
        """Collapse the folder under the cursor, or the note's enclosing folder."""
        note = self.current()
        if note is None:
            return
        if note.is_dir:
            note.expanded = False
            self.refresh()
            return
        parent = self._parent_index(self.cursor - 1)
        if parent is not None:
            self.notes[parent].expanded = False
            self.cursor = parent
            self.refresh()

    def create_note(self, create_empty: bool = False, now: datetime | None = None) -> str:
        """Write a timestamped note in the current directory and select it."""
        now = now or datetime.now()
        path = os.path.join(self.current_directory(), f"note-{now.strftime(FILE_STAMP)}.md")
        content = "" if create_empty else f"# New Note\n\nCreated: {now.strftime(CREATED_STAMP)}\n"
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(content)
        self.refresh()
        self.select_path(path)
        return path

    def create_folder(self) -> str:
        """Make a uniquely named 'New Folder' in the current directory and select it."""
        directory = self.current_directory()
        path = os.path.join(directory, NEW_FOLDER_NAME)
        counter = 1
        while os.path.exists(path):
            path = os.path.join(directory, f"{NEW_FOLDER_NAME} {counter}")
            counter += 1
        os.makedirs(path, exist_ok=True)
        self.refresh()
        self.select_path(path)
        return path

    def rename_current(self, new_name: str) -> str | None:
        """Rename the entry under the cursor within its folder; empty names do nothing."""
        note = self.current()
        if note is None or not new_name:
            return None
        new_path = os.path.join(os.path.dirname(note.path), new_name)
        os.rename(note.path, new_path)
        self.refresh()
        self.select_path(new_path)
        return new_path

    def archive_current(self, now: datetime | None = None) -> str | None:
        """Move the entry under the cursor into the archive folder."""
        note = self.current()
        if note is None:
            return None
        now = now or datetime.now()
        os.makedirs(self.archive_dir, exist_ok=True)
        name = f"{now.strftime(FILE_STAMP)}-{os.path.basename(note.path)}"
        target = os.path.join(self.archive_dir, name)
        os.rename(note.path, target)
        if self.cursor > 0:
            self.cursor -= 1
        self.refresh()
        return target

    def read_current(self) -> str | None:
        """Reload the selected note from disk; None for folders or unreadable files."""
        note = self.current()
        if note is None:
            return None
        content = _read_text(note.path)
        if content is not None:
            note.content = content
        return content

    def sidebar_lines(self) -> list[tuple[str, bool]]:
        """Sidebar rows as (text, is_selected) pairs."""
        lines = []
        for index, note in enumerate(self.notes):
            if note.is_dir:
                icon = "▼ " if note.expanded else "▶ "
            else:
                following = self.notes[index + 1] if index + 1 < len(self.notes) else None
                icon = "├─ " if following is not None and following.depth >= note.depth else "└─ "
            lines.append(("  " * note.depth + icon + note.title, index == self.cursor))
        return lines

    def status_text(self) -> str:
        text = f"{len(self.notes)} notes"
        note = self.current()
        if note is not None:
            text = f"{note.title} • {text}"
        return text


def _read_text(path: str) -> str | None:
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return handle.read()
    except OSError:
        return None