import os
from datetime import datetime

import pytest

from notebrowse.notes import NoteTree, extract_title

NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.mark.parametrize(
    "content, expected",
    [
        ("# My Title\nSome content", "My Title"),
        ("Some content without title", ""),
        ("", ""),
        ("intro\n## Sub\n# Real\n# Second", "Real"),
    ],
)
def test_extract_title(content, expected):
    assert extract_title(content) == expected


@pytest.fixture
def root(tmp_path):
    base = tmp_path / "notes"
    base.mkdir()
    (base / "b.md").write_text("# Bravo\nbody")
    (base / "a.md").write_text("no heading")
    (base / "ignored.txt").write_text("x")
    (base / "archive").mkdir()
    (base / "archive" / "old.md").write_text("# Old")
    folder = base / "folder"
    folder.mkdir()
    (folder / "inner.md").write_text("# Inner")
    return base


def make_tree(root):
    return NoteTree(str(root), str(root / "archive"))


def test_listing_sorted_and_filtered(root):
    tree = make_tree(root)
    assert [n.title for n in tree.notes] == ["a", "Bravo", "folder"]
    assert tree.notes[2].is_dir
    assert tree.notes[1].content == "# Bravo\nbody"
    assert tree.status_text() == "a • 3 notes"


def test_empty_tree(tmp_path):
    tree = NoteTree(str(tmp_path), str(tmp_path / "archive"))
    assert tree.current() is None
    assert tree.status_text() == "0 notes"
    assert tree.current_directory() == str(tmp_path)
    assert tree.read_current() is None


def test_cursor_movement(root):
    tree = make_tree(root)
    assert tree.move_up() is False
    assert tree.move_down() is True
    assert tree.move_down() is True
    assert tree.move_down() is False
    assert tree.current().title == "folder"


def test_expand_and_collapse(root):
    tree = make_tree(root)
    tree.select_path(str(root / "folder"))
    tree.expand()
    assert [n.title for n in tree.notes] == ["a", "Bravo", "folder", "Inner"]
    assert tree.notes[3].depth == 1
    tree.move_down()
    assert tree.current_directory() == str(root / "folder")
    tree.collapse()
    assert tree.current().title == "folder"
    assert [n.title for n in tree.notes] == ["a", "Bravo", "folder"]


def test_expansion_survives_refresh(root):
    tree = make_tree(root)
    tree.select_path(str(root / "folder"))
    tree.expand()
    tree.refresh()
    assert len(tree) == 4


def test_sidebar_lines(root):
    tree = make_tree(root)
    tree.select_path(str(root / "folder"))
    tree.expand()
    assert tree.sidebar_lines() == [
        ("├─ a", False),
        ("├─ Bravo", False),
        ("▼ folder", True),
        ("  └─ Inner", False),
    ]


def test_create_note_with_content(root):
    tree = make_tree(root)
    path = tree.create_note(False, NOW)
    assert path == os.path.join(str(root), "note-2024-03-05-140709.md")
    with open(path, encoding="utf-8") as handle:
        assert handle.read() == "# New Note\n\nCreated: 2024-03-05 14:07:09\n"
    assert tree.current().path == path
    assert tree.current().title == "New Note"


def test_create_empty_note_in_folder(root):
    tree = make_tree(root)
    tree.select_path(str(root / "folder"))
    tree.expand()
    path = tree.create_note(True, NOW)
    assert os.path.dirname(path) == str(root / "folder")
    assert os.path.getsize(path) == 0
    assert tree.current().title == "note-2024-03-05-140709"


def test_create_folder_unique_names(root):
    tree = make_tree(root)
    first = tree.create_folder()
    tree.select_path(str(root / "a.md"))
    second = tree.create_folder()
    assert os.path.basename(first) == "New Folder"
    assert os.path.basename(second) == "New Folder 1"
    assert tree.current().path == second
    assert os.path.isdir(second)


def test_rename_current(root):
    tree = make_tree(root)
    tree.select_path(str(root / "folder"))
    new_path = tree.rename_current("projects")
    assert new_path == str(root / "projects")
    assert tree.current().title == "projects"
    assert not (root / "folder").exists()
    assert tree.rename_current("") is None


def test_archive_current(root):
    tree = make_tree(root)
    tree.select_path(str(root / "b.md"))
    target = tree.archive_current(NOW)
    assert target == str(root / "archive" / "2024-03-05-140709-b.md")
    assert os.path.exists(target)
    assert [n.title for n in tree.notes] == ["a", "folder"]
    assert tree.cursor == 0


def test_read_current(root):
    tree = make_tree(root)
    (root / "a.md").write_text("# Changed")
    assert tree.read_current() == "# Changed"
    assert tree.current().content == "# Changed"
    tree.select_path(str(root / "folder"))
    assert tree.read_current() is None


def test_is_archive_dir(root):
    tree = make_tree(root)
    assert tree.is_archive_dir(str(root / "archive"))
    assert tree.is_archive_dir(str(root / "folder" / "archive"))
    assert not tree.is_archive_dir(str(root / "folder"))