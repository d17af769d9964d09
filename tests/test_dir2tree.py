"""Unit tests for StreamingDir2Tree."""

import os
import sys

import pytest

from dir2tree.dir2tree import StreamingDir2Tree, root_display_name
from dir2tree.exceptions import PatternCompileError
from dir2tree.file_system_tree.walk_options import WalkOptions


@pytest.fixture
def project_fs(memory_fs):
    memory_fs.add_file("/root/README.md")
    memory_fs.add_file("/root/src/main.py")
    memory_fs.add_file("/root/src/util.py")
    memory_fs.add_symlink("/root/latest")
    memory_fs.add_file("/root/locked/x")
    memory_fs.fail("/root/locked", "Permission denied")
    return memory_fs


@pytest.mark.parametrize(
    "root,expected",
    [
        (".", "."),
        ("./", "."),
        ("project", "project"),
        ("/home/user/project", "project"),
        ("/home/user/project/", "project"),
        ("../sibling", "sibling"),
        ("/", "/"),
    ],
)
def test_root_display_name(root, expected):
    assert root_display_name(root) == expected


def test_stream_tree(project_fs):
    analyzer = StreamingDir2Tree("/root", fs=project_fs)

    assert "".join(analyzer.stream_tree()) == (
        "root\n"
        "├── README.md\n"
        "├── latest\n"
        "├── locked/ [error: Permission denied]\n"
        "└── src/\n"
        "    ├── main.py\n"
        "    └── util.py\n"
    )


def test_counts(project_fs):
    analyzer = StreamingDir2Tree("/root", fs=project_fs)

    assert analyzer.directory_count == 2
    assert analyzer.file_count == 4
    assert analyzer.error_count == 1


def test_walks_only_once(project_fs):
    analyzer = StreamingDir2Tree("/root", fs=project_fs)
    list(analyzer.stream_tree())
    list(analyzer.stream_tree())
    assert analyzer.directory_count == 2
    assert project_fs.calls.count("/root") == 1


def test_stream_tree_deeper_than_recursion_limit(memory_fs):
    depth = sys.getrecursionlimit() + 100
    memory_fs.add_file("/root/" + "d/" * depth + "leaf.txt")
    analyzer = StreamingDir2Tree("/root", fs=memory_fs)

    lines = list(analyzer.stream_tree())

    assert len(lines) == depth + 2
    assert lines[-1] == "    " * depth + "└── leaf.txt\n"
    assert analyzer.directory_count == depth
    assert analyzer.file_count == 1


def test_root_error_is_appended_to_root_line(memory_fs):
    memory_fs.fail("/root", "Permission denied")
    analyzer = StreamingDir2Tree("/root", fs=memory_fs)
    assert list(analyzer.stream_tree()) == ["root [error: Permission denied]\n"]


def test_options_are_applied(project_fs):
    analyzer = StreamingDir2Tree(
        "/root", fs=project_fs, options=WalkOptions(max_depth=1, dirs_first=True, ignore_pattern="lock*")
    )

    assert list(analyzer.stream_tree()) == [
        "root\n",
        "├── src/\n",
        "├── README.md\n",
        "└── latest\n",
    ]


def test_invalid_pattern_raises_on_construction(project_fs, monkeypatch):
    def failing_compile(pattern):
        raise PatternCompileError(pattern)

    monkeypatch.setattr("dir2tree.file_system_tree.walker.compile_patterns", failing_compile)

    with pytest.raises(PatternCompileError):
        StreamingDir2Tree("/root", fs=project_fs, options=WalkOptions(ignore_pattern="x*"))
    assert project_fs.calls == []


def test_local_file_system_is_default(tmp_path):
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "inner.txt").write_text("")

    lines = list(StreamingDir2Tree(tmp_path).stream_tree())

    assert lines == [f"{tmp_path.name}\n", "├── a/\n", "│   └── inner.txt\n", "└── b.txt\n"]


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="Requires POSIX permissions as non-root")
def test_unreadable_subdirectory_on_disk(tmp_path):
    (tmp_path / "secret").mkdir()
    (tmp_path / "secret" / "x").write_text("")
    (tmp_path / "visible.txt").write_text("")
    (tmp_path / "secret").chmod(0)
    try:
        lines = list(StreamingDir2Tree(tmp_path).stream_tree())
    finally:
        (tmp_path / "secret").chmod(0o755)

    assert lines[1:] == ["├── secret/ [error: Permission denied]\n", "└── visible.txt\n"]
