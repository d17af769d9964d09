import re

import pytest

from dir2tree.exceptions import PatternCompileError
from dir2tree.exclusion_rules.base_rules import BaseExclusionRules
from dir2tree.exclusion_rules.name_patterns import CompiledPatterns, compile_patterns, glob_to_regex


def test_exact_match():
    patterns = compile_patterns("node_modules")
    assert patterns.matches("node_modules")
    assert not patterns.matches("node_modules_extra")
    assert not patterns.matches("my_node_modules")


def test_pipe_separated_literals():
    patterns = compile_patterns("node_modules|.git|dist")
    assert patterns.literals == frozenset({"node_modules", ".git", "dist"})
    assert patterns.matcher is None
    assert patterns.matches("dist")
    assert patterns.matches(".git")
    assert not patterns.matches("src")


def test_whitespace_around_segments_is_ignored():
    assert compile_patterns("  dist  ").matches("dist")
    assert compile_patterns(" node_modules | .git ").matches(".git")
    assert compile_patterns(" *.log ").matches("debug.log")


def test_empty_segments_are_dropped():
    patterns = compile_patterns("a||b|  |")
    assert patterns.literals == frozenset({"a", "b"})
    assert not patterns.matches("")


@pytest.mark.parametrize("pattern", ["", "|", " | | ", "   "])
def test_all_empty_pattern_matches_nothing(pattern):
    patterns = compile_patterns(pattern)
    assert patterns.literals == frozenset()
    assert patterns.matcher is None
    assert not patterns.matches("anything")
    assert not patterns.matches("")


@pytest.mark.parametrize(
    "pattern,name,expected",
    [
        ("*.log", "test.log", True),
        ("*.log", "app.log", True),
        ("*.log", ".log", True),
        ("*.log", "test.txt", False),
        ("*.log", "test.log.bak", False),
        ("test_*", "test_foo", True),
        ("test_*", "test_", True),
        ("test_*", "other_foo", False),
        ("test_*_bar", "test_foo_bar", True),
        ("test_*_bar", "test__bar", True),
        ("test_*_bar", "test_foo_baz", False),
        ("*_*_*", "a_b_c", True),
        ("*_*_*", "__", True),
    ],
)
def test_star_wildcard(pattern, name, expected):
    assert compile_patterns(pattern).matches(name) is expected


@pytest.mark.parametrize(
    "pattern,name,expected",
    [
        ("?.txt", "a.txt", True),
        ("?.txt", "b.txt", True),
        ("?.txt", "ab.txt", False),
        ("?.txt", ".txt", False),
        ("??.txt", "ab.txt", True),
        ("??.txt", "a.txt", False),
        ("??.txt", "abc.txt", False),
        ("test?.log", "test1.log", True),
        ("test?.log", "test12.log", False),
        ("file*.txt", "file.txt", True),
        ("file*.txt", "file123.txt", True),
    ],
)
def test_question_wildcard_and_combinations(pattern, name, expected):
    assert compile_patterns(pattern).matches(name) is expected


@pytest.mark.parametrize(
    "pattern,matching,not_matching",
    [
        ("test.*", "test.txt", "testXtxt"),
        ("file[1]*", "file[1].txt", "file1.txt"),
        ("a+b*", "a+b", "aab"),
        ("(test)*", "(test)", "test"),
        ("{x}?", "{x}1", "x1"),
        ("^a$*", "^a$", "a"),
        ("back\\slash*", "back\\slash", "backslash"),
        ("*#~ -&", "x#~ -&", "x#~-&"),
    ],
)
def test_regex_metacharacters_match_literally(pattern, matching, not_matching):
    patterns = compile_patterns(pattern)
    assert patterns.matches(matching)
    assert not patterns.matches(not_matching)


def test_pipe_is_always_a_separator():
    patterns = compile_patterns("a*|b")
    assert patterns.matches("abc")
    assert patterns.matches("b")
    assert not patterns.matches("x|b")


def test_mixed_exact_and_glob():
    patterns = compile_patterns("node_modules|*.log|dist")
    assert patterns.literals == frozenset({"node_modules", "dist"})
    assert patterns.matcher is not None
    assert patterns.matches("node_modules")
    assert patterns.matches("dist")
    assert patterns.matches("debug.log")
    assert patterns.matches("error.log")
    assert not patterns.matches("main.rs")


def test_wildcards_cover_newlines_and_anchor_at_true_end():
    assert compile_patterns("a*").matches("a\nb")
    assert compile_patterns("?").matches("\n")
    assert not compile_patterns("*.log").matches("debug.log\n")


@pytest.mark.parametrize("literal", ["Makefile", "dist", ".git", "a.b", "x+y", "weird name"])
@pytest.mark.parametrize("extra", ["x", ".bak", "/", " "])
def test_literal_matches_itself_but_not_extensions(literal, extra):
    patterns = compile_patterns(literal)
    assert patterns.matches(literal)
    assert not patterns.matches(literal + extra)


def test_segment_order_does_not_matter():
    names = ["a.log", "b", "c.txt", "build", "x"]
    forward = compile_patterns("*.log|build|?")
    backward = compile_patterns("?|build|*.log")
    assert [forward.matches(n) for n in names] == [backward.matches(n) for n in names]


def test_exclude_is_matches():
    patterns = compile_patterns("build|*.tmp")
    assert isinstance(patterns, BaseExclusionRules)
    assert patterns.exclude("build")
    assert patterns.exclude("x.tmp")
    assert not patterns.exclude("src")


def test_compiled_patterns_do_not_load_files():
    with pytest.raises(NotImplementedError):
        compile_patterns("a").load_rules("rules.txt")
    with pytest.raises(NotImplementedError):
        compile_patterns("a").add_rule("b")


def test_glob_to_regex_output():
    assert glob_to_regex("*.log") == r"\A.*\.log\Z"
    assert glob_to_regex("a?c") == r"\Aa.c\Z"


def test_compile_error_reports_raw_pattern(monkeypatch):
    def broken_compile(pattern, flags=0):
        raise re.error("boom")

    monkeypatch.setattr("dir2tree.exclusion_rules.name_patterns.re.compile", broken_compile)

    with pytest.raises(PatternCompileError) as excinfo:
        compile_patterns(" build | *.log ")

    assert excinfo.value.pattern == " build | *.log "
    assert "Invalid ignore pattern:  build | *.log " in str(excinfo.value)


def test_literal_only_pattern_never_compiles_a_regex(monkeypatch):
    def broken_compile(pattern, flags=0):
        raise re.error("boom")

    monkeypatch.setattr("dir2tree.exclusion_rules.name_patterns.re.compile", broken_compile)

    patterns = compile_patterns("build|dist")
    assert isinstance(patterns, CompiledPatterns)
    assert patterns.matches("dist")
