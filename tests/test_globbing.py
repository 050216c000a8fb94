"""
Tests for wildcard expansion
"""

from pyshell.globbing import expand_globs, has_magic
from pyshell.tokenizer import Token


def _touch(directory, *names):
    for name in names:
        (directory / name).write_text("")


def test_has_magic():
    assert has_magic("*.txt")
    assert has_magic("file?")
    assert has_magic("[ab].c")
    assert not has_magic("plain")
    assert not has_magic(Token("*.txt", quoted=True))


def test_expands_in_sorted_order_at_original_position(workdir):
    _touch(workdir, "c.txt", "a.txt", "b.txt", "other.log")
    assert expand_globs(["ls", "-l", "*.txt", "end"]) == ["ls", "-l", "a.txt", "b.txt", "c.txt", "end"]


def test_zero_matches_keeps_literal_pattern(workdir):
    assert expand_globs(["ls", "*.nothing"]) == ["ls", "*.nothing"]


def test_question_mark_and_brackets(workdir):
    _touch(workdir, "f1", "f2", "f10")
    assert expand_globs(["f?"]) == ["f1", "f2"]
    assert expand_globs(["f[2]"]) == ["f2"]


def test_quoted_pattern_is_not_expanded(workdir):
    _touch(workdir, "a.txt")
    assert expand_globs([Token("*.txt", quoted=True)]) == ["*.txt"]


def test_plain_tokens_pass_through(workdir):
    assert expand_globs(["echo", "hello"]) == ["echo", "hello"]


def test_expansion_is_capped(workdir):
    _touch(workdir, *[f"f{i:03d}" for i in range(120)])
    assert len(expand_globs(["ls", "f*"])) == 100
