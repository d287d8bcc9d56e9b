import pytest
from hypothesis import given
from hypothesis.strategies import integers

from tsdump.core import TokenKind, classify, format_tree_text
from tsdump.exceptions import UnbalancedTreeText

from .strategies import tree_texts


def test_classify() -> None:
    assert classify("(") is TokenKind.OPEN_PAREN
    assert classify(")") is TokenKind.CLOSE_PAREN
    assert classify(" ") is TokenKind.SPACE
    assert classify("a") is TokenKind.OTHER
    assert classify(":") is TokenKind.OTHER
    assert classify("\n") is TokenKind.OTHER


def test_format_empty() -> None:
    assert format_tree_text("") == ""


def test_format_nested() -> None:
    expected = "(\n  a\n  (\n    b\n  )\n  (\n    c\n    d\n  )\n)"
    assert format_tree_text("(a (b) (c d))") == expected
    assert format_tree_text("(a (b) (c     d))") == expected


def test_format_fields() -> None:
    serialized = "(variable_declarator name: (identifier) value: (number))"
    expected = (
        "(\n"
        "  variable_declarator\n"
        "  name:\n"
        "  (\n"
        "    identifier\n"
        "  )\n"
        "  value:\n"
        "  (\n"
        "    number\n"
        "  )\n"
        ")"
    )
    assert format_tree_text(serialized) == expected


def test_format_custom_indent() -> None:
    assert format_tree_text("(a (b))", indent="\t") == "(\n\ta\n\t(\n\t\tb\n\t)\n)"
    assert format_tree_text("(a (b))", indent="") == "(\na\n(\nb\n)\n)"


def test_format_leading_space() -> None:
    assert format_tree_text(" a") == "\na"
    assert format_tree_text("   a") == "\na"


def test_format_space_after_newline_is_kept() -> None:
    assert format_tree_text("a\n b") == "a\n b"


def test_format_unclosed() -> None:
    assert format_tree_text("(a") == "(\n  a"


def test_format_underflow() -> None:
    with pytest.raises(UnbalancedTreeText):
        format_tree_text(")")
    with pytest.raises(UnbalancedTreeText):
        format_tree_text("(a))")


@given(tree_texts())
def test_format_is_whitespace_lossless(s: str) -> None:
    assert "".join(format_tree_text(s).split()) == "".join(s.split())


@given(tree_texts())
def test_format_preserves_parentheses(s: str) -> None:
    formatted = format_tree_text(s)
    assert formatted.count("(") == s.count("(")
    assert formatted.count(")") == s.count(")")


@given(tree_texts())
def test_format_parentheses_on_own_lines(s: str) -> None:
    for line in format_tree_text(s).split("\n"):
        token = line.strip()
        assert token in ("(", ")") or ("(" not in token and ")" not in token)
        assert " " not in token


@given(tree_texts())
def test_format_returns_to_depth_zero(s: str) -> None:
    lines = format_tree_text(s).split("\n")
    assert lines[0] == "("
    assert lines[-1] == ")"


@given(tree_texts(), integers(min_value=2, max_value=8))
def test_format_collapses_space_runs(s: str, width: int) -> None:
    assert format_tree_text(s.replace(" ", " " * width)) == format_tree_text(s)


@given(tree_texts())
def test_format_indentation_follows_depth(s: str) -> None:
    depth = 0
    for line in format_tree_text(s).split("\n"):
        token = line.lstrip(" ")
        if token == ")":
            depth -= 1
        assert len(line) - len(token) == 2 * depth
        if token == "(":
            depth += 1
    assert depth == 0


def test_format_quoted_parenthesis_underflows() -> None:
    with pytest.raises(UnbalancedTreeText):
        format_tree_text('(program (MISSING ")"))')
