from __future__ import annotations

from enum import Enum

from .exceptions import UnbalancedTreeText


__all__ = ["TokenKind", "classify", "format_tree_text"]


#
# Enumerations
#


class TokenKind(Enum):
    """ An enumeration to specify the character classes of a serialized tree string """

    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    SPACE = " "
    OTHER = None


#
# Routines
#


def classify(char: str) -> TokenKind:
    """ Return the character class of a single character """

    try:
        return TokenKind(char)
    except ValueError:
        return TokenKind.OTHER


def format_tree_text(serialized: str, indent: str = "  ") -> str:
    """
    Reindent the single-line parenthesized serialization of a syntax tree.

    Every parenthesis ends up on its own line, and every space boundary between
    sibling tokens becomes a line break followed by `indent` repeated as many times
    as the current nesting depth. Runs of consecutive spaces collapse into a single
    break. All other characters are kept as is, in their original order.

    Raise UnbalancedTreeText if a closing parenthesis has no matching opening one.
    Unclosed nodes at the end of the input are rendered without complaint.
    """

    pieces: list[str] = []
    depth = 0
    length = len(serialized)

    i = 0
    while i < length:
        char = serialized[i]
        kind = classify(char)

        if kind is TokenKind.OPEN_PAREN:
            pieces.append(char + "\n" + indent * (depth + 1))
            depth += 1

        elif kind is TokenKind.CLOSE_PAREN:
            depth -= 1
            if depth < 0:
                raise UnbalancedTreeText(
                    f"Unmatched closing parenthesis at offset {i}"
                )
            pieces.append("\n" + indent * depth + char)

        elif kind is TokenKind.SPACE and (i == 0 or serialized[i - 1] != "\n"):
            pieces.append("\n" + indent * depth)
            while i + 1 < length and serialized[i + 1] == " ":
                i += 1

        else:
            pieces.append(char)

        i += 1

    return "".join(pieces)
