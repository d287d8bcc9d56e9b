"""
Thin front over the tree-sitter parsing engine.

The grammars themselves ship as separate distributions (tree-sitter-javascript,
tree-sitter-python, ...). Each exposes a `language()` function returning the
compiled grammar, which gets wrapped into a `tree_sitter.Language`.
"""

from __future__ import annotations

import importlib
from functools import cache
from os import PathLike
from pathlib import Path

from tree_sitter import Language, Parser

from .exceptions import UnknownLanguage


__all__ = [
    "GRAMMARS",
    "SUFFIXES",
    "DEFAULT_LANGUAGE",
    "load_language",
    "guess_language",
    "parse_to_tree_text",
]


#
# Constants
#

# Map a language name to the module of its grammar distribution
GRAMMARS = {
    "javascript": "tree_sitter_javascript",
    "python": "tree_sitter_python",
    "c": "tree_sitter_c",
}

SUFFIXES = {
    ".js": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".jsx": "javascript",
    ".py": "python",
    ".pyi": "python",
    ".c": "c",
    ".h": "c",
}

DEFAULT_LANGUAGE = "javascript"


#
# Routines
#


@cache
def load_language(name: str) -> Language:
    """ Return the tree-sitter language registered under the given name """

    try:
        module_name = GRAMMARS[name]
    except KeyError:
        known = ", ".join(sorted(GRAMMARS))
        raise UnknownLanguage(
            f"No grammar registered for {name!r}. Known languages are {known}."
        ) from None

    module = importlib.import_module(module_name)
    return Language(module.language())


def guess_language(path: str | PathLike) -> str:
    """ Guess the language name from the file suffix, falling back to the default language """
    return SUFFIXES.get(Path(path).suffix.lower(), DEFAULT_LANGUAGE)


def parse_to_tree_text(source: str, language: str = DEFAULT_LANGUAGE) -> str:
    """ Parse the source and return the parenthesized serialization of its root node """

    parser = Parser(load_language(language))
    tree = parser.parse(source.encode("utf-8"))
    return str(tree.root_node)
