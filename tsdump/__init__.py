from .__version__ import __version__
from .core import TokenKind, format_tree_text
from .dump import DEFAULT_OUTPUT_DIR, dump_file, dump_str
from .exceptions import (
    MutuallyExclusiveOptions,
    TreeDumpError,
    UnbalancedTreeText,
    UnknownLanguage,
)
from .report import Report


__all__ = [
    "dump_str",
    "dump_file",
    "format_tree_text",
    "TokenKind",
    "Report",
    "DEFAULT_OUTPUT_DIR",
    "TreeDumpError",
    "UnbalancedTreeText",
    "UnknownLanguage",
    "MutuallyExclusiveOptions",
    "__version__",
]
