from __future__ import annotations

from datetime import datetime, timezone
from os import PathLike
from pathlib import Path

from .core import format_tree_text
from .grammars import DEFAULT_LANGUAGE, guess_language, parse_to_tree_text
from .report import Report, output_path_for, write_report
from .utils import Logger


__all__ = ["dump_str", "dump_file", "build_report", "DEFAULT_OUTPUT_DIR"]


# Relative to the current working directory, not to the installation location
DEFAULT_OUTPUT_DIR = Path("parse_results")


def dump_str(source: str, language: str = DEFAULT_LANGUAGE, indent: str = "  ") -> str:
    """ Parse the source string and return the indented rendering of its syntax tree """
    return format_tree_text(parse_to_tree_text(source, language), indent)


def dump_file(
    file: str | PathLike,
    output_dir: str | PathLike = DEFAULT_OUTPUT_DIR,
    language: str | None = None,
    encoding: str = "utf-8",
    indent: str = "  ",
    now: datetime | None = None,
    logger: Logger | None = None,
) -> Path:
    """
    Parse the file, and write the report of its syntax tree to `output_dir/<name>.txt`.

    The language is guessed from the file suffix when not given. Return the path of
    the written report.
    """

    report = build_report(file, language, encoding, indent, now, logger)

    if logger:
        logger.log(f"Writing report to {output_path_for(file, output_dir)}")

    return write_report(report, output_dir, encoding)


def build_report(
    file: str | PathLike,
    language: str | None = None,
    encoding: str = "utf-8",
    indent: str = "  ",
    now: datetime | None = None,
    logger: Logger | None = None,
) -> Report:
    """ Read, parse and format the file, without touching the disk otherwise """

    logger = logger or Logger(enabled=False)

    if language is None:
        language = guess_language(file)

    logger.log(f"Reading {file} as {encoding}")
    source = Path(file).read_text(encoding=encoding)

    logger.log(f"Parsing with the {language} grammar")
    tree_text = parse_to_tree_text(source, language)

    logger.log(f"Formatting {len(tree_text)} characters of tree text")
    formatted = format_tree_text(tree_text, indent)

    return Report(
        source_path=str(file),
        parsed_at=now or datetime.now(timezone.utc),
        tree_text=formatted,
    )
