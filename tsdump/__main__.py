#!/usr/bin/env python3

from __future__ import annotations

import contextlib
import sys
from pathlib import Path
from types import SimpleNamespace

import click
from colorama import colorama_text

from .__version__ import __version__
from .dump import DEFAULT_OUTPUT_DIR, build_report, dump_file
from .exceptions import MutuallyExclusiveOptions
from .grammars import DEFAULT_LANGUAGE, GRAMMARS
from .utils import Logger, bright_green, bright_red, no_color_context, silent_context


#
# Constants
#

CHECK_MARK = "✓"


#
# Command Line Interface
#


@click.command(
    name="tsdump",
    help="Parse a source file with tree-sitter and save an indented dump of its syntax tree.",
    context_settings=dict(help_option_names=["-h", "--help"]),
    epilog="Reports are named after the input file, e.g. `src/app.js` is saved as "
    "`parse_results/app.txt`. An existing report of the same name is overwritten.",
)
@click.argument("file", required=False, metavar="FILE")
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, dir_okay=True, writable=True),
    default=str(DEFAULT_OUTPUT_DIR),
    show_default=True,
    help="The directory to save reports in. Created if absent.",
)
@click.option(
    "-l",
    "--language",
    type=click.Choice(sorted(GRAMMARS)),
    default=None,
    help="The grammar used to parse the file. "
    f"Guessed from the file suffix by default, falling back to {DEFAULT_LANGUAGE}.",
)
@click.option(
    "-e",
    "--encoding",
    metavar="ENCODING",
    default="utf-8",
    show_default=True,
    help="The encoding scheme used to read the source file and write the report.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Number of spaces per nesting level.",
)
@click.option(
    "-p",
    "--print",
    "print_report",
    is_flag=True,
    help="Print the report to the console instead of saving it.",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Suppress all output except the error channel.",
)
@click.option("-v", "--verbose", is_flag=True, help="Increase verboseness.")
@click.option(
    "--color-off",
    is_flag=True,
    help="Turn off color output. For compatibility with environment without color code support.",
)
@click.version_option(__version__)
@click.pass_context
def main(
    ctx: click.Context,
    file: str | None,
    output_dir: str,
    language: str | None,
    encoding: str,
    indent: int,
    print_report: bool,
    quiet: bool,
    verbose: bool,
    color_off: bool,
) -> None:
    """ the CLI entry """

    verboseness_context_manager = silent_context() if quiet else contextlib.nullcontext()
    colorness_context_manager = no_color_context() if color_off else colorama_text()

    with verboseness_context_manager, colorness_context_manager:

        try:
            validate_args(SimpleNamespace(**ctx.params))
        except MutuallyExclusiveOptions as exc:
            print(bright_red(str(exc)), file=sys.stderr)
            ctx.exit(1)

        if file is None:
            print(ctx.get_usage(), file=sys.stderr)
            ctx.exit(1)

        # Nothing may be created on disk for a missing input
        if not Path(file).is_file():
            print(bright_red(f"Error: File not found: {file}"), file=sys.stderr)
            ctx.exit(1)

        succeeded = run(
            file, output_dir, language, encoding, " " * indent, print_report, verbose
        )

    if not succeeded:
        ctx.exit(1)


def validate_args(options: SimpleNamespace) -> None:
    """ Preliminary check of the validness of the CLI argument """

    if options.quiet and options.verbose:
        raise MutuallyExclusiveOptions(
            "Can't specify both `--quiet` and `--verbose` options"
        )

    if options.quiet and options.print_report:
        raise MutuallyExclusiveOptions(
            "Can't specify both `--quiet` and `--print` options"
        )


def run(
    file: str,
    output_dir: str,
    language: str | None,
    encoding: str,
    indent: str,
    print_report: bool,
    verbose: bool,
) -> bool:
    """ Process the file as specified by the CLI arguments. Return whether it succeeds. """

    logger = Logger(enabled=verbose)

    try:

        if print_report:
            report = build_report(file, language, encoding, indent, logger=logger)
            print(bright_green(f"{CHECK_MARK} Parsed: {file}"))
            print(report.render())
        else:
            output_file = dump_file(
                file, output_dir, language, encoding, indent, logger=logger
            )
            print(bright_green(f"{CHECK_MARK} Parsed: {file}"))
            print(bright_green(f"{CHECK_MARK} Saved to: {output_file}"))

    except Exception as exc:
        print(bright_red(f"Parse error: {exc}"), file=sys.stderr)
        return False

    return True


if __name__ == "__main__":
    main()  # pylint: disable=no-value-for-parameter
