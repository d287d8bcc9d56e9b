from __future__ import annotations

from datetime import datetime, timezone
from os import PathLike
from pathlib import Path

import attrs


__all__ = ["Report", "timestamp", "output_path_for", "write_report"]


def timestamp(moment: datetime) -> str:
    """ Format the moment as an ISO-8601 UTC timestamp, e.g. 2026-10-16T08:30:00.123Z """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@attrs.frozen
class Report:
    source_path: str
    parsed_at: datetime
    tree_text: str

    def render(self) -> str:
        return (
            f"File: {self.source_path}\n"
            f"Parsed at: {timestamp(self.parsed_at)}\n"
            "\n"
            f"{self.tree_text}"
        )


def output_path_for(source_path: str | PathLike, output_dir: str | PathLike) -> Path:
    """ The report of `dir/name.ext` is stored as `output_dir/name.txt` """
    return Path(output_dir) / (Path(source_path).stem + ".txt")


def write_report(
    report: Report, output_dir: str | PathLike, encoding: str = "utf-8"
) -> Path:
    """ Write the rendered report into the output directory, overwriting any previous one """

    output_file = output_path_for(report.source_path, output_dir)
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(report.render(), encoding=encoding)
    return output_file
