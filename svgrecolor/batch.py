"""File and directory conversion — thin iteration around the engine.

Each item succeeds or fails on its own; a broken file is reported and the
rest of the batch still runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from svgrecolor.engine.config import ConversionOptions
from svgrecolor.engine.pipeline import run_conversion
from svgrecolor.errors import ConversionError

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


@dataclass
class ItemReport:
    input_path: Path
    output_path: Path
    colors_replaced: int = 0
    viewbox: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BatchReport:
    items: list[ItemReport] = field(default_factory=list)

    @property
    def succeeded(self) -> list[ItemReport]:
        return [item for item in self.items if item.ok]

    @property
    def failed(self) -> list[ItemReport]:
        return [item for item in self.items if not item.ok]


def default_output_file(input_path: Path) -> Path:
    """``icons/home.svg`` → ``icons/home-converted.svg``."""
    return input_path.with_name(f"{input_path.stem}-converted{input_path.suffix}")


def default_output_dir(input_dir: Path) -> Path:
    """``icons/`` → ``icons-converted/`` next to it."""
    return input_dir.parent / f"{input_dir.name}-converted"


def convert_file(
    input_path: Path,
    output_path: Path | None = None,
    options: ConversionOptions | None = None,
) -> ItemReport:
    """Read, convert and write one file. Failures are recorded on the report, not raised."""
    output_path = output_path or default_output_file(input_path)
    report = ItemReport(input_path=input_path, output_path=output_path)
    try:
        text = input_path.read_text(encoding="utf-8")
        ctx = run_conversion(text, options, source=str(input_path))
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(ctx.output, encoding="utf-8")
    except (ConversionError, OSError, UnicodeDecodeError) as e:
        report.error = str(e)
        logger.warning("Failed to convert %s: %s", input_path, e)
        return report

    report.colors_replaced = ctx.colors_replaced
    report.viewbox = ctx.bbox.viewbox if ctx.bbox else None
    return report


def find_svg_files(input_dir: Path, recursive: bool = False) -> list[Path]:
    """SVG files under ``input_dir`` (case-insensitive suffix), sorted."""
    entries = input_dir.rglob("*") if recursive else input_dir.iterdir()
    return sorted(p for p in entries if p.is_file() and p.suffix.lower() == SVG_SUFFIX)


def convert_directory(
    input_dir: Path,
    output_dir: Path | None = None,
    options: ConversionOptions | None = None,
    recursive: bool = False,
) -> BatchReport:
    """Convert every SVG in a directory, mirroring relative names into ``output_dir``."""
    output_dir = output_dir or default_output_dir(input_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    report = BatchReport()
    for path in find_svg_files(input_dir, recursive):
        target = output_dir / path.relative_to(input_dir)
        report.items.append(convert_file(path, target, options))

    logger.info(
        "Converted %d/%d files from %s → %s",
        len(report.succeeded),
        len(report.items),
        input_dir,
        output_dir,
    )
    return report
