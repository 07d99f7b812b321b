"""
svgrecolor — convert hard-coded SVG colors to currentColor.

Usage:
  svgrecolor --file icon.svg                      # writes icon-converted.svg
  svgrecolor --file icon.svg icon-current.svg
  svgrecolor --directory ./icons                  # writes ./icons-converted/
  svgrecolor --directory ./icons ./out --crop --recursive
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from svgrecolor.batch import convert_directory, convert_file, default_output_dir
from svgrecolor.engine.config import ConversionOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgrecolor",
        description="SVG Color Converter — convert hex, named and rgb()/hsl() colors to currentColor",
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("-f", "--file", nargs="+", metavar="PATH", help="Convert a single SVG file: INPUT [OUTPUT]")
    mode.add_argument(
        "-d", "--directory", nargs="+", metavar="PATH", help="Convert all SVG files in a directory: INPUT [OUTPUT]"
    )
    parser.add_argument("--crop", action="store_true", help="Crop the canvas to the visible artwork")
    parser.add_argument("-r", "--recursive", action="store_true", help="Descend into subdirectories (with --directory)")
    parser.add_argument(
        "--loose-semicolons",
        dest="require_semicolon",
        action="store_false",
        help="Also rewrite a final style declaration that has no trailing ';'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each conversion step")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    paths = args.file or args.directory
    if len(paths) > 2:
        parser.error("expected INPUT [OUTPUT]")
    input_path = Path(paths[0])
    output_path = Path(paths[1]) if len(paths) == 2 else None
    options = ConversionOptions(crop=args.crop, require_semicolon=args.require_semicolon)

    if args.file:
        if not input_path.is_file():
            print(f"File not found: {input_path}")
            return 1
        print(f"Converting file: {input_path}")
        report = convert_file(input_path, output_path, options)
        if not report.ok:
            print(f"Error: {report.error}")
            return 1
        print(f"Converted file saved to: {report.output_path} ({report.colors_replaced} colors replaced)")
        return 0

    if not input_path.is_dir():
        print(f"Directory not found: {input_path}")
        return 1
    output_dir = output_path or default_output_dir(input_path)
    print(f"Converting SVGs in directory: {input_path}")
    batch = convert_directory(input_path, output_dir, options, recursive=args.recursive)
    for item in batch.failed:
        print(f"  ✗ {item.input_path}: {item.error}")
    print(f"Converted {len(batch.succeeded)}/{len(batch.items)} SVG files to: {output_dir}")
    return 1 if batch.failed else 0


if __name__ == "__main__":
    sys.exit(main())
