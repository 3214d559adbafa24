#!/usr/bin/env python3
"""
ICNS Generator - Convert an image into a macOS application icon (.icns).

CLI usage:
    python icns_tool.py --input <file> [--output icon.icns] [--padding 8.75]
    python icns_tool.py --input <file> --iconset-only
    python icns_tool.py --list-formats
"""

import argparse
import logging
import os
import sys

from icns_constants import (
    DEFAULT_ICONSET_DIR,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_ICNS,
    DEFAULT_PADDING,
    VERSION,
)
from icns_errors import IcnsError
from icns_iconset import (
    export_plain_icons,
    generate_iconset,
    get_supported_formats,
    resolve_options,
)
from icns_package import package_iconset

logger = logging.getLogger(__name__)


def generate_icns(options=None, packager=package_iconset):
    """
    Build the iconset, package it and export the plain PNG copies.

    Args:
        options: Mapping or GenerationOptions; omitted fields use defaults
        packager: Callable taking (iconset_path, output_path) that writes the .icns

    Returns:
        Path of the generated .icns file
    """
    config = resolve_options(options)
    output_path = config.icns_path

    logger.info("Generating iconset with rounded corners...")
    iconset_path = generate_iconset(config)

    logger.info("Packaging to .icns...")
    packager(iconset_path, output_path)

    export_plain_icons(iconset_path, config.plain_path)

    logger.info("Generation successful: %s", output_path)
    return output_path


def build_parser():
    formats = ", ".join(get_supported_formats())
    parser = argparse.ArgumentParser(
        prog="icns-generator",
        description=f"Convert images to macOS application icons (.icns) files. Supported formats: {formats}",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "-i", "--input",
        default=DEFAULT_INPUT_FILE,
        metavar="<path>",
        help="Input image path",
    )
    parser.add_argument(
        "-o", "--output",
        default=DEFAULT_OUTPUT_ICNS,
        metavar="<path>",
        help="Output ICNS file name",
    )
    parser.add_argument(
        "-d", "--dir",
        default=DEFAULT_ICONSET_DIR,
        metavar="<path>",
        help="Temporary iconset directory name",
    )
    parser.add_argument(
        "-w", "--work-dir",
        default=os.getcwd(),
        metavar="<path>",
        help="Working directory",
    )
    parser.add_argument(
        "-O", "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        metavar="<path>",
        help="Output directory for all generated files",
    )
    parser.add_argument(
        "-p", "--padding",
        type=float,
        default=DEFAULT_PADDING,
        metavar="<percent>",
        help="Padding around the icon (percentage per side)",
    )
    parser.add_argument(
        "--iconset-only",
        action="store_true",
        help="Stop after writing the iconset folder (no iconutil needed)",
    )
    parser.add_argument("--list-formats", action="store_true", help="Display supported file formats")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every rendered size")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.list_formats:
        print("Supported image formats:")
        for fmt in get_supported_formats():
            print(f"  - {fmt}")
        return 0

    options = {
        "input_file": args.input,
        "output_icns": args.output,
        "iconset_dir": args.dir,
        "work_dir": args.work_dir,
        "output_dir": args.output_dir,
        "padding": args.padding,
    }

    print("ICNS Icon Generator")
    print(f"Input file: {args.input}")
    print(f"Output file: {args.output}")
    print(f"Output directory: {args.output_dir}")
    print(f"Padding: {args.padding}%")

    try:
        if args.iconset_only:
            iconset_path = generate_iconset(options)
            print(f"Created iconset: {iconset_path}")
        else:
            output_path = generate_icns(options)
            print(f"Created icon: {output_path}")
    except (IcnsError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
