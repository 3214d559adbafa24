#!/usr/bin/env python3
"""
Iconset assembly: option handling, input validation and the staging folder.

Every run is a full rebuild. The staging directory and the plain export
directory are removed and recreated before they are populated.
"""

import dataclasses
import logging
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from icns_constants import (
    DEFAULT_ICONSET_DIR,
    DEFAULT_INPUT_FILE,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_OUTPUT_ICNS,
    DEFAULT_PADDING,
    DEFAULT_PLAIN_DIR,
    SUPPORTED_FORMATS,
)
from icns_errors import IcnsError, InputError
from icns_render import compute_layout, render_icon
from icns_sizes import ALL_SIZES, plain_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationOptions:
    input_file: str = DEFAULT_INPUT_FILE
    iconset_dir: str = DEFAULT_ICONSET_DIR
    output_icns: str = DEFAULT_OUTPUT_ICNS
    work_dir: str = field(default_factory=os.getcwd)
    output_dir: str = DEFAULT_OUTPUT_DIR
    plain_dir: str = DEFAULT_PLAIN_DIR
    padding: float = DEFAULT_PADDING
    supported_formats: tuple = SUPPORTED_FORMATS

    @property
    def input_path(self):
        return Path(os.path.abspath(Path(self.work_dir) / self.input_file))

    @property
    def output_path(self):
        return Path(os.path.abspath(Path(self.work_dir) / self.output_dir))

    @property
    def iconset_path(self):
        return self.output_path / self.iconset_dir

    @property
    def icns_path(self):
        return self.output_path / self.output_icns

    @property
    def plain_path(self):
        return self.output_path / self.plain_dir


def resolve_options(options=None, **overrides):
    """
    Build a fresh GenerationOptions from defaults plus caller values.

    options may be None, a mapping or a GenerationOptions. Keyword overrides
    are applied last. Values of None are treated as omitted.
    """
    if isinstance(options, GenerationOptions):
        values = dataclasses.asdict(options)
    else:
        values = dict(options or {})
    values.update(overrides)

    known = {f.name for f in dataclasses.fields(GenerationOptions)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown option(s): {', '.join(unknown)}")

    values = {key: value for key, value in values.items() if value is not None}
    if "supported_formats" in values:
        values["supported_formats"] = tuple(fmt.lower() for fmt in values["supported_formats"])
    if "padding" in values:
        values["padding"] = float(values["padding"])
    return GenerationOptions(**values)


def get_supported_formats():
    """Return the accepted input extensions."""
    return list(SUPPORTED_FORMATS)


def is_supported_format(file_path, supported_formats=SUPPORTED_FORMATS):
    return Path(file_path).suffix.lower() in {fmt.lower() for fmt in supported_formats}


def validate_input(input_path, supported_formats=SUPPORTED_FORMATS):
    """Raise InputError unless input_path exists and has an accepted extension."""
    input_path = Path(input_path)
    if not input_path.is_file():
        raise InputError(f"Input file does not exist: {input_path}")

    if not is_supported_format(input_path, supported_formats):
        raise InputError(
            f"Unsupported file format: {input_path.suffix}\n"
            f"Supported formats: {', '.join(supported_formats)}"
        )


def validate_padding(padding, sizes=ALL_SIZES):
    """Check the padding against every planned size before any file I/O."""
    for spec in sizes:
        compute_layout(spec.size, padding)


def reset_directory(path):
    """
    Delete path (if present) and recreate it empty.

    This is destructive: whatever the directory held is gone. Callers must
    only pass directories owned by the current run.
    """
    path = Path(path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()
    path.mkdir(parents=True)
    return path


def generate_iconset(options=None, sizes=ALL_SIZES):
    """
    Render every size into a freshly reset iconset directory.

    Returns:
        Path of the populated iconset directory
    """
    config = resolve_options(options)
    input_path = config.input_path

    validate_padding(config.padding, sizes)
    validate_input(input_path, config.supported_formats)

    output_path = config.output_path
    if not output_path.is_dir():
        output_path.mkdir(parents=True)
        logger.info("Created output directory: %s", output_path)

    iconset_path = reset_directory(config.iconset_path)

    logger.info("Processing image: %s", input_path.name)
    try:
        for spec in sizes:
            render_icon(input_path, spec.size, config.padding, iconset_path / spec.name)
    except IcnsError:
        shutil.rmtree(iconset_path, ignore_errors=True)
        raise

    logger.info("Rendered %d icons into %s", len(sizes), iconset_path)
    return iconset_path


def export_plain_icons(iconset_path, plain_path, sizes=ALL_SIZES):
    """Copy staged icons into plain_path without the icon_ prefix."""
    iconset_path = Path(iconset_path)
    plain_path = reset_directory(plain_path)

    for spec in sizes:
        shutil.copyfile(iconset_path / spec.name, plain_path / plain_name(spec.name))

    logger.info("Exported plain icons: %s", plain_path)
    return plain_path
