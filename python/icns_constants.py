#!/usr/bin/env python3
"""Shared constants for the ICNS generator."""

VERSION = "1.2.0"

# Base edge lengths required by the .icns format; each also gets an @2x render
BASE_SIZES = (16, 32, 64, 128, 256, 512, 1024)

ICON_PREFIX = "icon_"

# Corner radius as a fraction of the content edge (not the canvas edge)
CORNER_RADIUS_RATIO = 0.2

# Padding is a percentage per side; 50% or more leaves no content area
MAX_PADDING_PERCENT = 50

DEFAULT_INPUT_FILE = "icon.png"
DEFAULT_ICONSET_DIR = "icon.iconset"
DEFAULT_OUTPUT_ICNS = "icon.icns"
DEFAULT_OUTPUT_DIR = "output"
DEFAULT_PLAIN_DIR = "icons"
DEFAULT_PADDING = 8.75

SUPPORTED_FORMATS = (
    ".png",
    ".jpg",
    ".jpeg",
    ".webp",
    ".tiff",
    ".gif",
    ".svg",
    ".avif",
    ".heif",
    ".bmp",
)

VECTOR_FORMATS = (".svg",)
