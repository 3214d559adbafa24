#!/usr/bin/env python3
"""Size table for macOS iconsets."""

from collections import namedtuple

from icns_constants import BASE_SIZES, ICON_PREFIX

SizeSpec = namedtuple("SizeSpec", ["name", "size"])


def plan_sizes(base_sizes=BASE_SIZES):
    """
    Expand base edge lengths into the iconset file list.

    Each base length L yields icon_LxL.png at L pixels followed by
    icon_LxL@2x.png at 2L pixels, in the order the bases are given.
    """
    specs = []
    for size in base_sizes:
        specs.append(SizeSpec(f"{ICON_PREFIX}{size}x{size}.png", size))
        specs.append(SizeSpec(f"{ICON_PREFIX}{size}x{size}@2x.png", size * 2))
    return tuple(specs)


ALL_SIZES = plan_sizes()


def plain_name(name):
    """Strip the icon_ prefix used inside the iconset."""
    if name.startswith(ICON_PREFIX):
        return name[len(ICON_PREFIX):]
    return name
