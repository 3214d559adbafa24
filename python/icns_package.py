#!/usr/bin/env python3
"""Package an iconset folder into an .icns file with macOS iconutil."""

import logging
import shutil
import subprocess
from pathlib import Path

from icns_errors import PackagingError

logger = logging.getLogger(__name__)

ICONUTIL = "iconutil"


def package_iconset(iconset_path, output_path):
    """
    Run iconutil -c icns on a populated iconset directory.

    Returns:
        Path of the written .icns file
    """
    iconutil = shutil.which(ICONUTIL)
    if iconutil is None:
        raise PackagingError(
            f"{ICONUTIL} was not found on PATH; packaging .icns files requires macOS"
        )

    output_path = Path(output_path)
    command = [iconutil, "-c", "icns", str(iconset_path), "-o", str(output_path)]
    logger.debug("Running %s", " ".join(command))

    result = subprocess.run(command, capture_output=True, text=True)
    if result.returncode != 0:
        message = (result.stderr or result.stdout).strip()
        raise PackagingError(f"{ICONUTIL} failed ({result.returncode}): {message}")

    return output_path
