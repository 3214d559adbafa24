#!/usr/bin/env python3
"""Exception types raised by the ICNS generator."""


class IcnsError(Exception):
    """Base class for all generation failures."""


class ConfigurationError(IcnsError, ValueError):
    """Padding leaves no room for the icon content."""


class InputError(IcnsError, ValueError):
    """Input file is missing or has an unsupported extension."""


class RenderError(IcnsError):
    """The source image could not be decoded, resized or encoded."""

    def __init__(self, source_path, reason):
        self.source_path = str(source_path)
        self.reason = reason
        super().__init__(f"Failed to render {self.source_path}: {reason}")


class PackagingError(IcnsError):
    """iconutil is unavailable or exited with an error."""
