from __future__ import annotations
from pathlib import Path


class TemplateError(Exception):
    """Base class for template lookup errors."""


class TemplateFileError(TemplateError):
    """The backing file could not be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


__all__ = ["TemplateError", "TemplateFileError"]
