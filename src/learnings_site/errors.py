"""Errors raised by the build stages.

Every error is fatal: the CLI logs it together with the stage that failed and
exits with a non-zero status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class BuildError(Exception):
    stage = "build"


class ConfigError(BuildError):
    stage = "config"


class OutputError(BuildError):
    stage = "output"


class ExportError(BuildError):
    stage = "export"

    def __init__(self, message: str, doc_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.doc_id = doc_id


class ParseError(BuildError):
    stage = "aggregate"

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class TemplateError(BuildError):
    stage = "templates"


class RenderError(BuildError):
    stage = "render"


class CopyError(BuildError):
    stage = "statics"
