"""Error types raised by the Pitaval converter.

Every error is fatal for a batch run: the pipeline never skips a file and
continues. The CLI maps the families below to process exit codes.
"""

from __future__ import annotations

__all__ = [
    "PitavalError",
    "ConfigurationError",
    "FilesystemError",
    "NormalizationError",
    "FormatterError",
    "FilenameError",
    "InvalidInputError",
    "TemplateError",
    "OutputCollisionError",
]


class PitavalError(RuntimeError):
    """Base class for all converter errors."""


class ConfigurationError(PitavalError):
    """Required paths missing, unreadable config file, or unknown option."""


class FilesystemError(PitavalError):
    """Output directory cannot be created or a file cannot be read/written."""


class NormalizationError(PitavalError):
    """A warning or decoding problem occurred while processing one file."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


class FormatterError(PitavalError):
    """The XML formatter reported an error in its output."""

    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class FilenameError(PitavalError):
    """A filename stem does not follow the ``Bd<vol>_<year>_<no>`` pattern."""


class InvalidInputError(PitavalError):
    """Input violates a precondition (e.g. a text without any block)."""


class TemplateError(PitavalError):
    """The TEI template cannot be loaded or lacks a required node."""


class OutputCollisionError(PitavalError):
    """Two inputs map to the same normalized output filename."""
