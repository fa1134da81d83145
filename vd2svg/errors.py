"""Conversion error taxonomy.

Every failure raised while parsing or converting a drawable is a
``ConversionError``; the ``kind`` tag says which class of problem it is.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    STRUCTURAL = "structural"
    UNKNOWN_VARIANT = "unknown_variant"
    UNSUPPORTED_FEATURE = "unsupported_feature"


class ConversionError(Exception):
    """Base for all conversion failures."""

    kind: ErrorKind = ErrorKind.STRUCTURAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "message": self.message}


class StructuralError(ConversionError):
    """Missing, duplicate or mis-named required element, or missing required attribute."""

    kind = ErrorKind.STRUCTURAL


class UnknownVariantError(ConversionError):
    """Unrecognized element name or gradient type."""

    kind = ErrorKind.UNKNOWN_VARIANT


class UnsupportedFeatureError(ConversionError):
    """Recognized input that has no SVG rendition (resource colors, sweep gradients)."""

    kind = ErrorKind.UNSUPPORTED_FEATURE
