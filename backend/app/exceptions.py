"""Custom exception hierarchy for Photo Canvas."""

from __future__ import annotations


class PhotoCanvasError(Exception):
    """Base exception for all Photo Canvas errors."""


class UnknownTemplateError(PhotoCanvasError):
    """Raised when a value outside the template enumeration is used."""


class InvalidImageDimensionsError(PhotoCanvasError):
    """Raised when a source image has zero or negative width or height."""


class ParseError(PhotoCanvasError):
    """Raised when an uploaded photo cannot be decoded."""


class UnsupportedFormatError(ParseError):
    """Raised when input file format is not supported."""


class CompositionError(PhotoCanvasError):
    """Raised when final image composition fails."""


class RenderSurfaceUnavailableError(CompositionError):
    """Raised when the export canvas cannot be allocated."""


class ValidationError(PhotoCanvasError):
    """Raised when input validation fails."""


class NoImageLoadedError(PhotoCanvasError):
    """Raised when an operation needs a photo and none has been loaded."""
