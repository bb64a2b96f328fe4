"""Exceptions raised while parsing, validating and exporting diagrams."""


class DiagramError(ValueError):
    """Base class for all diagram errors."""


class ParseError(DiagramError):
    """The header line is not a ``$$`` directive line, or the input is not text."""


class InvalidDiagram(DiagramError):
    """Bounds or image dimensions violate the diagram invariants.

    Attributes:
        bounds: The offending BoundingBox (None if detection never ran)
    """

    def __init__(self, message: str, bounds=None):
        super().__init__(message)
        self.bounds = bounds


class ExportUnsupported(DiagramError):
    """The board shape cannot be exported as a game record."""
