"""Custom exception hierarchy for board generation."""


class QueensError(Exception):
    """Base exception for generator failures."""


class InvalidDimensionError(QueensError):
    """Raised when the requested board dimension is not a positive integer."""


class PaletteExhaustedError(QueensError):
    """Raised when the board needs more region colours than the palette holds."""


class InvalidCandidatesError(QueensError):
    """Raised when a candidate set cannot be partitioned into regions."""


class GenerationFailedError(QueensError):
    """Raised when no full candidate set was found within the attempt cap."""


class RegionInvariantError(QueensError):
    """Raised when flood filling finds a cluster with no coloured neighbour."""


class ValidationError(QueensError):
    """Raised when the board integrity checks fail."""


class InvalidPaletteError(QueensError):
    """Raised when the palette repeats a colour among the regions in use."""
