"""Exception types raised by the growth engine and its collaborators."""


class ConfigurationError(ValueError):
    """Run parameters cannot produce a complete image.

    Raised before any canvas or frontier state is allocated, so nothing is
    left partially built.
    """


class CanvasWriteError(ValueError):
    """A canvas cell was written twice.

    Cells are write-once; hitting this means the frontier handed out a point
    that was already colored.
    """


class EncodingError(OSError):
    """A finished canvas could not be serialized or written to disk."""
