class AsciifyError(Exception):
    """Base class for errors raised while converting an image."""


class DecodeError(AsciifyError):
    """The source could not be read or decoded as an image."""

    def __init__(self, source, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Cannot decode image {source!r}: {reason}")


class InvalidDimensionError(AsciifyError, ValueError):
    """A requested or source dimension is outside the supported range."""
