"""Error types raised by the rendering pipeline."""


class RenderError(Exception):
    """Base class for every failure that aborts a render call."""


class ConfigurationError(RenderError, ValueError):
    """
    Raised when a style or frame asset is inconsistent with the board geometry.

    Examples are a margin table whose length differs from the grid height,
    or a style declaring non-positive cell dimensions.
    """


class PreconditionError(RenderError, TypeError):
    """Raised when a required collaborator (style, position, orientation) is missing."""


class BoundsError(RenderError, IndexError):
    """Raised when a coordinate falls outside the board."""
