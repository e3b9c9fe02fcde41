class ColorReplaceError(Exception):
    """Base class for every failure raised by crp."""


class InvalidDimensions(ColorReplaceError, ValueError):
    """Source and destination buffers do not share the same shape."""


class IndexOutOfBounds(ColorReplaceError, IndexError):
    """A row range falls outside the allocated extent of a buffer."""


class InvalidColor(ColorReplaceError, ValueError):
    """A color string could not be parsed or a channel is outside [0, 255]."""


class InvalidConfig(ColorReplaceError, ValueError):
    """An environment setting is not a valid value."""
