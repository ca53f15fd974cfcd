class ConversionError(Exception):
    """Base class for failures that abort a conversion."""


class InputReadError(ConversionError):
    """The Markdown source could not be read."""


class OutputWriteError(ConversionError):
    """The rendered document could not be written."""


class RenderError(ConversionError):
    """Pandoc failed to parse or lower the Markdown source."""
