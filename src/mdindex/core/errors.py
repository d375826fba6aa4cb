"""Error kinds raised while converting a frontmatter document"""


class ConversionError(Exception):
    """Base class for every conversion failure."""


class FormatError(ConversionError):
    """Input does not start with a `---` delimited frontmatter block."""


class YamlDecodeError(ConversionError):
    """Frontmatter block is not valid YAML or does not decode to a mapping."""


class ValidationError(ConversionError):
    """Required metadata fields are missing, falsy, or cannot be normalized."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(message)
        self.missing = list(missing or [])


class ProcessingError(ConversionError):
    """Single error surface of parse_document; message embeds the inner failure."""
