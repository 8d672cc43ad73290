"""Fatal error types raised while generating documentation."""


class MetadataError(ValueError):
    """Raised when the metadata source is missing or malformed."""


class TemplateLoadError(OSError):
    """Raised when a required template cannot be found or read."""


class ConfigError(ValueError):
    """Raised when a configuration file does not hold a mapping."""
