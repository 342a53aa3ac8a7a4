class ConfigurationError(ValueError):
    """Raised when a configuration value or catalog selection is invalid."""
