class ConfigError(ValueError):
    """Raised when the caller hands us configuration we cannot use"""
