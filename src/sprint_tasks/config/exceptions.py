"""Custom exceptions for the Config Store."""


class ConfigError(Exception):
    """Config directory or file cannot be created, read, written, or parsed."""
