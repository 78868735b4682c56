"""Custom exceptions for confform."""


class ConfformError(Exception):
    """Base exception for confform operations."""


class ConfigReadError(ConfformError):
    """Configuration source could not be read."""


class SettingsError(ConfformError):
    """Invalid settings key or value."""
