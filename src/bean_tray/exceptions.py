"""Custom exceptions for bean-tray."""


class BeanTrayError(Exception):
    """Base exception for bean-tray."""

    pass


class TrayBackendError(BeanTrayError):
    """Raised when the tray widget or app host rejects an operation."""

    pass


class TrayIconError(BeanTrayError):
    """Raised when the tray icon cannot be read or is invalid."""

    pass


class ConfigError(BeanTrayError):
    """Raised when environment configuration is invalid."""

    pass
