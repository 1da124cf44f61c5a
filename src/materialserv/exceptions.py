"""
Materialserv exceptions
"""


class MaterialservError(Exception):
    """Base exception for materialserv errors"""
    pass


class InvalidConfigError(MaterialservError, ValueError):
    """Raised when a widget or the package configuration is invalid"""
    pass


__all__ = ['MaterialservError', 'InvalidConfigError']
