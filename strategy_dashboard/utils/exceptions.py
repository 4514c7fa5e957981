"""Custom exception classes for the strategy dashboard.

Provides a hierarchy of exceptions so callers can tell bad configuration
apart from bad user parameters.
"""


class DashboardError(Exception):
    """Base exception for all dashboard-specific errors."""
    pass


class ConfigurationError(DashboardError):
    """Raised when configuration is invalid or missing."""
    pass


class ParameterError(DashboardError):
    """Raised when dashboard parameters are invalid."""
    pass


class InvalidDateRangeError(ParameterError):
    """Raised when a date cannot be parsed or the end date precedes the start date."""
    pass


class UnknownAssetError(ParameterError):
    """Raised in strict mode when an asset symbol is not in the catalog."""
    pass


class UnknownStrategyError(ParameterError):
    """Raised in strict mode when a strategy label is not in the catalog."""
    pass


class DataSourceError(DashboardError):
    """Raised when a data source fails to produce a result."""
    pass
