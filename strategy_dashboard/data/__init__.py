"""Data sources behind the dashboard surfaces."""

from .sources import BaseDataSource, MockDataSource

__all__ = ['BaseDataSource', 'MockDataSource']
