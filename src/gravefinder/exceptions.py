"""Custom exception hierarchy for Gravefinder.

The search and deep-link core never raises for malformed records or queries;
these exceptions cover the surrounding layers (settings, dataset loading) so
callers can tell configuration problems apart from bad data files.
"""

from __future__ import annotations


class GravefinderError(Exception):
    """Base class for all Gravefinder exceptions."""


class ConfigError(GravefinderError):
    """Raised when configuration loading or validation fails."""


class DatasetError(GravefinderError):
    """Raised when a burial dataset file is missing or malformed."""
