"""
Custom exceptions for the yearcal.io module.

Purpose
- Provide IO-layer specific error types for loading data sources.
- Keep yearcal.core as the source of truth for scale/navigation errors (see yearcal.core.errors).

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in yearcal.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from yearcal.core errors.
    """


class SourceError(IoError):
    """
    Raised when a data source cannot be loaded.

    Examples:
        - File does not exist
        - Unsupported file extension
        - Required date/value columns missing
    """
