"""
Module: utils
Description: Package initialization for utility functions.

This package contains shared utility functions and helpers used
throughout the plugin.

Current utilities:
- logger: Structured logging configuration and helpers
- metrics: Host/process metrics snapshot
"""

__all__ = []
