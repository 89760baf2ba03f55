"""
Function style library of utilkit
"""
from . import log  # This should be imported before timezone, core.timezones depends on it!
from . import array, timezone

__all__ = ['log', 'array', 'timezone']
