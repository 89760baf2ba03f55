"""
Sequence container with JavaScript Array style methods, and a timezone abbreviation registry
"""
from . import lib  # This should be imported first, it sets up logging for the rest of the package
from .types import NA, Sequence
from .utils.sequence_view import SequenceView
from .core.timezones import FixedOffset, TIMEZONES

__version__ = "0.1.0"

__all__ = ['NA', 'Sequence', 'SequenceView', 'FixedOffset', 'TIMEZONES', 'lib']
