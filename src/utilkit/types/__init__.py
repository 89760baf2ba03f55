from .na import NA, is_na
from .sequence import Sequence

__all__ = ['NA', 'is_na', 'Sequence']
