"""
ViewModel package for state shared between screens.
"""

from .shared_view_model import SharedViewModel

__all__ = [
    "SharedViewModel",
]
