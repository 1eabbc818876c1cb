"""
Utility modules for lexorank.
"""

from .validation import ValidationHelper

__all__ = ['ValidationHelper']
