"""
IO utilities for text file reading.
"""
from .text_load import read_lines

__all__ = ["read_lines"]
