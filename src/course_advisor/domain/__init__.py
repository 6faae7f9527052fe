"""
Domain models for the course advisor.
"""
from .models_course import Course

__all__ = ["Course"]
