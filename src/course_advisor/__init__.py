"""
Course Advisor: load a course catalog from a text file and answer
listing and prerequisite questions about it.
"""
from .catalog import CourseCatalog, load_courses, list_all, describe
from .domain import Course

__all__ = ["Course", "CourseCatalog", "load_courses", "list_all", "describe"]
