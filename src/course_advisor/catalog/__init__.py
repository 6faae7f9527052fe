"""
Catalog package for validating, loading and querying courses.
"""
from .validate import is_valid_course_number, is_valid_course_name, normalize_course_number, trim_course_name
from .index import CourseCatalog
from .loader import LoadError, LoadErrorKind, LoadResult, load_courses
from .query import format_course, list_all, describe

__all__ = [
    "is_valid_course_number",
    "is_valid_course_name",
    "normalize_course_number",
    "trim_course_name",
    "CourseCatalog",
    "LoadError",
    "LoadErrorKind",
    "LoadResult",
    "load_courses",
    "format_course",
    "list_all",
    "describe",
]
