"""
Catalog query: read-only listing and single-course detail lines.
"""
from ..domain import Course
from .index import CourseCatalog


def format_course(course: Course) -> str:
    """
    Render one course as a single display line.

    Prerequisites are space-separated and the label is omitted when
    the course has none:
        Course Number: CSCI201, Course Name: Data Structures, Prerequisites: CSCI101
        Course Number: CSCI101, Course Name: Intro to Programming
    """
    line = f"Course Number: {course.number}, Course Name: {course.name}"
    if course.has_prerequisites:
        line += ", Prerequisites: " + " ".join(course.prerequisites)
    return line


def list_all(catalog: CourseCatalog) -> list[str]:
    """Format every course in ascending course-number order."""
    return [format_course(course) for course in catalog.all()]


def describe(catalog: CourseCatalog, number: str) -> str:
    """
    Format the course with the given number.

    Args:
        catalog: Catalog to search
        number: Exact course number to look up

    Returns:
        The course's display line, or a "not found" notice naming `number`
    """
    course = catalog.lookup(number)
    if course is None:
        return f"Course not found: {number}"
    return format_course(course)
