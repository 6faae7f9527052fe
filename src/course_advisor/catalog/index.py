"""
Course catalog: ordered collection of courses keyed by course number.
"""
import bisect
from typing import Iterator, Optional

from ..domain import Course


class CourseCatalog:
    """
    Courses kept in ascending course-number order.

    Insertion finds the first entry whose number is not less than the new
    course's number and places the new course before it, so a duplicate
    number lands ahead of the existing equal entry. Lookup returns the first
    exact match in catalog order.
    """

    def __init__(self):
        self._courses: list[Course] = []
        self._numbers: list[str] = []  # parallel to _courses, for bisect

    def insert(self, course: Course) -> int:
        """
        Insert a course in sorted position.

        Args:
            course: Course to insert

        Returns:
            Index the course was placed at

        Raises:
            TypeError: If course is not a Course
        """
        if not isinstance(course, Course):
            raise TypeError(f"Expected Course, got {type(course).__name__}")

        index = bisect.bisect_left(self._numbers, course.number)
        self._numbers.insert(index, course.number)
        self._courses.insert(index, course)
        return index

    def lookup(self, number: str) -> Optional[Course]:
        """Return the first course whose number equals `number`, or None."""
        index = bisect.bisect_left(self._numbers, number)
        if index < len(self._numbers) and self._numbers[index] == number:
            return self._courses[index]
        return None

    def all(self) -> tuple[Course, ...]:
        """Return every course in ascending course-number order."""
        return tuple(self._courses)

    def numbers(self) -> list[str]:
        return list(self._numbers)

    def is_empty(self) -> bool:
        return not self._courses

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(tuple(self._courses))

    def __contains__(self, number: object) -> bool:
        return isinstance(number, str) and self.lookup(number) is not None

    def __repr__(self) -> str:
        return f"CourseCatalog({len(self)} courses)"
