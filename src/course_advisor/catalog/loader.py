"""
Catalog loader: reads a comma-delimited course file into a catalog.

Each line is one course:
    <course number>,<course name>[,<prerequisite course number>]*

Loading stops at the first bad line. Courses inserted from earlier lines
stay in the catalog; callers must not assume the load was atomic.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..domain import Course
from ..io import read_lines
from .index import CourseCatalog
from .validate import is_valid_course_name, is_valid_course_number

logger = logging.getLogger(__name__)


class LoadErrorKind(str, Enum):
    FILE_NOT_FOUND = "file_not_found"
    FILE_UNREADABLE = "file_unreadable"
    MALFORMED_RECORD = "malformed_record"
    INVALID_COURSE_NUMBER = "invalid_course_number"
    INVALID_COURSE_NAME = "invalid_course_name"
    INVALID_PREREQUISITE = "invalid_prerequisite"


@dataclass
class LoadError:
    """Why a load stopped, with the offending line when there is one."""
    kind: LoadErrorKind
    message: str
    line: Optional[str] = None
    line_number: Optional[int] = None  # 1-based


@dataclass
class LoadResult:
    """Result of loading a course file."""
    ok: bool
    path: str
    loaded: int = 0
    error: Optional[LoadError] = None


def split_record(line: str) -> list[str]:
    """
    Split a record line on commas without trimming tokens.

    An empty line has no tokens, and a single trailing empty token left
    by a line ending in "," is dropped.
    """
    if not line:
        return []
    tokens = line.split(",")
    if tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_course(line: str, line_number: Optional[int] = None) -> tuple[Optional[Course], Optional[LoadError]]:
    """
    Parse and validate one record line.

    Checks run in order: field count, course number, course name,
    then each prerequisite.

    Returns:
        Tuple of (course, error); exactly one of them is None
    """
    tokens = split_record(line)

    def fail(kind: LoadErrorKind, label: str):
        return None, LoadError(kind, f"ERROR: {label}: {line}", line, line_number)

    if len(tokens) < 2:
        return fail(LoadErrorKind.MALFORMED_RECORD, "Invalid course entry")

    number, name, prereqs = tokens[0], tokens[1], tokens[2:]

    if not is_valid_course_number(number):
        return fail(LoadErrorKind.INVALID_COURSE_NUMBER, "Invalid course number")

    if not is_valid_course_name(name):
        return fail(LoadErrorKind.INVALID_COURSE_NAME, "Invalid course name")

    for prereq in prereqs:
        if not is_valid_course_number(prereq):
            return fail(LoadErrorKind.INVALID_PREREQUISITE, "Invalid prerequisite course number")

    return Course(number=number, name=name, prerequisites=tuple(prereqs)), None


def load_courses(path: str, catalog: CourseCatalog) -> LoadResult:
    """
    Load courses from a file into `catalog` in sorted position.

    Args:
        path: Path to the course data file
        catalog: Destination catalog (modified in place)

    Returns:
        LoadResult; on failure `error` says why and `loaded` counts
        the courses already inserted before the failing line
    """
    logger.info(f"[Loader] Loading courses from {path}")

    try:
        lines = read_lines(path)
    except FileNotFoundError:
        logger.warning(f"[Loader] File not found: {path}")
        return LoadResult(
            ok=False,
            path=path,
            error=LoadError(LoadErrorKind.FILE_NOT_FOUND, f"ERROR: File does not exist: {path}"),
        )
    except ValueError as e:
        logger.warning(f"[Loader] {e}")
        return LoadResult(
            ok=False,
            path=path,
            error=LoadError(LoadErrorKind.FILE_UNREADABLE, f"ERROR: File could not be read: {path}"),
        )

    loaded = 0
    for line_number, line in enumerate(lines, start=1):
        course, error = parse_course(line, line_number)
        if error is not None:
            logger.warning(
                f"[Loader] Stopped at line {line_number} ({error.kind.value}) "
                f"after {loaded} course(s): {line!r}"
            )
            return LoadResult(ok=False, path=path, loaded=loaded, error=error)

        if course.number in catalog:
            logger.warning(f"[Loader] Duplicate course number {course.number} at line {line_number}")

        catalog.insert(course)
        loaded += 1
        logger.debug(f"[Loader] Inserted {course.number} ({len(course.prerequisites)} prerequisites)")

    logger.info(f"[Loader] Loaded {loaded} course(s) from {path}; catalog now has {len(catalog)}")
    return LoadResult(ok=True, path=path, loaded=loaded)
