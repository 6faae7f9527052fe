"""
Course field validation: syntax checks for course numbers and names.

Pure predicates with no side effects. Existence of prerequisite courses
is never checked here. Checks are byte-oriented: only ASCII whitespace
counts as whitespace and name length is measured in UTF-8 bytes.
"""
import string

COURSE_NUMBER_LENGTH = 7
MAX_COURSE_NAME_LENGTH = 55  # bytes, UTF-8

# str.isalnum() and str.split() also accept non-ASCII characters
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
ASCII_WHITESPACE = " \t\n\v\f\r"


def normalize_course_number(raw: str) -> str:
    """
    Remove every ASCII whitespace character from a course number.

    Internal whitespace is dropped too, so "CSCI 101" becomes "CSCI101".
    Non-ASCII spaces such as NBSP are kept, which makes the number invalid.
    """
    return "".join(ch for ch in raw if ch not in ASCII_WHITESPACE)


def trim_course_name(raw: str) -> str:
    """Strip leading and trailing ASCII whitespace from a course name."""
    return raw.strip(ASCII_WHITESPACE)


def is_valid_course_number(raw: str) -> bool:
    """
    Check that a course number is 7 ASCII letters/digits once whitespace is removed.

    Examples:
        "CSCI101"     → True
        " CSCI 101"   → True
        "CSCI10"      → False (too short)
        "CSCI-10"     → False (punctuation)
        "CSCI101\\xa0" → False (NBSP is not ASCII whitespace)
    """
    number = normalize_course_number(raw)
    if len(number) != COURSE_NUMBER_LENGTH:
        return False
    return all(ch in _ALPHANUMERIC for ch in number)


def is_valid_course_name(raw: str) -> bool:
    """Check that a course name is 1..55 UTF-8 bytes after trimming the ends."""
    name = trim_course_name(raw)
    return 0 < len(name.encode("utf-8")) <= MAX_COURSE_NAME_LENGTH
