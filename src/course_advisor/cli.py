"""
Interactive course planner shell.

Usage:
    course-advisor
    course-advisor --file courses.csv --log-level info
"""
import argparse
import logging
import sys
from typing import Callable, Optional

from .catalog import CourseCatalog, describe, list_all, load_courses
from .catalog.loader import LoadResult
from .config import load_settings, parse_log_level

logger = logging.getLogger(__name__)

MENU = (
    "Welcome to the course planner.\n"
    "1. Load Data Structure.\n"
    "2. Print Course List.\n"
    "3. Print Course.\n"
    "9. Exit"
)


def parse_menu_option(choice: str) -> Optional[int]:
    """Read a menu choice as a number, so "01" selects option 1."""
    try:
        return int(choice)
    except ValueError:
        return None


def format_load_result(result: LoadResult) -> str:
    if result.ok:
        return f"Courses loaded successfully from {result.path}."
    return result.error.message


class CourseAdvisorShell:
    """
    Menu loop around a single catalog.

    The loop only ends on option 9 or when input runs out.
    """

    def __init__(
        self,
        catalog: CourseCatalog,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        default_file: Optional[str] = None,
    ):
        self.catalog = catalog
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.default_file = default_file

    def run(self) -> int:
        """Run the menu loop and return the process exit code."""
        while True:
            self.output_fn(MENU)
            try:
                choice = self.input_fn("What would you like to do? ").strip()
                option = parse_menu_option(choice)

                if option == 1:
                    self.load_data()
                elif option == 2:
                    self.print_course_list()
                elif option == 3:
                    self.print_course()
                elif option == 9:
                    self.output_fn("Thank you for using the course planner!")
                    return 0
                else:
                    self.output_fn(f"{choice} is not a valid option.")
            except EOFError:
                logger.info("[Shell] Input closed, exiting")
                return 0

    def load_data(self) -> LoadResult:
        path = self.input_fn("Enter the file name: ").strip()
        if not path and self.default_file:
            path = self.default_file

        result = load_courses(path, self.catalog)
        self.output_fn(format_load_result(result))
        return result

    def print_course_list(self) -> None:
        if self.catalog.is_empty():
            self.output_fn("Load the data first.")
            return
        for line in list_all(self.catalog):
            self.output_fn(line)

    def print_course(self) -> None:
        number = self.input_fn("What course do you want to know about? ").strip()
        self.output_fn(describe(self.catalog, number))


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Course planner: list courses and look up prerequisites",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--file",
        default=None,
        help="Course data file to load before showing the menu"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: COURSE_ADVISOR_LOG_LEVEL or WARNING)"
    )

    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        log_level = parse_log_level(args.log_level) if args.log_level else settings.log_level
    except ValueError as e:
        print(f"✗ Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    catalog = CourseCatalog()
    shell = CourseAdvisorShell(catalog, default_file=settings.data_file)

    if args.file:
        print(format_load_result(load_courses(args.file, catalog)))

    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
