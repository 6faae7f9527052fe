"""
Text file reader with error handling.
"""
from pathlib import Path


def read_lines(path: str) -> list[str]:
    """
    Read a UTF-8 text file into a list of lines.

    Line terminators ("\\n", "\\r\\n") are removed. The file is closed
    before this function returns.

    Args:
        path: Path to text file

    Returns:
        Lines of the file, without terminators

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file can't be opened or decoded
    """
    text_path = Path(path)

    if not path or not text_path.exists():
        raise FileNotFoundError(f"Text file not found: {path}")

    try:
        with open(text_path, 'r', encoding='utf-8', newline='') as f:
            return [line.rstrip("\r\n") for line in f]
    except UnicodeDecodeError as e:
        raise ValueError(f"File '{path}' is not valid UTF-8: {e}")
    except OSError as e:
        raise ValueError(f"Error reading file '{path}': {e}")
