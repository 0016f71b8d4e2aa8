import re
from threading import Lock
from typing import Any, Optional

_INT_PATTERN = re.compile(r"[+-]?\d+")


class IDGenerator:
    """
    Thread-safe monotonic integer ID generator.
    """
    def __init__(self, start: int = 1):
        self._lock = Lock()
        self._current = start - 1

    def next_id(self) -> int:
        """
        Returns the next unique integer ID.
        """
        with self._lock:
            self._current += 1
            return self._current


def parse_int(value: Any) -> Optional[int]:
    """
    Parse an integer from a number or its text form.

    Returns None for missing, empty or non-integer input so callers can
    tell "not supplied" apart from a real zero.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INT_PATTERN.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # Beyond the interpreter's digit limit for int()
                return None
    return None
