import inspect
import json
import sys
from pathlib import Path
from typing import Any, Optional, TextIO


def _caller_location(depth: int) -> str:
    frame = inspect.currentframe()
    for _ in range(depth + 1):
        frame = frame.f_back
    filename = frame.f_code.co_filename
    try:
        filename = str(Path(filename).resolve().relative_to(Path.cwd()))
    except ValueError:
        pass
    return f"{filename}:{frame.f_lineno}"


def _pretty(value: Any) -> str:
    try:
        return json.dumps(value, indent=2, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


def debug_print(
    value: Any,
    label: str = "response",
    stream: Optional[TextIO] = None,
    depth: int = 1,
) -> Any:
    """
    Write `[file:line] label = value` to stderr and return value unchanged.

    depth selects the frame whose location is reported; 1 is the direct caller.
    """
    out = stream if stream is not None else sys.stderr
    out.write(f"[{_caller_location(depth)}] {label} = {_pretty(value)}\n")
    out.flush()
    return value
