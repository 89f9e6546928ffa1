"""Console output shared by the CLI and the scripts."""

import sys
from datetime import datetime
from typing import Optional, TextIO


def log(msg: str, stream: Optional[TextIO] = None) -> None:
    """Print timestamped log message."""
    ts = datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", file=stream or sys.stdout)


def summary_line(name: str, vertices: int, triangles: int, elapsed_ms: float) -> str:
    return f"{name},vertices={vertices},triangles={triangles},time_ms={elapsed_ms}"
