"""Machine-readable ``key=value`` output for CI workflows."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


def write_outputs(output_path: Optional[str] = None, **values: object) -> None:
    """Append ``key=value`` lines to ``output_path``, or print them."""
    lines = [f"{key}={value}" for key, value in values.items()]
    if not output_path:
        for line in lines:
            print(line)
        return
    with Path(output_path).open(mode="a", encoding="utf-8") as outfile:
        for line in lines:
            outfile.write(f"{line}\n")
