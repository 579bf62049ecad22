"""Pre-commit check: enforce unified logging usage.

Fails if package code touches the standard logging module or structlog
directly instead of ``fountainview.config.get_logger``. Only the config
package, which builds the logging setup, is exempt.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path
from typing import NamedTuple

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
PACKAGE = SRC / "fountainview"

# The config package builds the logging setup and may use it directly
ALLOWED_DIRS = (PACKAGE / "config",)

PATTERNS: dict[str, re.Pattern[str]] = {
    "logging.getLogger": re.compile(r"\blogging\.getLogger\s*\("),
    "structlog.get_logger": re.compile(r"\bstructlog\.get_logger\s*\("),
    "direct logging call": re.compile(
        r"\blogging\.(info|debug|warning|error|exception|critical)\s*\("
    ),
    "import logging": re.compile(r"^[ \t]*(import logging|from logging import )", re.M),
    "import structlog": re.compile(r"^[ \t]*(import structlog|from structlog)", re.M),
    "private logger import": re.compile(
        r"^[ \t]*from fountainview\.config\.logging import ", re.M
    ),
}


class Offender(NamedTuple):
    """One disallowed logging usage."""

    path: Path
    label: str
    line_no: int
    line: str


def is_allowed(path: Path) -> bool:
    return any(allowed in path.parents for allowed in ALLOWED_DIRS)


def find_offenders(package: Path = PACKAGE) -> list[Offender]:
    """Scan ``package`` for logging usage that bypasses ``get_logger``."""
    offenders: list[Offender] = []
    for path in sorted(package.rglob("*.py")):
        if is_allowed(path):
            continue

        text = path.read_text(encoding="utf-8", errors="ignore")
        lines = text.splitlines()
        for label, pattern in PATTERNS.items():
            for match in pattern.finditer(text):
                line_no = text.count("\n", 0, match.start()) + 1
                offenders.append(
                    Offender(path, label, line_no, lines[line_no - 1].rstrip())
                )
    return offenders


def main() -> int:
    """Report offenders and return a process exit code."""
    offenders = find_offenders()
    if not offenders:
        return 0

    print("Found disallowed logging usage:", file=sys.stderr)
    for offender in offenders:
        rel = offender.path.relative_to(ROOT)
        print(
            f"- {offender.label}: {rel}:{offender.line_no}: {offender.line}",
            file=sys.stderr,
        )
    print(
        "\nUse `from fountainview.config import get_logger` and "
        "`logger = get_logger(__name__)`.",
        file=sys.stderr,
    )
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
