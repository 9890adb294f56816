from __future__ import annotations

import sys
from typing import Optional, TextIO

# NOTE: Process-global, like the evaluator itself (single-threaded).
_output: Optional[TextIO] = None


def set_output(stream: Optional[TextIO]) -> None:
    """Redirect `print` output; None restores the default (sys.stdout)."""
    global _output
    _output = stream


def get_output() -> TextIO:
    # Resolved at call time so pytest's capsys replacement of sys.stdout is honoured
    return _output if _output is not None else sys.stdout
