"""
Interactive read-eval-print loop for mlisp.

Lines are accumulated until every '(' seen so far has been closed, then the
accumulated text is evaluated as one program against a session environment
kept alive for the whole process. A line reading exactly `exit` (or end of
input) ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from mlisp import __version__
from mlisp.config import get_log_level, get_prompt
from mlisp.errors import MLispError
from mlisp.interpreter import Interpreter
from mlisp.logging_config import setup_logging
from mlisp.printer import to_string

logger = logging.getLogger(__name__)

BANNER = f"mlisp {__version__}. Type `exit` to leave."
EXIT_COMMAND = "exit"


def balance(line: str) -> int:
    """Number of '(' minus number of ')' in `line`."""
    return line.count("(") - line.count(")")


class Repl:
    def __init__(
        self,
        interp: Optional[Interpreter] = None,
        prompt: Optional[str] = None,
        out: Optional[TextIO] = None,
    ):
        # Keep a single interpreter to maintain session state
        self.interp = interp if interp is not None else Interpreter()
        self.prompt = prompt if prompt is not None else get_prompt()
        self.out = out
        self.source = ""
        self.unclosed = 0

    def write(self, text: str) -> None:
        # Resolve stdout lazily so redirection after construction is honoured
        print(text, file=self.out if self.out is not None else sys.stdout)

    def feed(self, line: str) -> Optional[str]:
        """Accumulate one input line; return the response once the input balances."""
        self.unclosed += balance(line)
        self.source = f"{self.source} {line}"
        if self.unclosed > 0:
            return None

        source, self.source, self.unclosed = self.source, "", 0
        try:
            result = self.interp.eval(source)
        except MLispError as e:
            logger.debug("Evaluation failed: %r", e)
            return f"Execution error. {e}"
        return to_string(result)

    def run(self, read_line: Optional[Callable[[str], str]] = None) -> None:
        # Looked up per call so a replaced builtins.input is honoured
        read_line = read_line or input
        logger.info("Session started")
        while True:
            try:
                line = read_line(self.prompt)
            except EOFError:
                break
            if line == EXIT_COMMAND:
                break
            response = self.feed(line)
            if response is not None:
                self.write(response)
        self.write("Good bye")
        logger.info("Session ended")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mlisp", description="Interactive mlisp session")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    parser.add_argument("--prompt", default=None, help="Prompt shown before each input line")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level or get_log_level())
    try:
        import readline  # noqa: F401  (line editing for input())
    except ImportError:
        pass
    repl = Repl(prompt=args.prompt)
    repl.write(BANNER)
    repl.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
