"""Line-based read loop: `python -m minim`.

Each input line is handed to `evaluate_text`; results print as `=> value`,
errors as `// reason`. The loop ends on EOF or the `exit` form.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from minim import config
from minim.types.errors import ExitRequest, MinimError
from minim.interpreter import Interpreter
from minim.debug_utils.pprint import (
    DEFAULT_OPTIONS,
    NO_COLOR_OPTIONS,
    load_options_from_json,
    pprint_expr,
)

logger = logging.getLogger(__name__)


def repl(
    interp: Interpreter,
    stdin: TextIO,
    stdout: TextIO,
    prompt: str = "minim> ",
    options: Optional[dict] = None,
) -> int:
    """Run the read loop until EOF or `exit`; returns the process status."""
    if options is None:
        options = NO_COLOR_OPTIONS
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return 0
        if not line.strip():
            continue
        try:
            result = interp.eval(line)
        except ExitRequest as e:
            logger.debug("exit requested with status %d", e.status)
            return e.status
        except MinimError as e:
            stdout.write(f"// {e.reason}\n")
            continue
        stdout.write(f"=> {pprint_expr(result, options=options)}\n")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="minim", description="minim interactive interpreter")
    parser.add_argument("--no-color", action="store_true", help="disable ANSI colors in results")
    parser.add_argument("--verbose", "-v", action="store_true", help="log parsed forms and results")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    sys.setrecursionlimit(config.get_recursion_limit())
    use_color = config.get_color_enabled() and not args.no_color and sys.stdout.isatty()
    options = DEFAULT_OPTIONS if use_color else NO_COLOR_OPTIONS
    user_options = config.get_pprint_options()
    if user_options is not None:
        options = load_options_from_json(user_options, options)

    return repl(Interpreter(), sys.stdin, sys.stdout, config.get_prompt(), options)


if __name__ == "__main__":
    sys.exit(main())
