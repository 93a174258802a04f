"""Constant-term recovery from a JSON point document: entry point.

Usage: python main.py <testcase.json>

Prints p(0) as a base-10 integer, or as numerator/denominator when the
points do not yield an integer constant term.
"""

import json
import logging
import sys

import config
from core.errors import InterpolationError
from solver import solve


def run(path: str) -> str:
    with open(path, encoding="utf-8") as f:
        document = json.load(f)
    return solve(document)


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT,
                        stream=sys.stderr)

    if not argv:
        print("Usage: python main.py <testcase.json>", file=sys.stderr)
        return config.EXIT_USAGE

    try:
        result = run(argv[0])
    except (InterpolationError, OSError, UnicodeDecodeError,
            json.JSONDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return config.EXIT_FAILURE

    print(result)
    return config.EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
