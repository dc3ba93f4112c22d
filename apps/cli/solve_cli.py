"""Command-line front end: solve a puzzle read from a JSON file, or one of the built-in demo puzzles."""

# solve_cli.py
# Usage:
#   python -m apps.cli.solve_cli --grid puzzle.json
#   python -m apps.cli.solve_cli --demo hard --json
#
# A puzzle file holds either a bare 9x9 list of ints (0 = blank) or an object
# {"solution": [[...]], "status": ""} as accepted by the HTTP service.

import argparse
import json
import logging
import sys
from pathlib import Path

from apps.log_setup import setup_logging
from solver.sudoku_tools import format_grid, jsolve, sanity_check
from types_sudoku import SUCCESS_STATUS, Grid, JsonGrid

logger = logging.getLogger("SolveCli")

DEMO_PUZZLES: dict[str, Grid] = {
    # Solvable by direct deduction
    "easy": [
        [0, 0, 9, 0, 0, 3, 0, 0, 0],
        [0, 0, 0, 6, 2, 0, 9, 0, 4],
        [8, 2, 7, 0, 0, 0, 6, 0, 3],
        [2, 1, 0, 3, 6, 0, 0, 4, 5],
        [0, 9, 6, 0, 7, 0, 0, 0, 0],
        [7, 0, 0, 0, 4, 0, 1, 9, 0],
        [0, 6, 2, 4, 5, 0, 3, 0, 0],
        [1, 0, 0, 7, 0, 6, 4, 0, 0],
        [3, 0, 0, 9, 8, 2, 0, 6, 0],
    ],
    # These two need the backtracking search
    "medium": [
        [0, 0, 0, 0, 5, 1, 0, 0, 0],
        [5, 6, 1, 9, 0, 0, 0, 0, 0],
        [4, 0, 0, 7, 0, 0, 0, 0, 0],
        [0, 0, 2, 0, 0, 5, 4, 0, 0],
        [0, 4, 5, 0, 0, 0, 0, 0, 8],
        [1, 9, 0, 0, 4, 0, 0, 0, 3],
        [0, 8, 0, 0, 2, 7, 0, 3, 1],
        [6, 0, 0, 0, 0, 0, 0, 2, 0],
        [0, 5, 0, 8, 0, 0, 6, 4, 9],
    ],
    "hard": [
        [3, 0, 5, 0, 7, 1, 0, 0, 9],
        [0, 0, 0, 3, 4, 0, 0, 0, 0],
        [0, 9, 0, 2, 0, 0, 0, 0, 0],
        [0, 3, 0, 0, 0, 4, 0, 0, 0],
        [0, 6, 0, 0, 0, 0, 0, 0, 7],
        [0, 0, 0, 0, 0, 2, 8, 5, 0],
        [0, 0, 0, 0, 0, 0, 0, 8, 0],
        [0, 5, 4, 0, 0, 0, 9, 0, 1],
        [0, 0, 7, 0, 0, 0, 4, 0, 0],
    ],
}


def load_puzzle(path: str | Path) -> JsonGrid:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        return {"solution": data.get("solution"), "status": ""}
    return {"solution": data, "status": ""}


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku puzzle.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--grid", type=str, help="JSON file with the puzzle")
    src.add_argument("--demo", type=str, choices=sorted(DEMO_PUZZLES))
    ap.add_argument("--json", action="store_true", help="Print the JSON payload instead of the rendered grid")
    ap.add_argument("--log-level", dest="log_level", type=str, default="WARNING")
    args = ap.parse_args(argv)

    setup_logging(args.log_level)

    if args.grid:
        payload = load_puzzle(args.grid)
    else:
        payload = {"solution": [row[:] for row in DEMO_PUZZLES[args.demo]], "status": ""}

    result = jsolve(payload)
    ok = result["status"] == SUCCESS_STATUS

    if args.json:
        print(json.dumps(result))
    elif ok:
        print(format_grid(result["solution"]))
        check = sanity_check(payload["solution"], result["solution"])
        if not check["ok"]:
            logger.error("Solution failed verification: %s", check["issues"])
            return 1
    else:
        print(result["status"], file=sys.stderr)

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
