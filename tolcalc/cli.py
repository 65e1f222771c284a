#!/usr/bin/env python3
"""Command-line front end for the general tolerance calculator.

Usage:
    tolcalc calc 10 --grade m
    tolcalc calc 3000 --grade fine --json
    tolcalc table --grade c
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from tolcalc.core.calculator import ResultStatus, calculate, default_grade
from tolcalc.core.knowledge import ToleranceGrade, get_general_tolerance_table, parse_grade
from tolcalc.presentation import labels, present
from tolcalc.presentation.formatting import format_number
from tolcalc.utils.logging import setup_logging

logger = logging.getLogger(__name__)

EXIT_CODES = {
    ResultStatus.OK: 0,
    ResultStatus.UNSPECIFIED_TOLERANCE: 1,
    ResultStatus.INVALID_DIMENSION: 2,
    ResultStatus.INVALID_GRADE: 2,
}


def _grade_arg(value: str) -> ToleranceGrade:
    grade = parse_grade(value)
    if grade is None:
        raise argparse.ArgumentTypeError(
            f"unknown tolerance grade {value!r} (expected f, m, c, v or ISO 2768-m)"
        )
    return grade


def _print_header() -> None:
    print(labels.TITLE)
    print(labels.SUBTITLE)


def _cmd_calc(args: argparse.Namespace) -> int:
    result = calculate(args.dimension, args.grade)
    view = present(result, args.dimension)

    if args.json:
        payload = {
            "result": result.model_dump(mode="json"),
            "display": view.model_dump(mode="json"),
            "error_code": result.error_code.value if result.error_code else None,
        }
        print(json.dumps(payload, ensure_ascii=False, indent=2))
        return EXIT_CODES[result.status]

    _print_header()
    print(f"{labels.DIMENSION_LABEL}: {args.dimension}")
    print(f"{labels.GRADE_LABEL}: {view.grade_label}")
    print(f"[{labels.RESULT_HEADING}]")
    if view.inline_error:
        print(view.inline_error, file=sys.stderr)
    if view.message:
        print(view.message)
    else:
        print(f"{labels.TOLERANCE_LABEL}: {view.tolerance}")
        print(f"{labels.UPPER_LIMIT_LABEL}: {view.upper_limit}")
        print(f"{labels.LOWER_LIMIT_LABEL}: {view.lower_limit}")
    return EXIT_CODES[result.status]


def _cmd_table(args: argparse.Namespace) -> int:
    grade = args.grade or default_grade()
    rows = get_general_tolerance_table(grade)

    if args.json:
        print(json.dumps({"grade": grade.value, "rows": rows}, ensure_ascii=False, indent=2))
        return 0

    _print_header()
    print(f"{labels.GRADE_LABEL}: {labels.GRADE_LABELS[grade]}")
    for row in rows:
        print(f"{row['range_str']:>12} mm  ±{format_number(row['tolerance_mm'])}")
    print(labels.SCOPE_NOTE)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tolcalc",
        description="General tolerances for linear dimensions (JIS B 0405 / ISO 2768-1)",
    )
    parser.add_argument("--log-level", help="Override TOLCALC_LOG_LEVEL")
    parser.add_argument("--log-json", action="store_true", help="Emit JSON log records")
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Tolerance and limits for one dimension")
    calc.add_argument("dimension", help="Nominal dimension in mm (0.5-4000)")
    calc.add_argument(
        "--grade", "-g", type=_grade_arg, default=None,
        help="f, m, c, v (default: TOLCALC_DEFAULT_GRADE)",
    )
    calc.add_argument("--json", action="store_true", help="Print result as JSON")
    calc.set_defaults(func=_cmd_calc)

    table = sub.add_parser("table", help="Print the tolerance table for a grade")
    table.add_argument("--grade", "-g", type=_grade_arg, default=None, help="f, m, c, v")
    table.add_argument("--json", action="store_true", help="Print rows as JSON")
    table.set_defaults(func=_cmd_table)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, True if args.log_json else None, stream=sys.stderr)
    logger.debug("Running %s", args.command)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
