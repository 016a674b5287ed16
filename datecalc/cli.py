"""Command-line front end for the date calculator.

    datecalc diff 2020-01-01 2023-03-17
    datecalc add 2023-01-31 --months 1
    datecalc subtract 0001-01-01 --days 1

The commands drive DateCalculatorController, so the text printed is the
text the calculator screen would show.
"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from datetime import date, datetime, timezone

from datecalc.config import DateCalcConfig
from datecalc.core.mode import Mode
from datecalc.core.offset import OffsetSpec
from datecalc.errors import DateCalcError, ValidationError
from datecalc.presentation.controller import DateCalculatorController
from datecalc.services import (
    DefaultLocalizationSettings,
    DictStringCatalog,
    MemoryClipboard,
)

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def _parse_ymd(s: str) -> datetime:
    match = _DATE_RE.match(s)
    if not match:
        raise ValidationError(f"expected YYYY-MM-DD, got {s!r}")
    y, m, d = map(int, match.groups())
    try:
        date(y, m, d)
    except ValueError as exc:
        raise ValidationError(f"invalid date {s!r}: {exc}") from None
    return datetime(y, m, d, tzinfo=timezone.utc)


def _make_controller(config: DateCalcConfig, numbering: str) -> DateCalculatorController:
    localization = DefaultLocalizationSettings.for_numbering_system(
        numbering,
        calendar_identifier=config.calendar_identifier,
        list_separator=config.list_separator,
    )
    return DateCalculatorController(
        localization,
        DictStringCatalog(),
        clipboard=MemoryClipboard(),
        local_tz=timezone.utc,
        config=config,
    )


def cmd_diff(args: argparse.Namespace, config: DateCalcConfig) -> int:
    vm = _make_controller(config, args.numbering)
    vm.from_date = _parse_ymd(args.from_date)
    vm.to_date = _parse_ymd(args.to_date)

    print(vm.str_date_diff_result)
    if vm.str_date_diff_result_in_days:
        print(vm.str_date_diff_result_in_days)
    return 0


def cmd_offset(args: argparse.Namespace, config: DateCalcConfig) -> int:
    vm = _make_controller(config, args.numbering)
    vm.mode = Mode.ADD if args.cmd == "add" else Mode.SUBTRACT
    vm.start_date = _parse_ymd(args.start)
    vm.offset = OffsetSpec(years=args.years, months=args.months, days=args.days)

    print(vm.str_date_result)
    return 1 if vm.is_out_of_bound else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="datecalc", description="Date difference and date offset calculator")
    p.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    p.add_argument(
        "--numbering",
        default="latn",
        help="numbering system for digits: latn, arab, arabext, deva, thai (default latn)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("diff", help="difference between two dates")
    sp.add_argument("from_date", metavar="FROM", help="YYYY-MM-DD")
    sp.add_argument("to_date", metavar="TO", help="YYYY-MM-DD")

    for name, help_text in (("add", "add an offset to a date"), ("subtract", "subtract an offset from a date")):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("start", help="YYYY-MM-DD")
        sp.add_argument("--years", type=int, default=0)
        sp.add_argument("--months", type=int, default=0)
        sp.add_argument("--days", type=int, default=0)

    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = DateCalcConfig.from_env()
    except ValidationError as exc:
        print(f"datecalc: {exc}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.cmd == "diff":
            return cmd_diff(args, config)
        if args.cmd in ("add", "subtract"):
            return cmd_offset(args, config)
    except DateCalcError as exc:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"datecalc: {exc}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
