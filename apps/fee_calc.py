#!/usr/bin/env python3
"""Command-line fee calculator over the fee_ratio core.

Examples:
  python apps/fee_calc.py apply --n 1 --d 3 --mode ceil 10
  python apps/fee_calc.py reverse-fee --n 1 --d 3 --mode ceil 4
  python apps/fee_calc.py schedule --n 30 --d 10000 --stop 1000 --step 100 --out fees.csv
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from fee_ratio.core import (
    CeilFee,
    FloorFee,
    Ratio,
    RatioDomainError,
    UintWidth,
    fee_to_bps,
    fmt_aft_fee,
    fmt_range,
)
from fee_ratio.research import (
    ScheduleConfig,
    SCHEDULE_CFG,
    fee_schedule,
    schedule_rows_to_text,
    schedule_to_frame,
    summarize_schedule,
)

FEE_MODES = {
    "floor": FloorFee,
    "ceil": CeilFee,
}

WIDTHS = {str(w): w for w in UintWidth}


def _add_fee_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--n", type=int, required=True, help="Fee ratio numerator")
    p.add_argument("--d", type=int, required=True, help="Fee ratio denominator")
    p.add_argument("--n-width", choices=sorted(WIDTHS), default="u64")
    p.add_argument("--d-width", choices=sorted(WIDTHS), default="u64")
    p.add_argument("--mode", choices=sorted(FEE_MODES), default="ceil", help="Fee rounding mode")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Apply and reverse fee ratios on u64 amounts.")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_apply = sub.add_parser("apply", help="Split an amount into rem and fee")
    _add_fee_args(p_apply)
    p_apply.add_argument("amount", type=int)

    p_rem = sub.add_parser("reverse-rem", help="Amounts that leave the given remainder")
    _add_fee_args(p_rem)
    p_rem.add_argument("rem", type=int)

    p_fee = sub.add_parser("reverse-fee", help="Amounts that are charged the given fee")
    _add_fee_args(p_fee)
    p_fee.add_argument("fee", type=int)

    p_sched = sub.add_parser("schedule", help="Tabulate the fee over an amount grid")
    _add_fee_args(p_sched)
    p_sched.add_argument("--start", type=int, default=SCHEDULE_CFG.start)
    p_sched.add_argument("--stop", type=int, default=SCHEDULE_CFG.stop)
    p_sched.add_argument("--step", type=int, default=SCHEDULE_CFG.step)
    p_sched.add_argument("--out", default=None, help="Write CSV here instead of printing")

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    args = parse_args(argv)
    try:
        ratio = Ratio(args.n, args.d, WIDTHS[args.n_width], WIDTHS[args.d_width])
    except RatioDomainError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    fee = FEE_MODES[args.mode].new(ratio)
    if fee is None:
        print(f"[error] invalid fee ratio {ratio}: must be in [0, 1] and not x/0", file=sys.stderr)
        return 2

    try:
        if args.cmd == "apply":
            print(fmt_aft_fee(fee.apply(args.amount)))
        elif args.cmd == "reverse-rem":
            print(fmt_range(fee.reverse_from_rem(args.rem)))
        elif args.cmd == "reverse-fee":
            print(fmt_range(fee.reverse_from_fee(args.fee)))
        elif args.cmd == "schedule":
            cfg = ScheduleConfig(start=args.start, stop=args.stop, step=args.step)
            rows = fee_schedule(fee, cfg)
            if args.out:
                schedule_to_frame(rows).to_csv(args.out, index=False)
                summary = summarize_schedule(rows)
                print(f"[info] {fee} ({fee_to_bps(fee).normalize():f} bps): wrote {summary['rows']} rows to {args.out}")
            else:
                print(schedule_rows_to_text(rows))
    except ValueError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
