"""Command-line driver: build a contract from flags and print valuations."""

from __future__ import annotations

import argparse
import logging
import sys

from .contract import OptionContract
from .enums import ExerciseType, Greek, OptionType
from .exceptions import OptionAnalyticsError
from .utils import put_call_parity_gap
from .valuation import OptionValuation
from .valuation.sweeps import sweep_points

logger = logging.getLogger(__name__)


def add_common(parser: argparse.ArgumentParser):
    parser.add_argument("--T", type=float, default=0.0, help="years to expiry")
    parser.add_argument("--K", type=float, required=True, help="strike")
    parser.add_argument("--sig", type=float, required=True, help="volatility")
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free")
    parser.add_argument("--b", type=float, default=0.0, help="cost of carry")
    parser.add_argument("--S", type=float, required=True, help="spot")
    parser.add_argument("--type", dest="option_type", default="C", help="C|P")
    parser.add_argument(
        "--exercise",
        choices=[e.value for e in ExerciseType],
        default=ExerciseType.EUROPEAN.value,
    )
    parser.add_argument("--name", default="Default", help="asset name")


def _valuation(args) -> OptionValuation:
    contract = OptionContract.from_values(
        T=args.T,
        K=args.K,
        sig=args.sig,
        r=args.r,
        b=args.b,
        S=args.S,
        option_type=args.option_type,
        exercise_type=args.exercise,
        name=args.name,
    )
    return OptionValuation(contract)


def cmd_describe(args):
    print(_valuation(args).describe())


def cmd_point(args):
    val = _valuation(args)
    value = getattr(val, args.greek)()
    print(f"{args.greek}: {value:.10f}")


def cmd_sweep(args):
    val = _valuation(args)
    sweep = getattr(val, f"{args.greek}_sweep")
    values = sweep(args.factor, args.start, args.end, args.step)
    for x, y in zip(sweep_points(args.start, args.end, args.step), values):
        print(f"{x:.6g}\t{y:.10f}")


def cmd_approx(args):
    val = _valuation(args)
    print(f"approx delta: {val.approx_delta(args.h):.10f}")
    print(f"approx gamma: {val.approx_gamma(args.h):.10f}")


def cmd_parity(args):
    val = _valuation(args)
    contract = val.contract
    if contract.option_type is OptionType.PUT:
        contract.toggle()
    call = val.price()
    contract.toggle()
    put = val.price()
    f = contract.factors
    gap = put_call_parity_gap(
        call_price=call,
        put_price=put,
        T=f.expiry,
        K=f.strike,
        r=f.rate,
        b=f.carry,
        S=f.spot,
    )
    print(f"call: {call:.10f}")
    print(f"put:  {put:.10f}")
    print(f"put from call parity: {val.parity(call, OptionType.CALL):.10f}")
    print(f"parity holds: {val.parity_holds(call, put)}")
    print(f"cost-of-carry parity gap: {gap:.3e}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="option-analytics",
        description="Closed-form European and perpetual American option analytics",
    )
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="logging level (default: WARNING)",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    p_desc = sub.add_parser("describe", help="print the contract")
    add_common(p_desc)
    p_desc.set_defaults(func=cmd_describe)

    for greek in Greek:
        p_point = sub.add_parser(greek.value, help=f"{greek.value} of the contract")
        add_common(p_point)
        p_point.set_defaults(func=cmd_point, greek=greek.value)

    p_sweep = sub.add_parser("sweep", help="sweep one factor over a range")
    add_common(p_sweep)
    p_sweep.add_argument("--greek", choices=[g.value for g in Greek], default=Greek.PRICE.value)
    p_sweep.add_argument("--factor", required=True, help="T|K|SIG|R|B|S")
    p_sweep.add_argument("--start", type=float, required=True)
    p_sweep.add_argument("--end", type=float, required=True)
    p_sweep.add_argument("--step", type=float, required=True)
    p_sweep.set_defaults(func=cmd_sweep)

    p_approx = sub.add_parser("approx", help="finite-difference delta and gamma")
    add_common(p_approx)
    p_approx.add_argument("--h", type=float, default=None, help="spot bump")
    p_approx.set_defaults(func=cmd_approx)

    p_parity = sub.add_parser("parity", help="put-call parity check (European)")
    add_common(p_parity)
    p_parity.set_defaults(func=cmd_parity)

    args = p.parse_args(argv)
    logging.basicConfig(level=args.log_level)
    try:
        args.func(args)
    except OptionAnalyticsError as exc:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
