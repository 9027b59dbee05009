from __future__ import annotations

"""
nat CLI

Evaluate one natural number operation and print the result.

    python3 -m natural_numbers.nat_cli add 2 3            -> 5
    python3 -m natural_numbers.nat_cli pred 0             -> none
    python3 -m natural_numbers.nat_cli succ "S(S(0))" --json --pretty
    python3 -m natural_numbers.nat_cli succ 4294967295 --overflow wrap

Operands use the natural_numbers.parser literal syntax.

Contract (--json): emits JSON with schema tag + schema_doc.
"""

import argparse
import json
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple

from natural_numbers.config import OverflowPolicy, overflow_policy, overflow_policy_override
from natural_numbers.core.u32 import U32Nat
from natural_numbers.errors import NatError
from natural_numbers.parser import parse_nat
from natural_numbers.pretty import pretty_nat


SCHEMA_TAG = "nat-eval.v1"
SCHEMA_DOC = "docs/nat_eval_schema.md"
SCHEMA_JSON = "docs/schemas/nat_eval_schema.json"

# op name -> (arity, evaluator)
OPS: Dict[str, Tuple[int, Callable[..., Any]]] = {
    "value": (1, lambda a: a),
    "succ": (1, lambda a: a.succ()),
    "pred": (1, lambda a: a.pred()),
    "add": (2, lambda a, b: a.add(b)),
    "is-zero": (1, lambda a: a.is_zero()),
}


def _emit(payload: dict[str, Any], pretty: bool) -> None:
    if pretty:
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print(json.dumps(payload, ensure_ascii=False))


def _render(result: Any) -> Tuple[Any, Optional[str]]:
    """(JSON result, pretty form) for an op result."""
    if result is None:
        return None, None
    if isinstance(result, bool):
        return result, None
    return result.value(), pretty_nat(result)


def _text(result: Any) -> str:
    if result is None:
        return "none"
    if isinstance(result, bool):
        return "true" if result else "false"
    return str(result.value())


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(
        prog="nat",
        description="Evaluate a natural number operation (value, succ, pred, add, is-zero).",
    )
    ap.add_argument("--schema", action="store_true", help="Print schema tag + schema doc paths and exit.")
    ap.add_argument("--json", action="store_true", help="Emit a JSON payload instead of plain text.")
    ap.add_argument("--pretty", action="store_true", help="Pretty-print JSON output (implies --json).")
    ap.add_argument(
        "--overflow",
        choices=[p.value for p in OverflowPolicy],
        default=None,
        help="Overflow policy for succ/add at the maximum (default: $NAT_OVERFLOW or 'raise').",
    )
    ap.add_argument("op", nargs="?", choices=sorted(OPS), help="Operation to evaluate.")
    ap.add_argument("operands", nargs="*", help='Operands, e.g. 5, zero, "S(S(0))", "S^3(0)".')

    args = ap.parse_args(argv)

    if args.schema:
        print(f"{SCHEMA_TAG} {SCHEMA_DOC} {SCHEMA_JSON}")
        return 0

    if not args.op:
        ap.error("op is required unless --schema is used")

    arity, fn = OPS[args.op]
    if len(args.operands) != arity:
        ap.error(f"{args.op} takes {arity} operand(s), got {len(args.operands)}")

    try:
        policy = OverflowPolicy(args.overflow) if args.overflow else overflow_policy()
    except ValueError as e:
        print(f"nat: {e}", file=sys.stderr)
        return 2

    as_json = bool(args.json or args.pretty)

    with overflow_policy_override(policy):
        try:
            xs = [parse_nat(text, U32Nat) for text in args.operands]
        except (ValueError, TypeError, NatError) as e:
            print(f"nat: invalid input: {e}", file=sys.stderr)
            return 2

        warnings: List[str] = []
        try:
            result = fn(*xs)
            ok = True
        except NatError as e:
            result = None
            ok = False
            warnings.append(str(e))

    if not as_json:
        if not ok:
            print(f"nat: {warnings[0]}", file=sys.stderr)
            return 1
        print(_text(result))
        return 0

    out, shown = _render(result) if ok else (None, None)
    payload: dict[str, Any] = {
        "schema": SCHEMA_TAG,
        "schema_doc": SCHEMA_DOC,
        "op": args.op,
        "args": [x.value() for x in xs],
        "result": out,
        "pretty": shown,
        "ok": ok,
        "warnings": warnings,
        "meta": {
            "tool": "nat_cli",
            "overflow_policy": policy.value,
        },
    }
    _emit(payload, pretty=bool(args.pretty))
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
