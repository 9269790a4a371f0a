"""
Exact Decimal arithmetic for monetary reconciliation.

Fees and taxes are rarely printed as a single line; they are derived from the
difference between stated gross and net lines. Every helper here works on
Decimal and propagates a missing input (None) to a missing output, so a field
that could not be located invalidates the record at the validator instead of
raising in the middle of a parser.

Amount convention:
    Buy       amount = gross value + fee
    Sell      amount = gross value - fee - tax
    Dividend  amount = gross payout, tax = gross payout - net payout
"""
from __future__ import annotations

from decimal import Decimal
from functools import wraps

ZERO = Decimal("0")
CENT = Decimal("0.01")


def _propagate_missing(func):
    @wraps(func)
    def wrapper(*args):
        if any(arg is None for arg in args):
            return None
        return func(*args)

    return wrapper


def total(*values: Decimal | None) -> Decimal:
    """Sum of the given values, missing ones count as zero."""
    result = ZERO
    for value in values:
        if value is not None:
            result += value
    return result


@_propagate_missing
def fee_from_totals(stated_total: Decimal, net_amount: Decimal) -> Decimal:
    """fee = |stated total - net amount|"""
    return abs(stated_total - net_amount)


@_propagate_missing
def dividend_tax(gross: Decimal, net: Decimal) -> Decimal:
    """tax = gross payout - net payout"""
    return gross - net


@_propagate_missing
def price_per_share(value: Decimal, shares: Decimal) -> Decimal | None:
    if not shares:
        return None
    return value / shares


@_propagate_missing
def buy_amount(value: Decimal, fee: Decimal) -> Decimal:
    return value + fee


@_propagate_missing
def sell_amount(value: Decimal, fee: Decimal, tax: Decimal) -> Decimal:
    return value - fee - tax


def apply_reduction(
    gross_value: Decimal | None,
    stated_total: Decimal | None,
    reduction: Decimal | None,
) -> tuple[Decimal | None, Decimal | None]:
    """
    Nets a purchase-surcharge reduction exactly once.

    The stated total already has the reduction deducted, so the reduction is
    taken off the gross value and the fee is derived from what remains:

        effective = gross - reduction
        fee       = |stated total - effective|

    which keeps amount = effective + fee = stated total.

    Returns:
        (effective gross value, fee)
    """
    if gross_value is None or stated_total is None:
        return None, None
    effective = gross_value - abs(reduction or ZERO)
    return effective, abs(stated_total - effective)


def reconciles(
    activity_type: str,
    price: Decimal,
    shares: Decimal,
    amount: Decimal,
    fee: Decimal = ZERO,
    tax: Decimal = ZERO,
    tolerance: Decimal = CENT,
) -> bool:
    """
    Checks the amount against price, shares, fee and tax.

    Buy:  price * shares + fee       ~ amount
    Sell: price * shares - fee - tax ~ amount
    Dividends are not checked, their price is derived from the payout.
    """
    kind = str(getattr(activity_type, "value", activity_type))
    gross = price * shares
    if kind == "Buy":
        expected = gross + fee
    elif kind == "Sell":
        expected = gross - fee - tax
    else:
        return True
    return abs(expected - amount) <= tolerance


def to_output(value: Decimal | None) -> float | None:
    """Boundary conversion to the native float used in serialized records."""
    if value is None:
        return None
    return float(value)


__all__ = [
    "ZERO",
    "CENT",
    "total",
    "fee_from_totals",
    "dividend_tax",
    "price_per_share",
    "buy_amount",
    "sell_amount",
    "apply_reduction",
    "reconciles",
    "to_output",
]
