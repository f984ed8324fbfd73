from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from settlements.model import Instruction

MoneyLike = str | Decimal

_MONEY_Q = Decimal("0.01")


def _digits(value: Decimal) -> int:
    return len(value.as_tuple().digits)


def usd_amount(instruction: Instruction) -> Decimal:
    """USD value of an instruction: price_per_unit * agreed_fx * units.

    The context precision is widened to the operands' combined digit count so
    the product is exact and never depends on the caller's decimal context.
    """
    price = instruction.price_per_unit
    fx = instruction.agreed_fx
    units = Decimal(instruction.units)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits(price) + _digits(fx) + _digits(units))
        return price * fx * units


def quantize_money(value: Decimal, places: MoneyLike = _MONEY_Q) -> Decimal:
    """Round for display, half-up."""
    return value.quantize(Decimal(places), rounding=ROUND_HALF_UP)
