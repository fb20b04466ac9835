import logging
import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Mapping, Optional, Sequence

from .errors import InvalidInput, Reason
from .models import PriceBreakdown, PricingParameters

logger = logging.getLogger("pricer.pricing")

CENTS = Decimal("0.01")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _field(obj: Any, name: str) -> Any:
    # orders and items arrive either as dataclasses or as plain dicts
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _fail(reason: Reason, **details: Any) -> InvalidInput:
    logger.debug("invalid input: %s %s", reason.name, details)
    return InvalidInput(reason, details)


def calculate_subtotal(orders: Sequence[Any]) -> float:
    """Sum ``price * quantity`` over every item of every order.

    Orders are checked one at a time, so a bad order stops the sum before any
    later order is looked at.
    """
    subtotal = 0
    for order_index, order in enumerate(orders):
        items = _field(order, "items")
        if not _is_sequence(items):
            raise _fail(Reason.ITEMS_NOT_SEQUENCE, order_index=order_index)
        for item_index, item in enumerate(items):
            price = _field(item, "price")
            quantity = _field(item, "quantity")
            if not _is_number(price) or not _is_number(quantity):
                raise _fail(Reason.ITEM_NOT_NUMERIC, order_index=order_index, item_index=item_index)
            subtotal += price * quantity
    logger.info("subtotal=%s", subtotal)
    return subtotal


def apply_discount(subtotal: float, threshold: float, rate: float) -> float:
    """Return the discount amount; the threshold itself qualifies."""
    if subtotal >= threshold:
        return subtotal * rate
    return 0


def apply_tax(amount: float, rate: float) -> float:
    return amount * rate


def round_money(value: float) -> float:
    # toFixed hands back anything this large unrounded
    if not math.isfinite(value) or abs(value) >= 1e21:
        return float(value)
    return float(Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP))


def compute_breakdown(
    orders: Sequence[Any],
    discount_threshold: float,
    discount_rate: float,
    tax_rate: float,
) -> PriceBreakdown:
    if not _is_sequence(orders):
        raise _fail(Reason.ORDERS_NOT_SEQUENCE, type=type(orders).__name__)
    if not all(_is_number(v) for v in (discount_threshold, discount_rate, tax_rate)):
        raise _fail(Reason.PARAMETERS_NOT_NUMERIC)

    subtotal = calculate_subtotal(orders)
    discount = apply_discount(subtotal, discount_threshold, discount_rate)
    discounted_total = subtotal - discount
    tax = apply_tax(discounted_total, tax_rate)
    breakdown = PriceBreakdown(
        subtotal=subtotal,
        discount=discount,
        discounted_total=discounted_total,
        tax=tax,
        total=round_money(discounted_total + tax),
    )
    logger.debug("breakdown computed: %s", breakdown)
    return breakdown


def compute_total(
    orders: Sequence[Any],
    discount_threshold: float,
    discount_rate: float,
    tax_rate: float,
) -> float:
    """Total the orders, apply the threshold discount, then tax.

    Raises :class:`InvalidInput` on the first malformed argument, order or item.
    """
    return compute_breakdown(orders, discount_threshold, discount_rate, tax_rate).total


def price_orders(orders: Sequence[Any], params: Optional[PricingParameters] = None) -> float:
    params = params or PricingParameters()
    return compute_total(orders, params.discount_threshold, params.discount_rate, params.tax_rate)
