import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from .errors import InvalidInput, Reason

Number = Union[int, float]


@dataclass(frozen=True)
class Item:
    name: str
    price: Number
    quantity: Number = 1

    def line_total(self) -> Number:
        return self.price * self.quantity


@dataclass(frozen=True)
class Order:
    id: Optional[object] = None
    items: List[Item] = field(default_factory=list)

    def to_dict(self) -> Dict[str, object]:
        return {
            "orderId": self.id,
            "items": [
                {"name": i.name, "price": i.price, "quantity": i.quantity}
                for i in self.items
            ],
        }


def _env_number(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidInput(Reason.PARAMETERS_NOT_NUMERIC, {"variable": name, "value": raw}) from None


@dataclass(frozen=True)
class PricingParameters:
    discount_threshold: Number = 1000
    discount_rate: float = 0.1  # fraction, 0.1 == 10%
    tax_rate: float = 0.1

    @classmethod
    def from_env(cls) -> "PricingParameters":
        """Build parameters from PRICER_* environment variables, falling back to defaults."""
        defaults = cls()
        return cls(
            discount_threshold=_env_number("PRICER_DISCOUNT_THRESHOLD", defaults.discount_threshold),
            discount_rate=_env_number("PRICER_DISCOUNT_RATE", defaults.discount_rate),
            tax_rate=_env_number("PRICER_TAX_RATE", defaults.tax_rate),
        )


@dataclass(frozen=True)
class PriceBreakdown:
    subtotal: Number
    discount: Number
    discounted_total: Number
    tax: Number
    total: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "subtotal": self.subtotal,
            "discount": self.discount,
            "discounted_total": self.discounted_total,
            "tax": self.tax,
            "total": self.total,
        }
