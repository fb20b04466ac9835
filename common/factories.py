from dataclasses import dataclass
from typing import Dict, List

from pricer.models import Item, Order


@dataclass(frozen=True)
class Defaults:
    base_price: float = 10.0
    quantity: int = 1


def make_item(name: str = "Item", price: float = Defaults.base_price, quantity: int = Defaults.quantity) -> Item:
    return Item(name=name, price=price, quantity=quantity)


def make_order(order_id: int = 1, items: List[Item] = None) -> Order:
    return Order(id=order_id, items=list(items or []))


def make_orders(n: int = 1, items_per_order: int = 1, base: float = Defaults.base_price) -> List[Order]:
    return [
        make_order(o + 1, [make_item(f"SKU-{o}-{i}", base + i) for i in range(items_per_order)])
        for o in range(n)
    ]


def sample_orders() -> List[Dict[str, object]]:
    # 小计 = 1000*1 + 50*2 + 80*1 + 300*2 = 1780
    return [
        {
            "orderId": 1,
            "items": [
                {"name": "Laptop", "price": 1000, "quantity": 1},
                {"name": "Mouse", "price": 50, "quantity": 2},
            ],
        },
        {
            "orderId": 2,
            "items": [
                {"name": "Keyboard", "price": 80, "quantity": 1},
                {"name": "Monitor", "price": 300, "quantity": 2},
            ],
        },
    ]
