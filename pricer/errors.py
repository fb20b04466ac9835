from enum import Enum
from typing import Any, Dict, Optional


class Reason(Enum):
    ORDERS_NOT_SEQUENCE = "orders must be an array"
    PARAMETERS_NOT_NUMERIC = "Threshold and rates must be numbers"
    ITEMS_NOT_SEQUENCE = "Each order must have an items array"
    ITEM_NOT_NUMERIC = "Item price and quantity must be numbers"


class InvalidInput(ValueError):
    """Raised when pricing input has the wrong shape.

    ``reason`` tells which rule failed; ``str(exc)`` is the rule's message.
    """

    def __init__(self, reason: Reason, details: Optional[Dict[str, Any]] = None):
        super().__init__(reason.value)
        self.reason = reason
        self.message = reason.value
        self.details = details or {}
