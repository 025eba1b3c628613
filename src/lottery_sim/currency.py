"""Balance arithmetic for ticket purchases.

All functions are pure. deduct_balance is the one place that raises: a
purchase without enough balance is a caller bug, not bad stored data.
"""

from __future__ import annotations

from .exceptions import InsufficientBalanceError


def can_purchase(balance: float, cost: float) -> bool:
    return balance >= cost


def deduct_balance(balance: float, cost: float) -> float:
    """Return balance - cost.

    Raises:
        InsufficientBalanceError: if balance < cost.
    """
    if balance < cost:
        raise InsufficientBalanceError(balance, cost)
    return balance - cost


def add_winnings(balance: float, winnings: float) -> float:
    return balance + winnings


def calculate_draw_cost(ticket_price: int, count: int) -> int:
    return ticket_price * count
