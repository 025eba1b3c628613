class LotterySimError(Exception):
    """Base exception for the lottery simulator."""


class InsufficientBalanceError(LotterySimError, ValueError):
    """Raised when a purchase is attempted with a balance below its cost."""

    def __init__(self, balance: float, cost: float) -> None:
        self.balance = balance
        self.cost = cost
        super().__init__(f"Insufficient balance: {balance} < {cost}")
