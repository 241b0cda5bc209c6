"""
Demonstration royalty-rights token.

Holds a fixed supply minted to a single holder at construction. It exists
to give the factory something concrete to bind to a work; any token
exposing ``FungibleToken`` can be used instead.
"""

import logging
from typing import Dict, Optional

from .errors import InsufficientBalanceError
from .events import EventLog, Transfer
from .interfaces import FungibleToken
from .utils import ZERO_ADDRESS, normalize_address

logger = logging.getLogger(__name__)


class RoyaltyRightsToken(FungibleToken):
    """Fungible claim on one category of a work's royalty income."""

    def __init__(
        self,
        name: str,
        symbol: str,
        supply: int,
        holder: str,
        decimals: int = 18,
        address: Optional[str] = None,
        event_log: Optional[EventLog] = None,
    ):
        if not name:
            raise ValueError("Token name is required")

        if not symbol:
            raise ValueError("Token symbol is required")

        if decimals < 0 or decimals > 18:
            raise ValueError("Decimals must be between 0 and 18")

        if supply <= 0:
            raise ValueError("Total supply must be greater than 0")

        self.name = name
        self.symbol = symbol
        self.decimals = decimals
        self._supply = supply
        holder = normalize_address(holder, "holder address")
        self._balances: Dict[str, int] = {holder: supply}
        self.event_log = event_log if event_log is not None else EventLog()
        self.address = (
            normalize_address(address, "token address")
            if address else self.event_log.deploy_address(holder)
        )

        self.event_log.emit(self.address, Transfer(ZERO_ADDRESS, holder, supply))
        logger.info("Minted %d %s to %s at %s", supply, symbol, holder, self.address)

    def balance_of(self, account: str) -> int:
        return self._balances.get(normalize_address(account, "account address"), 0)

    def total_supply(self) -> int:
        return self._supply

    def transfer(self, sender: str, recipient: str, amount: int) -> bool:
        """
        Move ``amount`` units from ``sender`` to ``recipient``.

        Raises:
            ValueError: If the amount is negative
            InsufficientBalanceError: If the sender holds less than ``amount``
        """
        if amount < 0:
            raise ValueError("Transfer amount must not be negative")

        sender = normalize_address(sender, "sender address")
        recipient = normalize_address(recipient, "recipient address")
        balance = self._balances.get(sender, 0)
        if balance < amount:
            raise InsufficientBalanceError(
                f"{sender} holds {balance} {self.symbol}, cannot transfer {amount}"
            )

        self._balances[sender] = balance - amount
        self._balances[recipient] = self._balances.get(recipient, 0) + amount
        self.event_log.emit(self.address, Transfer(sender, recipient, amount))
        return True

    def __repr__(self) -> str:
        return f"RoyaltyRightsToken({self.symbol!r}, address={self.address!r})"
