"""
Factory binding new royalty-rights tokens to a new work.

Each ``create_work`` call mints one token per royalty category (by default
composition and recording rights, as for a musical work) and registers a
work pointing at them.
"""

import logging
from typing import Dict, List, Optional, Sequence

from .events import EventLog
from .token import RoyaltyRightsToken
from .utils import ZERO_ADDRESS, normalize_address
from .work import Authorizer, Work

logger = logging.getLogger(__name__)

DEFAULT_ROYALTY_CATEGORIES = ("Composition", "Recording")
DEFAULT_SUPPLY = 10000 * 10 ** 18


class WorkFactory:
    """Creates works together with their royalty-rights tokens."""

    def __init__(
        self,
        event_log: Optional[EventLog] = None,
        authorizer: Optional[Authorizer] = None,
        default_supply: int = DEFAULT_SUPPLY,
        deployer: str = ZERO_ADDRESS,
    ):
        self.event_log = event_log if event_log is not None else EventLog()
        self.address = self.event_log.deploy_address(
            normalize_address(deployer, "deployer address")
        )
        self.authorizer = authorizer
        self.default_supply = default_supply
        self._works: Dict[int, Work] = {}
        self._tokens: Dict[int, List[RoyaltyRightsToken]] = {}

    def create_work(
        self,
        ledger: str,
        metadata_uri: str,
        file_hash: str,
        royalty_categories: Sequence[str] = DEFAULT_ROYALTY_CATEGORIES,
        supply: Optional[int] = None,
    ) -> Work:
        """
        Mint royalty-rights tokens and register a work bound to them.

        Args:
            ledger: Registrant; receives the work token and every token supply
            metadata_uri: Initial metadata URI
            file_hash: Content hash of the metadata file
            royalty_categories: One token is minted per category, in order
            supply: Supply of each token (defaults to ``default_supply``)

        Returns:
            The new work
        """
        ledger = normalize_address(ledger, "ledger address")
        if len(set(royalty_categories)) != len(royalty_categories):
            raise ValueError("Duplicate royalty categories not allowed")

        token_id = len(self._works)
        supply = self.default_supply if supply is None else supply

        tokens = [
            RoyaltyRightsToken(
                f"{category} Rights #{token_id}",
                f"{category[:4].upper()}{token_id}",
                supply,
                ledger,
                address=self.event_log.deploy_address(self.address),
                event_log=self.event_log,
            )
            for category in royalty_categories
        ]

        work = Work(
            token_id,
            ledger,
            metadata_uri,
            file_hash,
            [token.address for token in tokens],
            address=self.event_log.deploy_address(self.address),
            event_log=self.event_log,
            authorizer=self.authorizer,
        )

        self._works[token_id] = work
        self._tokens[token_id] = tokens
        logger.info("Factory %s created work %d with %d tokens", self.address, token_id, len(tokens))
        return work

    def get_work(self, token_id: int) -> Work:
        """
        Raises:
            KeyError: If no work with this id was created here
        """
        return self._works[token_id]

    def get_tokens(self, token_id: int) -> List[RoyaltyRightsToken]:
        return list(self._tokens[token_id])

    def works(self) -> List[Work]:
        return list(self._works.values())

    def __len__(self) -> int:
        return len(self._works)
