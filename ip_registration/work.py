"""
Reference implementation of a registered work.

A ``Work`` records its ledger and royalty-rights tokens at construction and
keeps a single mutable metadata pair, replaced only through
``change_metadata_uri``.
"""

import logging
from typing import Callable, Iterable, List, Optional

from .errors import NonTransferableError, UnauthorizedError
from .events import EventLog, MetadataChanged, Transfer, WorkCreated
from .interfaces import MetadataPair, OwnershipToken, WorkRegistration
from .utils import normalize_address

logger = logging.getLogger(__name__)

Authorizer = Callable[["Work", str], bool]


def only_ledger(work: "Work", caller: str) -> bool:
    """Allow metadata changes only from the work's ledger."""
    return caller == work.get_ledger()


def only_owner(work: "Work", caller: str) -> bool:
    """Allow metadata changes only from the current owner of the work token."""
    return caller == work.owner_of(work.token_id)


class Work(WorkRegistration, OwnershipToken):
    """
    A registered intellectual-property work.

    The work is itself a non-fungible token, initially owned by its ledger.
    Transfers are disabled unless ``transferable`` is set.

    Without an ``authorizer`` any caller may change the metadata pair.
    """

    def __init__(
        self,
        token_id: int,
        ledger: str,
        metadata_uri: str,
        file_hash: str,
        royalty_rights_tokens: Iterable[str],
        address: Optional[str] = None,
        event_log: Optional[EventLog] = None,
        authorizer: Optional[Authorizer] = None,
        transferable: bool = False,
    ):
        if not isinstance(token_id, int) or token_id < 0:
            raise ValueError(f"Token id must be a non-negative integer, got {token_id!r}")

        self._token_id = token_id
        self._ledger = normalize_address(ledger, "ledger address")
        self._royalty_rights_tokens = tuple(
            normalize_address(token, "royalty rights token address")
            for token in royalty_rights_tokens
        )
        self._metadata = MetadataPair(metadata_uri, file_hash)
        self._owner = self._ledger
        self.event_log = event_log if event_log is not None else EventLog()
        self.address = (
            normalize_address(address, "work address")
            if address else self.event_log.deploy_address(self._ledger)
        )
        self.authorizer = authorizer
        self.transferable = transferable

        self.event_log.emit(self.address, WorkCreated(
            token_id,
            self._ledger,
            metadata_uri,
            file_hash,
            self._royalty_rights_tokens,
        ))
        logger.info(
            "Registered work %d at %s for ledger %s with %d royalty rights tokens",
            token_id, self.address, self._ledger, len(self._royalty_rights_tokens),
        )

    @property
    def token_id(self) -> int:
        return self._token_id

    @property
    def metadata(self) -> MetadataPair:
        return self._metadata

    def get_royalty_rights_tokens(self) -> List[str]:
        return list(self._royalty_rights_tokens)

    def get_metadata_uri(self) -> str:
        return self._metadata.uri

    def get_metadata_hash(self) -> str:
        return self._metadata.file_hash

    def get_metadata(self) -> MetadataPair:
        return self._metadata

    def get_ledger(self) -> str:
        return self._ledger

    def change_metadata_uri(self, new_uri: str, new_file_hash: str, caller: str) -> None:
        """
        Replace the metadata pair and emit ``MetadataChanged``.

        The URI is not checked; the file it points at is expected to live in
        content-addressed storage, so new content always means a new URI.

        Raises:
            UnauthorizedError: If an authorizer is set and rejects the caller
        """
        caller = normalize_address(caller, "caller address")

        if self.authorizer is not None and not self.authorizer(self, caller):
            logger.warning("Rejected metadata change of work %d by %s", self._token_id, caller)
            raise UnauthorizedError(caller, self._token_id)

        old = self._metadata
        self._metadata = MetadataPair(new_uri, new_file_hash)
        self.event_log.emit(self.address, MetadataChanged(
            caller, old.uri, old.file_hash, new_uri, new_file_hash,
        ))
        logger.info("Work %d metadata changed from %s to %s", self._token_id, old.uri, new_uri)

    def owner_of(self, token_id: int) -> str:
        if token_id != self._token_id:
            raise ValueError(f"Unknown token id {token_id} for work {self._token_id}")
        return self._owner

    def transfer_from(self, sender: str, recipient: str, token_id: int) -> None:
        """
        Transfer ownership of the work token.

        Raises:
            NonTransferableError: If the work was created non-transferable
            ValueError: If ``sender`` is not the current owner
        """
        if not self.transferable:
            raise NonTransferableError(f"Work {self._token_id} is not transferable")

        sender = normalize_address(sender, "sender address")
        recipient = normalize_address(recipient, "recipient address")
        if sender != self.owner_of(token_id):
            raise ValueError(f"{sender} does not own work {token_id}")

        self._owner = recipient
        self.event_log.emit(self.address, Transfer(sender, recipient, token_id))
        logger.info("Work %d transferred from %s to %s", token_id, sender, recipient)

    def metadata_history(self) -> List[MetadataPair]:
        """Return every metadata pair this work has held, oldest first."""
        return self.event_log.metadata_history(self.address)

    def __repr__(self) -> str:
        return f"Work(token_id={self._token_id}, address={self.address!r}, uri={self._metadata.uri!r})"
