"""
Events emitted by registered works and royalty-rights tokens.

Events are recorded in an append-only ``EventLog``. The log is the only
place earlier metadata pairs survive: a work keeps just its current pair,
and its full history is rebuilt from ``WorkCreated`` plus every
``MetadataChanged`` emitted afterwards.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, NamedTuple, Optional, Tuple, Type

from web3 import Web3

from .errors import EventLogError
from .interfaces import MetadataPair
from .utils import derive_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """Base class for emitted events."""

    NAME = ""
    SIGNATURE = ""

    @classmethod
    def topic(cls) -> str:
        """Return the log topic of the event: keccak of its signature."""
        return Web3.to_hex(Web3.keccak(text=cls.SIGNATURE))


@dataclass(frozen=True)
class MetadataChanged(Event):
    caller: str
    old_uri: str
    old_file_hash: str
    new_uri: str
    new_file_hash: str

    NAME = "MetadataChanged"
    SIGNATURE = "MetadataChanged(address,string,string,string,string)"

    @property
    def old(self) -> MetadataPair:
        return MetadataPair(self.old_uri, self.old_file_hash)

    @property
    def new(self) -> MetadataPair:
        return MetadataPair(self.new_uri, self.new_file_hash)


@dataclass(frozen=True)
class WorkCreated(Event):
    token_id: int
    ledger: str
    metadata_uri: str
    file_hash: str
    royalty_rights_tokens: Tuple[str, ...]

    NAME = "WorkCreated"
    SIGNATURE = "WorkCreated(address,string,string,address[])"


@dataclass(frozen=True)
class Transfer(Event):
    sender: str
    recipient: str
    value: int

    NAME = "Transfer"
    SIGNATURE = "Transfer(address,address,uint256)"


class LogEntry(NamedTuple):
    index: int
    emitter: str
    event: Event


class EventLog:
    """Append-only record of emitted events."""

    def __init__(self):
        self._entries: List[LogEntry] = []
        self._nonces: Dict[str, int] = {}

    def deploy_address(self, deployer: str) -> str:
        """
        Allocate a fresh emitter address for something ``deployer`` creates.

        Addresses derive from the deployer and its deployment count in this
        log, so each call yields a new address.
        """
        nonce = self._nonces.get(deployer, 0)
        self._nonces[deployer] = nonce + 1
        return derive_address(deployer, nonce)

    def emit(self, emitter: str, event: Event) -> LogEntry:
        """
        Append an event.

        Raises:
            EventLogError: If ``event`` is a WorkCreated and ``emitter``
                already has one in this log
        """
        if isinstance(event, WorkCreated) and self.entries(WorkCreated, emitter):
            raise EventLogError(f"Work already created at {emitter}")

        entry = LogEntry(len(self._entries), emitter, event)
        self._entries.append(entry)
        logger.debug("Event %s #%d from %s", event.NAME, entry.index, emitter)
        return entry

    def __iter__(self) -> Iterator[LogEntry]:
        return iter(tuple(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def entries(
        self,
        event_type: Optional[Type[Event]] = None,
        emitter: Optional[str] = None,
    ) -> List[LogEntry]:
        """
        Return log entries, optionally filtered.

        Args:
            event_type: Only entries whose event is an instance of this type
            emitter: Only entries emitted by this address
        """
        return [
            entry for entry in self._entries
            if (event_type is None or isinstance(entry.event, event_type))
            and (emitter is None or entry.emitter == emitter)
        ]

    def events(self, event_type: Optional[Type[Event]] = None, emitter: Optional[str] = None) -> List[Event]:
        return [entry.event for entry in self.entries(event_type, emitter)]

    def metadata_history(self, emitter: str) -> List[MetadataPair]:
        """
        Rebuild every metadata pair a work has held, oldest first.

        Args:
            emitter: Address of the work

        Returns:
            The creation pair followed by the pair set by each change

        Raises:
            EventLogError: If the work has no creation event, or a change's
                old pair does not match the pair before it
        """
        created = self.events(WorkCreated, emitter)
        if not created:
            raise EventLogError(f"No WorkCreated event for {emitter}")

        first = created[0]
        history = [MetadataPair(first.metadata_uri, first.file_hash)]

        for event in self.events(MetadataChanged, emitter):
            if event.old != history[-1]:
                raise EventLogError(
                    f"MetadataChanged for {emitter} expected old pair "
                    f"{tuple(history[-1])}, got {tuple(event.old)}"
                )
            history.append(event.new)

        return history
