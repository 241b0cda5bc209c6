"""
Capability interfaces for registered works and their collaborators.

A registered work is anything exposing the ``WorkRegistration`` capability
set. Royalty-rights tokens and the work's own ownership token are external
standards, described here only by the capabilities callers rely on.

Each capability set carries an ``InterfaceSpec`` whose id is the XOR of its
function selectors, so implementations can be introspected with
``supports_interface`` the same way on-chain contracts are.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import reduce
from typing import List, NamedTuple, Tuple, Union

from web3 import Web3

from .utils import selector, to_interface_id


@dataclass(frozen=True)
class InterfaceSpec:
    """A named set of Solidity function signatures."""

    name: str
    functions: Tuple[str, ...]

    @property
    def interface_id(self) -> bytes:
        selectors = [int.from_bytes(selector(sig), 'big') for sig in self.functions]
        return reduce(lambda a, b: a ^ b, selectors, 0).to_bytes(4, 'big')

    @property
    def interface_id_hex(self) -> str:
        return Web3.to_hex(self.interface_id)


INTROSPECTION = InterfaceSpec("IERC165", ("supportsInterface(bytes4)",))

WORK_REGISTRATION = InterfaceSpec(
    "IWorkRegistration",
    (
        "getRoyaltyRightsTokens()",
        "getMetadataURI()",
        "changeMetadataURI(string,string)",
        "getLedger()",
    ),
)

FUNGIBLE_TOKEN = InterfaceSpec(
    "IFungibleToken",
    (
        "balanceOf(address)",
        "totalSupply()",
        "transfer(address,uint256)",
    ),
)

OWNERSHIP_TOKEN = InterfaceSpec(
    "IOwnershipToken",
    (
        "ownerOf(uint256)",
        "transferFrom(address,address,uint256)",
    ),
)


class MetadataPair(NamedTuple):
    """Location and content hash of a work's metadata file."""

    uri: str
    file_hash: str


class SupportsInterface:
    """
    Capability introspection.

    Classes declare the capability set they add through an ``INTERFACE``
    class attribute; every set declared along the MRO is reported.
    """

    INTERFACE = INTROSPECTION

    @classmethod
    def declared_interfaces(cls) -> List[InterfaceSpec]:
        found = []
        for klass in cls.__mro__:
            spec = klass.__dict__.get('INTERFACE')
            if spec is not None and spec not in found:
                found.append(spec)
        return found

    def supports_interface(self, interface_id: Union[str, bytes, int]) -> bool:
        wanted = to_interface_id(interface_id)
        if wanted == b'\xff\xff\xff\xff':
            return False
        return any(spec.interface_id == wanted for spec in self.declared_interfaces())


class WorkRegistration(SupportsInterface, ABC):
    """Capability set every registered intellectual-property work exposes."""

    INTERFACE = WORK_REGISTRATION

    @abstractmethod
    def get_royalty_rights_tokens(self) -> List[str]:
        """Return the ordered royalty-rights token addresses."""

    @abstractmethod
    def get_metadata_uri(self) -> str:
        """Return the current metadata URI."""

    @abstractmethod
    def get_metadata_hash(self) -> str:
        """Return the content hash paired with the current metadata URI."""

    @abstractmethod
    def change_metadata_uri(self, new_uri: str, new_file_hash: str, caller: str) -> None:
        """Replace the metadata pair and emit ``MetadataChanged``."""

    @abstractmethod
    def get_ledger(self) -> str:
        """Return the registrant recorded when the work was created."""

    def get_metadata(self) -> MetadataPair:
        return MetadataPair(self.get_metadata_uri(), self.get_metadata_hash())


class FungibleToken(SupportsInterface, ABC):
    """Fungible ownership shares, as used by royalty-rights tokens."""

    INTERFACE = FUNGIBLE_TOKEN

    @abstractmethod
    def balance_of(self, account: str) -> int:
        pass

    @abstractmethod
    def total_supply(self) -> int:
        pass

    @abstractmethod
    def transfer(self, sender: str, recipient: str, amount: int) -> bool:
        pass


class OwnershipToken(SupportsInterface, ABC):
    """Non-fungible identity and ownership of a single token."""

    INTERFACE = OWNERSHIP_TOKEN

    @abstractmethod
    def owner_of(self, token_id: int) -> str:
        pass

    @abstractmethod
    def transfer_from(self, sender: str, recipient: str, token_id: int) -> None:
        pass
