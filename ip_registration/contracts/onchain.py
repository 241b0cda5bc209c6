"""
Work registration backed by a deployed contract.

``OnChainWork`` exposes the same capability set as the in-memory ``Work``
by calling a web3 contract object built from the ``WorkRegistration`` ABI.
"""

import logging
from typing import Any, List, Optional, Union

from web3 import Web3

from ..artifacts.loader import get_abi
from ..config import Settings, get_settings
from ..errors import RegistrationError
from ..events import MetadataChanged
from ..interfaces import WorkRegistration
from ..utils import normalize_address, to_interface_id
from .work_registration import WorkRegistrationContract

logger = logging.getLogger(__name__)


class OnChainWork(WorkRegistration):
    """
    Registered work living on chain.

    Built for the reference work contract. Other implementers can be bound
    with the bare ``IWorkRegistration`` ABI, which has no ``fileHash``
    getter, so ``get_metadata_hash`` is unavailable for them.

    Args:
        contract: web3 contract bound to the work's address
        receipt_timeout: Seconds to wait for a mutation to be mined
    """

    def __init__(self, contract: Any, receipt_timeout: int = 120):
        self.contract = contract
        self.receipt_timeout = receipt_timeout
        self.last_receipt: Optional[Any] = None
        self._wrapper = WorkRegistrationContract()

    @classmethod
    def connect(
        cls,
        w3: Web3,
        address: str,
        contract_name: str = WorkRegistrationContract.CONTRACT_NAME,
        **kwargs
    ) -> "OnChainWork":
        """
        Bind to a deployed work contract through an existing Web3 instance.

        Args:
            w3: Connected Web3 instance
            address: Address of the work contract
            contract_name: Artifact whose ABI the contract is bound with
        """
        contract = w3.eth.contract(
            address=normalize_address(address, "contract address"),
            abi=get_abi(contract_name),
        )
        return cls(contract, **kwargs)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None, **kwargs) -> "OnChainWork":
        """
        Bind to the contract named by the configured address and RPC URL.

        Raises:
            ValueError: If no contract address is configured
        """
        settings = settings or get_settings()
        if not settings.contract_address:
            raise ValueError("IP_REGISTRATION_CONTRACT_ADDRESS is not set")
        return cls.connect(settings.web3(), settings.contract_address, **kwargs)

    @property
    def address(self) -> str:
        return self.contract.address

    def get_royalty_rights_tokens(self) -> List[str]:
        return list(self.contract.functions.getRoyaltyRightsTokens().call())

    def get_metadata_uri(self) -> str:
        return self.contract.functions.getMetadataURI().call()

    def get_metadata_hash(self) -> str:
        """
        Read the public ``fileHash`` field of the reference work contract.

        Raises:
            RegistrationError: If the bound ABI has no ``fileHash`` getter
        """
        if not hasattr(self.contract.functions, "fileHash"):
            raise RegistrationError(
                f"Contract at {self.address} exposes no fileHash getter; "
                "the hash is only available from MetadataChanged events"
            )
        return self.contract.functions.fileHash().call()

    def get_ledger(self) -> str:
        return self.contract.functions.getLedger().call()

    def change_metadata_uri(self, new_uri: str, new_file_hash: str, caller: str) -> None:
        """
        Send changeMetadataURI from ``caller`` and wait for it to be mined.

        The receipt is kept in ``last_receipt``; ``metadata_changes`` decodes
        the emitted event from it.
        """
        prepared = self._wrapper.prepare_change_metadata_uri(new_uri, new_file_hash, caller)
        function = getattr(self.contract.functions, prepared["function"])
        tx_hash = function(*prepared["args"]).transact(prepared["transaction"])
        self.last_receipt = self.contract.w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=self.receipt_timeout
        )
        logger.info(
            "Metadata of %s changed to %s by %s (tx %s)",
            self.address, new_uri, prepared["transaction"]["from"], Web3.to_hex(tx_hash),
        )

    def metadata_changes(self, receipt: Optional[Any] = None) -> List[MetadataChanged]:
        """Decode MetadataChanged events from a receipt (default: the last one)."""
        receipt = receipt if receipt is not None else self.last_receipt
        if receipt is None:
            return []

        logs = self.contract.events.MetadataChanged().process_receipt(receipt)
        return [self._wrapper.decode_metadata_changed(dict(log["args"])) for log in logs]

    def supports_interface(self, interface_id: Union[str, bytes, int]) -> bool:
        return bool(
            self.contract.functions.supportsInterface(to_interface_id(interface_id)).call()
        )
