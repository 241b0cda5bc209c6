"""
WorkRegistration contract wrapper for deployment and interaction.

This module provides a high-level interface for deploying the reference
work contract and preparing calls against it.
"""

from typing import Any, Dict

from ..events import MetadataChanged, WorkCreated
from ..utils import normalize_address
from .base import ContractWrapper


class WorkRegistrationContract(ContractWrapper):
    """
    Wrapper for the reference work contract.

    The contract records a ledger and two royalty-rights tokens at
    deployment and exposes the work registration interface.
    """

    CONTRACT_NAME = "WorkRegistration"

    def encode_constructor_params(
        self,
        ledger: str,
        metadata_uri: str,
        file_hash: str,
        royalty_token_1: str,
        royalty_token_2: str
    ) -> Dict[str, Any]:
        """
        Encode constructor parameters for deployment.

        Args:
            ledger: Registrant address
            metadata_uri: Initial metadata URI (e.g. "ipfs://...")
            file_hash: Content hash of the metadata file
            royalty_token_1: First royalty-rights token address
            royalty_token_2: Second royalty-rights token address

        Returns:
            Dictionary of constructor parameters

        Raises:
            ValueError: If validation fails
        """
        if not metadata_uri:
            raise ValueError("Metadata URI is required")

        if not file_hash:
            raise ValueError("File hash is required")

        ledger = normalize_address(ledger, "ledger address")
        token_1 = normalize_address(royalty_token_1, "royalty token address")
        token_2 = normalize_address(royalty_token_2, "royalty token address")

        if token_1 == token_2:
            raise ValueError("Royalty tokens must be distinct")

        return {
            "_ledger": ledger,
            "_metadataURI": metadata_uri,
            "_fileHash": file_hash,
            "_royaltyToken1": token_1,
            "_royaltyToken2": token_2,
        }

    def get_deployment_data(
        self,
        ledger: str,
        metadata_uri: str,
        file_hash: str,
        royalty_token_1: str,
        royalty_token_2: str
    ) -> Dict[str, Any]:
        """
        Get complete deployment data for the work contract.

        Returns:
            Dictionary with bytecode, ABI and encoded constructor args
        """
        constructor_args = self.encode_constructor_params(
            ledger, metadata_uri, file_hash, royalty_token_1, royalty_token_2
        )
        return super().get_deployment_data(**constructor_args)

    def prepare_change_metadata_uri(
        self,
        new_uri: str,
        new_file_hash: str,
        caller: str
    ) -> Dict[str, Any]:
        """
        Prepare a changeMetadataURI call.

        Note: the reference contract accepts the call from any address.

        Args:
            new_uri: New metadata URI
            new_file_hash: Content hash of the new metadata file
            caller: Address sending the transaction

        Returns:
            Prepared function call data
        """
        return self.prepare_transaction(
            "changeMetadataURI",
            new_uri,
            new_file_hash,
            **{"from": normalize_address(caller, "caller address")}
        )

    def decode_metadata_changed(self, log_data: Dict[str, Any]) -> MetadataChanged:
        """Turn decoded MetadataChanged log arguments into an event."""
        data = self.decode_event(MetadataChanged.NAME, log_data)["data"]
        return MetadataChanged(
            data["changer"],
            data["oldURI"],
            data["oldFileHash"],
            data["newURI"],
            data["newFileHash"],
        )

    def decode_work_created(self, log_data: Dict[str, Any], token_id: int = 0) -> WorkCreated:
        """Turn decoded WorkCreated log arguments into an event."""
        data = self.decode_event(WorkCreated.NAME, log_data)["data"]
        return WorkCreated(
            token_id,
            data["ledger"],
            data["metadataURI"],
            data["fileHash"],
            tuple(data["royaltyRightsTokens"]),
        )

    def estimate_deployment_gas(
        self,
        metadata_uri: str,
        file_hash: str
    ) -> int:
        """
        Estimate gas for deployment.

        Args:
            metadata_uri: Initial metadata URI
            file_hash: Content hash of the metadata file

        Returns:
            Estimated gas amount
        """
        # Base gas for the work contract (ERC721 plus registration fields)
        base_gas = 1500000

        # Additional gas for string storage
        string_gas = (len(metadata_uri) + len(file_hash)) * 1000

        return base_gas + string_gas
