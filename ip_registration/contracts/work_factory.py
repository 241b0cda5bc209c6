"""
WorkFactory contract wrapper.

The factory contract deploys two royalty-rights tokens and a work contract
per ``createWork`` call, with the caller as ledger.
"""

from typing import Any, Dict

from ..utils import normalize_address
from .base import ContractWrapper


class WorkFactoryContract(ContractWrapper):
    """Wrapper for the reference factory contract."""

    CONTRACT_NAME = "WorkFactory"

    def prepare_create_work(
        self,
        metadata_uri: str,
        file_hash: str,
        caller: str
    ) -> Dict[str, Any]:
        """
        Prepare a createWork call.

        Args:
            metadata_uri: Initial metadata URI of the new work
            file_hash: Content hash of the metadata file
            caller: Address sending the transaction; becomes the ledger

        Returns:
            Prepared function call data

        Raises:
            ValueError: If validation fails
        """
        if not metadata_uri:
            raise ValueError("Metadata URI is required")

        if not file_hash:
            raise ValueError("File hash is required")

        return self.prepare_transaction(
            "createWork",
            metadata_uri,
            file_hash,
            **{"from": normalize_address(caller, "caller address")}
        )

    def decode_work_deployed(self, log_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Extract the addresses announced by a WorkDeployed log.

        Returns:
            Dictionary with 'work' and 'royalty_rights_tokens'
        """
        data = self.decode_event("WorkDeployed", log_data)["data"]
        return {
            "work": data["work"],
            "royalty_rights_tokens": [data["royaltyToken1"], data["royaltyToken2"]],
        }

    def estimate_create_work_gas(
        self,
        metadata_uri: str,
        file_hash: str
    ) -> int:
        """
        Estimate gas for a createWork call.

        Args:
            metadata_uri: Initial metadata URI of the new work
            file_hash: Content hash of the metadata file

        Returns:
            Estimated gas amount
        """
        # Two token deployments and one work deployment
        per_token_gas = 1000000
        work_gas = 1500000
        string_gas = (len(metadata_uri) + len(file_hash)) * 1000

        return 2 * per_token_gas + work_gas + string_gas
