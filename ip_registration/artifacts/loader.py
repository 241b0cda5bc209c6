"""
Artifact loader for the work registration contracts.

This module provides functions to load ABI, bytecode, and other metadata
from the Hardhat-style contract artifacts shipped with the package.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional

from web3 import Web3

from ..config import get_settings

# Get the package root directory
PACKAGE_DIR = Path(__file__).parent.parent
# Artifacts are shipped with the package at this location
ARTIFACTS_DIR = PACKAGE_DIR / "data" / "artifacts"

# Contract name mappings
CONTRACT_PATHS = {
    "WorkRegistration": "WorkRegistration.sol/WorkRegistration.json",
    "WorkFactory": "WorkFactory.sol/WorkFactory.json",
    "RoyaltyRightsToken": "RoyaltyRightsToken.sol/RoyaltyRightsToken.json",
    "IWorkRegistration": "interfaces/IWorkRegistration.sol/IWorkRegistration.json",
}


def get_artifacts_dir() -> Path:
    """Return the artifacts directory, honouring the configured override."""
    override = get_settings().artifacts_dir
    if override:
        return Path(override)
    return ARTIFACTS_DIR


def load_artifact(contract_name: str) -> Dict[str, Any]:
    """
    Load the complete artifact JSON for a contract.

    Args:
        contract_name: Name of the contract (e.g., 'WorkRegistration')

    Returns:
        Complete artifact dictionary including ABI, bytecode, and metadata

    Raises:
        FileNotFoundError: If the artifact file doesn't exist
        ValueError: If the contract name is not recognized
    """
    if contract_name not in CONTRACT_PATHS:
        available = ", ".join(CONTRACT_PATHS.keys())
        raise ValueError(
            f"Unknown contract: {contract_name}. "
            f"Available contracts: {available}"
        )

    artifact_path = get_artifacts_dir() / CONTRACT_PATHS[contract_name]

    if not artifact_path.exists():
        raise FileNotFoundError(f"Artifact file not found: {artifact_path}")

    with open(artifact_path, 'r') as f:
        return json.load(f)


def get_abi(contract_name: str) -> list:
    """
    Get the ABI for a specific contract.

    Args:
        contract_name: Name of the contract

    Returns:
        Contract ABI as a list
    """
    artifact = load_artifact(contract_name)
    return artifact.get('abi', [])


def get_bytecode(contract_name: str) -> str:
    """
    Get the deployment bytecode for a specific contract.

    Returns:
        Bytecode as a hex string ('0x' when the artifact carries none)
    """
    artifact = load_artifact(contract_name)
    return artifact.get('bytecode', '0x')


def get_deployed_bytecode(contract_name: str) -> str:
    artifact = load_artifact(contract_name)
    return artifact.get('deployedBytecode', '0x')


def get_contract_metadata(contract_name: str) -> Dict[str, Any]:
    """
    Get metadata about the contract artifact.

    Args:
        contract_name: Name of the contract

    Returns:
        Dictionary containing names, format and the ABI entry counts
    """
    artifact = load_artifact(contract_name)
    abi = artifact.get('abi', [])

    return {
        'contractName': artifact.get('contractName'),
        'sourceName': artifact.get('sourceName'),
        'format': artifact.get('_format'),
        'functions': sorted(
            item['name'] for item in abi if item.get('type') == 'function'
        ),
        'events': sorted(
            item['name'] for item in abi if item.get('type') == 'event'
        ),
    }


def _abi_signature(item: Dict[str, Any]) -> str:
    inputs = ','.join(inp['type'] for inp in item.get('inputs', []))
    return f"{item['name']}({inputs})"


def _find_abi_item(contract_name: str, item_type: str, name: str) -> Optional[Dict[str, Any]]:
    for item in get_abi(contract_name):
        if item.get('type') == item_type and item.get('name') == name:
            return item
    return None


def get_function_selector(contract_name: str, function_name: str) -> Optional[str]:
    """
    Get the function selector (4-byte signature) for a specific function.

    Args:
        contract_name: Name of the contract
        function_name: Name of the function

    Returns:
        Function selector as a '0x' hex string, or None if not found
    """
    item = _find_abi_item(contract_name, 'function', function_name)
    if item is None:
        return None
    return Web3.to_hex(Web3.keccak(text=_abi_signature(item))[:4])


def get_event_topic(contract_name: str, event_name: str) -> Optional[str]:
    """
    Get the log topic (keccak of the event signature) for an event.

    Returns:
        Topic as a '0x' hex string, or None if the event is not in the ABI
    """
    item = _find_abi_item(contract_name, 'event', event_name)
    if item is None:
        return None
    return Web3.to_hex(Web3.keccak(text=_abi_signature(item)))


def list_available_contracts() -> list:
    """
    List all available contracts in the package.

    Returns:
        List of contract names
    """
    return list(CONTRACT_PATHS.keys())


def validate_artifacts() -> Dict[str, bool]:
    """
    Validate that all expected artifacts are present.

    Returns:
        Dictionary mapping contract names to availability status
    """
    status = {}
    for contract_name in CONTRACT_PATHS:
        try:
            load_artifact(contract_name)
            status[contract_name] = True
        except (FileNotFoundError, ValueError):
            status[contract_name] = False

    return status
