"""Address and identifier helpers shared by the package."""

from typing import Union

from web3 import Web3

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def normalize_address(value: str, label: str = "address") -> str:
    """
    Validate an address and return it in checksum form.

    Raises:
        ValueError: If the value is not a 20-byte hex address
    """
    if not isinstance(value, str) or not value.startswith('0x'):
        raise ValueError(f"Invalid {label}: {value!r}")

    if len(value) != 42 or not Web3.is_address(value):
        raise ValueError(f"Invalid {label}: {value!r}")

    return Web3.to_checksum_address(value)


def derive_address(*parts) -> str:
    """Derive a deterministic address from the given parts."""
    seed = "|".join(str(part) for part in parts)
    return Web3.to_checksum_address(Web3.keccak(text=seed)[-20:])


def selector(signature: str) -> bytes:
    """Return the 4-byte function selector of a Solidity signature."""
    return bytes(Web3.keccak(text=signature)[:4])


def to_interface_id(value: Union[str, bytes, int]) -> bytes:
    """
    Normalize an interface id to its 4-byte form.

    Accepts '0x' hex strings, raw bytes, or integers.
    """
    if isinstance(value, int):
        if value < 0 or value > 0xFFFFFFFF:
            raise ValueError(f"Interface id out of range: {value}")
        return value.to_bytes(4, 'big')

    if isinstance(value, str):
        value = bytes(Web3.to_bytes(hexstr=value))

    if len(value) != 4:
        raise ValueError(f"Interface id must be 4 bytes, got {len(value)}")

    return bytes(value)
