"""Artifact loading utilities for the work registration contracts."""
from .loader import get_abi, get_bytecode, load_artifact, get_function_selector, get_event_topic

__all__ = ["get_abi", "get_bytecode", "load_artifact", "get_function_selector", "get_event_topic"]
