"""
IP Work Registration Reference Package

Represents intellectual-property works and their royalty-rights tokens:
the work registration interface, a reference work and factory, and
wrappers for the matching contract artifacts.
"""

__version__ = "0.1.0"
__author__ = "IP Registration Contributors"

from .artifacts.loader import (
    get_abi,
    get_bytecode,
    load_artifact,
    get_contract_metadata
)

from .errors import (
    RegistrationError,
    UnauthorizedError,
    NonTransferableError,
    InsufficientBalanceError,
    EventLogError,
)
from .events import EventLog, MetadataChanged, WorkCreated, Transfer
from .interfaces import (
    MetadataPair,
    WorkRegistration,
    FungibleToken,
    OwnershipToken,
    WORK_REGISTRATION,
)
from .work import Work, only_ledger, only_owner
from .token import RoyaltyRightsToken
from .factory import WorkFactory
from .contracts.work_registration import WorkRegistrationContract
from .contracts.work_factory import WorkFactoryContract
from .contracts.onchain import OnChainWork

__all__ = [
    'get_abi',
    'get_bytecode',
    'load_artifact',
    'get_contract_metadata',
    'RegistrationError',
    'UnauthorizedError',
    'NonTransferableError',
    'InsufficientBalanceError',
    'EventLogError',
    'EventLog',
    'MetadataChanged',
    'WorkCreated',
    'Transfer',
    'MetadataPair',
    'WorkRegistration',
    'FungibleToken',
    'OwnershipToken',
    'WORK_REGISTRATION',
    'Work',
    'only_ledger',
    'only_owner',
    'RoyaltyRightsToken',
    'WorkFactory',
    'WorkRegistrationContract',
    'WorkFactoryContract',
    'OnChainWork',
]
