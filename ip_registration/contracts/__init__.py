"""Contract wrappers and on-chain adapters."""
from .work_registration import WorkRegistrationContract
from .work_factory import WorkFactoryContract
from .onchain import OnChainWork

__all__ = ["WorkRegistrationContract", "WorkFactoryContract", "OnChainWork"]
