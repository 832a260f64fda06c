from .base import AbstractArmClient, ArmRequest
from .operations import ResourceOperations, ThroughputOperationsMixin
from .rest_client import ArmRestClient

__all__ = [
    "AbstractArmClient",
    "ArmRequest",
    "ArmRestClient",
    "ResourceOperations",
    "ThroughputOperationsMixin",
]
