from .entities import OwnedRecord
from .repositories import OwnedResourceRepository

__all__ = ["OwnedRecord", "OwnedResourceRepository"]
