"""Partition routing exports."""

from .blob_store import BlobStore, TempDirBlobStore
from .partition_router import PartitionRouter
from .routing_models import RoutedSchema, RoutingPolicy

__all__ = [
    "BlobStore",
    "PartitionRouter",
    "RoutedSchema",
    "RoutingPolicy",
    "TempDirBlobStore",
]
