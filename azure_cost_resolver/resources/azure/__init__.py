from .storage_queue import SUPPORTED_REPLICATION_TYPES, StorageQueue

__all__ = ["StorageQueue", "SUPPORTED_REPLICATION_TYPES"]
