from .partition import partition, partition_async
from .sequence import sequence, sequence_async

__all__ = (
    # Sync
    "partition",
    "sequence",
    # Async
    "partition_async",
    "sequence_async",
)
