from .message import MessageType, WorkerMessage
from .column_worker import extract_column
from .distributor import ColumnDistributor, parallel_column_extraction

__all__ = [
    "MessageType",
    "WorkerMessage",
    "extract_column",
    "ColumnDistributor",
    "parallel_column_extraction",
]
