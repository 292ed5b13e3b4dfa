"""
Child side of the column split: receive one task, send back one column.
"""

import uuid
from typing import Any, List, Sequence, Union

import numpy as np
from loguru import logger

from studykit.workers.message import MessageType, WorkerMessage

Matrix = Union[np.ndarray, Sequence[Sequence[Any]]]


def extract_column(matrix: Matrix, column_index: int) -> Union[np.ndarray, List[Any]]:
    if isinstance(matrix, np.ndarray):
        return matrix[:, column_index]
    # ragged rows: missing cells become None
    return [row[column_index] if column_index < len(row) else None for row in matrix]


def run(conn) -> None:
    """Process entry point, ``conn`` is the child end of a ``multiprocessing.Pipe``."""
    message = None
    try:
        message = WorkerMessage.from_json(conn.recv())
        column_index = message.data["column_index"]
        column = extract_column(message.data["matrix"], column_index)
        reply = WorkerMessage(
            task_id=message.task_id,
            id=str(uuid.uuid4()),
            msg_type=MessageType.column_result,
            data={"column_index": column_index, "column": column},
        )
    except Exception as e:
        logger.bind(task_id=getattr(message, "task_id", "N/A")).error(f"✖ [Worker] Column extraction failed: {e}")
        reply = WorkerMessage(
            task_id=getattr(message, "task_id", "parse_error"),
            id=str(uuid.uuid4()),
            msg_type=MessageType.column_result,
            data={"error": str(e)},
        )

    conn.send(reply.to_json())
    conn.close()
