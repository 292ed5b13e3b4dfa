import multiprocessing
import time
import uuid
from multiprocessing.connection import wait
from typing import Any, Dict, List, Optional

import numpy as np
from loguru import logger

from studykit.config import Settings
from studykit.utils.registry import register_demo
from studykit.workers import column_worker
from studykit.workers.column_worker import Matrix
from studykit.workers.message import MessageType, WorkerMessage

MATRIX = [
    [1, 2, 3],
    [4, 5, 6],
    [7, 8, 9],
]


class ColumnDistributor:
    """
    Forks one child per matrix column and gathers the columns back.

    There is no bound on the number of children: a matrix with N columns
    starts N processes at once.
    """

    def __init__(self, timeout: Optional[float] = None):
        settings = Settings()
        self.timeout = settings.worker_result_timeout if timeout is None else timeout
        self.task_id = str(uuid.uuid4())
        self.processes: List[multiprocessing.Process] = []
        self.pending: Dict[Any, int] = {}
        self.results: List[Any] = []
        self._received = 0
        self._ctx = multiprocessing.get_context()

    def start(self, matrix: Matrix):
        num_columns = len(matrix[0])
        self.results = [None] * num_columns
        logger.bind(task_id=self.task_id).info(f"Starting {num_columns} child processes, one per column")

        for col in range(num_columns):
            # encode before forking so a bad payload leaves no orphan child
            payload = WorkerMessage(
                task_id=self.task_id,
                id=str(uuid.uuid4()),
                msg_type=MessageType.column_task,
                data={"matrix": matrix, "column_index": col},
            ).to_json()

            parent_conn, child_conn = self._ctx.Pipe()
            process = self._ctx.Process(target=column_worker.run, args=(child_conn,), daemon=True)
            process.start()
            child_conn.close()
            self.processes.append(process)
            self.pending[parent_conn] = col
            parent_conn.send(payload)

    def _process_message(self, conn, col: int):
        ctx_logger = logger.bind(task_id=self.task_id, column=col)
        try:
            message = WorkerMessage.from_json(conn.recv())
        except EOFError:
            raise RuntimeError(f"Child {col} exited without sending a result")
        finally:
            conn.close()

        if "error" in message.data:
            error_message = str(message.data["error"])[:1000]
            ctx_logger.error(f"✖ Error from child {col}: {error_message}")
            raise RuntimeError(f"Error from child {col}: {error_message}")

        data = message.data["column"]
        ctx_logger.info(f"Received from child {col}: {data}")
        self.results[col] = data
        self._received += 1

        if self._received == len(self.results):
            logger.bind(task_id=self.task_id).info(f"Final Result: {self.results}")

    def collect(self) -> List[Any]:
        deadline = time.monotonic() + self.timeout
        while self.pending:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise TimeoutError(f"{len(self.pending)} column(s) missing after {self.timeout} seconds")
            for conn in wait(list(self.pending), timeout=remaining):
                self._process_message(conn, self.pending.pop(conn))
        return self.results

    def stop(self):
        for conn in self.pending:
            conn.close()
        self.pending.clear()
        for process in self.processes:
            process.join(timeout=1)
            if process.is_alive():
                logger.bind(task_id=self.task_id).warning(f"Terminating child process {process.pid}")
                process.terminate()
            process.join()


def parallel_column_extraction(matrix: Matrix, timeout: Optional[float] = None) -> List[Any]:
    if isinstance(matrix, np.ndarray) and matrix.ndim != 2:
        raise ValueError(f"Expected a 2-D matrix, got {matrix.ndim} dimension(s)")
    if len(matrix) == 0 or len(matrix[0]) == 0:
        return []

    distributor = ColumnDistributor(timeout=timeout)
    try:
        distributor.start(matrix)
        return distributor.collect()
    finally:
        distributor.stop()


@register_demo("columns")
def demo():
    return parallel_column_extraction(MATRIX)


if __name__ == "__main__":
    demo()
