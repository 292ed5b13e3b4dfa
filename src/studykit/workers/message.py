import enum
import json
import codecs
import pickle

import numpy as np


def _to_builtin(value):
    # numpy values nested inside plain lists
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class MessageType(enum.Enum):
    column_task = 0      # Matrix and column index sent to a child
    column_result = 1    # Column extracted by a child


class WorkerMessage:
    def __init__(self, task_id: str, id: str, msg_type: MessageType, data: dict):
        self.task_id = task_id
        self.id = id
        self.msg_type = msg_type
        self.data = data

    def _prepare_for_serialize(self):
        data = {
            "id": self.id,
            "task_id": self.task_id,
            "msg_type": self.msg_type.value,
            "data": {}
        }
        for key, value in self.data.items():
            if isinstance(value, np.ndarray):
                obj_base64string = codecs.encode(pickle.dumps(value, protocol=pickle.HIGHEST_PROTOCOL),
                                                 "base64").decode('latin1')
                data["data"][key] = {"data": obj_base64string, "type": str(np.ndarray)}
            else:
                data["data"][key] = {"data": value}
        return data

    def to_json(self) -> str:
        return json.dumps(self._prepare_for_serialize(), default=_to_builtin)

    @staticmethod
    def from_json(json_msg) -> "WorkerMessage":
        if isinstance(json_msg, (str, bytes)):
            json_msg = json.loads(json_msg)

        data = {}
        for key, value in json_msg["data"].items():
            if value.get("type") == str(np.ndarray):
                data[key] = pickle.loads(codecs.decode(value["data"].encode('latin1'), "base64"))
            else:
                data[key] = value["data"]
        return WorkerMessage(
            task_id=json_msg["task_id"],
            id=json_msg["id"],
            msg_type=MessageType(json_msg["msg_type"]),
            data=data,
        )
