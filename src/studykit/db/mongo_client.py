from typing import Any, Dict, List, Optional, Sequence, Tuple

from pymongo import MongoClient
from loguru import logger

from studykit.config import Settings


class MflixMongoClient:
    def __init__(self, host, port, username, password):
        self._client = None
        self.host, self.port = host, port
        self.username = username
        self.password = password

        settings = Settings()
        self.db_name = settings.mongodb_db_name
        self.timeout_ms = settings.mongodb_timeout_ms

    def __connect(self):
        logger.debug(f"  › [DB] Connecting to MongoDB: {self.host}:{self.port}...")
        self._client = MongoClient(
            f"mongodb://{self.username}:{self.password}@{self.host}:{self.port}/?authSource=admin",
            serverSelectionTimeoutMS=self.timeout_ms,
        )
        logger.debug("  ✔ [DB] MongoDB connection established")

    def __disconnect(self):
        if self._client is not None:
            self._client.close()
            logger.debug("  • [DB] MongoDB connection closed")
        self._client = None

    def __enter__(self):
        self.__connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.__disconnect()

    def _collection(self, collection: str):
        if self._client is None:
            raise RuntimeError("MongoDB client is not connected, use it inside a 'with' block")
        return self._client[self.db_name][collection]

    def update_one(self, collection: str, query: dict, update: dict, upsert: bool = False):
        logger.bind(query=str(query)).info(f"  › [DB] updateOne on '{self.db_name}.{collection}': {list(update)}")
        return self._collection(collection).update_one(query, update, upsert=upsert)

    def insert_one(self, collection: str, document: dict):
        logger.info(f"  › [DB] insertOne into '{self.db_name}.{collection}'")
        return self._collection(collection).insert_one(document)

    def insert_many(self, collection: str, documents: Sequence[dict]):
        logger.info(f"  › [DB] insertMany of {len(documents)} documents into '{self.db_name}.{collection}'")
        return self._collection(collection).insert_many(list(documents))

    def find_one(self, collection: str, query: dict, projection: Optional[dict] = None) -> dict:
        document = self._collection(collection).find_one(query, projection)
        return document if document else {}

    def find(
        self,
        collection: str,
        query: dict,
        projection: Optional[dict] = None,
        sort: Optional[List[Tuple[str, int]]] = None,
        skip: int = 0,
        limit: int = 0,
    ) -> List[dict]:
        logger.bind(query=str(query)).info(f"  › [DB] find on '{self.db_name}.{collection}' (skip={skip}, limit={limit})")
        cursor = self._collection(collection).find(query, projection)
        if sort:
            cursor = cursor.sort(sort)
        if skip:
            cursor = cursor.skip(skip)
        if limit:
            cursor = cursor.limit(limit)
        return list(cursor)

    def delete_one(self, collection: str, query: dict) -> bool:
        result = self._collection(collection).delete_one(query)
        return result.deleted_count > 0

    def distinct(self, collection: str, key: str, query: Optional[dict] = None) -> List[Any]:
        return self._collection(collection).distinct(key, query)

    def aggregate(self, collection: str, pipeline: List[Dict[str, Any]]) -> List[dict]:
        stages = [next(iter(stage)) for stage in pipeline]
        logger.info(f"  › [DB] aggregate on '{self.db_name}.{collection}': {stages}")
        return list(self._collection(collection).aggregate(pipeline))


if __name__ == "__main__":
    from studykit.config import settings

    db = MflixMongoClient(settings.mongodb_uri, settings.mongodb_port, settings.mongodb_username, settings.mongodb_password)
    with db:
        logger.info(db.distinct(settings.mongodb_movies_collection, "type"))
