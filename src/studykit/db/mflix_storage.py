from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from loguru import logger

from studykit.config import Settings
from studykit.db import user_fields
from studykit.db.mongo_client import MflixMongoClient
from studykit.utils.registry import register_demo

UserId = Union[ObjectId, str]


def _as_object_id(user_id: UserId) -> ObjectId:
    return user_id if isinstance(user_id, ObjectId) else ObjectId(user_id)


class MflixStorage:
    """
    Update operators and queries against the mflix sample database
    """

    def __init__(self):
        settings = Settings()
        self.mongo = MflixMongoClient(
            settings.mongodb_uri,
            settings.mongodb_port,
            settings.mongodb_username,
            settings.mongodb_password,
        )
        self.users = settings.mongodb_users_collection
        self.movies = settings.mongodb_movies_collection
        self.comments = settings.mongodb_comments_collection

    # --- users: update operators ---

    def _update_user(self, user_id: UserId, update: dict):
        with self.mongo:
            return self.mongo.update_one(self.users, {"_id": _as_object_id(user_id)}, update)

    def create_user(self, data: dict) -> ObjectId:
        document = user_fields.copy()
        document["genre"] = list(document["genre"])
        document.update(data)
        with self.mongo:
            return self.mongo.insert_one(self.users, document).inserted_id

    def get_user(self, user_id: UserId) -> dict:
        with self.mongo:
            return self.mongo.find_one(self.users, {"_id": _as_object_id(user_id)})

    def set_genres(self, user_id: UserId, genres: List[str]):
        return self._update_user(user_id, {"$set": {"genre": list(genres)}})

    def push_genres(self, user_id: UserId, genres: List[str]):
        return self._update_user(user_id, {"$push": {"genre": {"$each": list(genres)}}})

    def pull_genre(self, user_id: UserId, genre: str):
        return self._update_user(user_id, {"$pull": {"genre": genre}})

    def unset_field(self, user_id: UserId, field: str):
        return self._update_user(user_id, {"$unset": {field: ""}})

    def add_genre(self, user_id: UserId, genre: str):
        return self._update_user(user_id, {"$addToSet": {"genre": genre}})

    def increment_movies_watched(self, user_id: UserId, by: int = 1):
        return self._update_user(user_id, {"$inc": {"movies_watched": by}})

    def rename_field(self, user_id: UserId, old: str, new: str):
        return self._update_user(user_id, {"$rename": {old: new}})

    def pop_genre(self, user_id: UserId, last: bool = True):
        return self._update_user(user_id, {"$pop": {"genre": 1 if last else -1}})

    def remove_middle_genre(self, user_id: UserId) -> dict:
        """Build ["Rock", "Pop", "Jazz"] and pull the middle "Pop" back out."""
        self.set_genres(user_id, ["Rock"])
        self.push_genres(user_id, ["Pop", "Jazz"])
        logger.bind(user_id=str(user_id)).info(f"  › [Storage] Before pull: {self.get_user(user_id).get('genre')}")
        self.pull_genre(user_id, "Pop")
        return self.get_user(user_id)

    # --- movies: queries ---

    def movies_by_year(self, skip: int = 1, limit: int = 3) -> List[dict]:
        with self.mongo:
            return self.mongo.find(self.movies, {}, sort=[("year", 1)], skip=skip, limit=limit)

    def unrated_or_1893_movies(self, limit: int = 3) -> List[dict]:
        query = {
            "$and": [
                {"$or": [{"rated": "NOT RATED"}, {"year": 1893}]},
                {"type": "movie"},
            ]
        }
        with self.mongo:
            return self.mongo.find(self.movies, query, limit=limit)

    def search_plot(self, pattern: str, skip: int = 0, limit: int = 3) -> List[dict]:
        with self.mongo:
            return self.mongo.find(self.movies, {"plot": {"$regex": pattern}}, skip=skip, limit=limit)

    def movies_sharing_cast_with(self, title: str) -> List[dict]:
        with self.mongo:
            movie = self.mongo.find_one(self.movies, {"title": title})
            cast = movie.get("cast")
            if not cast:
                logger.warning(f"  ! [Storage] No cast found for '{title}'")
                return []
            return self.mongo.find(self.movies, {"cast": {"$in": cast}})

    def top_rated_before(self, year: int = 1900, limit: int = 5) -> List[dict]:
        with self.mongo:
            return self.mongo.find(self.movies, {"year": {"$lt": year}}, sort=[("imdb.rating", -1)], limit=limit)

    def movies_by_director(self, director: str) -> List[dict]:
        projection = {"title": 1, "year": 1, "imdb.rating": 1}
        with self.mongo:
            return self.mongo.find(self.movies, {"directors": director}, projection=projection)

    def run_pipeline(self, pipeline: List[Dict[str, Any]], collection: Optional[str] = None) -> List[dict]:
        with self.mongo:
            return self.mongo.aggregate(collection or self.movies, pipeline)


@register_demo("mflix")
def demo():
    from studykit.db import pipelines

    storage = MflixStorage()
    logger.info(storage.movies_by_year())
    logger.info(storage.unrated_or_1893_movies())
    logger.info(storage.search_plot("she"))
    logger.info(storage.top_rated_before())
    logger.info(storage.movies_by_director("William K.L. Dickson"))
    logger.info(storage.run_pipeline(pipelines.count_since()))
    logger.info(storage.run_pipeline(pipelines.with_comments(comments=storage.comments)))
    logger.info(storage.run_pipeline(pipelines.top_short_directors()))


if __name__ == "__main__":
    demo()
