from .default_fields import user_fields
from .mongo_client import MflixMongoClient
from .mflix_storage import MflixStorage
from . import pipelines

__all__ = [
    "user_fields",
    "MflixMongoClient",
    "MflixStorage",
    "pipelines",
]
