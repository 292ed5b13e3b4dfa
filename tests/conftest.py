from __future__ import annotations

import mongomock
import pytest

from studykit.config import Settings
from studykit.db import mongo_client
from studykit.patterns.singleton import Counter


@pytest.fixture
def mongo(monkeypatch: pytest.MonkeyPatch):
    """Route every MflixMongoClient connection to one shared in-memory server."""
    client = mongomock.MongoClient()
    monkeypatch.setattr(mongo_client, "MongoClient", lambda *args, **kwargs: client)
    return client[Settings().mongodb_db_name]


@pytest.fixture
def movies() -> list[dict]:
    """Small slice of the mflix movies collection."""
    return [
        {
            "title": "Blacksmith Scene",
            "year": 1893,
            "type": "movie",
            "rated": "UNRATED",
            "plot": "Three men hammer on an anvil and pass a bottle of beer around.",
            "cast": ["Charles Kayser", "John Ott"],
            "directors": ["William K.L. Dickson"],
            "genres": ["Short"],
            "imdb": {"rating": 6.2},
        },
        {
            "title": "Dickson Experimental Sound Film",
            "year": 1894,
            "type": "movie",
            "rated": "NOT RATED",
            "plot": "A man plays the violin while two men dance.",
            "cast": ["William K.L. Dickson"],
            "directors": ["William K.L. Dickson"],
            "genres": ["Short", "Music"],
            "imdb": {"rating": 5.8},
        },
        {
            "title": "The Kiss",
            "year": 1896,
            "type": "movie",
            "plot": "She and her partner share a kiss.",
            "cast": ["May Irwin", "John C. Rice", "John Ott"],
            "directors": ["William Heise"],
            "genres": ["Short", "Romance"],
            "imdb": {"rating": 5.9},
        },
        {
            "title": "The Great Train Robbery",
            "year": 1903,
            "type": "movie",
            "rated": "TV-G",
            "plot": "A group of bandits stage a brazen train hold-up.",
            "cast": ["A.C. Abadie", "Gilbert M. 'Broncho Billy' Anderson"],
            "directors": ["Edwin S. Porter"],
            "genres": ["Short", "Western"],
            "imdb": {"rating": 7.4},
        },
        {
            "title": "Traffic in Souls",
            "year": 1913,
            "type": "series",
            "rated": "NOT RATED",
            "plot": "A woman tries to rescue her sister from traffickers.",
            "directors": ["George Loane Tucker"],
            "genres": ["Crime", "Drama"],
            "imdb": {"rating": 6.0},
        },
    ]


@pytest.fixture
def seeded(mongo, movies):
    settings = Settings()
    client = mongo_client.MflixMongoClient(settings.mongodb_uri, settings.mongodb_port, "root", "example")
    with client:
        client.insert_many(settings.mongodb_movies_collection, [dict(m) for m in movies])
    return mongo


@pytest.fixture
def fresh_counter():
    Counter.reset_instance()
    yield
    Counter.reset_instance()
