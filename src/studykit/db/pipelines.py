"""
Aggregation pipelines over the mflix ``movies`` collection.

Each builder returns a plain list of stage documents ready for
``collection.aggregate``. The first group grows one stage at a time
(match, addFields, count, unwind, project, group, lookup, facet); the
second group answers standalone questions about directors, reviews
and cast members.
"""

from typing import Any, Dict, List

Pipeline = List[Dict[str, Any]]


def rating_match(min_rating: float = 5) -> Pipeline:
    return [{"$match": {"imdb.rating": {"$gt": min_rating}}}]


def with_average_rating(min_rating: float = 5) -> Pipeline:
    return rating_match(min_rating) + [
        {"$addFields": {"avg_ratings": {"$avg": ["$imdb.rating", "$tomatoes.viewer.rating"]}}},
    ]


def _since(year: int, min_rating: float) -> Pipeline:
    return with_average_rating(min_rating) + [{"$match": {"year": {"$gte": year}}}]


def count_since(year: int = 1910, min_rating: float = 5, field: str = "title") -> Pipeline:
    return _since(year, min_rating) + [{"$count": field}]


def unwind_genres(year: int = 1910, min_rating: float = 5) -> Pipeline:
    return _since(year, min_rating) + [{"$unwind": {"path": "$genres"}}]


def project_rated(year: int = 1910, min_rating: float = 5) -> Pipeline:
    return unwind_genres(year, min_rating) + [{"$project": {"rated": 1}}]


def group_titles_by_year(year: int = 1910, min_rating: float = 5) -> Pipeline:
    return _since(year, min_rating) + [
        {"$group": {"_id": "$year", "title": {"$push": "$title"}, "count": {"$sum": 1}}},
    ]


def with_comments(year: int = 1910, min_rating: float = 5, comments: str = "comments") -> Pipeline:
    return _since(year, min_rating) + [
        {
            "$lookup": {
                "from": comments,
                "foreignField": "movies_id",
                "localField": "_id",
                "as": "comments",
            }
        },
    ]


def paginated_with_count(skip: int = 10, limit: int = 10, year: int = 1910, min_rating: float = 5) -> Pipeline:
    return _since(year, min_rating) + [
        {
            "$facet": {
                "data": [{"$skip": skip}, {"$limit": limit}],
                "count": [{"$count": "title"}],
            }
        },
    ]


def top_short_directors(limit: int = 3, genre: str = "Short") -> Pipeline:
    """Directors with the most movies in ``genre``, as ``{director, numMovies}``."""
    return [
        {"$match": {"genres": genre}},
        {"$unwind": "$directors"},
        {"$group": {"_id": "$directors", "numMovies": {"$sum": 1}}},
        {"$sort": {"numMovies": -1}},
        {"$limit": limit},
        {"$project": {"_id": 0, "director": "$_id", "numMovies": 1}},
    ]


def review_growth(min_percent: float = 10) -> Pipeline:
    """
    Years whose average ``tomatoes.viewer.numReviews`` grew by at least
    ``min_percent`` over the previous year present in the collection.

    ``$setWindowFields`` with ``$shift`` needs MongoDB 5.0 or newer. The
    first year has no predecessor and gets a null percentage, so the
    final ``$match`` drops it.
    """
    percentage = {
        "$multiply": [
            {"$divide": [{"$subtract": ["$avgNumReviews", "$prevAvgNumReviews"]}, "$prevAvgNumReviews"]},
            100,
        ]
    }
    return [
        {"$group": {"_id": "$year", "totalNumOfReviews": {"$push": "$tomatoes.viewer.numReviews"}}},
        {"$addFields": {"avgNumReviews": {"$avg": "$totalNumOfReviews"}}},
        {
            "$setWindowFields": {
                "sortBy": {"_id": 1},
                "output": {"prevAvgNumReviews": {"$shift": {"output": "$avgNumReviews", "by": -1}}},
            }
        },
        {
            "$addFields": {
                "percentageIncrease": {
                    "$cond": {
                        "if": {"$gt": ["$prevAvgNumReviews", 0]},
                        "then": percentage,
                        "else": None,
                    }
                }
            }
        },
        {"$match": {"percentageIncrease": {"$gte": min_percent}}},
        {"$sort": {"percentageIncrease": 1}},
    ]


def costar_pairs() -> Pipeline:
    """Pairs of actors ordered by the number of movies they share."""
    cast_size = {"$size": "$cast"}
    pairs_of_one = {
        "$map": {
            "input": {"$slice": ["$cast", {"$add": ["$$this", 1]}, cast_size]},
            "as": "pairActor",
            "in": [{"$arrayElemAt": ["$cast", "$$this"]}, "$$pairActor"],
        }
    }
    return [
        {"$match": {"cast": {"$exists": True}}},
        {
            "$project": {
                "castPairs": {
                    "$reduce": {
                        "input": {"$range": [0, {"$subtract": [cast_size, 1]}]},
                        "initialValue": [],
                        "in": {"$concatArrays": ["$$value", pairs_of_one]},
                    }
                }
            }
        },
        {"$unwind": "$castPairs"},
        {
            "$project": {
                "actorPair": {
                    "$let": {
                        "vars": {
                            "first": {"$arrayElemAt": ["$castPairs", 0]},
                            "second": {"$arrayElemAt": ["$castPairs", 1]},
                        },
                        "in": {
                            "$cond": {
                                "if": {"$lt": ["$$first", "$$second"]},
                                "then": ["$$first", "$$second"],
                                "else": ["$$second", "$$first"],
                            }
                        },
                    }
                }
            }
        },
        {"$group": {"_id": "$actorPair", "count": {"$sum": 1}}},
        {"$sort": {"count": -1}},
    ]
