"""Tests for the aggregation pipeline builders."""

from studykit.db import pipelines


def _stages(pipeline):
    return [next(iter(stage)) for stage in pipeline]


class TestIncrementalPipelines:
    def test_each_step_extends_the_previous_one(self) -> None:
        """Every step keeps the stages of the step before it."""
        assert _stages(pipelines.rating_match()) == ["$match"]
        assert _stages(pipelines.with_average_rating()) == ["$match", "$addFields"]
        assert _stages(pipelines.count_since()) == ["$match", "$addFields", "$match", "$count"]
        assert _stages(pipelines.unwind_genres()) == ["$match", "$addFields", "$match", "$unwind"]
        assert _stages(pipelines.project_rated())[-2:] == ["$unwind", "$project"]
        assert _stages(pipelines.group_titles_by_year())[-1] == "$group"
        assert _stages(pipelines.with_comments())[-1] == "$lookup"
        assert _stages(pipelines.paginated_with_count())[-1] == "$facet"

    def test_rating_and_year_thresholds(self) -> None:
        pipeline = pipelines.count_since(year=1920, min_rating=7)

        assert pipeline[0] == {"$match": {"imdb.rating": {"$gt": 7}}}
        assert pipeline[2] == {"$match": {"year": {"$gte": 1920}}}
        assert pipeline[3] == {"$count": "title"}

    def test_average_rating_fields(self) -> None:
        add_fields = pipelines.with_average_rating()[1]["$addFields"]

        assert add_fields == {"avg_ratings": {"$avg": ["$imdb.rating", "$tomatoes.viewer.rating"]}}

    def test_group_titles_by_year(self) -> None:
        group = pipelines.group_titles_by_year()[-1]["$group"]

        assert group == {"_id": "$year", "title": {"$push": "$title"}, "count": {"$sum": 1}}

    def test_lookup_targets_comments(self) -> None:
        lookup = pipelines.with_comments(comments="movie_comments")[-1]["$lookup"]

        assert lookup["from"] == "movie_comments"
        assert lookup["localField"] == "_id"
        assert lookup["foreignField"] == "movies_id"
        assert lookup["as"] == "comments"

    def test_facet_pagination(self) -> None:
        facet = pipelines.paginated_with_count(skip=20, limit=5)[-1]["$facet"]

        assert facet["data"] == [{"$skip": 20}, {"$limit": 5}]
        assert facet["count"] == [{"$count": "title"}]


class TestQuestionPipelines:
    def test_top_short_directors(self) -> None:
        pipeline = pipelines.top_short_directors(limit=3)

        assert pipeline[0] == {"$match": {"genres": "Short"}}
        assert {"$limit": 3} in pipeline
        assert pipeline[-1] == {"$project": {"_id": 0, "director": "$_id", "numMovies": 1}}

    def test_review_growth_shifts_previous_year(self) -> None:
        pipeline = pipelines.review_growth(min_percent=25)
        window = pipeline[2]["$setWindowFields"]

        assert _stages(pipeline) == ["$group", "$addFields", "$setWindowFields", "$addFields", "$match", "$sort"]
        assert window["sortBy"] == {"_id": 1}
        assert window["output"]["prevAvgNumReviews"]["$shift"] == {"output": "$avgNumReviews", "by": -1}
        assert pipeline[4] == {"$match": {"percentageIncrease": {"$gte": 25}}}

    def test_review_growth_guards_division(self) -> None:
        """Years without a positive previous average get a null percentage."""
        cond = pipelines.review_growth()[3]["$addFields"]["percentageIncrease"]["$cond"]

        assert cond["if"] == {"$gt": ["$prevAvgNumReviews", 0]}
        assert cond["else"] is None

    def test_costar_pairs(self) -> None:
        pipeline = pipelines.costar_pairs()

        assert pipeline[0] == {"$match": {"cast": {"$exists": True}}}
        assert _stages(pipeline) == ["$match", "$project", "$unwind", "$project", "$group", "$sort"]
        assert pipeline[-2] == {"$group": {"_id": "$actorPair", "count": {"$sum": 1}}}
        assert pipeline[-1] == {"$sort": {"count": -1}}
