"""Tests for the engagement service."""

import pytest
from fastapi import HTTPException
from sqlalchemy.exc import OperationalError

from recipebox.models.like import Like
from recipebox.models.recipe import Recipe
from recipebox.models.review import Review
from recipebox.models.user import User
from recipebox.services.engagement import EngagementService


@pytest.fixture
def setup(db):
    """Create two users and a recipe."""
    alice = User(
        username="alice",
        email="alice@example.com",
        password_hash="fake",
        profile_picture_url="https://example.com/a.png",
        about_me="",
    )
    bob = User(
        username="bob",
        email="bob@example.com",
        password_hash="fake",
        profile_picture_url="https://example.com/b.png",
        about_me="",
    )
    db.add_all([alice, bob])
    db.flush()

    recipe = Recipe(
        user_id=alice.id,
        name="Miso Soup",
        cuisine="Japanese",
        ingredients="dashi, miso, tofu, wakame",
        instructions="Warm dashi, dissolve miso, add tofu and wakame.",
        recipe_picture_url="https://example.com/miso.jpg",
        total_prep_time=15,
        difficulty_level="easy",
        notes="Never boil the miso.",
    )
    db.add(recipe)
    db.commit()

    return {"alice": alice, "bob": bob, "recipe": recipe}


def test_like_and_unlike(db, setup):
    """Test the like counter follows the Like rows."""
    service = EngagementService(db)
    recipe_id = setup["recipe"].id

    recipe = service.like(setup["alice"].id, recipe_id)
    assert recipe.likes == 1
    assert service.is_liked(setup["alice"].id, recipe_id) is True
    assert service.is_liked(setup["bob"].id, recipe_id) is False

    recipe = service.unlike(setup["alice"].id, recipe_id)
    assert recipe.likes == 0
    assert db.query(Like).count() == 0


def test_like_twice_raises(db, setup):
    """Test that liking twice raises without a second increment."""
    service = EngagementService(db)
    service.like(setup["alice"].id, setup["recipe"].id)

    with pytest.raises(HTTPException) as exc_info:
        service.like(setup["alice"].id, setup["recipe"].id)

    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Recipe already liked"
    db.refresh(setup["recipe"])
    assert setup["recipe"].likes == 1


def test_unlike_floors_drifted_counter(db, setup):
    """Test that a counter already at zero stays at zero when a Like row is removed."""
    recipe = setup["recipe"]
    db.add(Like(user_id=setup["bob"].id, recipe_id=recipe.id))
    db.commit()

    service = EngagementService(db)
    recipe = service.unlike(setup["bob"].id, recipe.id)

    assert recipe.likes == 0
    assert db.query(Like).count() == 0


def test_concurrent_like_conflict(db, setup, monkeypatch):
    """Test that a like losing the race on the unique pair is reported as already liked."""
    recipe = setup["recipe"]
    bob_id = setup["bob"].id

    # Another transaction committed the like after our existence check
    db.add(Like(user_id=bob_id, recipe_id=recipe.id))
    recipe.likes = 1
    db.commit()

    service = EngagementService(db)
    answers = iter([False, True])
    monkeypatch.setattr(service, "is_liked", lambda user_id, recipe_id: next(answers))

    with pytest.raises(HTTPException) as exc_info:
        service.like(bob_id, recipe.id)

    assert exc_info.value.status_code == 400
    db.refresh(recipe)
    assert recipe.likes == 1
    assert db.query(Like).count() == 1


def test_liked_recipes(db, setup):
    """Test listing liked recipes for a user."""
    service = EngagementService(db)
    service.like(setup["bob"].id, setup["recipe"].id)

    assert [r.id for r in service.liked_recipes(setup["bob"].id)] == [setup["recipe"].id]
    assert service.liked_recipes(setup["alice"].id) == []


def test_review_lifecycle(db, setup):
    """Test add, edit and delete keep the review counter in step."""
    service = EngagementService(db)
    recipe_id = setup["recipe"].id

    review = service.add_review(setup["bob"].id, recipe_id, "  Comforting.  ")
    assert review.content == "Comforting."
    db.refresh(setup["recipe"])
    assert setup["recipe"].reviews == 1

    review = service.edit_review(review.id, setup["bob"].id, "Very comforting.")
    assert review.content == "Very comforting."
    db.refresh(setup["recipe"])
    assert setup["recipe"].reviews == 1

    service.delete_review(review.id, setup["bob"].id)
    db.refresh(setup["recipe"])
    assert setup["recipe"].reviews == 0
    assert db.query(Review).count() == 0


def test_add_review_empty_content(db, setup):
    """Test that empty content is rejected before touching the store."""
    service = EngagementService(db)

    with pytest.raises(HTTPException) as exc_info:
        service.add_review(setup["bob"].id, setup["recipe"].id, "   ")

    assert exc_info.value.status_code == 400
    assert db.query(Review).count() == 0


def test_delete_review_by_non_owner(db, setup):
    """Test that a non-owner cannot delete a review."""
    service = EngagementService(db)
    review = service.add_review(setup["bob"].id, setup["recipe"].id, "Mine")

    with pytest.raises(HTTPException) as exc_info:
        service.delete_review(review.id, setup["alice"].id)

    assert exc_info.value.status_code == 403
    db.refresh(setup["recipe"])
    assert setup["recipe"].reviews == 1
    assert db.query(Review).count() == 1


def test_delete_review_floors_drifted_counter(db, setup):
    """Test that deleting a review never drives the counter negative."""
    service = EngagementService(db)
    review = service.add_review(setup["bob"].id, setup["recipe"].id, "Drifted")
    setup["recipe"].reviews = 0
    db.commit()

    service.delete_review(review.id, setup["bob"].id)
    db.refresh(setup["recipe"])
    assert setup["recipe"].reviews == 0


def test_list_reviews_missing_recipe(db, setup):
    """Test listing reviews of a missing recipe."""
    service = EngagementService(db)

    with pytest.raises(HTTPException) as exc_info:
        service.list_reviews(999999)

    assert exc_info.value.status_code == 404


def test_missing_review_status_per_operation(db, setup):
    """Test that editing a missing review is 404 and deleting one is 400."""
    service = EngagementService(db)

    with pytest.raises(HTTPException) as exc_info:
        service.edit_review(999999, setup["bob"].id, "Anything")
    assert exc_info.value.status_code == 404

    with pytest.raises(HTTPException) as exc_info:
        service.delete_review(999999, setup["bob"].id)
    assert exc_info.value.status_code == 400
    assert exc_info.value.detail == "Review not found"


def test_edit_review_rolls_back_on_store_failure(db, setup, monkeypatch):
    """Test that a failed commit leaves the review content untouched."""
    service = EngagementService(db)
    review = service.add_review(setup["bob"].id, setup["recipe"].id, "Original")

    def failing_commit():
        raise OperationalError("UPDATE reviews", {}, Exception("database is locked"))

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(OperationalError):
        service.edit_review(review.id, setup["bob"].id, "Replacement")
    monkeypatch.undo()

    assert db.query(Review).filter(Review.id == review.id).one().content == "Original"
