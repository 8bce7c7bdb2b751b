"""Tests for the validated single-attribute write on ORM records."""

import pytest
from sqlalchemy import select

from inplace_editing.db.models import Post
from inplace_editing.infrastructure.database import RecordErrors


@pytest.mark.asyncio
async def test_successful_write_is_persisted(database, blog):
    async with database() as session:
        post = await session.get(Post, blog.post_id)
        assert await post.update_attribute_with_validation(session, "title", "Renamed") is True
        assert not post.errors
        await session.commit()

    async with database() as session:
        result = await session.execute(select(Post.title).where(Post.id == blog.post_id))
        assert result.scalar_one() == "Renamed"


@pytest.mark.asyncio
async def test_validator_failure_keeps_error_and_skips_write(database, blog):
    async with database() as session:
        post = await session.get(Post, blog.post_id)
        assert await post.update_attribute_with_validation(session, "title", "   ") is False
        assert post.errors.on("title") == "can't be blank"
        assert post.title == "Hello"
        await session.commit()

    async with database() as session:
        post = await session.get(Post, blog.post_id)
        assert post.title == "Hello"


@pytest.mark.asyncio
async def test_numeric_columns_are_coerced_from_text(database, blog):
    async with database() as session:
        post = await session.get(Post, blog.post_id)
        assert await post.update_attribute_with_validation(session, "view_limit", " 12 ") is True
        assert post.view_limit == 12

        assert await post.update_attribute_with_validation(session, "view_limit", "") is True
        assert post.view_limit is None


@pytest.mark.asyncio
async def test_uncoercible_value_is_reported(database, blog):
    async with database() as session:
        post = await session.get(Post, blog.post_id)
        assert await post.update_attribute_with_validation(session, "view_limit", "lots") is False
        assert post.errors.on("view_limit") == "is not a number"
        assert post.view_limit is None


@pytest.mark.asyncio
async def test_errors_are_cleared_on_next_write(database, blog):
    async with database() as session:
        post = await session.get(Post, blog.post_id)
        assert await post.update_attribute_with_validation(session, "title", "") is False
        assert post.errors.on("title")

        assert await post.update_attribute_with_validation(session, "title", "Fixed") is True
        assert post.errors.on("title") is None


def test_record_errors_join_messages_per_attribute():
    errors = RecordErrors()
    errors.add("title", "can't be blank")
    errors.add("title", "is too short")
    errors.add("category_id", "is invalid")

    assert errors.on("title") == "can't be blank, is too short"
    assert errors.on("body") is None
    assert len(errors) == 3
    assert errors.full_messages() == [
        "Title can't be blank",
        "Title is too short",
        "Category is invalid",
    ]

    errors.clear()
    assert not errors
