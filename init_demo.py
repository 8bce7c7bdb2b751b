"""
Seed the demo blog
Creates a few categories and a post to try in-place editing on
"""
import argparse
import asyncio

from sqlalchemy import select

from inplace_editing.db.models import Category, Post
from inplace_editing.infrastructure.database import dispose_engine, get_session, init_db

DEFAULT_CATEGORIES = ("General", "Python", "Web")


async def seed_demo(title: str) -> None:
    """Create demo rows unless posts already exist"""
    await init_db()

    async for db in get_session():
        result = await db.execute(select(Post).limit(1))
        if result.scalar_one_or_none() is not None:
            print("Demo data already present, nothing to do")
            break

        categories = [Category(name=name) for name in DEFAULT_CATEGORIES]
        db.add_all(categories)
        await db.flush()

        post = Post(title=title, body="Click any field to edit it.", category_id=categories[0].id)
        db.add(post)
        await db.flush()

        print("=" * 50)
        print(f"Created post #{post.id}: {post.title}")
        print(f"Categories: {', '.join(DEFAULT_CATEGORIES)}")
        print(f"Open /posts/{post.id} to edit it in place")
        print("=" * 50)

    await dispose_engine()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the in-place editing demo database")
    parser.add_argument("--title", default="Hello, in-place editing")
    args = parser.parse_args()
    asyncio.run(seed_demo(args.title))
