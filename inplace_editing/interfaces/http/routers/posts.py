"""Demo blog pages rendering in-place editable posts."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from inplace_editing.db.models import Category, Post
from inplace_editing.interfaces.http.deps import get_db_session
from inplace_editing.modules.editing import RecordNotFoundError

router = APIRouter()


@router.get("/", response_class=HTMLResponse, summary="List posts")
async def list_posts(request: Request, db: AsyncSession = Depends(get_db_session)):
    result = await db.execute(select(Post).order_by(Post.id))
    return request.app.state.templates.TemplateResponse(
        request,
        "posts/index.html",
        {"posts": result.scalars().all()},
    )


@router.get("/posts/{post_id}", response_class=HTMLResponse, summary="Show an editable post")
async def show_post(post_id: int, request: Request, db: AsyncSession = Depends(get_db_session)):
    post = await db.get(Post, post_id)
    if post is None:
        raise RecordNotFoundError("post", post_id)

    result = await db.execute(select(Category).order_by(Category.name))
    categories = result.scalars().all()
    category = next((item for item in categories if item.id == post.category_id), None)
    return request.app.state.templates.TemplateResponse(
        request,
        "posts/show.html",
        {
            "post": post,
            "category_name": category.name if category else "",
            "category_choices": [[item.id, item.name] for item in categories],
        },
    )
