"""Tests for the demo pages rendering editable fields."""

import pytest
from httpx import ASGITransport, AsyncClient

from .conftest import make_app


@pytest.mark.asyncio
async def test_post_page_renders_editors(client, blog):
    response = await client.get(f"/posts/{blog.post_id}")

    assert response.status_code == 200
    html = response.text
    assert f'<h1><span id="post_title_{blog.post_id}_in_place_editor" class="in_place_editor_field">Hello</span>' in html
    assert (
        f"new Ajax.InPlaceEditor('post_title_{blog.post_id}_in_place_editor', "
        f"'/edit/set_post_title/{blog.post_id}', {{cancelText: 'Nope', okText: 'Save'}})"
    ) in html
    assert ">General</span>" in html
    assert f"new Ajax.InPlaceCollectionEditor('post_category_id_{blog.post_id}_in_place_editor'" in html
    assert f'collection: [[{blog.general_id}, "General"], [{blog.python_id}, "Python"]]' in html
    assert "authenticity_token" not in html


@pytest.mark.asyncio
async def test_post_page_embeds_token_when_protected(database, blog):
    app = make_app(csrf_enabled=True)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        response = await http.get(f"/posts/{blog.post_id}")

    assert response.status_code == 200
    assert "Form.serialize(form) + '&authenticity_token=' + encodeURIComponent('" in response.text


@pytest.mark.asyncio
async def test_index_links_to_posts(client, blog):
    response = await client.get("/")

    assert response.status_code == 200
    assert f"/posts/{blog.post_id}" in response.text


@pytest.mark.asyncio
async def test_unknown_post_is_not_found(client, blog):
    response = await client.get("/posts/999")

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_edited_category_name_cannot_break_out_of_editor_script(client, blog):
    payload = "</script><img src=x onerror=alert(1)>"

    saved = await client.post(f"/edit/set_category_name/{blog.python_id}", data={"value": payload})
    response = await client.get(f"/posts/{blog.post_id}")

    assert saved.status_code == 200
    assert response.status_code == 200
    assert "<img src=x onerror" not in response.text
    assert '"\\u003c/script\\u003e\\u003cimg src=x onerror=alert(1)\\u003e"' in response.text
