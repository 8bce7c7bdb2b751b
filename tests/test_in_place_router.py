"""Tests for declaring in-place edit actions and building their routes."""

import pytest

from inplace_editing.db.models import Category, Post
from inplace_editing.interfaces.http.routers.in_place import InPlaceEditRouter
from inplace_editing.modules.editing import (
    DuplicateEditableFieldError,
    RecordTypeRegistry,
    UnknownAttributeError,
    UnknownRecordTypeError,
)


@pytest.fixture
def registry():
    registry = RecordTypeRegistry()
    registry.register(Post)
    registry.register(Category)
    return registry


def test_registry_defaults_type_name_from_class(registry):
    assert registry.type_names() == ["category", "post"]
    assert registry.resolve("post") is Post
    assert "post" in registry


@pytest.mark.parametrize(
    "type_name, attribute",
    [("post", "title"), ("post", "body"), ("post", "category_id"), ("category", "name")],
)
def test_action_name_is_set_type_attribute(registry, type_name, attribute):
    editing = InPlaceEditRouter(registry)
    field = editing.in_place_edit_for(type_name, attribute)
    assert field.action_name == f"set_{type_name}_{attribute}"
    assert editing.get(type_name, attribute) is field


def test_foreign_key_declaration_resolves_related_model(registry):
    editing = InPlaceEditRouter(registry)
    field = editing.in_place_edit_for_foreign_key("post", "category_id", "category", "name")

    assert field.action_name == "set_post_category_id"
    assert field.foreign_key.model is Category
    assert field.foreign_key.display_attribute == "name"


def test_unknown_type_fails_at_declaration(registry):
    editing = InPlaceEditRouter(registry)
    with pytest.raises(UnknownRecordTypeError):
        editing.in_place_edit_for("comment", "body")


def test_unknown_attribute_fails_at_declaration(registry):
    editing = InPlaceEditRouter(registry)
    with pytest.raises(UnknownAttributeError):
        editing.in_place_edit_for("post", "subtitle")
    with pytest.raises(UnknownAttributeError):
        editing.in_place_edit_for_foreign_key("post", "category_id", "category", "label")


def test_duplicate_declaration_is_rejected(registry):
    editing = InPlaceEditRouter(registry)
    editing.in_place_edit_for("post", "title")
    with pytest.raises(DuplicateEditableFieldError):
        editing.in_place_edit_for("post", "title", empty_text="-")


def test_build_registers_named_post_routes(registry):
    editing = InPlaceEditRouter(registry)
    editing.in_place_edit_for("post", "title")
    editing.in_place_edit_for_foreign_key("post", "category_id", "category", "name")

    routes = {route.name: route for route in editing.build().routes}

    assert set(routes) == {"set_post_title", "set_post_category_id"}
    assert routes["set_post_title"].path == "/set_post_title/{record_id}"
    assert routes["set_post_title"].methods == {"POST"}
    assert routes["set_post_title"].url_path_for("set_post_title", record_id="3") == "/set_post_title/3"
