"""
Palette Picker Backend — Validator Unit Tests
===============================================

What:  Tests for the per-route required-field schemas and id parsing.
How:   Pure functions; no database or HTTP.

What we test:
    ✅ Presence-only checks (empty string / null / wrong type still pass)
    ✅ First missing field is reported, in declared order
    ✅ Exact error wording per route
    ✅ Truthy id rule for deletes
    ✅ Lenient integer parsing of delete ids
"""

import pytest

from palette_picker.exceptions import ValidationError
from palette_picker.validators import (
    COLOR_SEARCH,
    PALETTE_CREATE,
    PALETTE_DELETE,
    PALETTE_PATCH,
    PROJECT_CREATE,
    PROJECT_DELETE,
    PROJECT_UPDATE,
    parse_integer_id,
    require,
    require_color_field,
)


COMPLETE_PALETTE = {
    "color1": "#111111",
    "color2": "#222222",
    "color3": "#333333",
    "color4": "#444444",
    "color5": "#555555",
    "project_id": 1,
}


class TestRequestSchemaCheck:

    def test_complete_payload_is_ok(self):
        result = PALETTE_CREATE.check(COMPLETE_PALETTE)
        assert result.ok
        assert result.missing == []
        assert result.first_missing is None

    def test_missing_fields_listed_in_declared_order(self):
        payload = {"color2": "#222222", "color4": "#444444"}
        result = PALETTE_CREATE.check(payload)
        assert not result.ok
        assert result.missing == ["color1", "color3", "color5", "project_id"]
        assert result.first_missing == "color1"

    def test_none_payload_misses_everything(self):
        assert PROJECT_CREATE.check(None).missing == ["name"]

    @pytest.mark.parametrize("value", ["", None, 0, [], {"nested": True}])
    def test_presence_only_ignores_value(self, value):
        """A present key passes whatever it holds."""
        assert PROJECT_CREATE.check({"name": value}).ok

    def test_optional_palette_name_not_required(self):
        assert "name" not in PALETTE_CREATE.required
        assert PALETTE_CREATE.check(COMPLETE_PALETTE).ok


class TestRequire:

    def test_require_passes_silently(self):
        require(PROJECT_CREATE, {"name": "Kitchen"})

    def test_project_create_message(self):
        with pytest.raises(ValidationError) as exc_info:
            require(PROJECT_CREATE, {})
        assert exc_info.value.message == "You are missing a name property for this project"
        assert exc_info.value.field == "name"

    def test_project_update_uses_create_message(self):
        with pytest.raises(ValidationError) as exc_info:
            require(PROJECT_UPDATE, {"title": "wrong key"})
        assert exc_info.value.message == "You are missing a name property for this project"

    def test_palette_create_names_first_missing(self):
        payload = dict(COMPLETE_PALETTE)
        del payload["color3"]
        del payload["project_id"]
        with pytest.raises(ValidationError) as exc_info:
            require(PALETTE_CREATE, payload)
        assert exc_info.value.message == (
            "The expected format is: { project_id: <Integer> }. "
            "You are missing the color3 property."
        )
        assert exc_info.value.context["missing"] == ["color3", "project_id"]

    def test_palette_patch_message(self):
        with pytest.raises(ValidationError) as exc_info:
            require(PALETTE_PATCH, {"changeColor": "color1"})
        assert exc_info.value.message == (
            "The expected format is: { changeColor: <String>, newColor: <String> }. "
            "You are missing the newColor property."
        )

    def test_color_search_message(self):
        with pytest.raises(ValidationError, match="chosenColor"):
            require(COLOR_SEARCH, {})


class TestDeleteSchemas:

    @pytest.mark.parametrize("schema", [PROJECT_DELETE, PALETTE_DELETE])
    @pytest.mark.parametrize("payload", [{}, {"id": 0}, {"id": ""}, {"id": None}, {"id": False}])
    def test_missing_or_falsy_id_rejected(self, schema, payload):
        with pytest.raises(ValidationError) as exc_info:
            require(schema, payload)
        assert exc_info.value.message == (
            "The expected format is: { id: <Number> }. You are missing the id property."
        )

    @pytest.mark.parametrize("value", [1, "1", "0", -5, 2.5, "abc"])
    def test_truthy_id_accepted(self, value):
        require(PROJECT_DELETE, {"id": value})


class TestRequireColorField:

    @pytest.mark.parametrize("field", ["color1", "color2", "color3", "color4", "color5"])
    def test_color_columns_accepted(self, field):
        assert require_color_field(field) == field

    @pytest.mark.parametrize("field", ["id", "project_id", "name", "color6", "", None])
    def test_other_columns_rejected(self, field):
        with pytest.raises(ValidationError, match="must be one of"):
            require_color_field(field)


class TestParseIntegerId:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (-100, -100),
            ("12", 12),
            ("  7 ", 7),
            ("42abc", 42),
            ("+3", 3),
            (3.9, 3),
        ],
    )
    def test_parsed(self, value, expected):
        assert parse_integer_id(value) == expected

    @pytest.mark.parametrize("value", ["abc", "", True, None, [1], {"id": 1}, float("nan")])
    def test_unparseable_is_none(self, value):
        assert parse_integer_id(value) is None
