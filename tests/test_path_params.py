"""Tests for path template substitution."""

from dataclasses import dataclass

import pytest

from grpt.transcoding.errors import MissingPathParameter
from grpt.transcoding.path_params import placeholder_names, resolve_path, to_camel_case


class TestToCamelCase:
    def test_snake_case(self):
        assert to_camel_case("example_param_name") == "exampleParamName"

    def test_no_underscore_unchanged(self):
        assert to_camel_case("id") == "id"
        assert to_camel_case("userId") == "userId"


class TestResolvePath:
    def test_literal_name(self):
        assert resolve_path("/users/{user_id}", {"user_id": 7}) == "/users/7"

    def test_camel_case_fallback(self):
        assert resolve_path("/users/{user_id}", {"userId": "42"}) == "/users/42"

    def test_literal_name_wins_over_camel_case(self):
        assert resolve_path("/users/{user_id}", {"user_id": "a", "userId": "b"}) == "/users/a"

    def test_fallback_is_one_directional(self):
        with pytest.raises(MissingPathParameter) as exc:
            resolve_path("/users/{userId}", {"user_id": "42"})
        assert exc.value.name == "userId"

    def test_missing_parameter(self):
        with pytest.raises(MissingPathParameter, match="MISSING PARAMETER: shelf_id"):
            resolve_path("/shelves/{shelf_id}/books/{book_id}", {"bookId": 1})

    def test_none_counts_as_missing(self):
        with pytest.raises(MissingPathParameter):
            resolve_path("/users/{id}", {"id": None})

    def test_values_are_url_encoded(self):
        assert resolve_path("/files/{name}", {"name": "a b/c?d"}) == "/files/a%20b%2Fc%3Fd"

    def test_unreserved_characters_kept(self):
        assert resolve_path("/n/{v}", {"v": "a-b_c.d!e~f*g'h(i)"}) == "/n/a-b_c.d!e~f*g'h(i)"

    def test_repeated_placeholder_replaced_identically(self):
        assert resolve_path("/{id}/x/{id}", {"id": 5}) == "/5/x/5"

    def test_several_placeholders_in_order(self):
        path = resolve_path("/shelves/{shelf_id}/books/{book_id}", {"shelfId": 1, "book_id": 2})
        assert path == "/shelves/1/books/2"

    def test_boolean_rendered_like_json(self):
        assert resolve_path("/flags/{on}", {"on": True}) == "/flags/true"

    def test_attribute_input(self):
        @dataclass
        class GetUserRequest:
            userId: str

        assert resolve_path("/users/{user_id}", GetUserRequest(userId="u1")) == "/users/u1"

    def test_input_not_mutated(self):
        data = {"user_id": "1", "extra": "x"}
        resolve_path("/users/{user_id}", data)
        assert data == {"user_id": "1", "extra": "x"}

    def test_placeholder_names(self):
        assert placeholder_names("/a/{x}/b/{y_z}/{x}") == ["x", "y_z", "x"]

    def test_integral_float_rendered_like_json(self):
        assert resolve_path("/p/{v}", {"v": 2.0}) == "/p/2"
        assert resolve_path("/p/{v}", {"v": 2.5}) == "/p/2.5"

    def test_message_field_named_lookup(self):
        @dataclass
        class SearchRequest:
            lookup: str
            shelf_id: str

        assert resolve_path("/s/{shelf_id}", SearchRequest(lookup="x", shelf_id="7")) == "/s/7"
