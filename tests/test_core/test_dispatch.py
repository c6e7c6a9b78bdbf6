"""Tests for request descriptor assembly and domain models."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from core.domain.models import (
    GetRequest,
    KeyValuePair,
    Method,
    PostRequest,
    RequestDescriptor,
)
from core.services.dispatch import build_descriptor


def _pairs(*items: tuple[str, str]) -> list[KeyValuePair]:
    return [KeyValuePair(key=k, value=v) for k, v in items]


class TestBuildDescriptor:
    """Tests for build_descriptor."""

    def test_get(self) -> None:
        descriptor = build_descriptor(Method.GET, "https://example.com")

        assert isinstance(descriptor, GetRequest)
        assert descriptor.method is Method.GET
        assert descriptor.url == "https://example.com"

    def test_post_keeps_field_order(self) -> None:
        fields = _pairs(("b", "2"), ("a", "1"))
        descriptor = build_descriptor(Method.POST, "https://example.com", fields)

        assert isinstance(descriptor, PostRequest)
        assert [f.key for f in descriptor.fields] == ["b", "a"]

    def test_post_without_fields(self) -> None:
        descriptor = build_descriptor(Method.POST, "https://example.com")

        assert isinstance(descriptor, PostRequest)
        assert descriptor.fields == ()
        assert descriptor.json_body() == {}

    def test_unknown_method_is_programming_error(self) -> None:
        with pytest.raises(AssertionError):
            build_descriptor("DELETE", "https://example.com")  # type: ignore[arg-type]


class TestPostBody:
    """Tests for folding fields into the JSON body."""

    def test_fields_become_object(self) -> None:
        descriptor = PostRequest(url="https://example.com", fields=_pairs(("a", "1"), ("b", "2")))

        assert descriptor.json_body() == {"a": "1", "b": "2"}

    def test_last_duplicate_wins(self) -> None:
        descriptor = PostRequest(url="https://example.com", fields=_pairs(("a", "1"), ("a", "2")))

        assert descriptor.json_body() == {"a": "2"}


class TestDescriptorModel:
    """Tests for descriptor immutability and the tagged union."""

    def test_descriptor_is_frozen(self) -> None:
        descriptor = GetRequest(url="https://example.com")

        with pytest.raises(ValidationError):
            descriptor.url = "https://other.example"  # type: ignore[misc]

    def test_pair_is_frozen(self) -> None:
        pair = KeyValuePair(key="a", value="1")

        with pytest.raises(ValidationError):
            pair.value = "2"  # type: ignore[misc]

    def test_union_discriminates_on_method(self) -> None:
        adapter = TypeAdapter(RequestDescriptor)

        get = adapter.validate_python({"method": "GET", "url": "https://example.com"})
        post = adapter.validate_python(
            {"method": "POST", "url": "https://example.com", "fields": [{"key": "a", "value": "1"}]}
        )

        assert isinstance(get, GetRequest)
        assert isinstance(post, PostRequest)
        assert post.json_body() == {"a": "1"}
