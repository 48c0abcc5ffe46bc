"""Tests for URL composition."""

import pytest

from grpt.transcoding.urls import compose_url


@pytest.mark.parametrize(
    "base, path",
    [
        ("http://h/", "/x"),
        ("http://h", "/x"),
        ("http://h/", "x"),
        ("http://h", "x"),
    ],
)
def test_single_slash_at_seam(base, path):
    assert compose_url(base, path) == "http://h/x"


def test_keeps_base_path_prefix():
    assert compose_url("https://api.example.com/v1", "/users/42") == "https://api.example.com/v1/users/42"


def test_only_the_seam_is_normalized():
    # Slashes away from the seam are left alone.
    assert compose_url("http://h/a//", "/b//c") == "http://h/a//b//c"


def test_empty_path_returns_base():
    assert compose_url("http://h", "") == "http://h"
