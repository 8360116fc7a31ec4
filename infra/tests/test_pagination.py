"""Tests for extracting the start cursor from a next link."""
from __future__ import annotations

from vpc_infra.pagination import get_next


def test_get_next_returns_start_parameter() -> None:
    href = "https://us-south.iaas.cloud.ibm.com/v1/subnets?limit=50&start=r006-abc123"
    assert get_next(href) == "r006-abc123"


def test_get_next_none_means_last_page() -> None:
    assert get_next(None) == ""


def test_get_next_empty_string_means_last_page() -> None:
    assert get_next("") == ""


def test_get_next_without_start_parameter() -> None:
    assert get_next("https://us-south.iaas.cloud.ibm.com/v1/subnets?limit=50") == ""
