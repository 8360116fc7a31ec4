"""Shared fixtures for the vpc_infra unit tests."""
from __future__ import annotations

import pytest

from fakes import FakeTagClient, make_subnet
from vpc_infra.components.subnet import SubnetRecord


@pytest.fixture
def subnets() -> list[SubnetRecord]:
    """Seven subnets named subnet-1 .. subnet-7."""
    return [make_subnet(i) for i in range(1, 8)]


@pytest.fixture
def tag_client() -> FakeTagClient:
    return FakeTagClient()
