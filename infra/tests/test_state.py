"""Tests for mapping a subnet record into data source state."""
from __future__ import annotations

from fakes import make_subnet
from vpc_infra.errors import ApiError, TagFetchError
from vpc_infra.schema import output_names
from vpc_infra.state import SubnetState


def test_required_fields_copied() -> None:
    record = make_subnet(4)
    state = SubnetState.from_record(record, controller_url="https://cloud.ibm.com")
    assert state.id == record.id
    assert state.identifier == record.id
    assert state.name == "subnet-4"
    assert state.ipv4_cidr_block == "10.240.4.0/24"
    assert state.total_ipv4_address_count == 256
    assert state.available_ipv4_address_count == 251
    assert state.status == "available"
    assert state.zone == "us-south-1"
    assert state.vpc == "r006-vpc"
    assert state.vpc_name == "main-vpc"
    assert state.resource_name == state.name
    assert state.resource_crn == state.crn == record.crn
    assert state.resource_status == "available"


def test_optional_references_copied_when_present() -> None:
    state = SubnetState.from_record(make_subnet(1), controller_url="https://cloud.ibm.com")
    assert state.network_acl == "r006-acl"
    assert state.public_gateway == "r006-pgw"
    assert state.resource_group == "rg-1"
    assert state.resource_group_name == "Default"


def test_missing_references_are_unset() -> None:
    record = make_subnet(1, public_gateway=False, network_acl=False, resource_group=False)
    outputs = SubnetState.from_record(record, controller_url="https://cloud.ibm.com").to_outputs()
    for key in ("public_gateway", "network_acl", "resource_group", "resource_group_name"):
        assert outputs[key] is None, key


def test_controller_url_gets_console_path() -> None:
    state = SubnetState.from_record(make_subnet(1), controller_url="https://cloud.ibm.com/")
    assert state.resource_controller_url == "https://cloud.ibm.com/vpc-ext/network/subnets"


def test_outputs_are_serialisable() -> None:
    warning = TagFetchError("0717-0001", "access", ApiError("boom"))
    state = SubnetState.from_record(
        make_subnet(1),
        controller_url="https://cloud.ibm.com",
        tags={"b", "a"},
        warnings=(warning,),
    )
    outputs = state.to_outputs()
    assert outputs["tags"] == ["a", "b"]
    assert outputs["access_tags"] == []
    assert outputs["warnings"] == [str(warning)]


def test_outputs_cover_every_schema_field() -> None:
    outputs = SubnetState.from_record(make_subnet(1), controller_url="https://cloud.ibm.com").to_outputs()
    assert set(output_names()) <= set(outputs)
