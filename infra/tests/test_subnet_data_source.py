"""Unit tests for the subnet data source resource using Pulumi mocks.

The mocks answer each resource by running ``SubnetDataSourceProvider.create``
on the inputs the resource sent to the engine, so outputs come from the
fake VPC and tagging clients.
"""
from __future__ import annotations

import pulumi
from pulumi.runtime import Mocks

from fakes import FakeSubnetClient, FakeTagClient, make_subnet
from vpc_infra.providers.ibm.subnet import SubnetDataSourceProvider

CONTROLLER_URL = "https://cloud.ibm.com"

_SUBNETS = [make_subnet(i, public_gateway=(i != 9)) for i in range(1, 12)]


def fake_clients(region: str) -> tuple[FakeSubnetClient, FakeTagClient]:
    return FakeSubnetClient(_SUBNETS, page_size=4), FakeTagClient()


class SubnetMocks(Mocks):
    """Resolves dynamic subnet resources through the real provider."""

    def new_resource(
        self, args: pulumi.runtime.MockResourceArgs
    ) -> tuple[str, dict[str, object]]:
        provider = SubnetDataSourceProvider(fake_clients, CONTROLLER_URL, "us-south")
        result = provider.create(dict(args.inputs))
        return (result.id, result.outs)

    def call(
        self, args: pulumi.runtime.MockCallArgs
    ) -> tuple[dict[str, object], list[tuple[str, str]]]:
        return ({}, [])


pulumi.runtime.set_mocks(SubnetMocks(), preview=False)

from vpc_infra.providers.ibm.subnet import SubnetDataSource  # noqa: E402


def _subnet(resource_name: str, **key: str) -> SubnetDataSource:
    return SubnetDataSource(
        resource_name,
        client_factory=fake_clients,
        controller_url=CONTROLLER_URL,
        region="us-south",
        **key,
    )


@pulumi.runtime.test
def test_name_lookup_resolves_subnet_id() -> None:
    pulumi.runtime.set_mocks(SubnetMocks(), preview=False)
    subnet = _subnet("test-subnet", name="subnet-9")

    def check(values: list[object]) -> None:
        subnet_id, identifier = values
        assert subnet_id == "0717-0009"
        assert identifier == "0717-0009"

    return pulumi.Output.all(subnet.id, subnet.identifier).apply(check)


@pulumi.runtime.test
def test_identifier_lookup_exposes_cidr() -> None:
    pulumi.runtime.set_mocks(SubnetMocks(), preview=False)
    subnet = _subnet("test-subnet2", identifier="0717-0010")

    def check(values: list[object]) -> None:
        name, cidr = values
        assert name == "subnet-10"
        assert cidr == "10.240.10.0/24"

    return pulumi.Output.all(subnet.name, subnet.outputs.ipv4_cidr_block).apply(check)


@pulumi.runtime.test
def test_public_gateway_unset() -> None:
    pulumi.runtime.set_mocks(SubnetMocks(), preview=False)
    subnet = _subnet("test-subnet3", identifier="0717-0009")

    def check(gateway: str | None) -> None:
        assert gateway is None

    return subnet.outputs.public_gateway.apply(check)


@pulumi.runtime.test
def test_tags_come_from_tag_client() -> None:
    pulumi.runtime.set_mocks(SubnetMocks(), preview=False)
    subnet = _subnet("test-subnet4", name="subnet-2")

    def check(values: list[object]) -> None:
        tags, access_tags, url = values
        assert tags == ["env:dev", "team:network"]
        assert access_tags == ["project:vpc"]
        assert url == "https://cloud.ibm.com/vpc-ext/network/subnets"

    return pulumi.Output.all(subnet.tags, subnet.access_tags, subnet.resource_controller_url).apply(check)
