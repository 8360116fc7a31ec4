"""IBM Cloud VPC subnet data source as a Pulumi dynamic resource."""

from __future__ import annotations

import logging
from typing import Any, Callable

import pulumi
from pulumi import dynamic
from pydantic import ValidationError

from vpc_infra.components.subnet import (
    ById,
    LookupKey,
    SubnetClient,
    SubnetOutputs,
    TagClient,
)
from vpc_infra.resolver import SubnetResolver
from vpc_infra.schema import SUBNET_SCHEMA, SubnetLookupArgs, input_names
from vpc_infra.state import SubnetState

logger: logging.Logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], tuple[SubnetClient, TagClient]]

_LOOKUP_KEY: str = "lookup_key"


def get_subnet(
    key: LookupKey,
    client: SubnetClient,
    tag_client: TagClient,
    controller_url: str,
) -> SubnetState:
    """Resolve a subnet outside of the Pulumi engine.

    Raises ``SubnetLookupError`` or ``SubnetNotFoundError`` on failure.
    """
    return SubnetResolver(client, tag_client, controller_url).read(key)


class SubnetDataSourceProvider(dynamic.ResourceProvider):
    """Reads a subnet on every create, update and refresh. Owns nothing remote.

    Args:
        client_factory: Builds the VPC and tagging clients for a region.
            Called once per operation because dynamic providers are
            serialised into state.
        controller_url: Base console URL used for ``resource_controller_url``.
        region: Region handed to ``client_factory``.
    """

    def __init__(self, client_factory: ClientFactory, controller_url: str, region: str) -> None:
        self._client_factory: ClientFactory = client_factory
        self._controller_url: str = controller_url
        self._region: str = region

    def _read(self, key: LookupKey) -> SubnetState:
        client, tag_client = self._client_factory(self._region)
        return get_subnet(key, client, tag_client, self._controller_url)

    def _lookup(self, props: dict[str, Any]) -> tuple[SubnetState, dict[str, Any]]:
        args = SubnetLookupArgs.model_validate(props)
        state = self._read(args.to_key())
        outs = {
            **props,
            **state.to_outputs(),
            _LOOKUP_KEY: {"identifier": args.identifier, "name": args.name},
        }
        return state, outs

    def check(self, _olds: dict[str, Any], news: dict[str, Any]) -> dynamic.CheckResult:
        try:
            SubnetLookupArgs.model_validate(news)
        except ValidationError as err:
            failures = [
                dynamic.CheckFailure(
                    str(error["loc"][0]) if error["loc"] else "identifier",
                    error["msg"],
                )
                for error in err.errors()
            ]
            return dynamic.CheckResult(news, failures)
        return dynamic.CheckResult(news, [])

    def diff(self, _id: str, olds: dict[str, Any], news: dict[str, Any]) -> dynamic.DiffResult:
        """Always report changes so every ``pulumi up`` re-reads the subnet.

        Only a different lookup key forces a replacement.
        """
        old_key = olds.get(_LOOKUP_KEY) or {}
        replaces = [
            field_name
            for field_name in input_names()
            if old_key.get(field_name) != news.get(field_name)
        ]
        return dynamic.DiffResult(
            changes=True,
            replaces=replaces,
            delete_before_replace=True,
        )

    def create(self, props: dict[str, Any]) -> dynamic.CreateResult:
        state, outs = self._lookup(props)
        logger.debug("subnet_data_source_created", extra={"identifier": state.id})
        return dynamic.CreateResult(state.id, outs)

    def update(self, _id: str, _olds: dict[str, Any], news: dict[str, Any]) -> dynamic.UpdateResult:
        state, outs = self._lookup(news)
        logger.debug("subnet_data_source_updated", extra={"identifier": state.id})
        return dynamic.UpdateResult(outs)

    def read(self, id_: str, props: dict[str, Any]) -> dynamic.ReadResult:
        state = self._read(ById(id_))
        logger.debug("subnet_data_source_refreshed", extra={"identifier": state.id})
        return dynamic.ReadResult(state.id, {**props, **state.to_outputs()})

    def delete(self, _id: str, _props: dict[str, Any]) -> None:
        """Nothing to remove: the subnet is not owned by this stack."""


class SubnetDataSource(dynamic.Resource):
    """Looks up an existing VPC subnet by ``identifier`` or ``name``."""

    identifier: pulumi.Output[str]
    name: pulumi.Output[str]
    ipv4_cidr_block: pulumi.Output[str]
    available_ipv4_address_count: pulumi.Output[int]
    total_ipv4_address_count: pulumi.Output[int]
    tags: pulumi.Output[list[str]]
    access_tags: pulumi.Output[list[str]]
    crn: pulumi.Output[str]
    network_acl: pulumi.Output[str | None]
    public_gateway: pulumi.Output[str | None]
    status: pulumi.Output[str]
    vpc: pulumi.Output[str]
    vpc_name: pulumi.Output[str]
    zone: pulumi.Output[str]
    resource_group: pulumi.Output[str | None]
    resource_controller_url: pulumi.Output[str]
    resource_name: pulumi.Output[str]
    resource_crn: pulumi.Output[str]
    resource_status: pulumi.Output[str]
    resource_group_name: pulumi.Output[str | None]
    warnings: pulumi.Output[list[str]]

    def __init__(
        self,
        resource_name: str,
        client_factory: ClientFactory,
        controller_url: str,
        region: str,
        identifier: pulumi.Input[str] | None = None,
        name: pulumi.Input[str] | None = None,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        """Declare the lookup.

        Args:
            resource_name: Logical Pulumi resource name.
            client_factory: Builds the VPC and tagging clients for ``region``.
            controller_url: Base console URL.
            region: Region the subnet lives in.
            identifier: Subnet ID to fetch. Mutually exclusive with ``name``.
            name: Subnet name to search for. Mutually exclusive with ``identifier``.
            opts: Optional Pulumi resource options.
        """
        logger.debug(
            "declaring_subnet_data_source",
            extra={"resource_name": resource_name, "region": region},
        )
        inputs = {"identifier": identifier, "name": name}
        props: dict[str, Any] = {spec.name: inputs.get(spec.name) for spec in SUBNET_SCHEMA}
        props["warnings"] = None
        super().__init__(
            SubnetDataSourceProvider(client_factory, controller_url, region),
            resource_name,
            props,
            opts,
        )

    @property
    def outputs(self) -> SubnetOutputs:
        """Return the resolved subnet outputs."""
        return SubnetOutputs(
            subnet_id=self.id,
            ipv4_cidr_block=self.ipv4_cidr_block,
            zone=self.zone,
            vpc=self.vpc,
            crn=self.crn,
            public_gateway=self.public_gateway,
        )
