"""Provider-agnostic subnet lookup interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

import pulumi

logger: logging.Logger = logging.getLogger(__name__)


class TagType(StrEnum):
    """Tag collections attached to a resource through its CRN."""

    USER = "user"
    ACCESS = "access"


@dataclass(frozen=True)
class ResourceReference:
    """Reference to another remote resource."""

    id: str
    name: str | None = None


@dataclass(frozen=True)
class SubnetRecord:
    """Subnet attributes as returned by the VPC API.

    ``network_acl``, ``public_gateway`` and ``resource_group`` are ``None``
    when the subnet has no such attachment.
    """

    id: str
    name: str
    ipv4_cidr_block: str
    total_ipv4_address_count: int
    available_ipv4_address_count: int
    status: str
    zone: str
    vpc: ResourceReference
    crn: str
    network_acl: ResourceReference | None = None
    public_gateway: ResourceReference | None = None
    resource_group: ResourceReference | None = None


@dataclass(frozen=True)
class SubnetPage:
    """One page of a subnet list call."""

    subnets: list[SubnetRecord] = field(default_factory=list)
    next_href: str | None = None


@dataclass(frozen=True)
class ById:
    identifier: str


@dataclass(frozen=True)
class ByName:
    name: str


LookupKey = ById | ByName


class SubnetClient(Protocol):
    """Remote VPC API calls used by the resolver.

    Implementations raise ``ApiError`` on transport or service failure.
    """

    def get_subnet(self, subnet_id: str) -> SubnetRecord: ...

    def list_subnets(self, start: str | None = None) -> SubnetPage: ...


class TagClient(Protocol):
    """Global tagging lookups keyed by CRN."""

    def get_tags(self, crn: str, tag_type: TagType) -> set[str]: ...


class SubnetOutputs:
    """Resolved outputs from a subnet lookup."""

    def __init__(
        self,
        subnet_id: pulumi.Output[str],
        ipv4_cidr_block: pulumi.Output[str],
        zone: pulumi.Output[str],
        vpc: pulumi.Output[str],
        crn: pulumi.Output[str],
        public_gateway: pulumi.Output[str | None],
    ) -> None:
        self.subnet_id: pulumi.Output[str] = subnet_id
        self.ipv4_cidr_block: pulumi.Output[str] = ipv4_cidr_block
        self.zone: pulumi.Output[str] = zone
        self.vpc: pulumi.Output[str] = vpc
        self.crn: pulumi.Output[str] = crn
        self.public_gateway: pulumi.Output[str | None] = public_gateway


class SubnetLookup(Protocol):
    @property
    def outputs(self) -> SubnetOutputs: ...
