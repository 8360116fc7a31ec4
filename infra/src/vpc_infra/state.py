"""Typed state record produced by a subnet read."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from vpc_infra.components.subnet import SubnetRecord
from vpc_infra.errors import TagFetchError

logger: logging.Logger = logging.getLogger(__name__)

SUBNETS_CONSOLE_PATH: str = "/vpc-ext/network/subnets"


@dataclass(frozen=True)
class SubnetState:
    """Data source state for one resolved subnet.

    Optional references are ``None`` when the subnet has no such
    attachment, never an empty string.
    """

    id: str
    name: str
    ipv4_cidr_block: str
    available_ipv4_address_count: int
    total_ipv4_address_count: int
    status: str
    zone: str
    vpc: str
    vpc_name: str | None
    crn: str
    resource_controller_url: str
    network_acl: str | None = None
    public_gateway: str | None = None
    resource_group: str | None = None
    resource_group_name: str | None = None
    tags: frozenset[str] = frozenset()
    access_tags: frozenset[str] = frozenset()
    warnings: tuple[TagFetchError, ...] = field(default=(), compare=False)

    @property
    def identifier(self) -> str:
        return self.id

    @property
    def resource_name(self) -> str:
        return self.name

    @property
    def resource_crn(self) -> str:
        return self.crn

    @property
    def resource_status(self) -> str:
        return self.status

    @classmethod
    def from_record(
        cls,
        record: SubnetRecord,
        controller_url: str,
        tags: set[str] | frozenset[str] = frozenset(),
        access_tags: set[str] | frozenset[str] = frozenset(),
        warnings: tuple[TagFetchError, ...] = (),
    ) -> SubnetState:
        """Map a fetched record field by field."""
        return cls(
            id=record.id,
            name=record.name,
            ipv4_cidr_block=record.ipv4_cidr_block,
            available_ipv4_address_count=record.available_ipv4_address_count,
            total_ipv4_address_count=record.total_ipv4_address_count,
            status=record.status,
            zone=record.zone,
            vpc=record.vpc.id,
            vpc_name=record.vpc.name,
            crn=record.crn,
            resource_controller_url=controller_url.rstrip("/") + SUBNETS_CONSOLE_PATH,
            network_acl=record.network_acl.id if record.network_acl else None,
            public_gateway=record.public_gateway.id if record.public_gateway else None,
            resource_group=record.resource_group.id if record.resource_group else None,
            resource_group_name=record.resource_group.name if record.resource_group else None,
            tags=frozenset(tags),
            access_tags=frozenset(access_tags),
            warnings=warnings,
        )

    def to_outputs(self) -> dict[str, Any]:
        """Serialise into the property bag stored by the Pulumi engine."""
        return {
            "identifier": self.identifier,
            "name": self.name,
            "ipv4_cidr_block": self.ipv4_cidr_block,
            "available_ipv4_address_count": self.available_ipv4_address_count,
            "total_ipv4_address_count": self.total_ipv4_address_count,
            "network_acl": self.network_acl,
            "public_gateway": self.public_gateway,
            "status": self.status,
            "zone": self.zone,
            "vpc": self.vpc,
            "vpc_name": self.vpc_name,
            "resource_group": self.resource_group,
            "tags": sorted(self.tags),
            "access_tags": sorted(self.access_tags),
            "crn": self.crn,
            "resource_controller_url": self.resource_controller_url,
            "resource_name": self.resource_name,
            "resource_crn": self.resource_crn,
            "resource_status": self.resource_status,
            "resource_group_name": self.resource_group_name,
            "warnings": [str(w) for w in self.warnings],
        }
