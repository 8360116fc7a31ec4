"""Input validation and field metadata for the subnet data source."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, model_validator

from vpc_infra.components.subnet import ById, ByName, LookupKey

logger: logging.Logger = logging.getLogger(__name__)

FieldType = Literal["string", "int", "set"]


class SubnetLookupArgs(BaseModel):
    """Data source inputs. Exactly one of ``identifier`` or ``name`` must be set.

    Raises ``pydantic.ValidationError`` when both or neither are supplied,
    or when a supplied value is empty.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    identifier: str | None = None
    name: str | None = None

    @model_validator(mode="after")
    def _exactly_one_key(self) -> SubnetLookupArgs:
        for field_name in ("identifier", "name"):
            value = getattr(self, field_name)
            if value is not None and not value.strip():
                raise ValueError(f"{field_name} must not be empty")
        if (self.identifier is None) == (self.name is None):
            raise ValueError("exactly one of identifier or name must be specified")
        return self

    def to_key(self) -> LookupKey:
        if self.identifier is not None:
            return ById(self.identifier)
        return ByName(self.name)  # type: ignore[arg-type]  # validator guarantees name is set


@dataclass(frozen=True)
class FieldSpec:
    name: str
    type: FieldType
    computed: bool = True
    optional: bool = False
    description: str = ""


SUBNET_SCHEMA: tuple[FieldSpec, ...] = (
    FieldSpec("identifier", "string", computed=False, optional=True),
    FieldSpec("name", "string", computed=True, optional=True),
    FieldSpec("ipv4_cidr_block", "string"),
    FieldSpec("available_ipv4_address_count", "int"),
    FieldSpec("total_ipv4_address_count", "int"),
    FieldSpec("tags", "set", description="List of tags"),
    FieldSpec("access_tags", "set", description="List of access tags"),
    FieldSpec("crn", "string", description="The crn of the resource"),
    FieldSpec("network_acl", "string"),
    FieldSpec("public_gateway", "string"),
    FieldSpec("status", "string"),
    FieldSpec("vpc", "string"),
    FieldSpec("vpc_name", "string"),
    FieldSpec("zone", "string"),
    FieldSpec("resource_group", "string"),
    FieldSpec(
        "resource_controller_url",
        "string",
        description=(
            "The URL of the IBM Cloud dashboard that can be used to explore and view "
            "details about this instance"
        ),
    ),
    FieldSpec("resource_name", "string", description="The name of the resource"),
    FieldSpec("resource_crn", "string", description="The crn of the resource"),
    FieldSpec("resource_status", "string", description="The status of the resource"),
    FieldSpec(
        "resource_group_name",
        "string",
        description="The resource group name in which resource is provisioned",
    ),
)


def input_names() -> list[str]:
    """Names of the fields a caller may set: the mutually exclusive lookup keys."""
    return [spec.name for spec in SUBNET_SCHEMA if spec.optional]


def output_names() -> list[str]:
    """Names of every field the data source computes."""
    return [spec.name for spec in SUBNET_SCHEMA if spec.computed]
