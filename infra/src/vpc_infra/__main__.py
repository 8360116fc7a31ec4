"""Pulumi stack entry point for the subnet data source."""

from __future__ import annotations

import logging

import pulumi
import structlog

from vpc_infra.config import ProviderConfig
from vpc_infra.providers.ibm.subnet import SubnetDataSource

logger: logging.Logger = logging.getLogger(__name__)


class SubnetStack:
    """Looks up the configured subnet and exports its attributes."""

    def __init__(self, config: ProviderConfig) -> None:
        """Initialise the stack with resolved configuration."""
        self._config: ProviderConfig = config

    def run(self) -> SubnetDataSource:
        """Declare the lookup and export every output."""
        config = self._config
        if config.client_factory is None:
            raise ValueError(
                "VPC_CLIENT_FACTORY must name a callable taking a region and returning "
                "(subnet_client, tag_client)."
            )
        args = config.lookup_args()

        logger.info(
            "stack_run_started",
            extra={"region": config.region, "identifier": args.identifier, "subnet_name": args.name},
        )

        subnet = SubnetDataSource(
            "subnet",
            client_factory=config.client_factory,
            controller_url=config.controller_url,
            region=config.region,
            identifier=args.identifier,
            name=args.name,
        )

        pulumi.export("subnet_id", subnet.id)
        pulumi.export("subnet_name", subnet.name)
        pulumi.export("ipv4_cidr_block", subnet.ipv4_cidr_block)
        pulumi.export("available_ipv4_address_count", subnet.available_ipv4_address_count)
        pulumi.export("total_ipv4_address_count", subnet.total_ipv4_address_count)
        pulumi.export("zone", subnet.zone)
        pulumi.export("vpc", subnet.vpc)
        pulumi.export("vpc_name", subnet.vpc_name)
        pulumi.export("network_acl", subnet.network_acl)
        pulumi.export("public_gateway", subnet.public_gateway)
        pulumi.export("resource_group", subnet.resource_group)
        pulumi.export("resource_group_name", subnet.resource_group_name)
        pulumi.export("crn", subnet.crn)
        pulumi.export("tags", subnet.tags)
        pulumi.export("access_tags", subnet.access_tags)
        pulumi.export("resource_controller_url", subnet.resource_controller_url)
        return subnet


def configure_logging(level: str) -> None:
    """Apply ``level`` to structlog and to the stdlib loggers the modules use."""
    logging.basicConfig(level=level)
    logging.getLogger("vpc_infra").setLevel(level)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
    )


if __name__ == "__main__":
    config = ProviderConfig.load()
    configure_logging(config.log_level)
    SubnetStack(config=config).run()
