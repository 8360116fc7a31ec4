"""Pulumi entry point for the subnet data source stack."""
from vpc_infra.__main__ import SubnetStack, configure_logging
from vpc_infra.config import ProviderConfig

config = ProviderConfig.load()
configure_logging(config.log_level)
SubnetStack(config=config).run()
