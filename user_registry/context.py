"""
Process-wide handle on configuration and store access.

A RegistryContext is built once at cold start and handed to the router.
It is never mutated afterwards; tests build their own against a moto table
or substitute fake APIs.
"""

import logging
from dataclasses import dataclass

from .config import RegistryConfig
from .core import TableGateway, create_table_gateway
from .handlers import UserReadApi, UserWriteApi

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryContext:
    config: RegistryConfig
    gateway: TableGateway
    read_api: UserReadApi
    write_api: UserWriteApi

    @classmethod
    def from_config(cls, config: RegistryConfig) -> 'RegistryContext':
        """Wire one shared gateway into the read and write APIs."""
        gateway = create_table_gateway(config)
        logger.info(f"Registry context initialized for table {gateway.table_name}")
        return cls(
            config=config,
            gateway=gateway,
            read_api=UserReadApi(config, gateway),
            write_api=UserWriteApi(config, gateway),
        )

    @classmethod
    def from_env(cls) -> 'RegistryContext':
        """
        Build the context from environment variables.

        Raises:
            ConfigurationError: DYNAMODB_TABLE_NAME is missing or blank
        """
        return cls.from_config(RegistryConfig.from_env())
