from .config import TABLE_NAME_ENV_VAR, RegistryConfig

__all__ = [
    "RegistryConfig",
    "TABLE_NAME_ENV_VAR",
]
