"""`deploy_config` - Resolve and validate per-network L2 deployment configuration.

Subpackages:
- schemas: Schema registry, resolved config model, resolver
- networks: Per-network config loading and the get_config entry point
- cli: Command-line inspection of resolved configs
"""

from deploy_config.errors import (
    DeployConfigError,
    InvalidFieldType,
    MissingRequiredField,
    UnknownField,
    UnknownNetwork,
    ValidationError,
)
from deploy_config.networks import get_config, load_raw_config
from deploy_config.schemas import DeployConfig, resolve_deploy_config

__version__ = "0.1.0"

__all__ = [
    'DeployConfig',
    'DeployConfigError',
    'InvalidFieldType',
    'MissingRequiredField',
    'UnknownField',
    'UnknownNetwork',
    'ValidationError',
    'get_config',
    'load_raw_config',
    'resolve_deploy_config',
]
