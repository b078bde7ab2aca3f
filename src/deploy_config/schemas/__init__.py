"""Configuration schemas for network deployments.

This module provides the schema registry, the resolved configuration model
and the resolver that connects them.

Exports
-------
resolve_deploy_config : function
    Single entrypoint for configuration resolution
validate_supplied_fields : function
    Validation of only the fields a raw configuration supplies
DeployConfig : class
    Fully validated, immutable deploy configuration
DEPLOY_CONFIG_SCHEMA : mapping
    Field name -> FieldSpec for every recognized field
FieldSpec : class
    Declared type and default of one field
FieldType : class
    Closed set of field types with their validators
CLIConfig : class
    Command-line options
"""

from deploy_config.schemas.resolve import resolve_deploy_config, validate_supplied_fields
from deploy_config.schemas.deploy import DeployConfig
from deploy_config.schemas.fields import (
    DEPLOY_CONFIG_SCHEMA,
    ZERO_ADDRESS,
    FieldSpec,
    FieldType,
    field_defaults,
    get_field_spec,
    is_chain_address,
    required_fields,
)
from deploy_config.schemas.cli import CLIConfig

__all__ = [
    'resolve_deploy_config',
    'validate_supplied_fields',
    'DeployConfig',
    'DEPLOY_CONFIG_SCHEMA',
    'ZERO_ADDRESS',
    'FieldSpec',
    'FieldType',
    'field_defaults',
    'get_field_spec',
    'is_chain_address',
    'required_fields',
    'CLIConfig',
]
