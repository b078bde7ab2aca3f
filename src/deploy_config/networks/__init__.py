"""Network loader: maps a network name to its raw deploy configuration."""

from deploy_config.networks.loader import (
    available_networks,
    default_config_dir,
    get_config,
    load_raw_config,
)

__all__ = ['available_networks', 'default_config_dir', 'get_config', 'load_raw_config']
