"""CLIConfig: Command-line options for inspecting deploy configs.

This schema handles command-line arguments parsed by argparse.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import ConfigDict, model_validator

from deploy_config.schemas.base import DeployBaseModel


class CLIConfig(DeployBaseModel):
    """Command-line options.

    Notes
    -----
    Either ``network`` or ``list_networks`` must be given. ``verbose``
    implies DEBUG logging unless ``log_level`` is set explicitly.

    Usage
    -----
        cli_cfg = CLIConfig(network="goerli", config_dir="deploy-config")
    """

    network: Optional[str] = None
    config_dir: Optional[Path] = None
    list_networks: bool = False
    verbose: bool = False
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    # argparse hands over plain strings for paths
    model_config = ConfigDict(strict=False)

    @model_validator(mode="after")
    def require_network_or_list(self):
        """A network name is required unless only listing networks."""
        if self.network is None and not self.list_networks:
            raise ValueError("a network name is required (or use --list)")
        return self

    @property
    def effective_log_level(self) -> str:
        if self.log_level is not None:
            return self.log_level
        return "DEBUG" if self.verbose else "WARNING"
