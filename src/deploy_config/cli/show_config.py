"""Core logic for printing a network's resolved deploy configuration.

show_deploy_config() is the real implementation; main() only parses
arguments, sets up logging and maps errors to an exit status.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import Optional, Sequence, Union

from pydantic import ValidationError as PydanticValidationError

from deploy_config.errors import DeployConfigError
from deploy_config.networks import available_networks, default_config_dir, get_config, load_raw_config
from deploy_config.schemas import DEPLOY_CONFIG_SCHEMA, CLIConfig, DeployConfig


logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    log_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def show_deploy_config(
    network: str,
    config_dir: Optional[Union[str, Path]] = None,
    verbose: bool = False,
) -> DeployConfig:
    """Resolve a network's deploy config and print it.

    Parameters
    ----------
    network : str
        Network name.
    config_dir : str or Path, optional
        Directory holding per-network config files.
    verbose : bool, optional
        If True, also print which fields were filled from defaults.

    Returns
    -------
    DeployConfig
        The resolved configuration that was printed.

    Raises
    ------
    UnknownNetwork
        If no configuration file exists for ``network``.
    ValidationError
        If the configuration is invalid.
    """
    raw = load_raw_config(network, config_dir)
    config = get_config(network, loader=lambda _: raw)
    directory = Path(config_dir) if config_dir is not None else default_config_dir()

    print(f"{'='*60}")
    print("Deploy Configuration")
    print('='*60)
    print(f"Network:  {config.network}")
    print(f"Chain ID: {config.l2_chain_id}")
    print(f"Source:   {directory / f'{network}.py'}")
    print('='*60)
    print(json.dumps(config.to_raw(), indent=2))

    if verbose:
        defaulted = [
            name for name, spec in DEPLOY_CONFIG_SCHEMA.items()
            if raw.get(name) is None and spec.default is not None
        ]
        if defaulted:
            print(f"Defaults applied: {', '.join(defaulted)}")

    return config


def list_networks(config_dir: Optional[Union[str, Path]] = None) -> list[str]:
    """Print and return the networks that have a config file."""
    networks = available_networks(config_dir)
    if not networks:
        directory = Path(config_dir) if config_dir is not None else default_config_dir()
        print(f"No deploy configs found in {directory}")
    for name in networks:
        print(name)
    return networks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deploy-config",
        description="Resolve and print the deploy configuration of a network",
    )
    parser.add_argument("network", nargs="?", help="Network name (file stem in the config directory)")
    parser.add_argument("--config-dir", help="Directory of per-network config files")
    parser.add_argument("--list", dest="list_networks", action="store_true", help="List available networks and exit")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], help="Logging level")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        cli_cfg = CLIConfig.model_validate({
            k: v
            for k, v in vars(args).items()
            if v is not None
        })
    except PydanticValidationError as err:
        parser.error(err.errors()[0]["msg"])

    configure_logging(cli_cfg.effective_log_level)

    if cli_cfg.list_networks:
        list_networks(cli_cfg.config_dir)
        return 0

    try:
        show_deploy_config(cli_cfg.network, cli_cfg.config_dir, verbose=cli_cfg.verbose)
    except DeployConfigError as err:
        logger.debug("Deploy config resolution failed", exc_info=True)
        print(f"error: {err}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
