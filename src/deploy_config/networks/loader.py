"""Per-network deploy configuration loading.

Each network's raw configuration lives in ``<config_dir>/<network>.py``,
a plain Python file defining a ``CONFIG`` dict keyed by config field name:

    CONFIG = {
        "network": "goerli",
        "l1BlockTimeSeconds": 15,
        ...
    }

get_config() is the public entry point: it loads that dict and resolves
it into a DeployConfig.
"""

import os
import logging
import importlib.util
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Union

from deploy_config.errors import UnknownNetwork, ValidationError
from deploy_config.schemas import DeployConfig, resolve_deploy_config


logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "DEPLOY_CONFIG_DIR"
CONFIG_VARIABLE = "CONFIG"

PathLike = Union[str, Path]
RawConfigLoader = Callable[[str], Mapping[str, Any]]


def default_config_dir() -> Path:
    """Directory holding per-network config files.

    ``$DEPLOY_CONFIG_DIR`` if set, otherwise ``./deploy-config``.
    """
    env_dir = os.environ.get(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.cwd() / "deploy-config"


def _resolve_dir(config_dir: Optional[PathLike]) -> Path:
    if config_dir is None:
        return default_config_dir()
    return Path(config_dir).expanduser()


def available_networks(config_dir: Optional[PathLike] = None) -> list[str]:
    """List network names that have a config file.

    Parameters
    ----------
    config_dir : str or Path, optional
        Directory to scan. Defaults to default_config_dir().

    Returns
    -------
    list of str
        Sorted network names. Empty if the directory does not exist.
    """
    directory = _resolve_dir(config_dir)
    if not directory.is_dir():
        return []
    return sorted(
        path.stem for path in directory.glob("*.py")
        if not path.stem.startswith("_")
    )


def load_raw_config(network: str, config_dir: Optional[PathLike] = None) -> dict[str, Any]:
    """Load the raw (unvalidated) config dict for a network.

    Parameters
    ----------
    network : str
        Network name; the config file is ``<config_dir>/<network>.py``.
    config_dir : str or Path, optional
        Directory holding config files. Defaults to default_config_dir().

    Returns
    -------
    dict
        Copy of the file's CONFIG dict.

    Raises
    ------
    UnknownNetwork
        If the name is not a plain file stem, the file does not exist,
        fails to execute, or defines no CONFIG dict.
    """
    directory = _resolve_dir(config_dir)

    if not network or Path(network).name != network or network.startswith(("_", ".")):
        raise UnknownNetwork(network, available_networks(directory))

    path = directory / f"{network}.py"
    if not path.is_file():
        raise UnknownNetwork(network, available_networks(directory))

    logger.debug("Loading deploy config: %s", path)
    spec = importlib.util.spec_from_file_location(f"deploy_config_{network}", path)
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as err:
        logger.warning("Failed to load %s: %s", path, err)
        raise UnknownNetwork(network, available_networks(directory)) from err

    config = getattr(module, CONFIG_VARIABLE, None)
    if not isinstance(config, dict):
        logger.warning("No %s dict found in %s", CONFIG_VARIABLE, path)
        raise UnknownNetwork(network, available_networks(directory))

    return dict(config)


def get_config(
    network: str,
    config_dir: Optional[PathLike] = None,
    loader: Optional[RawConfigLoader] = None,
) -> DeployConfig:
    """Get the resolved deploy config for a network.

    Parameters
    ----------
    network : str
        Network name.
    config_dir : str or Path, optional
        Directory holding config files (ignored when ``loader`` is given).
    loader : callable, optional
        ``loader(network) -> raw config``. Defaults to reading
        ``<config_dir>/<network>.py`` via load_raw_config().

    Returns
    -------
    DeployConfig
        Fully resolved configuration.

    Raises
    ------
    UnknownNetwork
        If no configuration source exists for ``network``.
    ValidationError
        If the configuration is invalid; ``err.network`` names the network.

    Examples
    --------
    >>> config = get_config("goerli")
    >>> config.l2_chain_id
    420
    """
    if loader is None:
        raw = load_raw_config(network, config_dir)
    else:
        raw = loader(network)

    try:
        config = resolve_deploy_config(raw)
    except ValidationError as err:
        err.network = network
        raise

    logger.info("Resolved deploy config for network: %s", network)
    return config
