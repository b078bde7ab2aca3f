"""Command-line interface for inspecting resolved deploy configs.

This package contains the core execution logic, making scripts/ optional and deletable.
"""

from deploy_config.cli.show_config import main, show_deploy_config

__all__ = ['main', 'show_deploy_config']
