#!/usr/bin/env python3
"""Print the resolved deploy configuration of a network.

Usage:
    python scripts/show_deploy_config.py goerli
    python scripts/show_deploy_config.py goerli --config-dir deploy-config -v
    python scripts/show_deploy_config.py --list
"""

import sys

from deploy_config.cli import main


if __name__ == "__main__":
    sys.exit(main())
