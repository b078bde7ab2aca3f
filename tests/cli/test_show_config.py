"""Tests for the deploy-config command line."""

import json

import pytest

from deploy_config.cli import main, show_deploy_config
from deploy_config.errors import UnknownNetwork


def _json_block(output):
    """Extract the JSON document printed after the summary header."""
    start = output.index("{")
    end = output.index("}", start) + 1
    return json.loads(output[start:end])


class TestShowDeployConfig:

    def test_prints_resolved_config(self, config_dir, capsys):
        config = show_deploy_config("goerli", config_dir)

        out = capsys.readouterr().out
        assert "Network:  goerli" in out
        assert "Chain ID: 420" in out
        assert _json_block(out) == config.to_raw()

    def test_verbose_lists_defaulted_fields(self, config_dir, capsys):
        show_deploy_config("goerli", config_dir, verbose=True)

        out = capsys.readouterr().out
        assert "Defaults applied:" in out
        assert "gasPriceOracleOverhead" in out.split("Defaults applied:")[1]

    def test_verbose_skips_fields_without_default_value(self, config_dir, capsys):
        show_deploy_config("goerli", config_dir, verbose=True)

        defaulted = capsys.readouterr().out.split("Defaults applied:")[1].strip().split(", ")
        assert "gasPrice" not in defaulted
        assert "hfBerlinBlock" in defaulted

    def test_unknown_network_raises(self, config_dir):
        with pytest.raises(UnknownNetwork):
            show_deploy_config("mainnet", config_dir)


class TestMain:

    def test_success_exit_status(self, config_dir, capsys):
        assert main(["goerli", "--config-dir", str(config_dir)]) == 0
        assert "goerli" in capsys.readouterr().out

    def test_list_networks(self, config_dir, capsys):
        assert main(["--list", "--config-dir", str(config_dir)]) == 0
        assert capsys.readouterr().out.split() == ["goerli"]

    def test_list_empty_directory(self, tmp_path, capsys):
        assert main(["--list", "--config-dir", str(tmp_path / "empty")]) == 0
        assert "No deploy configs found" in capsys.readouterr().out

    def test_unknown_network_exit_status(self, config_dir, capsys):
        assert main(["mainnet", "--config-dir", str(config_dir)]) == 1

        err = capsys.readouterr().err
        assert "no deploy config found for network: mainnet" in err

    def test_invalid_config_exit_status(self, write_network_config, raw_config, capsys):
        raw_config["ovmProposerAddress"] = "not-an-address"
        config_dir = write_network_config("goerli", raw_config)

        assert main(["goerli", "--config-dir", str(config_dir)]) == 1

        err = capsys.readouterr().err
        assert "ovmProposerAddress" in err
        assert "network: goerli" in err

    def test_broken_config_file_exit_status(self, tmp_path, capsys):
        (tmp_path / "goerli.py").write_text("CONFIG = {\n")

        assert main(["goerli", "--config-dir", str(tmp_path)]) == 1

        err = capsys.readouterr().err
        assert "no deploy config found for network: goerli" in err

    def test_missing_network_argument(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
        assert "network name is required" in capsys.readouterr().err
