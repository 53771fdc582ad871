from types import SimpleNamespace

import click
import pytest
from click.testing import CliRunner

from fundme_deployment import utils
from fundme_deployment.constants import NETWORK_CONFIG_FILEPATH
from fundme_deployment.deployer import ApeDeployer
from fundme_deployment.options import confirmations_option, tag_option
from scripts import deploy_fund_me as script

SENDER = SimpleNamespace(address="0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266")


@pytest.fixture
def sepolia(monkeypatch):
    network = SimpleNamespace(
        name="sepolia",
        chain_id=11155111,
        required_confirmations=6,
        ecosystem=SimpleNamespace(name="ethereum"),
    )
    provider = SimpleNamespace(network=network)
    monkeypatch.setattr(utils, "networks", SimpleNamespace(provider=provider))
    monkeypatch.setattr(script, "networks", SimpleNamespace(provider=provider))
    monkeypatch.setattr(script, "get_account", lambda alias, network, autosign: SENDER)
    return network


@pytest.fixture
def runs(monkeypatch):
    runs = []
    monkeypatch.setattr(script, "deploy_fund_me", lambda **kwargs: runs.append(kwargs))
    return runs


def _invoke(tmp_path, confirmations=None, tags=()):
    # the connected-provider command wrapper is bypassed; the callback is the command body
    script.cli.callback(
        account_alias="deployer",
        autosign=True,
        network_config_filepath=NETWORK_CONFIG_FILEPATH,
        registry_filepath=tmp_path / "deployments.json",
        confirmations=confirmations,
        tags=tags,
    )


def test_unmatched_tags_skip_the_run(tmp_path, sepolia, runs, capsys):
    _invoke(tmp_path, tags=("mocks",))

    assert runs == []
    assert "Skipping FundMe deployment" in capsys.readouterr().out


@pytest.mark.parametrize("tags", [(), ("all",), ("fundme",)])
def test_matching_tags_run(tmp_path, sepolia, runs, tags):
    _invoke(tmp_path, tags=tags)
    assert len(runs) == 1


def test_run_is_wired_from_provider_and_environment(tmp_path, sepolia, runs, monkeypatch):
    monkeypatch.setenv("ETHERSCAN_API_KEY", "ABC123")

    _invoke(tmp_path)

    (run,) = runs
    assert run["network"].name == "sepolia"
    assert run["network"].chain_id == 11155111
    assert run["network"].confirmations == 6
    assert run["sender"] is SENDER
    assert run["verification_enabled"] is True
    assert run["registry"].filepath == tmp_path / "deployments.json"
    assert isinstance(run["deployer"], ApeDeployer)
    assert run["deployer"].chain_id == 11155111
    assert run["deployer"].autosign is True
    assert 11155111 in run["network_config"]


def test_missing_api_key_disables_verification(tmp_path, sepolia, runs, monkeypatch):
    monkeypatch.delenv("ETHERSCAN_API_KEY", raising=False)

    _invoke(tmp_path)

    assert runs[0]["verification_enabled"] is False


def test_confirmations_option_overrides_network(tmp_path, sepolia, runs):
    _invoke(tmp_path, confirmations=2)
    assert runs[0]["network"].confirmations == 2


@click.command()
@confirmations_option
@tag_option
def _options_command(confirmations, tags):
    click.echo(f"{confirmations} {','.join(tags)}")


def test_options_parsing():
    result = CliRunner().invoke(_options_command, ["-c", "3", "-t", "all", "-t", "fundme"])
    assert result.exit_code == 0
    assert result.output.strip() == "3 all,fundme"


@pytest.mark.parametrize("value", ["0", "-1", "many"])
def test_confirmations_must_be_positive_integer(value):
    result = CliRunner().invoke(_options_command, ["--confirmations", value])
    assert result.exit_code != 0
