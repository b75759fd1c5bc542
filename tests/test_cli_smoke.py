"""CLI smoke tests — verify commands are registered, help works, errors exit 1."""

import json
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from windriver.cli.app import cli
from windriver.config import configure
from windriver.errors import NotInstalledError
from windriver.models import PackageRecord
from windriver.store.lifecycle import PackageLifecycleController
from windriver.store.query import PackageQueryService

AUMID = "Contoso.App_8wekyb3d8bbwe!App"


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "winapp" in result.output


def test_cli_command_help():
    runner = CliRunner()
    for command in ["info", "installed", "activate", "terminate", "backup", "restore"]:
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0, command
        assert "APP_USER_MODEL_ID" in result.output


def test_cli_info_json(monkeypatch, tmp_path):
    monkeypatch.setenv("LOCALAPPDATA", str(tmp_path))
    configure()
    runner = CliRunner()
    result = runner.invoke(cli, ["--json", "info", AUMID])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["package_family_name"] == "Contoso.App_8wekyb3d8bbwe"
    assert data["package_name"] == "Contoso.App"
    assert data["application_id"] == "App"


def test_cli_info_resolve():
    query = MagicMock(spec=PackageQueryService)
    query.find.return_value = [PackageRecord(package_full_name="Contoso.App_1.0_x64__h")]
    controller = PackageLifecycleController(AUMID, query_service=query)

    with patch("windriver.cli.app._controller", return_value=controller):
        result = CliRunner().invoke(cli, ["info", "--resolve", AUMID])
    assert result.exit_code == 0
    assert "Contoso.App_1.0_x64__h" in result.output


def test_cli_info_malformed_id():
    result = CliRunner().invoke(cli, ["info", "Contoso.App"])
    assert result.exit_code == 1
    assert "Invalid Application User Model ID" in result.output


def test_cli_terminate_not_installed():
    controller = MagicMock()
    controller.terminate.side_effect = NotInstalledError("Contoso.App", "terminate")
    with patch("windriver.cli.app._controller", return_value=controller):
        result = CliRunner().invoke(cli, ["--json", "terminate", AUMID])
    assert result.exit_code == 1
    assert "not installed" in result.output


def test_cli_activate():
    controller = MagicMock()
    with patch("windriver.cli.app._controller", return_value=controller):
        result = CliRunner().invoke(cli, ["activate", AUMID])
    assert result.exit_code == 0
    controller.activate.assert_called_once_with()
    assert f"Activated {AUMID}" in result.output


def test_cli_installed_false_exits_nonzero():
    controller = MagicMock()
    controller.is_installed.return_value = False
    with patch("windriver.cli.app._controller", return_value=controller):
        result = CliRunner().invoke(cli, ["installed", AUMID])
    assert result.exit_code == 1
    assert "False" in result.output
