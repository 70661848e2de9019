from typer.testing import CliRunner
from artifact_fs.cli.app import app

runner = CliRunner()

def test_cli_help_runs():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Usage" in result.stdout
    for command in ("walk", "du", "info", "which"):
        assert command in result.stdout
