from typer.testing import CliRunner

from chainshell.cli import app

runner = CliRunner()


def test_cli_exits_cleanly_on_exit_command() -> None:
    result = runner.invoke(app, ["--no-history"], input="exit\n")
    assert result.exit_code == 0
    assert "shell[1]% exit\n" in result.output


def test_cli_ends_at_end_of_input() -> None:
    result = runner.invoke(app, ["--no-history"], input="; ;\n")
    assert result.exit_code == 0
    assert result.output == "shell[1]% shell[2]% \n"


def test_cli_with_history_file_exits_cleanly(tmp_path) -> None:
    history = tmp_path / "history"
    result = runner.invoke(app, ["--history-file", str(history)], input="exit\n")
    assert result.exit_code == 0


def test_cli_saves_history_after_exit(tmp_path, monkeypatch) -> None:
    saved = []
    monkeypatch.setattr("chainshell.cli.save_history", lambda path: saved.append(path))
    history = tmp_path / "history"
    result = runner.invoke(app, ["--history-file", str(history)], input="exit\nnever\n")
    assert result.exit_code == 0
    assert saved == [str(history)]
    assert "never" not in result.output
