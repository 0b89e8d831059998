"""chainshell command line entry point."""

from pathlib import Path
from typing import Optional

import typer

from chainshell import config
from chainshell.executor import ProcessFacility
from chainshell.history import init_readline, load_history, save_history
from chainshell.logging_utils import configure_logging
from chainshell.shell import Session

app = typer.Typer(
    name="chainshell",
    help="Minimal command interpreter with ';' and '&' command chains.",
    add_completion=False,
)


def _terminate_session() -> None:
    raise typer.Exit(0)


@app.command()
def main(
    history_file: Optional[Path] = typer.Option(None, "--history-file", help="Where line history is kept."),
    no_history: bool = typer.Option(False, "--no-history", help="Do not load or save line history."),
    log_level: str = typer.Option(config.LOG_LEVEL, "--log-level", help="Diagnostic log level (stderr)."),
) -> None:
    configure_logging(log_level)

    history_path = str(history_file) if history_file else config.HISTORY_FILE
    if not no_history:
        init_readline()
        load_history(history_path)

    session = Session(ProcessFacility(), on_terminate=_terminate_session)
    try:
        session.run()
    finally:
        if not no_history:
            save_history(history_path)


if __name__ == "__main__":
    app()
