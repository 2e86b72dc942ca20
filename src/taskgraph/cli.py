from __future__ import annotations

import json
from pathlib import Path

import typer

from .errors import ParseError
from .logging import get_logger, log_to_file
from .parser import DEFAULT_ROOT_KEY, YamlParser
from .task import Task


app = typer.Typer(add_completion=False, help="Build task graphs from YAML configs")
log = get_logger("taskgraph.cli")

ROOT_KEY_OPTION = typer.Option(
    DEFAULT_ROOT_KEY, envvar="TASKGRAPH_ROOT_KEY", help="Root key holding the tasks"
)


@app.callback()
def main_options(
    log_file: str = typer.Option(
        "", envvar="TASKGRAPH_LOG_FILE", help="Also write logs to this file"
    ),
):
    """Build task graphs from YAML configs."""
    if log_file:
        log_to_file(Path(log_file))


def _build(config: str, root_key: str) -> list[Task]:
    try:
        return YamlParser(root_key=root_key).parse_tasks(config)
    except ParseError as e:
        log.error("Failed to parse %s: %s", config, e)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def check(
    config: str = typer.Argument(..., help="Path to YAML config"),
    root_key: str = ROOT_KEY_OPTION,
):
    """Validate a config file."""
    tasks = _build(config, root_key)
    typer.echo(f"OK: {len(tasks)} tasks")


@app.command("list")
def list_tasks(
    config: str = typer.Argument(..., help="Path to YAML config"),
    root_key: str = ROOT_KEY_OPTION,
):
    """List tasks with their numeric ids and precursors."""
    tasks = _build(config, root_key)
    for t in tasks:
        after = ", ".join(str(p) for p in t.precursors) or "-"
        typer.echo(f"{t.id}\t{t.document_id}\t{t.name}\tafter: {after}")


@app.command()
def export(
    config: str = typer.Argument(..., help="Path to YAML config"),
    root_key: str = ROOT_KEY_OPTION,
    output: str = typer.Option("", help="Write JSON here instead of stdout"),
):
    """Export the resolved numeric graph as JSON."""
    tasks = _build(config, root_key)
    data = json.dumps({"tasks": [t.to_dict() for t in tasks]}, indent=2)
    if output:
        out = Path(output)
        try:
            out.parent.mkdir(parents=True, exist_ok=True)
            out.write_text(data + "\n", encoding="utf-8")
        except OSError as e:
            log.error("Failed to write %s: %s", out, e)
            typer.echo(f"Error: cannot write {out}: {e}", err=True)
            raise typer.Exit(code=1)
        log.info("Wrote %d tasks to %s", len(tasks), out)
    else:
        typer.echo(data)


def main():  # pragma: no cover
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
