"""CLI interface using Typer."""

import os
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from autoassign import __version__
from autoassign.assign import run_assignment
from autoassign.changes import GitError
from autoassign.config import ConfigError
from autoassign.output import get_formatter

app = typer.Typer(
  name="autoassign",
  help="Assign pull request reviewers from path ownership rules",
  no_args_is_help=False,
)

console = Console()
err_console = Console(stderr=True)


def _is_debug() -> bool:
  return os.environ.get("AUTOASSIGN_DEBUG", "").lower() in ("1", "true", "yes")


def version_callback(value: bool) -> None:
  if value:
    console.print(f"autoassign {__version__}")
    raise typer.Exit()


def _read_stdin_paths() -> list[str]:
  stream = typer.get_text_stream("stdin")
  return [line for line in stream.read().splitlines() if line.strip()]


@app.command()
def main(
  files: Optional[list[str]] = typer.Argument(
    None,
    help="Changed file paths (use '-' to read them from stdin)",
  ),
  branch: str = typer.Option(None, "--branch", "-b", help="Branch to compare against base"),
  base: str = typer.Option("main", "--base", help="Base branch for comparison"),
  config: Path = typer.Option(None, "--config", "-c", help="Reviewer config file path"),
  author: str = typer.Option(
    None, "--author", "-a", envvar="AUTOASSIGN_AUTHOR",
    help="Change author, never assigned as reviewer",
  ),
  max_reviewers: int = typer.Option(
    None, "--max-reviewers", "-n", help="Maximum number of reviewers (default from config, else 2)"
  ),
  format_type: str = typer.Option(
    "terminal", "--format", help="Output format: terminal, json, markdown, github"
  ),
  debug: bool = typer.Option(False, "--debug", "-d", help="Show full traceback on errors"),
  version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
  """Pick reviewers for changed files.

  With no arguments, uses staged git changes.
  With --branch, uses the changes between base and branch.
  With file arguments, uses the given paths directly.
  """
  show_traceback = debug or _is_debug()

  try:
    formatter = get_formatter(format_type)
    if not files:
      files = None
    elif list(files) == ["-"]:
      files = _read_stdin_paths()

    result = run_assignment(
      files=files,
      branch=branch,
      base=base,
      config_path=config,
      author=author,
      max_reviewers=max_reviewers,
    )

    output = formatter.format(result)
    if output:
      typer.echo(output)

  except ConfigError as e:
    err_console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except GitError as e:
    err_console.print(f"[red]Error:[/red] {e}")
    raise typer.Exit(1) from None
  except Exception as e:
    err_console.print(f"[red]Error:[/red] {e}")
    if show_traceback:
      err_console.print("\n[dim]Traceback:[/dim]")
      err_console.print(traceback.format_exc())
    raise typer.Exit(1) from None


if __name__ == "__main__":
  app()
