"""Output formatting for assignment results."""

import json
from abc import ABC, abstractmethod

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from autoassign.models import Assignment, AssignmentSource


class OutputFormatter(ABC):
  """Base output formatter."""

  @abstractmethod
  def format(self, result: Assignment) -> str:
    """Format assignment result for output."""
    ...


def _describe(result: Assignment, reviewer: str) -> str:
  score = result.scores.get(reviewer)
  if score is None:
    return "default"
  return f"matched {score} rule(s)"


class TerminalFormatter(OutputFormatter):
  """Rich terminal output formatter."""

  SOURCE_STYLES = {
    AssignmentSource.RULES: "green",
    AssignmentSource.DEFAULTS: "yellow",
    AssignmentSource.NONE: "dim",
  }

  def __init__(self, console: Console | None = None):
    self.console = console or Console()

  def format(self, result: Assignment) -> str:
    self._print_summary(result)
    self._print_reviewers(result)
    return ""

  def _print_summary(self, result: Assignment) -> None:
    self.console.print()
    self.console.print(Panel(
      result.summary,
      title=f"[bold]Reviewer Assignment[/bold] ({result.source.value})",
      border_style=self.SOURCE_STYLES.get(result.source, "blue"),
    ))

  def _print_reviewers(self, result: Assignment) -> None:
    if not result.reviewers:
      self.console.print("\n[dim]No reviewers assigned.[/dim]")
      return

    table = Table(show_header=True, header_style="bold")
    table.add_column("#", width=3, justify="right")
    table.add_column("Reviewer", min_width=20)
    table.add_column("Reason", min_width=20)

    for position, reviewer in enumerate(result.reviewers, start=1):
      table.add_row(str(position), f"@{reviewer}", _describe(result, reviewer))

    self.console.print()
    self.console.print(table)


class JsonFormatter(OutputFormatter):
  """JSON output formatter."""

  def format(self, result: Assignment) -> str:
    data = {
      "reviewers": list(result.reviewers),
      "scores": dict(result.scores),
      "source": result.source.value,
      "summary": result.summary,
      "changed_files": result.changed_files,
    }
    return json.dumps(data, indent=2)


class MarkdownFormatter(OutputFormatter):
  """Markdown output formatter, suitable for a job summary."""

  def format(self, result: Assignment) -> str:
    lines = ["## Auto-Assigned Reviewers", "", result.summary, ""]

    if result.reviewers:
      for reviewer in result.reviewers:
        lines.append(f"- @{reviewer} ({_describe(result, reviewer)})")
    else:
      lines.append("No reviewers assigned.")
    lines.append("")

    return "\n".join(lines)


class GitHubFormatter(OutputFormatter):
  """GitHub Actions step output and workflow annotation."""

  OUTPUT_NAME = "assigned-reviewers"

  def format(self, result: Assignment) -> str:
    summary = result.summary.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
    return "\n".join([
      f"{self.OUTPUT_NAME}={','.join(result.reviewers)}",
      f"::notice title=Reviewer assignment::{summary}",
    ])


def get_formatter(format_type: str) -> OutputFormatter:
  """Get formatter by type name."""
  formatters = {
    "terminal": TerminalFormatter,
    "json": JsonFormatter,
    "markdown": MarkdownFormatter,
    "github": GitHubFormatter,
  }
  formatter_class = formatters.get(format_type)
  if not formatter_class:
    raise ValueError(f"Unknown format: {format_type}")
  return formatter_class()
