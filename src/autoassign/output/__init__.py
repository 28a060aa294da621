"""Output formatting."""

from autoassign.output.formatter import (
    GitHubFormatter,
    JsonFormatter,
    MarkdownFormatter,
    OutputFormatter,
    TerminalFormatter,
    get_formatter,
)

__all__ = [
  "OutputFormatter",
  "TerminalFormatter",
  "JsonFormatter",
  "MarkdownFormatter",
  "GitHubFormatter",
  "get_formatter",
]
