"""Core assignment orchestration."""

from pathlib import Path

from rich.console import Console

from autoassign.changes import changes_from_paths, list_branch_changes, list_staged_changes
from autoassign.config import load_config
from autoassign.matching import assign_reviewers
from autoassign.models import (
  Assignment,
  AssignmentSource,
  ChangeSet,
  ReviewerConfig,
)

_console = Console(stderr=True)


class ReviewerAssigner:
  """Assigns reviewers for a change using a reviewer config."""

  def __init__(self, config: ReviewerConfig, author: str | None = None):
    self.config = config
    self.author = author

  def assign_staged(self, cwd: Path | None = None) -> Assignment:
    """Assign reviewers for staged changes."""
    return self._perform_assignment(list_staged_changes(cwd))

  def assign_branch(
    self,
    branch: str,
    base: str = "main",
    cwd: Path | None = None,
  ) -> Assignment:
    """Assign reviewers for changes between branches."""
    return self._perform_assignment(list_branch_changes(branch, base, cwd))

  def assign_files(self, files: list[str]) -> Assignment:
    """Assign reviewers for an explicit list of paths."""
    return self._perform_assignment(changes_from_paths(files))

  def _perform_assignment(self, changes: ChangeSet) -> Assignment:
    files = list(changes.files)
    _console.print(f"[dim]{len(files)} changed file(s) ({changes.target_ref})[/dim]")

    assignment = assign_reviewers(
      files,
      self.config.rules,
      defaults=self.config.defaults,
      exclude=self.author,
      max_reviewers=self.config.max_reviewers,
    )
    matched = len(assignment.matched_rules)
    _console.print(f"[dim]{matched} of {len(self.config.rules)} rule(s) matched[/dim]")

    if assignment.source == AssignmentSource.DEFAULTS:
      _console.print(f"Using default reviewers: {', '.join(assignment.reviewers)}")
    elif assignment.source == AssignmentSource.NONE:
      _console.print("No matching reviewers found for changed files.")
    return assignment


def _skipped(reason: str) -> Assignment:
  _console.print(f"[yellow]Warning:[/yellow] {reason}")
  return Assignment(reviewers=[], source=AssignmentSource.NONE, summary=reason)


def run_assignment(
  files: list[str] | None = None,
  branch: str | None = None,
  base: str = "main",
  config_path: Path | None = None,
  author: str | None = None,
  max_reviewers: int | None = None,
  cwd: Path | None = None,
) -> Assignment:
  """Run a reviewer assignment with the given options.

  An explicit file list, even an empty one, takes precedence over git.
  """
  settings = load_config(config_path, cwd)
  if settings is None:
    return _skipped("No reviewer config file found. Skipping reviewer assignment.")
  if not settings.has_rules:
    return _skipped("No reviewers configuration found. Skipping assignment.")

  settings = settings.model_copy(deep=True)
  if max_reviewers is not None:
    settings.max_reviewers = max_reviewers

  assigner = ReviewerAssigner(settings.to_reviewer_config(), author=author)

  if files is not None:
    return assigner.assign_files(files)
  if branch:
    return assigner.assign_branch(branch, base, cwd)
  return assigner.assign_staged(cwd)
