"""Changed file listing from git or explicit paths."""

import subprocess
from pathlib import Path
from typing import Iterable

from autoassign.models import ChangeSet, ChangeSource


class GitError(Exception):
  """Git command failed."""


def _sanitize_error(stderr: str) -> str:
  """Remove potentially sensitive path information from error messages."""
  lines = stderr.strip().split("\n")
  sanitized = []
  for line in lines:
    if "fatal:" in line or "error:" in line:
      sanitized.append(line.split("/")[-1] if "/" in line else line)
    else:
      sanitized.append(line)
  return "\n".join(sanitized)


def run_git(*args: str, cwd: Path | None = None) -> str:
  """Run a git command and return stdout."""
  try:
    result = subprocess.run(
      ["git", *args],
      capture_output=True,
      text=True,
      check=True,
      cwd=cwd,
    )
    return result.stdout
  except FileNotFoundError as e:
    raise GitError("git executable not found") from e
  except subprocess.CalledProcessError as e:
    sanitized = _sanitize_error(e.stderr)
    raise GitError(f"git {' '.join(args)} failed: {sanitized}") from e


def normalize_paths(paths: Iterable[str]) -> list[str]:
  """Clean up path strings and drop duplicates, keeping first-seen order."""
  cleaned: list[str] = []
  for raw in paths:
    path = raw.strip().replace("\\", "/")
    while path.startswith("./"):
      path = path[2:]
    if path:
      cleaned.append(path)
  return list(dict.fromkeys(cleaned))


def parse_name_only(output: str) -> list[str]:
  """Parse `git diff --name-only` output into paths."""
  if not output.strip():
    return []
  return normalize_paths(output.split("\n"))


def list_staged_changes(cwd: Path | None = None) -> ChangeSet:
  """List files with staged changes."""
  output = run_git("diff", "--cached", "--name-only", cwd=cwd)
  return ChangeSet(
    files=parse_name_only(output),
    source=ChangeSource.STAGED,
    base_ref="HEAD",
    target_ref="staged",
  )


def list_branch_changes(
  branch: str,
  base: str = "main",
  cwd: Path | None = None,
) -> ChangeSet:
  """List files changed on branch since it diverged from base."""
  output = run_git("diff", "--name-only", f"{base}...{branch}", cwd=cwd)
  return ChangeSet(
    files=parse_name_only(output),
    source=ChangeSource.BRANCH,
    base_ref=base,
    target_ref=branch,
  )


def changes_from_paths(paths: Iterable[str]) -> ChangeSet:
  """Wrap explicit paths as a ChangeSet.

  Paths are not checked against the filesystem, so deleted files
  can still be routed to their owners.
  """
  return ChangeSet(
    files=normalize_paths(paths),
    source=ChangeSource.FILES,
    base_ref="N/A",
    target_ref="files",
  )
