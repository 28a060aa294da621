"""Changed file discovery."""

from autoassign.changes.extractor import (
    GitError,
    changes_from_paths,
    list_branch_changes,
    list_staged_changes,
)

__all__ = [
  "changes_from_paths",
  "list_branch_changes",
  "list_staged_changes",
  "GitError",
]
