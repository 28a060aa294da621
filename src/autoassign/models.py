"""Core domain models for reviewer assignment."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Sequence

DEFAULT_MAX_REVIEWERS = 2


class AssignmentSource(Enum):
  """Where the selected reviewers came from."""

  RULES = "rules"
  DEFAULTS = "defaults"
  NONE = "none"


class ChangeSource(Enum):
  """How the changed file list was obtained."""

  STAGED = "staged"
  BRANCH = "branch"
  FILES = "files"


@dataclass(frozen=True)
class ReviewerRule:
  """Path patterns owned by a list of candidate reviewers.

  A rule matches a change when any of its patterns matches any changed
  file. Both fields may also hold a single string.
  """

  patterns: Sequence[str] | str = ()
  users: Sequence[str] | str = ()


@dataclass(frozen=True)
class ReviewerConfig:
  """Parsed reviewer configuration handed to the engine."""

  rules: Sequence[ReviewerRule]
  defaults: Sequence[str] = ()
  max_reviewers: int = DEFAULT_MAX_REVIEWERS


@dataclass(frozen=True)
class ChangeSet:
  """Paths touched by a change, relative to the repository root."""

  files: Sequence[str]
  source: ChangeSource = ChangeSource.STAGED
  base_ref: str = "HEAD"
  target_ref: str = "staged"


@dataclass(frozen=True)
class Assignment:
  """Result of a reviewer assignment."""

  reviewers: Sequence[str]
  scores: Mapping[str, int] = field(default_factory=dict)
  source: AssignmentSource = AssignmentSource.NONE
  summary: str = ""
  changed_files: int = 0
  matched_rules: Sequence[int] = ()

  @property
  def has_reviewers(self) -> bool:
    return bool(self.reviewers)
