"""Pytest fixtures."""

from pathlib import Path
from typing import Callable

import pytest
from autoassign.models import Assignment, AssignmentSource, ReviewerRule


@pytest.fixture
def sample_rules() -> list[ReviewerRule]:
  return [
    ReviewerRule(patterns=["src/api/**"], users=["backend1", "backend2"]),
    ReviewerRule(patterns=["*.tf"], users=["ops"]),
    ReviewerRule(patterns=["infra/**"], users=["ops", "lead"]),
    ReviewerRule(patterns=["**/*.tsx", "web/**/*.css"], users=["frontend"]),
  ]


@pytest.fixture
def sample_config() -> str:
  return """
reviewers:
  - patterns: ["src/api/**"]
    users: [backend1, backend2]
  - patterns: "*.tf"
    users: ops
  - patterns: ["infra/**"]
    users: [ops, lead]
defaults:
  reviewers: [lead1, lead2, lead3]
max_reviewers: 2
"""


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
  def _write(content: str, name: str = ".github/reviewers.yml") -> Path:
    path = tmp_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path

  return _write


@pytest.fixture
def sample_assignment() -> Assignment:
  return Assignment(
    reviewers=["ops", "lead"],
    scores={"ops": 2, "lead": 1},
    source=AssignmentSource.RULES,
    summary="Assigned 2 reviewer(s) from matching rules (1 changed file).",
    changed_files=1,
  )
