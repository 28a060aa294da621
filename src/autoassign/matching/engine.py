"""Reviewer assignment engine."""

from typing import Any, Sequence

from autoassign.matching.evaluator import RuleLike, matching_rules, tally
from autoassign.matching.resolver import resolve
from autoassign.models import DEFAULT_MAX_REVIEWERS, Assignment, AssignmentSource


def assign_reviewers(
  changed_files: Sequence[str],
  rules: Sequence[RuleLike],
  defaults: Any = (),
  exclude: str | None = None,
  max_reviewers: int = DEFAULT_MAX_REVIEWERS,
) -> Assignment:
  """Evaluate rules against changed files and pick reviewers.

  This is a pure function: it performs no I/O and keeps no state
  between calls.

  Example:
    assignment = assign_reviewers(
      ["src/api/handler.go"],
      [ReviewerRule(patterns=["src/api/**"], users=["backend1", "backend2"])],
      exclude="backend1",
    )
    assignment.reviewers  # ["backend2"]
  """
  matched = matching_rules(changed_files, rules)
  scores = tally(rules, matched, exclude)
  reviewers = resolve(scores, defaults, exclude, max_reviewers)

  if not reviewers:
    source = AssignmentSource.NONE
  elif scores:
    source = AssignmentSource.RULES
  else:
    source = AssignmentSource.DEFAULTS

  return Assignment(
    reviewers=reviewers,
    scores={r: scores[r] for r in reviewers if r in scores},
    source=source,
    summary=_summarize(reviewers, source, len(changed_files)),
    changed_files=len(changed_files),
    matched_rules=tuple(matched),
  )


def _summarize(reviewers: list[str], source: AssignmentSource, file_count: int) -> str:
  files = f"{file_count} changed file{'s' if file_count != 1 else ''}"
  if source == AssignmentSource.RULES:
    return f"Assigned {len(reviewers)} reviewer(s) from matching rules ({files})."
  if source == AssignmentSource.DEFAULTS:
    return f"No rules matched; assigned {len(reviewers)} default reviewer(s) ({files})."
  return f"No matching reviewers found ({files})."
