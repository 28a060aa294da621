"""Rule evaluation against a set of changed files."""

from typing import Any, Iterable, Mapping, Sequence

from autoassign.matching.pattern import PathPattern, compile_pattern
from autoassign.models import ReviewerRule

ScoreTable = dict[str, int]

RuleLike = ReviewerRule | Mapping[str, Any]


def normalize_candidate(candidate: str | None) -> str | None:
  """Normalize a candidate identifier for case-insensitive comparison."""
  if candidate is None:
    return None
  normalized = candidate.strip().casefold()
  return normalized or None


def as_list(value: Any) -> list[str]:
  """Coerce a rule field to a list of non-blank strings.

  A scalar string becomes a one-element list. None, non-string entries
  and blank strings contribute nothing.
  """
  if value is None:
    return []
  if isinstance(value, str):
    items: Iterable[Any] = [value]
  elif isinstance(value, Iterable):
    items = value
  else:
    return []
  return [item for item in items if isinstance(item, str) and item.strip()]


def _rule_field(rule: RuleLike, name: str) -> list[str]:
  if isinstance(rule, Mapping):
    return as_list(rule.get(name))
  return as_list(getattr(rule, name, None))


def _compile_all(patterns: list[str]) -> list[PathPattern]:
  compiled = (compile_pattern(p) for p in patterns)
  return [c for c in compiled if c is not None]


def rule_matches(changed_files: Sequence[str], patterns: Sequence[PathPattern]) -> bool:
  """Check if any compiled pattern matches any changed file."""
  return any(
    pattern.matches(file_path)
    for file_path in changed_files
    for pattern in patterns
  )


def matching_rules(changed_files: Sequence[str], rules: Sequence[RuleLike]) -> list[int]:
  """Return the indices of rules matched by the changed files."""
  return [
    index for index, rule in enumerate(rules)
    if rule_matches(changed_files, _compile_all(_rule_field(rule, "patterns")))
  ]


def tally(
  rules: Sequence[RuleLike],
  matched: Iterable[int],
  exclude: str | None = None,
) -> ScoreTable:
  """Give every user of each matched rule one point."""
  excluded = normalize_candidate(exclude)
  scores: ScoreTable = {}

  for index in matched:
    users = dict.fromkeys(_rule_field(rules[index], "users"))
    for user in users:
      if normalize_candidate(user) == excluded:
        continue
      scores[user] = scores.get(user, 0) + 1

  return scores


def evaluate(
  changed_files: Sequence[str],
  rules: Sequence[RuleLike],
  exclude: str | None = None,
) -> ScoreTable:
  """Score candidates by the number of distinct rules they match.

  Each matched rule gives every listed user one point, regardless of how
  many files or patterns matched. The excluded candidate is compared
  case-insensitively and never enters the table.

  Args:
    changed_files: Paths relative to the repository root.
    rules: ReviewerRule objects or mappings with patterns/users keys.
    exclude: Candidate barred from assignment (usually the author).

  Returns:
    Mapping of candidate to score, in order of first match.
  """
  return tally(rules, matching_rules(changed_files, rules), exclude)
