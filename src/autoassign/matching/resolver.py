"""Turn candidate scores into a bounded reviewer list."""

from typing import Any, Mapping

from autoassign.matching.evaluator import as_list, normalize_candidate


def rank(scores: Mapping[str, int], exclude: str | None = None) -> list[str]:
  """Order candidates by descending score.

  Ties keep the mapping's insertion order, i.e. the order in which each
  candidate first matched.
  """
  excluded = normalize_candidate(exclude)
  eligible = [
    (candidate, score) for candidate, score in scores.items()
    if normalize_candidate(candidate) != excluded
  ]
  eligible.sort(key=lambda item: -item[1])
  return [candidate for candidate, _ in eligible]


def filter_defaults(defaults: Any, exclude: str | None = None) -> list[str]:
  """Drop the excluded candidate and duplicates from the default list."""
  excluded = normalize_candidate(exclude)
  return [
    candidate for candidate in dict.fromkeys(as_list(defaults))
    if normalize_candidate(candidate) != excluded
  ]


def resolve(
  scores: Mapping[str, int],
  defaults: Any = (),
  exclude: str | None = None,
  max_reviewers: int = 2,
) -> list[str]:
  """Select at most max_reviewers candidates.

  Rule matches always win: defaults are used only when no candidate
  scored. An empty result is valid.
  """
  if max_reviewers <= 0:
    return []

  ranked = rank(scores, exclude)
  if ranked:
    return ranked[:max_reviewers]

  return filter_defaults(defaults, exclude)[:max_reviewers]
