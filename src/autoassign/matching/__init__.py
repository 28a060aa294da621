"""Pure pattern matching and scoring engine."""

from autoassign.matching.engine import assign_reviewers
from autoassign.matching.evaluator import ScoreTable, evaluate, matching_rules, tally
from autoassign.matching.pattern import PathPattern, compile_pattern, matches
from autoassign.matching.resolver import resolve

__all__ = [
  "PathPattern",
  "ScoreTable",
  "assign_reviewers",
  "compile_pattern",
  "evaluate",
  "matches",
  "matching_rules",
  "resolve",
  "tally",
]
