"""Tests for the assignment engine facade."""

import itertools

import pytest
from autoassign.matching.engine import assign_reviewers
from autoassign.matching.evaluator import evaluate
from autoassign.models import AssignmentSource, ReviewerRule


class TestScenarios:
  def test_author_excluded_from_rule_match(self) -> None:
    rules = [ReviewerRule(patterns=["src/api/**"], users=["backend1", "backend2"])]
    result = assign_reviewers(["src/api/handler.go"], rules, exclude="backend1", max_reviewers=2)
    assert result.reviewers == ["backend2"]
    assert result.source == AssignmentSource.RULES
    assert result.scores == {"backend2": 1}

  def test_highest_score_wins(self) -> None:
    rules = [
      ReviewerRule(patterns=["*.tf"], users=["ops"]),
      ReviewerRule(patterns=["infra/**"], users=["ops", "lead"]),
    ]
    result = assign_reviewers(["infra/main.tf"], rules, max_reviewers=1)
    assert result.reviewers == ["ops"]
    assert result.scores == {"ops": 2}

  def test_defaults_on_total_miss(self) -> None:
    rules = [ReviewerRule(patterns=["src/**"], users=["dev"])]
    result = assign_reviewers(
      ["README.md"],
      rules,
      defaults=["lead1", "lead2", "lead3"],
      exclude="lead2",
      max_reviewers=2,
    )
    assert result.reviewers == ["lead1", "lead3"]
    assert result.source == AssignmentSource.DEFAULTS
    assert result.scores == {}

  def test_empty_without_defaults(self) -> None:
    rules = [ReviewerRule(patterns=["src/**"], users=["dev"])]
    result = assign_reviewers(["README.md"], rules)
    assert result.reviewers == []
    assert result.source == AssignmentSource.NONE
    assert not result.has_reviewers
    assert "No matching reviewers" in result.summary

  def test_changed_file_count_in_result(self) -> None:
    result = assign_reviewers(["a.py", "b.py"], [ReviewerRule(patterns="*.py", users="dev")])
    assert result.changed_files == 2
    assert "2 changed files" in result.summary


FILES = ["src/api/x.go", "infra/main.tf", "web/app/Button.tsx", "README.md"]
CANDIDATES = [None, "backend1", "OPS", "frontend", "lead", "lead1"]


class TestInvariants:
  @pytest.mark.parametrize("exclude", CANDIDATES)
  @pytest.mark.parametrize("max_reviewers", [-1, 0, 1, 2, 5])
  @pytest.mark.parametrize("file_count", [0, 1, 2, 4])
  def test_result_invariants(
    self,
    sample_rules: list[ReviewerRule],
    exclude: str | None,
    max_reviewers: int,
    file_count: int,
  ) -> None:
    files = FILES[:file_count]
    defaults = ["lead1", "lead2", "lead1"]
    result = assign_reviewers(files, sample_rules, defaults, exclude, max_reviewers)
    scores = evaluate(files, sample_rules, exclude)

    assert len(result.reviewers) <= max(max_reviewers, 0)
    assert len(set(result.reviewers)) == len(result.reviewers)
    if exclude:
      assert exclude.casefold() not in [r.casefold() for r in result.reviewers]
    if scores:
      assert set(result.reviewers) <= set(scores)
      ranked = [scores[r] for r in result.reviewers]
      assert ranked == sorted(ranked, reverse=True)
      left_out = set(scores) - set(result.reviewers)
      if ranked and left_out:
        assert min(ranked) >= max(scores[c] for c in left_out)
    elif max_reviewers > 0:
      expected = [d for d in dict.fromkeys(defaults) if d != exclude]
      assert result.reviewers == expected[:max_reviewers]

  def test_file_order_does_not_change_result(self, sample_rules: list[ReviewerRule]) -> None:
    expected = assign_reviewers(FILES, sample_rules, max_reviewers=3).reviewers
    for permutation in itertools.permutations(FILES):
      assert assign_reviewers(list(permutation), sample_rules, max_reviewers=3).reviewers == expected


class TestMatchedRules:
  def test_indices_recorded(self, sample_rules: list[ReviewerRule]) -> None:
    result = assign_reviewers(["infra/main.tf"], sample_rules)
    assert result.matched_rules == (1, 2)

  def test_empty_when_nothing_matched(self, sample_rules: list[ReviewerRule]) -> None:
    assert assign_reviewers(["README.md"], sample_rules).matched_rules == ()
