"""Reviewer configuration schema."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from autoassign.models import DEFAULT_MAX_REVIEWERS, ReviewerConfig, ReviewerRule


def _coerce_list(value: Any) -> Any:
  """Accept a scalar string (or nothing) where a list is expected."""
  if value is None:
    return []
  if isinstance(value, str):
    return [value]
  return value


class RuleSettings(BaseModel):
  """One `reviewers` entry: patterns and the users who own them."""

  model_config = ConfigDict(extra="ignore")

  patterns: list[str] = Field(default_factory=list)
  users: list[str] = Field(default_factory=list)

  @field_validator("patterns", "users", mode="before")
  @classmethod
  def coerce_list(cls, value: Any) -> Any:
    return _coerce_list(value)


class DefaultSettings(BaseModel):
  """Fallback reviewers used when no rule matches."""

  model_config = ConfigDict(extra="ignore")

  reviewers: list[str] = Field(default_factory=list)

  @field_validator("reviewers", mode="before")
  @classmethod
  def coerce_list(cls, value: Any) -> Any:
    return _coerce_list(value)


class Settings(BaseModel):
  """Reviewer assignment configuration."""

  model_config = ConfigDict(extra="ignore")

  reviewers: list[RuleSettings] = Field(default_factory=list)
  defaults: DefaultSettings = Field(default_factory=DefaultSettings)
  max_reviewers: int = DEFAULT_MAX_REVIEWERS

  @field_validator("reviewers", mode="before")
  @classmethod
  def reviewers_none_as_empty(cls, value: Any) -> Any:
    return [] if value is None else value

  @field_validator("defaults", mode="before")
  @classmethod
  def defaults_none_as_empty(cls, value: Any) -> Any:
    return {} if value is None else value

  @property
  def has_rules(self) -> bool:
    return bool(self.reviewers)

  def to_reviewer_config(self) -> ReviewerConfig:
    """Convert to the engine's immutable config."""
    return ReviewerConfig(
      rules=tuple(
        ReviewerRule(patterns=tuple(r.patterns), users=tuple(r.users))
        for r in self.reviewers
      ),
      defaults=tuple(self.defaults.reviewers),
      max_reviewers=self.max_reviewers,
    )
