"""Glob-style path pattern compilation."""

import re
from dataclasses import dataclass
from enum import Enum

SEPARATOR = "/"


class TokenKind(Enum):
  """Lexical classes of a path pattern."""

  GLOBSTAR = "**"
  STAR = "*"
  QMARK = "?"
  SEP = "/"
  LITERAL = "literal"


@dataclass(frozen=True)
class Token:
  kind: TokenKind
  text: str


@dataclass(frozen=True)
class PathPattern:
  """A compiled pattern, matched against paths relative to the repo root."""

  source: str
  regex: re.Pattern[str]

  def matches(self, file_path: str) -> bool:
    return self.regex.search(file_path) is not None


def tokenize(pattern: str) -> list[Token]:
  """Split a pattern into wildcard, separator and literal tokens.

  Runs of ordinary characters are collected into a single LITERAL token.
  Three or more consecutive stars are read as a globstar followed by stars.
  """
  tokens: list[Token] = []
  literal: list[str] = []
  i = 0

  def flush() -> None:
    if literal:
      tokens.append(Token(TokenKind.LITERAL, "".join(literal)))
      literal.clear()

  while i < len(pattern):
    char = pattern[i]
    if char == "*":
      flush()
      if pattern.startswith("**", i):
        tokens.append(Token(TokenKind.GLOBSTAR, "**"))
        i += 2
        continue
      tokens.append(Token(TokenKind.STAR, "*"))
    elif char == "?":
      flush()
      tokens.append(Token(TokenKind.QMARK, "?"))
    elif char == SEPARATOR:
      flush()
      tokens.append(Token(TokenKind.SEP, SEPARATOR))
    else:
      literal.append(char)
    i += 1

  flush()
  return tokens


def _translate(tokens: list[Token]) -> str:
  """Translate tokens into a regex body (no anchors)."""
  parts: list[str] = []
  i = 0

  while i < len(tokens):
    token = tokens[i]
    if token.kind == TokenKind.GLOBSTAR:
      at_segment_start = i == 0 or tokens[i - 1].kind == TokenKind.SEP
      followed_by_sep = i + 1 < len(tokens) and tokens[i + 1].kind == TokenKind.SEP
      if at_segment_start and followed_by_sep:
        # Whole-segment globstar: zero or more directories
        parts.append(r"(?:.*/)?")
        i += 2
        continue
      parts.append(".*")
    elif token.kind == TokenKind.STAR:
      parts.append("[^/]*")
    elif token.kind == TokenKind.QMARK:
      parts.append("[^/]")
    elif token.kind == TokenKind.SEP:
      parts.append("/")
    else:
      parts.append(re.escape(token.text))
    i += 1

  return "".join(parts)


def compile_pattern(pattern: str) -> PathPattern | None:
  """Compile a glob pattern into a PathPattern.

  Patterns are anchored at the end of the path. A pattern starting with
  "/" must match from the repository root; any other pattern may start
  at the beginning of the path or right after a separator.

  Returns:
    The compiled pattern, or None if the pattern can never match
    (empty, or a bare separator).
  """
  if not pattern:
    return None

  rooted = pattern.startswith(SEPARATOR)
  body = pattern.lstrip(SEPARATOR) if rooted else pattern
  if not body:
    return None

  prefix = "^" if rooted else "(?:^|/)"
  regex = re.compile(prefix + _translate(tokenize(body)) + r"\Z")
  return PathPattern(source=pattern, regex=regex)


def matches(file_path: str, pattern: str) -> bool:
  """Check whether a single path matches a glob pattern."""
  compiled = compile_pattern(pattern)
  return compiled is not None and compiled.matches(file_path)
