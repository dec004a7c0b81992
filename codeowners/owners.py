from __future__ import annotations

import io
import logging
from pathlib import Path, PurePosixPath
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import structlog
from pydantic import BaseModel, ConfigDict

from codeowners import app_config as conf
from codeowners.errors import InvalidOwner, InvalidPattern
from codeowners.owner import Owner
from codeowners.pattern import Pattern

logger = structlog.wrap_logger(logging.getLogger(__name__))

STREAM_LOCATION = "<stream>"
STRING_LOCATION = "<string>"


def ancestors(path: str, depth: Optional[int] = None) -> Iterator[str]:
    """
    Yield the parent directories of `path`, nearest first. When `depth` is
    given only the ancestor with exactly that many segments is produced.
    """
    parts = path.split("/")
    if depth is not None:
        if 0 < depth < len(parts):
            yield "/".join(parts[:depth])
        return
    for end in range(len(parts) - 1, 0, -1):
        yield "/".join(parts[:end])


class Rule(BaseModel):
    model_config = ConfigDict(frozen=True)

    # 1-based line number in the source, comments and blank lines included
    line: int
    pattern: Pattern
    owners: Tuple[Owner, ...] = ()

    def matches(self, path: str) -> bool:
        if self.pattern.matches(path):
            return True
        # `docs/*` owns the files in docs, not the files in its subdirectories
        if self.pattern.direct_children_only:
            return False
        # a rule owning a directory owns everything beneath it
        return any(
            self.pattern.matches(parent)
            for parent in ancestors(path, self.pattern.depth)
        )


def normalize_path(path: Union[str, PurePosixPath]) -> str:
    return PurePosixPath(path).as_posix().lstrip("/")


class CodeOwners(BaseModel):
    """
    Rules parsed from a CODEOWNERS file, highest precedence first.

    Order is significant: the last matching pattern in a CODEOWNERS file wins,
    so `rules` holds the file's rules in reverse and the first match decides.
    """

    model_config = ConfigDict(frozen=True)

    location: str
    rules: Tuple[Rule, ...] = ()

    def rule_for(self, path: Union[str, PurePosixPath]) -> Optional[Rule]:
        query = normalize_path(path)
        for rule in self.rules:
            if rule.matches(query):
                return rule
        return None

    def of(self, path: Union[str, PurePosixPath]) -> Optional[Tuple[Owner, ...]]:
        """
        Owners of `path`. `None` means no rule matched and the path is up for
        adoption. An empty tuple means a matching rule lists no owners.
        """
        rule = self.rule_for(path)
        if rule is None:
            return None
        return rule.owners


def parse_owners(
    tokens: Iterable[str], *, line: int, location: str
) -> Tuple[Owner, ...]:
    owners: List[Owner] = []
    for token in tokens:
        try:
            owners.append(Owner.parse(token))
        except InvalidOwner:
            logger.debug(
                "dropping unrecognized owner", token=token, line=line, location=location
            )
    return tuple(owners)


def from_reader(
    reader: Iterable[Union[str, bytes]],
    location: str = STREAM_LOCATION,
    strict: Optional[bool] = None,
) -> CodeOwners:
    """
    Build a CodeOwners table from lines of CODEOWNERS text.

    `strict` controls malformed patterns: raise `InvalidPattern` when true,
    otherwise skip the line with a warning. Defaults to `CODEOWNERS_STRICT`.
    """
    if strict is None:
        strict = conf.CODEOWNERS_STRICT
    rules: List[Rule] = []
    for line_number, raw_line in enumerate(reader, start=1):
        line = raw_line.decode() if isinstance(raw_line, bytes) else raw_line
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        token, *owner_tokens = line.split()
        try:
            pattern = Pattern.parse(token)
        except InvalidPattern as e:
            e.line = line_number
            e.location = location
            if strict:
                raise
            logger.warning(
                "skipping rule with invalid pattern",
                token=token,
                reason=e.reason,
                line=line_number,
                location=location,
            )
            continue
        owners = parse_owners(owner_tokens, line=line_number, location=location)
        rules.append(Rule(line=line_number, pattern=pattern, owners=owners))
    # last match takes precedence
    rules.reverse()
    logger.debug("parsed codeowners", location=location, rule_count=len(rules))
    return CodeOwners(location=location, rules=tuple(rules))


def from_str(
    text: str, location: str = STRING_LOCATION, strict: Optional[bool] = None
) -> CodeOwners:
    return from_reader(io.StringIO(text), location=location, strict=strict)


def from_path(path: Union[str, Path], strict: Optional[bool] = None) -> CodeOwners:
    with open(path, encoding="utf-8") as f:
        return from_reader(f, location=str(path), strict=strict)
