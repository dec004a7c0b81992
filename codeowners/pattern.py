from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict
from wcmatch import fnmatch, glob

from codeowners.errors import InvalidPattern

# `*` may cross `/` when the pattern has no separator, so `*.js` owns
# javascript at any depth.
FNMATCH_FLAGS = fnmatch.IGNORECASE | fnmatch.DOTMATCH
GLOB_FLAGS = glob.GLOBSTAR | glob.IGNORECASE | glob.DOTGLOB

STAR_RUN = re.compile(r"\*{3,}")


def normalize(token: str) -> str:
    """
    Convert a gitignore style CODEOWNERS token into a glob.

    - tokens that don't start with `*` or `/` match at any depth: `**/` is
      prepended
    - a single leading `/` is dropped; the glob is matched against paths
      relative to the repository root
    - a trailing `/` owns the directory's contents: `**` is appended

    >>> normalize("docs/*")
    '**/docs/*'
    >>> normalize("/build/logs/")
    'build/logs/**'
    """
    pattern = token if token.startswith(("*", "/")) else "**/" + token
    if pattern.startswith("/"):
        pattern = pattern[1:]
    if pattern.endswith("/"):
        pattern += "**"
    return pattern


def validate(token: str, pattern: str) -> None:
    if not pattern:
        raise InvalidPattern(token, "pattern is empty")
    if STAR_RUN.search(pattern):
        raise InvalidPattern(token, "wildcards can be at most `**`")
    for segment in pattern.split("/"):
        if "**" in segment and segment != "**":
            raise InvalidPattern(token, "`**` must be an entire path segment")
    i = 0
    while i < len(pattern):
        if pattern[i] == "[":
            # `]` directly after `[` or `[!` is a literal member of the class
            j = i + 1
            if j < len(pattern) and pattern[j] in "!^":
                j += 1
            if j < len(pattern) and pattern[j] == "]":
                j += 1
            end = pattern.find("]", j)
            if end == -1:
                raise InvalidPattern(token, "unterminated character class")
            i = end
        i += 1


class Pattern(BaseModel):
    model_config = ConfigDict(frozen=True)

    # token as written in the CODEOWNERS file
    source: str
    glob: str

    @classmethod
    def parse(cls, token: str) -> Pattern:
        pattern = normalize(token)
        validate(token, pattern)
        return cls(source=token, glob=pattern)

    @property
    def literal_separator(self) -> bool:
        return "/" in self.glob

    @property
    def direct_children_only(self) -> bool:
        return self.glob.endswith("/*")

    @property
    def depth(self) -> Optional[int]:
        """
        Number of path segments every match has, when that is fixed.
        """
        if not self.literal_separator or "**" in self.glob:
            return None
        return self.glob.count("/") + 1

    def matches(self, path: str) -> bool:
        if self._match(path, self.glob):
            return True
        # `docs/` owns the docs directory itself, not only its contents
        if self.glob.endswith("/**"):
            return self._match(path, self.glob[:-3])
        return False

    def _match(self, path: str, pattern: str) -> bool:
        if self.literal_separator:
            return glob.globmatch(path, pattern, flags=GLOB_FLAGS)
        return fnmatch.fnmatch(path, pattern, flags=FNMATCH_FLAGS)
