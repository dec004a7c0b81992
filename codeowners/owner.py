from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict

from codeowners.errors import InvalidOwner

# order matters: a team handle also looks like a username, and both contain
# an `@` like an email address.
TEAM = re.compile(r"^@\S+/\S+")
USERNAME = re.compile(r"^@\S+")
EMAIL = re.compile(r"^\S+@\S+")


class OwnerKind(str, Enum):
    username = "username"
    team = "team"
    email = "email"


class Owner(BaseModel):
    """
    A user (`@octocat`), team (`@github/docs`) or email address
    (`docs@example.com`) named on a CODEOWNERS line.

    `value` is stored exactly as written so `str(owner)` round trips.
    """

    model_config = ConfigDict(frozen=True)

    kind: OwnerKind
    value: str

    @classmethod
    def parse(cls, token: str) -> Owner:
        if TEAM.match(token):
            return cls(kind=OwnerKind.team, value=token)
        if USERNAME.match(token):
            return cls(kind=OwnerKind.username, value=token)
        if EMAIL.match(token):
            return cls(kind=OwnerKind.email, value=token)
        raise InvalidOwner(token)

    def __str__(self) -> str:
        return self.value
