from codeowners.errors import (
    CodeOwnersError,
    CodeOwnersNotFound,
    InvalidOwner,
    InvalidPattern,
)
from codeowners.locate import locate
from codeowners.owner import Owner, OwnerKind
from codeowners.owners import CodeOwners, Rule, from_path, from_reader, from_str
from codeowners.pattern import Pattern

__all__ = [
    "CodeOwners",
    "CodeOwnersError",
    "CodeOwnersNotFound",
    "InvalidOwner",
    "InvalidPattern",
    "Owner",
    "OwnerKind",
    "Pattern",
    "Rule",
    "from_path",
    "from_reader",
    "from_str",
    "locate",
]
