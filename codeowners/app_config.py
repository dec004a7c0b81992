import os
from typing import Any, Optional, Type, TypeVar, overload

from starlette.config import Config, undefined
from starlette.datastructures import CommaSeparatedStrings

from codeowners.logging import get_logging_level

T = TypeVar("T")


class TypedConfig(Config):
    @overload  # type: ignore [override]
    def __call__(self, key: str, cast: Type[T], default: T = ...) -> T:
        ...

    @overload
    def __call__(self, key: str, cast: Type[str] = ..., default: str = ...) -> str:
        ...

    @overload
    def __call__(
        self, key: str, cast: Type[str] = ..., default: None = ...
    ) -> Optional[str]:
        ...

    def __call__(
        self, key: str, cast: Optional[type] = None, default: Any = undefined
    ) -> Any:
        return super().get(key, cast=cast, default=default)


# .env is optional
config = TypedConfig(".env" if os.path.isfile(".env") else None)

LOGGING_LEVEL = get_logging_level(config("LOGGING_LEVEL", default="WARNING"))

# abort parsing on a malformed glob. When disabled the offending line is
# skipped and a warning is logged.
CODEOWNERS_STRICT = config("CODEOWNERS_STRICT", cast=bool, default=True)

# explicit CODEOWNERS file to use when the CLI isn't given one.
CODEOWNERS_PATH = config("CODEOWNERS_PATH", default=None)

# locations checked, in order, relative to the repository root.
CODEOWNERS_SEARCH_PATHS = list(
    config(
        "CODEOWNERS_SEARCH_PATHS",
        cast=CommaSeparatedStrings,
        default=["CODEOWNERS", ".github/CODEOWNERS", "docs/CODEOWNERS"],
    )
)
