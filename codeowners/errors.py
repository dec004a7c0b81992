from typing import Optional


class CodeOwnersError(Exception):
    pass


class InvalidOwner(CodeOwnersError, ValueError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"not an owner: {token!r}")


class InvalidPattern(CodeOwnersError, ValueError):
    def __init__(
        self,
        token: str,
        reason: str,
        *,
        line: Optional[int] = None,
        location: Optional[str] = None,
    ) -> None:
        self.token = token
        self.reason = reason
        self.line = line
        self.location = location
        super().__init__(str(self))

    def __str__(self) -> str:
        prefix = ""
        if self.location is not None and self.line is not None:
            prefix = f"{self.location}:{self.line}: "
        return f"{prefix}invalid pattern {self.token!r}: {self.reason}"


class CodeOwnersNotFound(CodeOwnersError):
    def __init__(self, root: str) -> None:
        self.root = root
        super().__init__(f"no CODEOWNERS file found under {root!r}")
