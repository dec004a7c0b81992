import os

import pytest


@pytest.hookimpl(tryfirst=True)  # type: ignore[misc]
def pytest_load_initial_conftests(
    args: object, early_config: object, parser: object
) -> None:
    os.environ["LOGGING_LEVEL"] = "DEBUG"
    os.environ["CODEOWNERS_STRICT"] = "1"
    os.environ.pop("CODEOWNERS_PATH", None)
    os.environ.pop("CODEOWNERS_SEARCH_PATHS", None)
