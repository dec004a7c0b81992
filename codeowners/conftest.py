from pathlib import Path

import pytest

from codeowners.owners import CodeOwners, from_path


def load_codeowners_fixture(fixture_name: str) -> Path:
    return Path(__file__).parent / "test" / "fixtures" / fixture_name


@pytest.fixture(autouse=True)
def configure_structlog() -> None:
    """
    Configures cleanly structlog for each test method.
    https://github.com/hynek/structlog/issues/76#issuecomment-240373958
    """
    import structlog

    structlog.reset_defaults()
    structlog.configure(
        processors=[
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def codeowners_path() -> Path:
    return load_codeowners_fixture("CODEOWNERS")


@pytest.fixture
def codeowners(codeowners_path: Path) -> CodeOwners:
    return from_path(codeowners_path)
