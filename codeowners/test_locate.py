from pathlib import Path

from pytest_mock import MockFixture

from codeowners import app_config as conf
from codeowners.locate import locate


def touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("* @octocat\n")
    return path


def test_locate_not_found(tmp_path: Path) -> None:
    assert locate(tmp_path) is None


def test_locate_root(tmp_path: Path) -> None:
    expected = touch(tmp_path / "CODEOWNERS")
    touch(tmp_path / ".github" / "CODEOWNERS")
    touch(tmp_path / "docs" / "CODEOWNERS")
    assert locate(tmp_path) == expected


def test_locate_github_before_docs(tmp_path: Path) -> None:
    expected = touch(tmp_path / ".github" / "CODEOWNERS")
    touch(tmp_path / "docs" / "CODEOWNERS")
    assert locate(tmp_path) == expected


def test_locate_docs(tmp_path: Path) -> None:
    expected = touch(tmp_path / "docs" / "CODEOWNERS")
    assert locate(str(tmp_path)) == expected


def test_locate_ignores_directories(tmp_path: Path) -> None:
    (tmp_path / "CODEOWNERS").mkdir()
    expected = touch(tmp_path / "docs" / "CODEOWNERS")
    assert locate(tmp_path) == expected


def test_locate_custom_candidates(tmp_path: Path) -> None:
    expected = touch(tmp_path / ".gitlab" / "CODEOWNERS")
    touch(tmp_path / "CODEOWNERS")
    assert locate(tmp_path, candidates=[".gitlab/CODEOWNERS", "CODEOWNERS"]) == expected


def test_locate_candidates_from_config(tmp_path: Path, mocker: MockFixture) -> None:
    expected = touch(tmp_path / "OWNERS")
    touch(tmp_path / "CODEOWNERS")
    mocker.patch.object(conf, "CODEOWNERS_SEARCH_PATHS", ["OWNERS"])
    assert locate(tmp_path) == expected
