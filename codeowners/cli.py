import logging
from pathlib import Path
from typing import Optional

import click
import structlog

from codeowners import app_config as conf
from codeowners.errors import CodeOwnersError, CodeOwnersNotFound
from codeowners.locate import locate
from codeowners.logging import configure_logging
from codeowners.owners import CodeOwners, from_path

logger = structlog.wrap_logger(logging.getLogger(__name__))

codeowners_option = click.option(
    "-c",
    "--codeowners",
    "codeowners_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to code owners file. An attempt will be made to locate one if this is not provided.",
)


def find_codeowners(codeowners_path: Optional[str]) -> Path:
    if codeowners_path is None:
        codeowners_path = conf.CODEOWNERS_PATH
    if codeowners_path is not None:
        return Path(codeowners_path)
    located = locate(".")
    if located is None:
        raise CodeOwnersNotFound(".")
    return located


def load(codeowners_path: Optional[str]) -> CodeOwners:
    try:
        return from_path(find_codeowners(codeowners_path))
    except (CodeOwnersError, OSError, UnicodeDecodeError) as e:
        logger.info("failed to load codeowners", exc_info=True)
        raise click.ClickException(str(e)) from e


@click.group(
    help="""GitHub CODEOWNERS query CLI

    For more information on GitHub CODEOWNERS see
    https://help.github.com/en/articles/about-code-owners
    """
)
def cli() -> None:
    configure_logging(conf.LOGGING_LEVEL)


@cli.command(help="print the owners of a file or directory")
@click.argument("path")
@codeowners_option
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Also print the CODEOWNERS line that decided ownership.",
)
def of(path: str, codeowners_path: Optional[str], verbose: bool) -> None:
    codeowners = load(codeowners_path)
    rule = codeowners.rule_for(path)
    if rule is None:
        click.echo(f"{path} is up for adoption")
        return
    if verbose:
        click.echo(
            f"{codeowners.location}:{rule.line}: {rule.pattern.source}", err=True
        )
    for owner in rule.owners:
        click.echo(str(owner))


@cli.command(help="prints out the parsed rules of a CODEOWNERS file")
@codeowners_option
def rules(codeowners_path: Optional[str]) -> None:
    """
    output the json representation of a CODEOWNERS file, highest precedence
    rule first
    """
    codeowners = load(codeowners_path)
    click.echo(codeowners.model_dump_json(indent=2))


@cli.command(help="print the location of the CODEOWNERS file for a repository")
@click.argument(
    "root", default=".", type=click.Path(exists=True, file_okay=False)
)
def find(root: str) -> None:
    path = locate(root)
    if path is None:
        raise click.ClickException(str(CodeOwnersNotFound(root)))
    click.echo(str(path))
