import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import structlog

from codeowners import app_config as conf

logger = structlog.wrap_logger(logging.getLogger(__name__))


def locate(
    root: Union[str, Path] = ".", candidates: Optional[Sequence[str]] = None
) -> Optional[Path]:
    """
    Find the CODEOWNERS file for the repository at `root`.

    GitHub looks in the repository root, `.github/` and `docs/`, in that
    order, and uses the first file it finds.
    """
    if candidates is None:
        candidates = conf.CODEOWNERS_SEARCH_PATHS
    for candidate in candidates:
        path = Path(root) / candidate
        if path.is_file():
            logger.debug("found codeowners", path=str(path))
            return path
    logger.debug("no codeowners found", root=str(root), candidates=list(candidates))
    return None
