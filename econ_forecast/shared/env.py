"""Environment utilities for resolving secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def load_secret_file_variables() -> List[str]:
    """
    Expose Docker-style secret files as environment variables.

    For every ``KEY_FILE`` entry whose ``KEY`` is unset, the referenced file
    is read and its stripped content stored in ``KEY``. Unreadable files are
    logged and skipped.

    Returns:
        The names of the variables that were populated.
    """

    loaded: List[str] = []
    for key, file_path in list(os.environ.items()):
        if not key.endswith("_FILE") or not file_path:
            continue
        target_key = key[: -len("_FILE")]
        if os.environ.get(target_key):
            continue
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning(
                "env.secret_file.unreadable key=%s path=%s error=%s",
                key,
                file_path,
                exc,
            )
            continue
        loaded.append(target_key)
    return loaded
