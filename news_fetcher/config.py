from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values

from .exceptions import MissingCredentialError

logger = logging.getLogger(__name__)

API_KEY_VAR = "NEWS_API_KEY"
DEFAULT_ENV_FILE = ".env"


def load_credential(
    var_name: str = API_KEY_VAR,
    env_file: str = DEFAULT_ENV_FILE,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Return the API key, read once at startup.

    Values from ``env_file`` act as defaults; real environment variables win.
    ``os.environ`` is read but never modified.

    Raises MissingCredentialError when the key is absent or blank in both sources.
    """
    values = {}
    path = Path(env_file)
    if path.is_file():
        logger.debug("Reading defaults from %s", path)
        values.update({k: v for k, v in dotenv_values(path).items() if v is not None})

    values.update(os.environ if environ is None else environ)

    key = values.get(var_name) or ""
    if not key.strip():
        raise MissingCredentialError(var_name, env_file)
    return key
