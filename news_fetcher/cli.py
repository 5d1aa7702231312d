from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import API_KEY_VAR, DEFAULT_ENV_FILE, load_credential
from .exceptions import MissingCredentialError
from .shell import NewsShell

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Suppress noisy loggers from libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Browse NewsAPI headlines and search results.")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    p.add_argument("--env-file", default=DEFAULT_ENV_FILE, help="file holding default environment values")
    args = p.parse_args(argv)

    _setup_logging(args.verbose)
    print("News fetcher starting...")

    try:
        credential = load_credential(env_file=args.env_file)
    except MissingCredentialError as e:
        logger.debug("Startup aborted: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        print(
            f"Create {e.env_file} with the line {API_KEY_VAR}=your-key, or export {API_KEY_VAR}.",
            file=sys.stderr,
        )
        return 1

    NewsShell(credential).run()
    return 0
