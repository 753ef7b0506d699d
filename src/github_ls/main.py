from __future__ import annotations
import logging
from github_ls.infrastructure.config import get_settings
from github_ls.interface.cli import cli

def main() -> None:
    """Configure logging and run the ``github-ls`` command."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )
    cli()


if __name__ == "__main__":
    main()
