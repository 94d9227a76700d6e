"""Generate the static video listing page.

Loads every Markdown file of the content directory, validates its front
matter, renders the bodies to HTML and writes ``index.html`` into the
output directory using the page template and its fragments. Any error
aborts the build before anything is written and the process exits with
status 1.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console

from src.config import (
    CONTENT_DIR,
    LOG_DIR,
    LOG_FILENAME_GENERATE_SITE,
    LOG_FORMAT,
    OUTPUT_DIR,
    TEMPLATE_DIR,
)
from src.exceptions import AppError, ConfigurationError
from src.pipeline.website_generator.runner import run_from_config

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO", enable_file: bool = True) -> None:
    for h in logging.root.handlers[:]:
        logging.root.removeHandler(h)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if enable_file:
        try:
            LOG_DIR.mkdir(exist_ok=True)
            handlers.insert(
                0,
                logging.FileHandler(LOG_DIR / LOG_FILENAME_GENERATE_SITE, mode="a"),
            )
        except OSError:
            logger.warning("File logging disabled: cannot create %s", LOG_DIR)
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate the static HTML listing page from Markdown content."
    )
    parser.add_argument("--content-dir", type=Path, default=CONTENT_DIR)
    parser.add_argument("--template-dir", type=Path, default=TEMPLATE_DIR)
    parser.add_argument("--output-dir", type=Path, default=OUTPUT_DIR)
    parser.add_argument("--log-level", type=str, default="INFO")
    return parser.parse_args(argv)


def check_directories(content_dir: Path, template_dir: Path) -> None:
    """Fail early when an input directory is missing."""
    for label, directory in (("content", content_dir), ("template", template_dir)):
        if not directory.is_dir():
            raise ConfigurationError(
                f"The {label} directory {directory} does not exist",
                context={"path": str(directory)},
            )


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint for site generation.

    Returns
    -------
    int
        0 when the page was written, 1 when the build failed.
    """
    args = parse_args(argv)
    setup_logging(args.log_level, enable_file=not os.environ.get("DISABLE_FILE_LOGS"))
    console = Console(stderr=True)
    try:
        check_directories(args.content_dir, args.template_dir)
        output_file = run_from_config(
            content_dir=args.content_dir,
            template_dir=args.template_dir,
            output_dir=args.output_dir,
        )
    except AppError as exc:
        logger.error("Build failed: %s", exc, extra={"error": exc.to_dict()})
        console.print(f"[bold red]Build failed[/] ({exc.code})", highlight=False)
        console.print(exc.message, markup=False, highlight=False)
        return 1
    console.print(f"[green]Wrote[/] {output_file}", highlight=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
