import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from .core import Launcher
from .services.options import OptionService

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[
        RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=False,
            rich_tracebacks=True,
        )
    ],
)


def configure_logging(verbose: bool, log_file=None):
    logger = logging.getLogger("etcdlauncher")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)


# The launcher's own flags (``-stop``, ``-fg``, bare name suffixes) are not
# click-style, so every token is passed through untouched.
@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    }
)
@click.argument("arguments", nargs=-1, type=click.UNPROCESSED)
def main(arguments):
    """Configure and run the etcd-browser web UI in a docker container."""
    parsed = OptionService().parse(arguments)
    configure_logging(parsed.verbose, parsed.log_file)

    raise SystemExit(Launcher().run(parsed))


if __name__ == "__main__":
    main()
