"""Logging setup for the command-line entry point.

Library modules only create loggers; handlers are installed here, once,
by the CLI.
"""

import logging

from rich.logging import RichHandler

from nmprune.utils.formatting import err_console

_HANDLER_NAME = "nmprune-rich"


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route ``nmprune`` log records to the stderr console.

    Warnings are always shown. ``verbose`` lowers the threshold to DEBUG;
    ``quiet`` keeps it at WARNING and wins over ``verbose``.

    Args:
        verbose: Show debug and info records.
        quiet: Show only warnings and errors.
    """
    level = logging.DEBUG if verbose and not quiet else logging.WARNING

    logger = logging.getLogger("nmprune")
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        markup=False,
        rich_tracebacks=verbose,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
