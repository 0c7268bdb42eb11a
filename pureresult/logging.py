import logging
import sys
from rich.highlighter import RegexHighlighter
from rich.logging import RichHandler


class OutcomeHighlighter(RegexHighlighter):
    """Bold `back-ticked` names, colour the case of a printed outcome."""
    highlights = [
        r"`(?P<bold>[^`]*)`",
        r"\b(?P<green>Ok)\(",
        r"\b(?P<red>Failure)\(",
    ]


def logger():
    return logging.getLogger("pureresult")


def configure_logger(debug: bool, rich: bool = True):
    """Attach a single handler to the package logger.

    Only the `pureresult` logger is touched, so an application embedding the
    library keeps its own root configuration.
    """
    log = logger()
    if rich:
        handler: logging.Handler = RichHandler(
            show_path=debug, highlighter=OutcomeHighlighter(), log_time_format="[%X]"
        )
    else:
        handler = logging.StreamHandler(sys.stdout)

    log.handlers[:] = [handler]
    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.propagate = False
    return log
