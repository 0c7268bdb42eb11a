from argparse import ArgumentParser
import sys
from typing import Any

import argh  # type: ignore
from rich.console import Console
from rich_argparse import RichHelpFormatter

from .invoke import invoke
from .logging import logger, configure_logger
from .result import Outcome
from .version import __version__

log = logger()


def may_raise(i: int) -> bool:
    if i % 2 == 0:
        return True
    raise RuntimeError(f"odd parameter: {i}")


def describe(label: str, x: Any) -> str:
    return f"{label}(type = {type(x).__name__}) = {x!r}"


def run_sample(count: int, console: Console) -> list[Outcome[bool, Exception]]:
    def show(text: str):
        console.print(text, markup=False, highlight=False)

    outcomes = []
    for i in range(count):
        outcome = invoke(may_raise, parameter_from=lambda: i)
        log.debug(f"iteration {i}: {outcome}")
        show(str(outcome))
        (
            outcome
            .call(
                lambda value: show(describe("value", value)),
                lambda error: show(describe("error descriptor", error)),
            )
            .call_on_success(lambda value: show(describe("value", value)))
            .call_on_error(lambda error: show(describe("error descriptor", error)))
            .map_value(str)
            .call_on_success(
                lambda s: show(f"value as {type(s).__name__} = {s!r}, length = {len(s)}")
            )
            .map_error_descriptor(str)
            .call_on_error(
                lambda s: show(f"error as {type(s).__name__} = {s!r}, length = {len(s)}")
            )
        )
        outcomes.append(outcome)

    return outcomes


@argh.arg("-n", "--count", help="number of iterations")
@argh.arg("-v", "--version", help="print version number and exit")
@argh.arg("--plain", help="plain logging and console output")
@argh.arg("--debug", help="more verbose logging")
def sample(
    *,
    count: int = 10,
    version: bool = False,
    plain: bool = False,
    debug: bool = False
):
    """Invoke an operation that fails for odd parameters and chain the outcomes."""
    if version:
        print(f"pure-result {__version__}")
        sys.exit(0)

    configure_logger(debug, rich=not plain)
    console = Console(no_color=plain, soft_wrap=True)
    outcomes = run_sample(int(count), console)
    failed = sum(1 for o in outcomes if o.is_failure())
    log.info(f"{len(outcomes) - failed} succeeded, {failed} failed")


def cli():
    parser = ArgumentParser(formatter_class=RichHelpFormatter)
    argh.set_default_command(parser, sample)
    argh.dispatch(parser)


if __name__ == "__main__":
    cli()
