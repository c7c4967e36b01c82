"""CLI application entry point and command routing for ttyask.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ttyask.exceptions.TtyaskError`, ``KeyboardInterrupt``
and any unexpected ``Exception``, rendering user-friendly messages via
Rich and returning well-defined exit codes.

Architecture notes
------------------
* Prompts, menus and errors render on stderr; stdout carries only the
  answer, so ``ttyask`` composes in shell pipelines::

      env=$(ttyask choice "Deploy to" dev=Development prod=Production --default dev)

* Settings (auto-yes mode) are resolved exactly once here, from the
  environment and the ``--yes`` flag, before any prompt runs.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Mapping

from ttyask.cli import exit_codes
from ttyask.cli.console import configure_logging, console
from ttyask.core.models import OptionSet, PromptSettings
from ttyask.core.prompter import Prompter
from ttyask.exceptions import InputClosedError, TtyaskError
from ttyask.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _option_spec(value: str) -> tuple[str, str]:
    """Parse a ``KEY=LABEL`` argument; a bare ``KEY`` is its own label."""
    key, sep, label = value.partition("=")
    key = key.strip()
    if not key:
        raise argparse.ArgumentTypeError(f"option {value!r} has an empty key")
    return key, label if sep else key


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``ttyask confirm QUESTION``
    * ``ttyask choice MESSAGE KEY=LABEL...``
    * ``ttyask input MESSAGE``
    * ``ttyask --version``
    """
    parser = argparse.ArgumentParser(
        prog="ttyask",
        description="Ask interactive questions on the terminal.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-y",
        "--yes",
        action="store_true",
        help="Answer every confirmation with yes without asking "
        "(also enabled by TTYASK_ASSUME_YES=1).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr.",
    )
    parser.add_argument(
        "--locale-dir",
        default=None,
        help="Directory containing ttyask gettext catalogues.",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    confirm = sub.add_parser("confirm", help="Ask a yes/no question.")
    confirm.add_argument("question")
    confirm.add_argument(
        "--default-yes",
        action="store_true",
        help="Treat an empty answer as yes (default: no).",
    )
    confirm.add_argument(
        "--exit-status",
        action="store_true",
        help="Exit with status 1 when the answer is no.",
    )
    confirm.add_argument(
        "--select",
        action="store_true",
        help="Use an arrow-key prompt instead of typing y/n.",
    )

    choice = sub.add_parser("choice", help="Pick one option from a numbered menu.")
    choice.add_argument("message")
    choice.add_argument(
        "options",
        nargs="+",
        type=_option_spec,
        metavar="KEY=LABEL",
        help="Options in display order.",
    )
    choice.add_argument(
        "--default",
        dest="default_key",
        default=None,
        help="Key returned on an empty answer.",
    )
    choice.add_argument(
        "--select",
        action="store_true",
        help="Use an arrow-key selector instead of typing a number.",
    )

    text = sub.add_parser("input", help="Ask for free-text input.")
    text.add_argument("message")
    text.add_argument("--default", default="", help="Value returned on an empty answer.")
    text.add_argument(
        "--required",
        action="store_true",
        help="Re-ask until a non-empty answer is given (ignored with --default).",
    )
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _resolve_settings(args: argparse.Namespace, environ: Mapping[str, str]) -> PromptSettings:
    from_env = PromptSettings.from_env(environ)
    return PromptSettings(auto_yes=args.yes or from_env.auto_yes)


def _build_prompter(args: argparse.Namespace, settings: PromptSettings) -> Prompter:
    """Instantiate the terminal-backed prompter."""
    from ttyask.infra.terminal import (
        RichTableRenderer,
        RichTextRenderer,
        StdinLineReader,
        get_rich_console,
    )
    from ttyask.infra.translation import GettextTranslator

    rich_console = get_rich_console()
    return Prompter(
        StdinLineReader(),
        RichTextRenderer(rich_console),
        RichTableRenderer(rich_console),
        GettextTranslator(args.locale_dir),
        settings,
    )


def _emit(answer: str) -> None:
    sys.stdout.write(answer + "\n")
    sys.stdout.flush()


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_confirm(args: argparse.Namespace, settings: PromptSettings) -> int:
    if args.select:
        from ttyask.cli.select_prompt import confirm_select

        answer = confirm_select(args.question, args.default_yes, settings)
    else:
        answer = _build_prompter(args, settings).confirm(args.question, args.default_yes)

    _emit("yes" if answer else "no")
    if args.exit_status and not answer:
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def _handle_choice(args: argparse.Namespace, settings: PromptSettings) -> int:
    options = OptionSet.from_pairs(args.options)

    if args.select:
        from ttyask.cli.select_prompt import select_option

        key = select_option(options, args.message, args.default_key)
    else:
        key = _build_prompter(args, settings).choice(options, args.message, args.default_key)

    _emit("" if key is None else key)
    return exit_codes.SUCCESS


def _handle_input(args: argparse.Namespace, settings: PromptSettings) -> int:
    answer = _build_prompter(args, settings).input(args.message, args.default, args.required)
    _emit(answer)
    return exit_codes.SUCCESS


_HANDLERS = {
    "confirm": _handle_confirm,
    "choice": _handle_choice,
    "input": _handle_input,
}


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    """Run the ttyask CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment used to resolve settings.  Defaults to ``os.environ``.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    settings = _resolve_settings(args, os.environ if environ is None else environ)
    return _HANDLERS[args.command](args, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except InputClosedError as exc:
        console.print(f"\n[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.INPUT_CLOSED)
    except TtyaskError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
