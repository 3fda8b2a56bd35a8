# src/variable_irony/cli.py

import argparse
import json
import platform
import sys
from difflib import get_close_matches

from .bindings import create_cached_variable, link_environment_variable
from .errors import IronyError
from .meta import DESCRIPTION, PROGRAM_DISPLAY, PROGRAM_SCRIPT, VERSION
from .platform_select import get_backend
from .scope import Scope
from .utils import safe_log
from .utils_logs import LEVEL_ORDER, get_log_level, get_logger, set_log_level


# --------------------------------------------------------------------------- #
# CLI setup and helpers
# --------------------------------------------------------------------------- #


class HintingArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        # Build known option strings: ["-v", "--verbose", "--log-level", ...]
        known_opts: list[str] = []
        for action in self._actions:
            known_opts.extend([s for s in action.option_strings if s])

        hint_lines: list[str] = []
        # Argparse message for bad flags is typically
        # "unrecognized arguments: --verbos ..."
        if "unrecognized arguments:" in message:
            bad = message.split("unrecognized arguments:", 1)[1].strip()
            bad_args = [tok for tok in bad.split() if tok.startswith("-")]
            for arg in bad_args:
                close = get_close_matches(arg, known_opts, n=1, cutoff=0.6)
                if close:
                    hint_lines.append(f"Hint: did you mean {close[0]}?")

        # Print usage + the argparse error
        self.print_usage(sys.stderr)
        full = f"{self.prog}: error: {message}"
        if hint_lines:
            full += "\n" + "\n".join(hint_lines)
        self.exit(2, full + "\n")


def _parse_json_arg(raw: str) -> object:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        xmsg = f"not valid JSON: {raw!r} ({e.msg})"
        raise argparse.ArgumentTypeError(xmsg) from e


def _setup_parser() -> argparse.ArgumentParser:
    """Define and return the CLI argument parser."""
    parser = HintingArgumentParser(prog=PROGRAM_SCRIPT, description=DESCRIPTION)

    # --- Version and verbosity ---
    parser.add_argument("--version", action="store_true", help="Show version info.")

    log_level = parser.add_mutually_exclusive_group()
    log_level.add_argument(
        "-q",
        "--quiet",
        action="store_const",
        const="warning",
        dest="log_level",
        help="Suppress non-critical output (same as --log-level warning).",
    )
    log_level.add_argument(
        "-v",
        "--verbose",
        action="store_const",
        const="debug",
        dest="log_level",
        help="Verbose output (same as --log-level debug).",
    )
    log_level.add_argument(
        "--log-level",
        choices=LEVEL_ORDER,
        default=None,
        dest="log_level",
        help="Set log verbosity level.",
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    # --- env ---
    env = commands.add_parser(
        "env",
        help="Link an environment variable and print its value.",
    )
    env.add_argument("name", help="Variable name (camelCase or snake_case).")
    env.add_argument(
        "-r",
        "--real-name",
        default=None,
        help="Environment variable to bind instead of the derived one.",
    )
    env.add_argument(
        "-d",
        "--default",
        default=None,
        help="Value to use when the variable is unset.",
    )
    env.add_argument(
        "--key",
        action="store_true",
        help="Print the resolved environment variable name instead of its value.",
    )

    # --- cache ---
    cache = commands.add_parser(
        "cache",
        help="Bind a cached variable and print its value as JSON.",
    )
    cache.add_argument("name", help="Cached variable name.")
    cache.add_argument(
        "-d",
        "--default",
        type=_parse_json_arg,
        default=None,
        metavar="JSON",
        help="Initial value when nothing is cached yet.",
    )
    cache.add_argument(
        "--set",
        type=_parse_json_arg,
        default=argparse.SUPPRESS,
        dest="new_value",
        metavar="JSON",
        help="Assign a new value (saved on exit).",
    )
    return parser


def _run_env(args: argparse.Namespace) -> int:
    scope = Scope()
    real_key = link_environment_variable(
        args.name, args.real_name, args.default, scope
    )
    sys.stdout.write(real_key if args.key else scope[args.name])
    return 0


def _run_cache(args: argparse.Namespace) -> int:
    scope = Scope()
    create_cached_variable(args.name, args.default, scope)
    # absent unless given, so `--set null` stores null
    if hasattr(args, "new_value"):
        scope[args.name] = args.new_value
    sys.stdout.write(json.dumps(scope[args.name]))
    return 0


# --------------------------------------------------------------------------- #
# Main entry
# --------------------------------------------------------------------------- #


def main(argv: list[str] | None = None) -> int:
    logger = get_logger()  # init (use env + defaults)

    try:
        parser = _setup_parser()
        args = parser.parse_args(argv)

        if args.log_level:
            set_log_level(args.log_level)
        logger.trace("[BOOT] log-level initialized: %s", get_log_level())

        logger.debug(
            "Runtime: Python %s (%s)",
            platform.python_version(),
            platform.python_implementation(),
        )

        # --- Version flag ---
        if args.version:
            logger.info("%s %s", PROGRAM_DISPLAY, VERSION)
            return 0

        if args.command is None:
            parser.print_help(sys.stderr)
            return 2

        if args.command == "env":
            code = _run_env(args)
        else:
            code = _run_cache(args)
            get_backend().flush_cache()

    except IronyError as e:
        # controlled termination
        try:
            logger.error(str(e))  # noqa: TRY400
        except Exception:  # noqa: BLE001
            safe_log(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    except Exception as e:  # noqa: BLE001
        # unexpected internal error
        try:
            logger.critical("Unexpected internal error: %s", e)
        except Exception:  # noqa: BLE001
            safe_log(f"[FATAL] Logging failed while reporting: {e}")
        return 1

    else:
        return code
