"""CLI entrypoint for a11y-select."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .constants import SAMPLE_LABEL, SAMPLE_OPTIONS
from .controller import SelectionController
from .log import configure_logging
from .registry import load_option_file, load_select_file, save_option_file, to_definition
from .validate import OptionFileError, validate_config, validate_option_table


def _cmd_init(args: argparse.Namespace) -> int:
    dest = Path(args.path)
    if dest.exists() and not args.force:
        print(f"Refusing to overwrite existing file: {dest} (use --force)")
        return 1
    dest.parent.mkdir(parents=True, exist_ok=True)
    save_option_file(
        dest,
        {"label": SAMPLE_LABEL, "initial_value": SAMPLE_OPTIONS[1]["value"]},
        [to_definition(item) for item in SAMPLE_OPTIONS],
    )
    print(f"Wrote {dest}")
    return 0


def _cmd_validate(args: argparse.Namespace) -> int:
    data = load_option_file(args.path)
    errors = validate_option_table(data)
    if errors:
        print("Option file validation failed:\n")
        for msg in errors:
            print(f"- {msg}")
        return 1
    config, _ = load_select_file(args.path)
    diagnostic = validate_config(config)
    if diagnostic is not None:
        print(f"warning: {diagnostic}")
    print("Option file valid")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    config, definitions = load_select_file(args.path)
    controller = SelectionController(definitions, config)
    selected = controller.state.selected_index
    for option in controller.registry:
        marker = "*" if option.index == selected else " "
        flags = " (disabled)" if option.disabled else ""
        print(f"{marker} {option.index:>3}  {option.value}  {option.display_label}{flags}")
    if selected is None:
        print(f"initial: none ({config.placeholder_text})")
    else:
        print(f"initial: {controller.selected_value}")
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    from .tui import launch_demo

    path = Path(args.path) if args.path else None
    return launch_demo(path, label=args.label, initial_value=args.initial_value)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog=os.path.basename(sys.argv[0]))
    parser.add_argument("--log-level", help="Logging level (default WARNING)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also write logs to this file")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_init = sub.add_parser("init", help="Write a sample option file")
    p_init.add_argument("path", help="Destination .toml path")
    p_init.add_argument("--force", action="store_true", help="Overwrite an existing file")
    p_init.set_defaults(func=_cmd_init)

    p_validate = sub.add_parser("validate", help="Validate an option file")
    p_validate.add_argument("path", help="Path to the option file")
    p_validate.set_defaults(func=_cmd_validate)

    p_show = sub.add_parser("show", help="Print indexed options and initial selection")
    p_show.add_argument("path", help="Path to the option file")
    p_show.set_defaults(func=_cmd_show)

    p_demo = sub.add_parser("demo", help="Run the interactive select demo")
    p_demo.add_argument("path", nargs="?", help="Option file (default: built-in sample)")
    p_demo.add_argument("--label", help="Override the accessible label")
    p_demo.add_argument("--initial-value", help="Override the initial value")
    p_demo.set_defaults(func=_cmd_demo)

    args = parser.parse_args(argv)
    configure_logging(
        level=args.log_level,
        debug=args.debug,
        log_file=args.log_file,
        tui=args.cmd == "demo",
    )
    try:
        return args.func(args)
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except (OptionFileError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
