"""
plyra-scope CLI
~~~~~~~~~~~~~~~

Command-line interface for plyra-scope.
"""

from __future__ import annotations

import argparse
import sys

import yaml


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="plyra-scope",
        description="plyra-scope — Deterministic scope-exit cleanup for Python",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    subparsers = parser.add_subparsers(dest="command")

    # version command
    subparsers.add_parser("version", help="Show version")

    # inspect command
    inspect_parser = subparsers.add_parser(
        "inspect", help="Print the effective configuration"
    )
    inspect_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to scope_config.yaml",
    )

    # validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Validate a configuration file"
    )
    validate_parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to scope_config.yaml",
    )

    args = parser.parse_args(argv)

    if args.version or args.command == "version":
        from plyra_scope import __version__

        print(f"plyra-scope {__version__} (Plyra Infrastructure)")
        return

    if args.command == "inspect":
        _run_inspect(args)
    elif args.command == "validate":
        _run_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


def _run_inspect(args: argparse.Namespace) -> None:
    """Run the inspect command."""
    from plyra_scope.config.loader import load_config, load_config_from_dict
    from plyra_scope.exceptions import ConfigError

    try:
        config = load_config(args.config) if args.config else load_config_from_dict({})
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False), end="")


def _run_validate(args: argparse.Namespace) -> None:
    """Run the validate command."""
    from plyra_scope.config.loader import load_config
    from plyra_scope.exceptions import ConfigError

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Invalid: {exc}", file=sys.stderr)
        sys.exit(1)

    print(f"Valid:      {args.config}")
    print(f"On failure: {config.teardown.on_failure}")


if __name__ == "__main__":
    main()
