"""Command-line entry point for yaml-keypath.

Usage:
    yaml-keypath config.yaml [override.yaml ...] [--key-path-pattern P]
                 [--env-var-prefix X] [--string-scalars] [--dry-run] [--github]

Without SOURCES the settings are read from GitHub Actions inputs
(`INPUT_CONFIG`, `INPUT_CONFIG-FILES`, ...), so the same entry point
serves as the action's main.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Mapping, Optional, Sequence

from yaml_keypath import __version__
from yaml_keypath.adapters.console import ConsoleEmitter
from yaml_keypath.adapters.github_actions import GitHubActionsEmitter
from yaml_keypath.core.exceptions import SettingsError
from yaml_keypath.core.output.emitter import Emitter
from yaml_keypath.core.settings import RunSettings
from yaml_keypath.runner import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yaml-keypath",
        description="Flatten YAML/JSON documents into dotted key-paths with $(name) substitution",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        help="YAML/JSON documents, merged left to right (later ones override)",
    )
    parser.add_argument(
        "--key-path-pattern",
        type=str,
        default=None,
        help="Regular expression selecting key-paths; the first match is removed from the output key",
    )
    parser.add_argument(
        "--env-var-prefix",
        type=str,
        default=None,
        help="Also export every selected entry as <PREFIX>_<KEY> environment variable",
    )
    parser.add_argument(
        "--string-scalars",
        action="store_true",
        help="Load every scalar as its source text (no number/boolean typing)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Resolve and filter without emitting anything",
    )
    parser.add_argument(
        "--github",
        action="store_true",
        help="Emit through the GitHub Actions runner protocol",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def settings_from_args(args: argparse.Namespace, environ: Mapping[str, str]) -> RunSettings:
    """Settings da linha de comando; sem SOURCES, parte dos inputs da action."""
    if not args.sources:
        inputs = RunSettings.from_action_inputs(environ)
        return RunSettings.from_sources(
            inputs.sources,
            key_path_pattern=args.key_path_pattern or inputs.key_path_pattern,
            env_var_prefix=args.env_var_prefix or inputs.env_var_prefix,
            string_scalars=args.string_scalars or inputs.string_scalars,
            dry_run=args.dry_run,
        )

    return RunSettings.from_sources(
        args.sources,
        key_path_pattern=args.key_path_pattern,
        env_var_prefix=args.env_var_prefix,
        string_scalars=args.string_scalars,
        dry_run=args.dry_run,
    )


def select_emitter(args: argparse.Namespace, environ: Mapping[str, str]) -> Emitter:
    if args.github or environ.get("GITHUB_OUTPUT"):
        return GitHubActionsEmitter()
    return ConsoleEmitter()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    environ = os.environ

    emitter = select_emitter(args, environ)

    try:
        settings = settings_from_args(args, environ)
    except SettingsError as e:
        emitter.set_failed(e.message)
        return 1

    result = run(settings, emitter)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
