from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates raw argparse namespaces
into configuration overrides understood by the validator.
"""

import argparse
from typing import Any, Dict

from treetext.domain.constants import CHARSET_ASCII, CHARSET_UTF8
from treetext.domain.render_models import FORMAT_IDS
from treetext.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the treetext CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="treetext",
        description=i18n.t("app.description"),
    )

    # --- Input / Output ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=i18n.t("cli.args.output"),
    )
    p.add_argument(
        "--example",
        action="store_true",
        help=i18n.t("cli.args.example"),
    )

    # --- Format Selection ---
    # Not restricted with choices: unknown ids fall back unless --strict
    p.add_argument(
        "-f", "--format",
        dest="format",
        default=None,
        help=i18n.t("cli.args.format", formats=", ".join(FORMAT_IDS)),
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help=i18n.t("cli.args.strict"),
    )

    # --- Line-Drawing Layout ---
    p.add_argument(
        "--charset",
        dest="charset",
        choices=[CHARSET_ASCII, CHARSET_UTF8, "utf8"],
        default=None,
        help=i18n.t("cli.args.charset"),
    )
    p.add_argument(
        "--trailing-slash",
        action="store_true",
        help=i18n.t("cli.args.trailing_slash"),
    )
    p.add_argument(
        "--full-path",
        action="store_true",
        help=i18n.t("cli.args.full_path"),
    )
    p.add_argument(
        "--no-root-dot",
        action="store_true",
        help=i18n.t("cli.args.no_root_dot"),
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--save-defaults",
        action="store_true",
        help=i18n.t("cli.args.save_defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Only flags the user actually set are returned, so persisted settings
    survive for everything else.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.format:
        overrides["format"] = args.format
    if args.charset:
        overrides["charset"] = args.charset
    if args.trailing_slash:
        overrides["trailing_dir_slash"] = True
    if args.full_path:
        overrides["full_path"] = True
    if args.no_root_dot:
        overrides["root_dot"] = False
    if args.strict:
        overrides["strict_format"] = True

    return overrides
