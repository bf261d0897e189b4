from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, resolution of the
configuration hierarchy (defaults, persisted settings, command-line
overrides), outline loading, rendering, and output delivery.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from treetext.core.parsing.input_parser import parse_input
from treetext.core.rendering.dispatcher import format_tree
from treetext.core.validator import to_render_options, validate_config
from treetext.domain import config as config_store
from treetext.domain.constants import SAMPLE_INPUT
from treetext.domain.errors import TreeTextError
from treetext.domain.render_models import FormatType, normalize_charset
from treetext.infra.fs import read_text_source, write_text_output
from treetext.infra.logging import LoggingConfig, configure_logging, get_logger
from treetext.interface.cli import args as cli_args
from treetext.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

_LINE_DRAWING_FORMATS = (FormatType.ASCII, FormatType.UTF8)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    if sys.platform == "win32":
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding="utf-8")
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding="utf-8")

    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console on stderr, optional file)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 3. Configuration hierarchy
    base_conf = config_store.get_default_config() if args.use_defaults else config_store.load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_defaults:
        config_store.save_config(clean_conf)
        print(i18n.t("cli.status.saved", path=config_store.CONFIG_FILE), file=sys.stderr)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Outline loading
    try:
        source = SAMPLE_INPUT if args.example else read_text_source(args.input_path)
    except FileNotFoundError:
        return _fail(i18n.t("cli.errors.input_not_found", path=args.input_path), EXIT_BAD_INPUT)
    except (OSError, UnicodeDecodeError) as e:
        return _fail(i18n.t("cli.errors.read_failed", error=str(e)), EXIT_BAD_INPUT)
    except KeyboardInterrupt:
        return _interrupted()

    # 5. Parse and render
    try:
        rendered = render_text(source, clean_conf)
    except TreeTextError as e:
        return _fail(i18n.t("cli.errors.render_failed", error=str(e)), EXIT_BAD_INPUT)
    except KeyboardInterrupt:
        return _interrupted()
    except Exception as e:
        logger.critical(i18n.t("cli.errors.unexpected", error=str(e)), exc_info=True)
        print(f"ERROR: {i18n.t('cli.errors.unexpected', error=str(e))}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output delivery
    if args.output_path:
        try:
            written = write_text_output(args.output_path, rendered)
        except OSError as e:
            return _fail(i18n.t("cli.errors.write_failed", error=str(e)), EXIT_FAILURE)
        logger.info(i18n.t("cli.status.written", path=written))
    else:
        sys.stdout.write(rendered if rendered.endswith("\n") else rendered + "\n")

    return EXIT_OK


def render_text(source: str, conf: Dict[str, Any]) -> str:
    """
    Run the parse/render pipeline for one outline.

    Args:
        source: Outline text.
        conf: Validated configuration.

    Returns:
        str: The rendering in the configured format.
    """
    root = parse_input(source)
    return format_tree(
        root,
        conf["format"],
        to_render_options(conf),
        strict=bool(conf.get("strict_format")),
    )

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge overrides into the base configuration.

    Only keys known to the default schema are merged. For line drawing the
    format id and the charset name the same glyph set, so overriding one of
    them carries the other along.
    """
    out = dict(base)
    for k in config_store.get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]

    charset = overrides.get("charset")
    requested = FormatType.resolve(overrides.get("format"))

    if charset and not overrides.get("format"):
        if FormatType.resolve(out.get("format")) in _LINE_DRAWING_FORMATS:
            out["format"] = normalize_charset(charset)
    elif requested in _LINE_DRAWING_FORMATS and not charset:
        out["charset"] = requested.value

    return out

# -----------------------------------------------------------------------------
# ERROR REPORTING
# -----------------------------------------------------------------------------

def _fail(msg: str, code: int) -> int:
    logger.error(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return code


def _interrupted() -> int:
    msg = i18n.t("cli.status.interrupted")
    logger.warning(msg)
    print(msg, file=sys.stderr)
    return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
