from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Installs a process-wide exception hook so that unexpected crashes are
logged and reported on stderr with a non-zero exit code, then delegates
to the CLI controller.
"""

import logging
import os
import sys
import traceback
from typing import Any, List, Optional

# Allow running this file directly from a source checkout
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)

EXIT_CRASH = 1

# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions, log them and terminate the process.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("treetext.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (TREETEXT CLI)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(EXIT_CRASH)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Console-script entry point.

    Returns:
        int: Process exit code.
    """
    sys.excepthook = global_exception_handler

    from treetext.interface.cli.app import main as cli_main
    return cli_main(argv)


if __name__ == "__main__":
    sys.exit(main())
