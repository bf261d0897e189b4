from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotency of configuration,
file output and log rotation.
"""

import logging
import time
from pathlib import Path

from treetext.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    shutdown_logging,
)


def test_logging_idempotency() -> None:
    """Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    configure_logging(LoggingConfig(level="DEBUG", console=True), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len([h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]) == 1


def test_file_handler_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "treetext.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    logging.getLogger("treetext.test").info("rendered tree")
    shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "INFO | treetext.test | rendered tree" in content


def test_log_rotation(tmp_path: Path) -> None:
    """File rotation triggers when the size limit is exceeded."""
    log_file = tmp_path / "test_rotate.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")

    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Give time for the QueueListener to process
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "test_rotate.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """The root logger uses a single tagged QueueHandler."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(ours) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_everything() -> None:
    configure_logging(LoggingConfig(level="INFO", console=True))
    shutdown_logging()

    root = logging.getLogger()
    assert not [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)


def test_default_log_path_lives_under_user_data_dir() -> None:
    path = Path(get_default_log_path())

    assert path.name == "treetext.log"
    assert path.parent.name == "logs"
