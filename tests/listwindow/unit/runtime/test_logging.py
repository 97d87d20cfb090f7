from __future__ import annotations

import json
import logging

import listwindow.api.logging as api_logging
from listwindow.api.logging import LoggingConfig, configure_logging
from listwindow.runtime.logging import JsonFormatter, setup_logging, shutdown_logging


def test_setup_logging_adds_handler_when_missing(monkeypatch) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    try:
        root.handlers.clear()
        root.setLevel(logging.NOTSET)
        monkeypatch.setenv("LISTWINDOW_LOG_LEVEL", "DEBUG")
        setup_logging()
        assert root.handlers
        assert root.level == logging.DEBUG
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_setup_logging_does_not_override_existing_handlers() -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    sentinel = logging.NullHandler()
    try:
        root.handlers.clear()
        root.addHandler(sentinel)
        root.setLevel(logging.WARNING)
        setup_logging()
        assert root.handlers == [sentinel]
        assert root.level == logging.WARNING
    finally:
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.listwindow.json")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="window %s",
        args=("changed",),
        exc_info=None,
        extra={"overscan_stop": 7},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "window changed"
    assert payload["level"] == "INFO"
    assert payload["fields"] == {"overscan_stop": 7}


def test_configure_logging_streams_json_to_file(tmp_path) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    log_file = tmp_path / "logs" / "listwindow.jsonl"
    try:
        configure_logging(LoggingConfig(level_name="debug", file_path=str(log_file)))
        assert root.level == logging.DEBUG
        logging.getLogger("test.listwindow.file").info("settled")
        shutdown_logging()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert any(json.loads(line)["msg"] == "settled" for line in lines)
    finally:
        shutdown_logging()
        root.handlers.clear()
        root.handlers.extend(original_handlers)
        root.setLevel(original_level)


def test_public_logging_surface_is_config_and_configure() -> None:
    assert sorted(api_logging.__all__) == ["LoggingConfig", "configure_logging"]
