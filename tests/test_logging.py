from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from user_management.config import Settings
from user_management.core.database import create_engine
from user_management.core.logging import LOG_FORMAT, setup_logging
from user_management.main import create_app


@pytest.fixture()
def lines() -> Iterator[list[str]]:
    captured: list[str] = []
    yield captured
    setup_logging("INFO")


def test_text_lines_carry_request_id(lines: list[str]) -> None:
    setup_logging("INFO", sink=lines.append)

    with logger.contextualize(request_id="rid-42"):
        logger.info("inside request")
    logger.info("outside request")

    assert "rid-42" in lines[0]
    assert "inside request" in lines[0]
    assert " | - | " in lines[1]


def test_json_lines_carry_request_id(lines: list[str]) -> None:
    setup_logging("INFO", json_format=True, sink=lines.append)

    with logger.contextualize(request_id="rid-json"):
        logger.info("structured")

    record = json.loads(lines[0])["record"]
    assert record["extra"]["request_id"] == "rid-json"


def test_stdlib_records_are_forwarded(lines: list[str]) -> None:
    setup_logging("INFO", sink=lines.append)

    logging.getLogger("user_management.tests").warning("from stdlib")

    assert any("from stdlib" in line for line in lines)


def test_request_log_lines_use_request_id(settings: Settings, lines: list[str]) -> None:
    app = create_app(settings)
    handler_id = logger.add(lines.append, level="INFO", format=LOG_FORMAT)
    try:
        with TestClient(app) as client:
            client.get("/health", headers={"X-Request-ID": "rid-http"})
    finally:
        logger.remove(handler_id)

    request_lines = [line for line in lines if "GET /health" in line]
    assert request_lines
    assert "rid-http" in request_lines[0]


@pytest.mark.parametrize(("sql_echo", "expected"), [(True, logging.INFO), (False, logging.WARNING)])
def test_sql_echo_controls_engine_logger(
    lines: list[str], sql_echo: bool, expected: int
) -> None:
    setup_logging("DEBUG", sql_echo=sql_echo, sink=lines.append)

    assert logging.getLogger("sqlalchemy.engine").level == expected


def test_engine_has_no_own_echo_handler(settings: Settings) -> None:
    engine = create_engine(settings)

    assert settings.debug
    assert engine.sync_engine.echo is False
