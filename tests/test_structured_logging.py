from __future__ import annotations

import json
import logging

import pytest

from polychain.config import SignerConfig
from polychain.structured_logging import configure_structured_logging, log_event


def test_log_event_emits_one_json_line(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("polychain.test")
    with caplog.at_level(logging.INFO, logger="polychain.test"):
        log_event(logger, "chain_sign", chain="ETH", key=b"\x01\x02")
    payload = json.loads(caplog.records[-1].getMessage())
    assert payload["event"] == "chain_sign"
    assert payload["chain"] == "ETH"
    assert payload["key"] == "0x0102"
    assert isinstance(payload["ts_ms"], int)


def test_log_event_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("polychain.test")
    with caplog.at_level(logging.WARNING, logger="polychain.test"):
        log_event(logger, "quiet")
        log_event(logger, "loud", level=logging.WARNING)
    events = [json.loads(r.getMessage())["event"] for r in caplog.records]
    assert events == ["loud"]


@pytest.fixture
def polychain_logger(monkeypatch: pytest.MonkeyPatch):
    for name in ("POLYCHAIN_SIGNER_CONFIG_PATH", "POLYCHAIN_ETH_KEY_ID", "POLYCHAIN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    logger = logging.getLogger("polychain")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield logger
    logger.handlers, logger.level, logger.propagate = saved
    if hasattr(logger, "_polychain_configured"):
        delattr(logger, "_polychain_configured")


def test_configure_reads_level_from_environment(
    polychain_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("POLYCHAIN_LOG_LEVEL", "warning")
    assert configure_structured_logging() is polychain_logger
    configure_structured_logging()
    assert len(polychain_logger.handlers) == 1
    assert polychain_logger.level == logging.WARNING
    assert polychain_logger.propagate is False


def test_configure_takes_level_from_signer_config(polychain_logger: logging.Logger) -> None:
    configure_structured_logging(SignerConfig(eth_key_id=None, log_level="DEBUG"))
    assert polychain_logger.level == logging.DEBUG
    configure_structured_logging(SignerConfig(eth_key_id=None, log_level="ERROR"))
    assert polychain_logger.level == logging.ERROR
    assert len(polychain_logger.handlers) == 1


def test_configure_rejects_unknown_level(polychain_logger: logging.Logger) -> None:
    with pytest.raises(ValueError):
        configure_structured_logging(SignerConfig(eth_key_id=None, log_level="LOUD"))
