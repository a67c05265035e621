"""Testes para config.logging.

Cobre: configure_logging, get_logger, RequestIdFilter,
create_json_formatter, ClientLogAdapter e resolve_log_level.
"""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest

from woocommerce_api.config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    STATIC_LOG_FIELDS,
    ClientLogAdapter,
    RequestIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    resolve_log_level,
)
from woocommerce_api.config.logging.config import (
    DEFAULT_SERVICE_NAME,
    LIBRARY_LOGGER_NAME,
    VALID_LOG_LEVELS,
)
from woocommerce_api.constants import VERSION
from woocommerce_api.observability import get_request_id, reset_request_id, set_request_id


@pytest.fixture(autouse=True)
def _restore_loggers() -> Iterator[None]:
    loggers = [logging.getLogger(), logging.getLogger(LIBRARY_LOGGER_NAME)]
    saved = [(lg.handlers[:], lg.level) for lg in loggers]
    yield
    for lg, (handlers, level) in zip(loggers, saved):
        lg.handlers = handlers
        lg.setLevel(level)


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_configure_logging_default_level(self) -> None:
        """Configura o logger da biblioteca com nível padrão INFO."""
        configure_logging()
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.INFO

    def test_configure_logging_case_insensitive(self) -> None:
        """Nível aceita minúsculas."""
        configure_logging(level="warning")
        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.WARNING

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_root_logger_is_untouched(self) -> None:
        """Handlers e nível do root logger da aplicação ficam como estavam."""
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level

        configure_logging(level="DEBUG")

        assert root.handlers == handlers
        assert root.level == level

    def test_reconfigure_replaces_only_own_handler(self) -> None:
        """Chamadas repetidas trocam o próprio handler e preservam os da aplicação."""
        library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
        app_handler = logging.NullHandler()
        library_logger.addHandler(app_handler)

        first = configure_logging()
        second = configure_logging()

        assert app_handler in library_logger.handlers
        assert second in library_logger.handlers
        assert first not in library_logger.handlers
        assert any(isinstance(f, RequestIdFilter) for f in second.filters)

    def test_writes_json_lines_to_stream(self) -> None:
        """Linha emitida é JSON com service, request_id e campos extra."""
        stream = io.StringIO()
        configure_logging(
            level="INFO",
            service_name="loja",
            request_id_getter=lambda: "req-1",
            stream=stream,
        )

        get_logger("woocommerce_api.client.request").info(
            "woocommerce_request_completed", extra={"status_code": 200}
        )

        line = json.loads(stream.getvalue().splitlines()[-1])
        assert line["message"] == "woocommerce_request_completed"
        assert line["service"] == "loja"
        assert line["request_id"] == "req-1"
        assert line["status_code"] == 200

    def test_constants(self) -> None:
        """Constantes públicas do módulo."""
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "woocommerce_api"


class TestGetLogger:
    """Testes para get_logger."""

    def test_get_logger_returns_same_instance(self) -> None:
        """Mesmo nome retorna mesma instância."""
        logger = get_logger("same.module")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("same.module")


class TestRequestIdFilter:
    """Testes para RequestIdFilter."""

    def test_filter_adds_request_id_from_getter(self) -> None:
        """Filter adiciona request_id do getter e o service."""
        filter_ = RequestIdFilter("my_service", lambda: "req-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.request_id == "req-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_request_id(self) -> None:
        """Filter preserva request_id passado via extra."""
        filter_ = RequestIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.request_id = "explicit-id"
        filter_.filter(record)
        assert record.request_id == "explicit-id"

    def test_filter_reads_context_var_by_default(self) -> None:
        """Sem getter, usa o request_id do contexto."""
        filter_ = RequestIdFilter("svc")
        token = set_request_id("ctx-id")
        try:
            record = _record()
            filter_.filter(record)
        finally:
            reset_request_id(token)
        assert record.request_id == "ctx-id"
        assert get_request_id() == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_log_fields_order(self) -> None:
        """Campos fixos na ordem de saída."""
        assert REQUIRED_LOG_FIELDS == (
            "asctime",
            "levelname",
            "name",
            "service",
            "request_id",
            "message",
        )

    def test_field_rename_map_content(self) -> None:
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record(self) -> None:
        """JsonFormatter gera JSON com campos renomeados e identificação da biblioteca."""
        record = _record("Pedido criado: café")
        record.request_id = "abc-123"
        record.service = "test_service"

        raw = create_json_formatter().format(record)
        output = json.loads(raw)

        assert output["message"] == "Pedido criado: café"
        assert "café" in raw
        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["request_id"] == "abc-123"
        assert output["library"] == STATIC_LOG_FIELDS["library"]
        assert output["library_version"] == VERSION


class TestResolveLogLevel:
    """Testes para resolve_log_level."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, logging.ERROR),
            (0, logging.ERROR),
            (1, logging.INFO),
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
        ],
    )
    def test_valid_levels(self, value: str | int | None, expected: int) -> None:
        assert resolve_log_level(value) == expected

    @pytest.mark.parametrize("value", [2, -1, True, "LOUD"])
    def test_invalid_levels(self, value: str | int) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            resolve_log_level(value)


class TestClientLogAdapter:
    """Testes para ClientLogAdapter."""

    def test_threshold_blocks_lower_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        """Abaixo do limiar nada é emitido, mesmo com o logger em DEBUG."""
        caplog.set_level(logging.DEBUG, logger="adapter.test")
        adapter = ClientLogAdapter(logging.getLogger("adapter.test"), logging.ERROR)

        adapter.info("hidden")
        adapter.error("shown")

        assert [r.getMessage() for r in caplog.records] == ["shown"]

    def test_request_id_is_attached(self, caplog: pytest.LogCaptureFixture) -> None:
        """request_id do contexto vai no extra de cada record."""
        caplog.set_level(logging.DEBUG, logger="adapter.ctx")
        adapter = ClientLogAdapter(logging.getLogger("adapter.ctx"), logging.DEBUG)
        token = set_request_id("req-42")
        try:
            adapter.info("with id", extra={"status_code": 200})
        finally:
            reset_request_id(token)

        record = caplog.records[0]
        assert record.request_id == "req-42"
        assert record.status_code == 200

    def test_logging_failure_does_not_raise(self) -> None:
        """Handler com defeito não derruba o chamador."""

        class BrokenStream:
            def write(self, _: str) -> None:
                raise OSError("disk full")

            def flush(self) -> None:
                raise OSError("disk full")

        logger = logging.getLogger("adapter.broken")
        handler = logging.StreamHandler(BrokenStream())
        logger.addHandler(handler)
        raise_exceptions = logging.raiseExceptions
        logging.raiseExceptions = False
        try:
            ClientLogAdapter(logger, logging.ERROR).error("still fine")
        finally:
            logging.raiseExceptions = raise_exceptions
            logger.removeHandler(handler)
