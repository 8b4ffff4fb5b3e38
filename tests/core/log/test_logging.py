import logging

from flart.core.log.logging import SuppressFigmaTokenFilter, _configure_library_loggers


def make_record(name: str, level: int, msg: str) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


class TestSuppressFigmaTokenFilter:
    def test_drops_figma_request_debug_lines(self) -> None:
        record = make_record(
            "urllib3.connectionpool",
            logging.DEBUG,
            'https://api.figma.com:443 "GET /v1/files/AbC123 HTTP/1.1" 200 None',
        )

        assert SuppressFigmaTokenFilter().filter(record) is False

    def test_keeps_other_records(self) -> None:
        other_host = make_record(
            "urllib3.connectionpool", logging.DEBUG, "https://example.com:443 GET /"
        )
        warning = make_record(
            "urllib3.connectionpool", logging.WARNING, "Retrying api.figma.com"
        )

        assert SuppressFigmaTokenFilter().filter(other_host) is True
        assert SuppressFigmaTokenFilter().filter(warning) is True

    def test_connection_pool_logs_debug_through_filter(self) -> None:
        # Given
        pool_logger = logging.getLogger("urllib3.connectionpool")

        # When
        _configure_library_loggers()
        _configure_library_loggers()

        # Then
        assert pool_logger.isEnabledFor(logging.DEBUG)
        filters = [f for f in pool_logger.filters if isinstance(f, SuppressFigmaTokenFilter)]
        assert len(filters) == 1
