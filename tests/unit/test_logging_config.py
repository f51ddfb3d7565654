"""
Tests for logging configuration.
"""
import json
import logging
from tableforge.logging_config import setup_logging, get_logger, JSONFormatter, ColoredFormatter


class TestLoggingConfig:
    """Test logging configuration."""

    def test_setup_logging_default(self):
        logger = setup_logging(verbose=0)
        assert logger.level == logging.WARNING

    def test_setup_logging_verbose(self):
        logger = setup_logging(verbose=1)
        assert logger.level == logging.INFO

    def test_setup_logging_debug(self):
        logger = setup_logging(verbose=2)
        assert logger.level == logging.DEBUG

    def test_setup_logging_single_handler(self):
        setup_logging(verbose=1)
        logger = setup_logging(verbose=1, log_format='json')
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_setup_logging_no_color(self):
        logger = setup_logging(verbose=1, log_format='text', no_color=True)
        formatter = logger.handlers[0].formatter
        assert isinstance(formatter, ColoredFormatter)
        assert formatter.use_color is False

    def test_get_logger_default(self):
        assert get_logger().name == 'tableforge'

    def test_get_logger_with_name(self):
        assert get_logger('walker').name == 'tableforge.walker'


def make_record(level=logging.INFO, msg='Test message'):
    return logging.LogRecord(
        name='tableforge.test', level=level, pathname='', lineno=0,
        msg=msg, args=(), exc_info=None
    )


class TestJSONFormatter:
    """Test JSON log formatter."""

    def test_basic_format(self):
        output = json.loads(JSONFormatter().format(make_record()))
        assert output['message'] == 'Test message'
        assert output['level'] == 'INFO'
        assert output['logger'] == 'tableforge.test'
        assert output['timestamp'].endswith('Z')

    def test_format_with_extras(self):
        record = make_record()
        record.construct = 'VISIBLE'
        record.file_path = 'schema.sql'
        output = json.loads(JSONFormatter().format(record))
        assert output['construct'] == 'VISIBLE'
        assert output['file_path'] == 'schema.sql'
        assert 'statement' not in output


class TestColoredFormatter:
    """Test colored log formatter."""

    def test_format_with_color(self):
        output = ColoredFormatter(use_color=True).format(make_record(logging.ERROR, 'Error message'))
        assert 'Error message' in output
        assert '\033[31m' in output

    def test_format_without_color(self):
        output = ColoredFormatter(use_color=False).format(make_record(msg='Info message'))
        assert output == '[INFO] Info message'

    def test_context_fields(self):
        record = make_record(logging.WARNING, 'skipped')
        record.statement = 'ALTER TABLE t'
        record.construct = 'INDEX'
        output = ColoredFormatter(use_color=False).format(record)
        assert output == '[WARNING] skipped [stmt=ALTER TABLE t, at=INDEX]'
