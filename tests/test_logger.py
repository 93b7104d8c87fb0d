import io
import logging

from snudown_parser.logger import ROOT_LOGGER_NAME, enable_debug_logging, get_logger
from snudown_parser.parser import parse_html


def test_get_logger_prefixes_names():
    assert get_logger("scanner").name == "snudown_parser.scanner"
    assert get_logger("snudown_parser.parser").name == "snudown_parser.parser"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_unknown_tags_are_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        parse_html("<p><marquee>x</marquee></p>")

    assert any("<marquee>" in record.getMessage() for record in caplog.records)
    assert any("1 components" in record.getMessage() for record in caplog.records)


def test_enable_debug_logging_writes_to_stream():
    stream = io.StringIO()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    previous_level = root.level
    handler = enable_debug_logging(stream)
    try:
        parse_html('<p><a href=\\"u\\"><img src=\\"\\" width=\\"1\\" height=\\"1\\"></a></p>')
    finally:
        root.removeHandler(handler)
        root.setLevel(previous_level)

    assert "Omitting inline image" in stream.getvalue()
