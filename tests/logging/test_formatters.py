import logging

from ghtf.logging.formatters import GhtfFormatter


def _record(msg, args=()):
    return logging.LogRecord(
        name="ghtf.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=msg,
        args=args,
        exc_info=None,
    )


def test_formatter_basic_format():
    output = GhtfFormatter(include_timestamps=False).format(_record("hello"))

    assert "INFO" in output
    assert "[ghtf.test]" in output
    assert "hello" in output


def test_formatter_sanitizes_dict_msg():
    formatter = GhtfFormatter(include_timestamps=False)
    output = formatter.format(_record({"token": "supersecrettoken"}))

    assert "supersecrettoken" not in output
    assert "supe...oken" in output


def test_formatter_sanitizes_dict_args():
    formatter = GhtfFormatter(include_timestamps=False)
    output = formatter.format(_record("args %s %s", ("x", {"pem": "k"})))

    assert "'pem': '***'" in output


def test_formatter_without_sanitizing():
    formatter = GhtfFormatter(include_timestamps=False, sanitize_sensitive=False)
    output = formatter.format(_record({"token": "supersecrettoken"}))

    assert "supersecrettoken" in output
