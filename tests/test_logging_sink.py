from loguru import logger as loguru_logger

from jsonrpc_post.logging_sink import default_logger, log, set_default_logger


class _DebugOnly:
    def __init__(self):
        self.messages = []

    def debug(self, message):
        self.messages.append(message)


class _Exploding:
    def error(self, message):
        raise RuntimeError("sink is broken")


def test_default_logger_starts_as_loguru():
    assert default_logger() is loguru_logger


def test_default_logger_can_be_replaced(capture_logger):
    set_default_logger(capture_logger)
    assert default_logger() is capture_logger


def test_instance_logger_wins(capture_logger):
    fallback = _DebugOnly()
    set_default_logger(fallback)
    log("debug", "hello", capture_logger)
    assert capture_logger.records == [("debug", "hello")]
    assert fallback.messages == []


def test_falls_back_to_default_when_instance_lacks_level(capture_logger):
    instance = _DebugOnly()
    set_default_logger(capture_logger)
    log("error", "broken", instance)
    log("debug", "fine", instance)
    assert capture_logger.records == [("error", "broken")]
    assert instance.messages == ["fine"]


def test_no_logger_is_a_noop():
    set_default_logger(None)
    log("debug", "nobody listens")
    log("error", "nobody listens", object())


def test_warn_resolves_to_warning(capture_logger):
    log("warn", "careful", capture_logger)
    assert capture_logger.records == [("warning", "careful")]


def test_sink_errors_are_suppressed():
    set_default_logger(None)
    log("error", "boom", _Exploding())


def test_package_exports_do_not_hide_the_sink_module():
    import jsonrpc_post
    import jsonrpc_post.logging_sink as sink_module

    assert jsonrpc_post.logging_sink is sink_module
    assert jsonrpc_post.log is sink_module.log
    assert callable(jsonrpc_post.log)
    assert sink_module.default_logger() is loguru_logger
