import logging

from subscription_gateway.core.logger import HANDLER_NAME, configure_logging


def test_configure_logging_installs_one_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    try:
        configure_logging("debug")
        configure_logging("info")
        named = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(named) == 1
        assert root.level == logging.INFO
    finally:
        for handler in root.handlers[:]:
            if handler not in before:
                root.removeHandler(handler)
