import logging

import pytest
from fastapi.testclient import TestClient

from app.main import app


class RecordingHandler(logging.Handler):
    """Keeps formatted messages in memory"""
    def __init__(self):
        super().__init__()
        self.messages = []

    def emit(self, record):
        self.messages.append(record.getMessage())


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def access_log():
    handler = RecordingHandler()
    access_logger = logging.getLogger("access")
    access_logger.addHandler(handler)
    yield handler.messages
    access_logger.removeHandler(handler)


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    access_logger = logging.getLogger("access")
    root_handlers = root_logger.handlers[:]
    access_handlers = access_logger.handlers[:]
    root_level = root_logger.level
    yield
    for logger, saved in ((root_logger, root_handlers), (access_logger, access_handlers)):
        for handler in logger.handlers[:]:
            if handler not in saved:
                logger.removeHandler(handler)
                handler.close()
        for handler in saved:
            if handler not in logger.handlers:
                logger.addHandler(handler)
    root_logger.setLevel(root_level)
