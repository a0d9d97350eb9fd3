"""
Общие фикстуры тестов
"""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Сброс глобальной настройки structlog и обработчиков после теста"""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, logging.FileHandler) or type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
            handler.close()
