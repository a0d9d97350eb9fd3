"""
Исключения для ipfs_lite
"""

from typing import Optional


class NodeClientError(Exception):
    """Базовое исключение клиента узла"""
    pass


class BadUrl(NodeClientError):
    """Некорректный URL запроса"""

    def __init__(self, url: str):
        super().__init__(f"bad url: {url}")
        self.url = url


class Timeout(NodeClientError):
    """Истекло время ожидания ответа узла"""

    def __init__(self):
        super().__init__("request timed out")


class NetworkError(NodeClientError):
    """Ошибка сетевых операций"""

    def __init__(self, reason: Optional[str] = None):
        super().__init__("network error")
        self.reason = reason


class BadStatus(NodeClientError):
    """Узел ответил статусом вне диапазона 2xx"""

    def __init__(self, status_code: int, body: Optional[str] = None):
        super().__init__(f"bad status: {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeFailure(NodeClientError):
    """Ответ получен, но не соответствует ожидаемой схеме"""

    def __init__(self, detail: str):
        super().__init__(f"decode failure: {detail}")
        self.detail = detail


class NodeError(NodeClientError):
    """Семантическая ошибка (например, неверный узел или хэш)"""

    def __init__(self, message: str):
        super().__init__(f"node error: {message}")
        self.message = message


def describe_error(error: NodeClientError) -> str:
    """
    Однострочное описание ошибки

    Args:
        error: Ошибка клиента

    Returns:
        Человекочитаемое описание
    """
    if isinstance(error, BadUrl):
        return f"bad url: {error.url}"
    if isinstance(error, Timeout):
        return "request timed out"
    if isinstance(error, NetworkError):
        return "network error"
    if isinstance(error, BadStatus):
        return f"bad status: {error.status_code}"
    if isinstance(error, DecodeFailure):
        return f"decode failure: {error.detail}"
    if isinstance(error, NodeError):
        return f"node error: {error.message}"
    return str(error)
