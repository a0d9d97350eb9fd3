"""
Типы данных клиента: узел, хэш контента, связанный файл
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from ipfs_lite.exceptions import NodeError


@dataclass(frozen=True)
class NodeHandle:
    """Ссылка на узел: нормализованный базовый URL"""
    url: str

    def endpoint(self, path: str) -> str:
        """Полный URL метода API узла"""
        return f"{self.url}/{path.lstrip('/')}"

    def __str__(self):
        return self.url


@dataclass(frozen=True)
class ContentHash:
    """Адрес контента (CID) на узле"""
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Content hash must not be empty")

    def as_path(self) -> str:
        """Путь в пространстве имен /ipfs/"""
        return f"/ipfs/{self.value}"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class LinkedFile:
    """Запись директории или ссылка объекта"""
    name: str
    hash: ContentHash
    size: int  # int в Python не ограничен по разрядности

    def to_dict(self) -> Dict[str, Any]:
        """Представление в формате ответа узла"""
        return {
            "Name": self.name,
            "Hash": self.hash.value,
            "Size": str(self.size),
        }


def create_node(url: str) -> Optional[NodeHandle]:
    """
    Создание ссылки на узел из строки URL

    Query и fragment отбрасываются, один завершающий слэш удаляется.
    Доступность узла не проверяется.

    Args:
        url: Абсолютный URL узла

    Returns:
        NodeHandle или None, если URL некорректен
    """
    try:
        parts = urlsplit(url)
        # Невалидный порт обнаруживается только при обращении
        parts.port
    except ValueError:
        return None

    if not parts.scheme or not parts.netloc or not parts.hostname:
        return None

    normalized = urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))
    if normalized.endswith("/"):
        normalized = normalized[:-1]

    return NodeHandle(url=normalized)


def create_hash(value: str) -> Optional[ContentHash]:
    """
    Создание хэша контента

    Args:
        value: Строка идентификатора

    Returns:
        ContentHash или None для пустой строки
    """
    if not value:
        return None
    return ContentHash(value=value)


def require_node(url: str) -> NodeHandle:
    """
    Создание ссылки на узел с ошибкой вместо None

    Raises:
        NodeError: Если URL некорректен
    """
    node = create_node(url)
    if node is None:
        raise NodeError(f"invalid node url: {url}")
    return node


def require_hash(value: str) -> ContentHash:
    """
    Создание хэша с ошибкой вместо None

    Raises:
        NodeError: Если строка пустая
    """
    content_hash = create_hash(value)
    if content_hash is None:
        raise NodeError("invalid hash")
    return content_hash
