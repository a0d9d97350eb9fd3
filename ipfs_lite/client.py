"""
HTTP клиент для работы с узлом IPFS
Предоставляет чтение, запись и разрешение ссылок по адресу контента
"""

from typing import Any, Callable, Dict, List, Optional

import httpx

from ipfs_lite.config import Config
from ipfs_lite.decoders import decode_linked_file, decode_links, parse_json, parse_last_json_line
from ipfs_lite.exceptions import BadStatus, BadUrl, DecodeFailure, NetworkError, NodeError, Timeout
from ipfs_lite.logger import get_logger, setup_logging
from ipfs_lite.types import ContentHash, LinkedFile, NodeHandle

API_PREFIX = "api/v0"


def _identity(text: str) -> str:
    return text


def _body_text(response: httpx.Response) -> str:
    """
    Тело ответа как текст

    Байты всегда декодируются как UTF-8 независимо от charset ответа.
    Невалидные последовательности сохраняются через surrogateescape,
    поэтому text.encode("utf-8", "surrogateescape") возвращает исходные байты.
    """
    return response.content.decode("utf-8", errors="surrogateescape")


class NodeClient:
    """
    Клиент HTTP API узла IPFS

    Каждая операция - корутина, выполняющая ровно один HTTP запрос при
    ожидании (await). Клиент не хранит соединений между вызовами.
    Все ошибки транспорта и декодирования приводятся к NodeClientError.

    Пример использования:
        ```python
        from ipfs_lite import NodeClient, create_node

        async def main():
            client = NodeClient()
            node = create_node("http://127.0.0.1:5001")

            # Запись файла
            entry = await client.store_content(node, "readme.md", "# Привет")

            # Чтение по ссылке в директории
            readme = await client.resolve_link(node, entry.hash, "readme.md")
            text = await client.read_content(node, readme.hash)
        ```
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Инициализация клиента

        Args:
            timeout: Таймаут запроса в секундах (None - без ограничения)
            transport: Транспорт httpx (для тестов)
            headers: Дополнительные заголовки запросов
        """
        self.timeout = timeout
        self.headers = headers or {}
        self._transport = transport
        self.logger = get_logger("client")

    @classmethod
    def from_config(cls, config: Config) -> "NodeClient":
        """Создание клиента по конфигурации с настройкой логирования"""
        setup_logging(
            log_level=config.log_level, log_file=config.log_file, node_url=config.node.url
        )
        return cls(timeout=config.node.timeout)

    async def execute(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        files: Optional[Dict[str, Any]] = None,
        decoder: Optional[Callable[[str], Any]] = None,
    ) -> Any:
        """
        Выполнение запроса и классификация результата

        Args:
            method: HTTP метод
            url: Полный URL метода API
            params: Параметры query
            files: Части multipart тела (только для POST)
            decoder: Функция декодирования тела ответа

        Returns:
            Декодированное тело ответа

        Raises:
            BadUrl: Некорректный URL
            Timeout: Истекло время ожидания
            NetworkError: Ошибка соединения
            BadStatus: Статус ответа вне 2xx
            DecodeFailure: Тело ответа не соответствует схеме или Content-Encoding
        """
        decoder = decoder or _identity

        try:
            request_url = httpx.URL(url, params=params)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            self.logger.warning("Malformed request url", url=url, error=str(e))
            raise BadUrl(url) from e

        self.logger.debug("Sending request", method=method, url=str(request_url))

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout, headers=self.headers
            ) as client:
                response = await client.request(method, request_url, files=files)
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            self.logger.warning("Malformed request url", url=url, error=str(e))
            raise BadUrl(url) from e
        except httpx.TimeoutException as e:
            self.logger.warning("Request timed out", method=method, url=url)
            raise Timeout() from e
        except httpx.DecodingError as e:
            # Тело получено, но Content-Encoding не соответствует данным
            self.logger.warning("Failed to decode response body", url=url, error=str(e))
            raise DecodeFailure(str(e)) from e
        except httpx.RequestError as e:
            self.logger.warning("Network error", method=method, url=url, error=str(e))
            raise NetworkError(str(e)) from e

        body = _body_text(response)

        if not response.is_success:
            self.logger.warning(
                "Bad response status", method=method, url=url, status=response.status_code
            )
            raise BadStatus(response.status_code, body)

        try:
            return decoder(body)
        except DecodeFailure as e:
            self.logger.warning("Failed to decode response", url=url, detail=e.detail)
            raise

    async def read_content(self, node: NodeHandle, content_hash: ContentHash) -> str:
        """
        Чтение контента по хэшу (api/v0/cat)

        Returns:
            Тело ответа без изменений (UTF-8 с surrogateescape, см. _body_text)
        """
        return await self.execute(
            "GET",
            node.endpoint(f"{API_PREFIX}/cat"),
            params={"arg": content_hash.as_path()},
        )

    async def store_content(self, node: NodeHandle, filename: str, data: str) -> LinkedFile:
        """
        Запись строки на узел (api/v0/add), результат оборачивается в директорию

        Args:
            node: Узел
            filename: Имя файла внутри директории
            data: Содержимое

        Returns:
            LinkedFile оборачивающей директории
        """
        return await self.execute(
            "POST",
            node.endpoint(f"{API_PREFIX}/add"),
            params={
                "wrap-with-directory": "true",
                "stdin-name": filename,
                "silent": "true",
            },
            files={filename: (filename, data.encode("utf-8"))},
            decoder=lambda text: decode_linked_file(parse_last_json_line(text)),
        )

    async def list_links(self, node: NodeHandle, content_hash: ContentHash) -> List[LinkedFile]:
        """Список ссылок объекта (api/v0/object/get)"""
        return await self.execute(
            "GET",
            node.endpoint(f"{API_PREFIX}/object/get"),
            params={"arg": content_hash.as_path()},
            decoder=lambda text: decode_links(parse_json(text)),
        )

    async def resolve_link(
        self, node: NodeHandle, content_hash: ContentHash, name: str
    ) -> Optional[LinkedFile]:
        """
        Поиск ссылки по имени

        Returns:
            Первая ссылка с таким именем или None
        """
        links = await self.list_links(node, content_hash)
        for link in links:
            if link.name == name:
                return link
        return None

    async def resolve_path(
        self, node: NodeHandle, content_hash: ContentHash, path: str
    ) -> Optional[LinkedFile]:
        """
        Последовательное разрешение пути вида "dir/sub/file"

        Каждый сегмент - отдельный запрос object/get.

        Returns:
            Ссылка последнего сегмента или None, если сегмент не найден

        Raises:
            NodeError: Если путь пуст
        """
        segments = [segment for segment in path.split("/") if segment]
        if not segments:
            raise NodeError("empty path")

        current = content_hash
        link = None
        for segment in segments:
            link = await self.resolve_link(node, current, segment)
            if link is None:
                self.logger.debug("Path segment not found", path=path, segment=segment)
                return None
            current = link.hash

        return link

    async def read_path(
        self, node: NodeHandle, content_hash: ContentHash, path: str
    ) -> Optional[str]:
        """Чтение контента по пути внутри директории"""
        link = await self.resolve_path(node, content_hash, path)
        if link is None:
            return None
        return await self.read_content(node, link.hash)

    async def version(self, node: NodeHandle) -> str:
        """Версия узла (api/v0/version?number=true) как текст, декодируется как в read_content"""
        return await self.execute(
            "GET",
            node.endpoint(f"{API_PREFIX}/version"),
            params={"number": "true"},
        )
