#!/usr/bin/env python3
"""
Пример базового использования ipfs_lite
"""

import asyncio
import sys
from pathlib import Path

from ipfs_lite import Config, NodeClient, NodeClientError, describe_error


async def main():
    """Главная функция"""
    config = Config.from_file(Path("config.yaml"))
    node = config.node_handle()
    if node is None:
        print(f"Error: invalid node url: {config.node.url}")
        sys.exit(1)

    client = NodeClient.from_config(config)

    try:
        version = await client.version(node)
        print(f"Версия узла: {version.strip()}")

        # Запись файла, обернутого в директорию
        directory = await client.store_content(node, "hello.txt", "Привет, IPFS!")
        print(f"Директория: {directory.hash} ({directory.size} байт)")

        # Поиск файла по имени и чтение
        entry = await client.resolve_link(node, directory.hash, "hello.txt")
        if entry is None:
            print("Файл не найден в директории")
            return

        content = await client.read_content(node, entry.hash)
        print(f"Содержимое {entry.name}: {content}")

    except NodeClientError as e:
        print(f"Ошибка: {describe_error(e)}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
