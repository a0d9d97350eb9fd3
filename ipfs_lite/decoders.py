"""
Декодирование JSON-ответов узла
"""

import json
import re
from typing import Any, List

from ipfs_lite.exceptions import DecodeFailure
from ipfs_lite.types import ContentHash, LinkedFile

_DIGITS = re.compile(r"[0-9]+")


def parse_json(text: str) -> Any:
    """
    Разбор JSON с преобразованием ошибки в DecodeFailure

    Args:
        text: Тело ответа

    Returns:
        Разобранное значение
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeFailure(
            f"{e.msg}: line {e.lineno} column {e.colno} (char {e.pos})"
        ) from e
    except RecursionError as e:
        raise DecodeFailure("JSON nesting too deep") from e
    except ValueError as e:
        raise DecodeFailure(str(e)) from e


def parse_last_json_line(text: str) -> Any:
    """
    Разбор последней непустой строки потока JSON-объектов

    Метод add возвращает по объекту на строку, последний описывает
    оборачивающую директорию.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise DecodeFailure("empty response body")
    return parse_json(lines[-1])


def _decode_size(value: Any) -> int:
    if isinstance(value, bool):
        raise DecodeFailure("invalid size")
    if isinstance(value, int):
        if value < 0:
            raise DecodeFailure("invalid size")
        return value
    if isinstance(value, str) and _DIGITS.fullmatch(value):
        return int(value)
    raise DecodeFailure("invalid size")


def decode_linked_file(obj: Any) -> LinkedFile:
    """
    Декодирование объекта {Name, Hash, Size}

    Поля проверяются по порядку, первая ошибка прерывает разбор.

    Args:
        obj: Разобранный JSON

    Returns:
        LinkedFile

    Raises:
        DecodeFailure: Если поле отсутствует или некорректно
    """
    if not isinstance(obj, dict):
        raise DecodeFailure("expected an object")

    name = obj.get("Name")
    if not isinstance(name, str):
        raise DecodeFailure("missing or invalid field Name")

    if "Hash" not in obj:
        raise DecodeFailure("missing field Hash")
    value = obj["Hash"]
    if not isinstance(value, str) or not value:
        raise DecodeFailure("invalid hash")

    if "Size" not in obj:
        raise DecodeFailure("missing field Size")
    size = _decode_size(obj["Size"])

    return LinkedFile(name=name, hash=ContentHash(value), size=size)


def decode_links(obj: Any) -> List[LinkedFile]:
    """
    Декодирование ответа object/get

    Ошибка в любом элементе отменяет весь список.

    Raises:
        DecodeFailure: Если нет массива Links или элемент некорректен
    """
    if not isinstance(obj, dict) or "Links" not in obj:
        raise DecodeFailure("missing field Links")
    links = obj["Links"]
    if not isinstance(links, list):
        raise DecodeFailure("field Links is not an array")

    return [decode_linked_file(link) for link in links]
