"""
Модуль конфигурации ipfs_lite
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from ipfs_lite.types import NodeHandle, create_node


@dataclass
class NodeConfig:
    """Конфигурация узла"""
    url: str = "http://127.0.0.1:5001"
    timeout: Optional[float] = None  # None - ждать ответа без ограничения


@dataclass
class Config:
    """Главная конфигурация"""
    node: NodeConfig = field(default_factory=NodeConfig)
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "Config":
        """
        Загрузка конфигурации из файла

        Переменные из .env рядом с файлом конфигурации загружаются только здесь.
        """
        if config_path is None:
            config_path = Path("config.yaml")

        load_dotenv(config_path.parent / ".env")

        if config_path.exists():
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        else:
            config_data = {}

        return cls(
            node=NodeConfig(**config_data.get("node", {})),
            log_level=config_data.get("log_level", os.getenv("LOG_LEVEL", "INFO")),
            log_file=Path(config_data["log_file"]) if config_data.get("log_file") else None,
        )

    def to_file(self, config_path: Path) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            "node": {
                "url": self.node.url,
                "timeout": self.node.timeout,
            },
            "log_level": self.log_level,
        }

        if self.log_file:
            config_data["log_file"] = str(self.log_file)

        with open(config_path, "w") as f:
            yaml.dump(config_data, f, default_flow_style=False, sort_keys=False)

    def node_handle(self) -> Optional[NodeHandle]:
        """Ссылка на узел из конфигурации (None, если URL некорректен)"""
        return create_node(self.node.url)
