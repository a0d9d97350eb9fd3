"""
ipfs_lite - легковесный клиент HTTP API узла IPFS
"""

from .client import NodeClient
from .config import Config, NodeConfig
from .exceptions import (
    BadStatus,
    BadUrl,
    DecodeFailure,
    NetworkError,
    NodeClientError,
    NodeError,
    Timeout,
    describe_error,
)
from .types import (
    ContentHash,
    LinkedFile,
    NodeHandle,
    create_hash,
    create_node,
    require_hash,
    require_node,
)

__version__ = "0.1.0"

__all__ = [
    "NodeClient",
    "Config",
    "NodeConfig",
    "NodeHandle",
    "ContentHash",
    "LinkedFile",
    "create_node",
    "create_hash",
    "require_node",
    "require_hash",
    "NodeClientError",
    "BadUrl",
    "Timeout",
    "NetworkError",
    "BadStatus",
    "DecodeFailure",
    "NodeError",
    "describe_error",
]
