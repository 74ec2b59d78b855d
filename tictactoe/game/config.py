"""Application configuration dataclasses."""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal
import json
import os

LogLevel = Literal["debug", "info", "warning", "error"]
LOG_LEVELS = ("debug", "info", "warning", "error")

CONFIG_ENV = "TICTACTOE_CONFIG"
HOST_ENV = "TICTACTOE_HOST"
PORT_ENV = "TICTACTOE_PORT"


@dataclass
class ServerConfig:
    """Where the web front end listens."""
    host: str = "127.0.0.1"
    port: int = 7000
    log_level: LogLevel = "info"

    def __post_init__(self):
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
        if not 0 < self.port < 65536:
            raise ValueError(f"Invalid port: {self.port}")

    def to_dict(self) -> dict:
        return {
            "host": self.host,
            "port": self.port,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ServerConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Server config must be an object, got {data!r}")
        unknown = set(data) - {"host", "port", "log_level"}
        if unknown:
            raise ValueError(f"Unknown server config keys: {', '.join(sorted(unknown))}")
        return cls(
            host=data.get("host", "127.0.0.1"),
            port=int(data.get("port", 7000)),
            log_level=data.get("log_level", "info"),
        )


@dataclass
class AppConfig:
    """Complete application configuration."""
    server: ServerConfig = field(default_factory=ServerConfig)
    title: str = "Tic-Tac-Toe"

    def to_dict(self) -> dict:
        return {
            "server": self.server.to_dict(),
            "title": self.title,
        }

    @classmethod
    def from_dict(cls, data: dict) -> AppConfig:
        unknown = set(data) - {"server", "title"}
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(
            server=ServerConfig.from_dict(data.get("server", {})),
            title=data.get("title", "Tic-Tac-Toe"),
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_json(cls, json_str: str) -> AppConfig:
        return cls.from_dict(json.loads(json_str))


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from `path`, or from $TICTACTOE_CONFIG, else defaults.

    $TICTACTOE_HOST and $TICTACTOE_PORT override the server address.
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV)
    if path:
        config = AppConfig.from_json(Path(path).read_text())
    else:
        config = AppConfig()

    host = os.environ.get(HOST_ENV)
    port = os.environ.get(PORT_ENV)
    if host or port:
        config.server = ServerConfig(
            host=host or config.server.host,
            port=int(port) if port else config.server.port,
            log_level=config.server.log_level,
        )
    return config
