import os
from dataclasses import dataclass


@dataclass
class ServerConfig:
    api_base: str = ""
    token: str = ""
    user_agent: str = "nocobase-mcp-agent/1.0"
    server_name: str = "Nocobase MCP Server"
    server_version: str = "1.0.0"
    timeout: float = 30.0
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        return cls(
            api_base=os.environ.get("API_BASE", "").rstrip("/"),
            token=os.environ.get("TOKEN", ""),
            user_agent=os.environ.get("USER_AGENT") or "nocobase-mcp-agent/1.0",
            server_name=os.environ.get("SERVER_NAME") or "Nocobase MCP Server",
            server_version=os.environ.get("SERVER_VERSION") or "1.0.0",
            timeout=float(os.environ.get("HTTP_TIMEOUT") or "30.0"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": "application/json",
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }
