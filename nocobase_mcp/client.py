import json
import logging
from typing import Any, Optional

import httpx

from nocobase_mcp.config import ServerConfig

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT", "PATCH")


class CrmClient:
    """Thin async wrapper over the Nocobase REST API.

    Every call goes through `request`, which returns the decoded JSON body or
    None when the call failed for any reason. Failures are logged, never raised.
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._config = config or ServerConfig.from_env()
        self._client = httpx.AsyncClient(
            base_url=self._config.api_base,
            headers=self._config.headers,
            timeout=self._config.timeout,
            transport=transport,
        )

    @property
    def config(self) -> ServerConfig:
        return self._config

    @staticmethod
    def filter_params(criteria: dict[str, Any]) -> dict[str, str]:
        return {"filter": json.dumps(criteria)}

    async def request(
        self,
        path: str,
        method: str = "GET",
        body: Optional[dict[str, Any]] = None,
        params: Optional[dict[str, str]] = None,
    ) -> Optional[Any]:
        method = method.upper()
        payload = body if body is not None and method in BODY_METHODS else None

        try:
            response = await self._client.request(method, path, params=params, json=payload)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"{method} {path} failed with status {e.response.status_code} "
                f"(base: {self._config.api_base}, agent: {self._config.user_agent})"
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                f"{method} {path} failed: {e!r} "
                f"(base: {self._config.api_base}, agent: {self._config.user_agent})"
            )
        return None

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "CrmClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
