"""HTTP client for the Binalyze AIR public API."""

from __future__ import annotations

import re
from typing import Any

import httpx
import structlog

from air_mcp.api.acquisitions import AcquisitionsAPI
from air_mcp.api.assets import AssetsAPI
from air_mcp.api.audit import AuditAPI
from air_mcp.api.auto_asset_tags import AutoAssetTagsAPI
from air_mcp.api.base import AIRAPIError
from air_mcp.api.baseline import BaselineAPI
from air_mcp.api.cases import CasesAPI
from air_mcp.api.evidence import EvidenceAPI
from air_mcp.api.organizations import OrganizationsAPI
from air_mcp.api.params import ParamsAPI
from air_mcp.api.policies import PoliciesAPI
from air_mcp.api.repositories import RepositoriesAPI
from air_mcp.api.settings import SettingsAPI
from air_mcp.api.tasks import TasksAPI
from air_mcp.api.triages import TriagesAPI
from air_mcp.api.users import UsersAPI
from air_mcp.api.webhooks import WebhooksAPI
from air_mcp.config import AIRConfig

logger = structlog.get_logger()

_TOKEN_PARAM_RE = re.compile(r"(token=)[^&\s'\"]+", re.IGNORECASE)


class AIRClient:
    """Async client bound to one AIR console.

    Resource groups are exposed as attributes (``client.assets``,
    ``client.cases`` ...). Every method on them issues exactly one request.
    """

    def __init__(
        self,
        config: AIRConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            config: Connection settings.
            transport: Optional transport override, used by tests.
        """
        self.config = config
        self.http = httpx.AsyncClient(
            base_url=config.base_url,
            headers={"Content-Type": "application/json"},
            timeout=config.timeout,
            verify=config.verify_ssl,
            transport=transport,
        )

        self.acquisitions = AcquisitionsAPI(self)
        self.assets = AssetsAPI(self)
        self.audit = AuditAPI(self)
        self.auto_asset_tags = AutoAssetTagsAPI(self)
        self.baseline = BaselineAPI(self)
        self.cases = CasesAPI(self)
        self.evidence = EvidenceAPI(self)
        self.organizations = OrganizationsAPI(self)
        self.params = ParamsAPI(self)
        self.policies = PoliciesAPI(self)
        self.repositories = RepositoriesAPI(self)
        self.settings = SettingsAPI(self)
        self.tasks = TasksAPI(self)
        self.triages = TriagesAPI(self)
        self.users = UsersAPI(self)
        self.webhooks = WebhooksAPI(self)

    def scrub(self, text: str) -> str:
        """Remove the API token and any ``token=`` query values from text."""
        token = self.config.api_token.strip()
        if token:
            text = text.replace(token, "***")
        return _TOKEN_PARAM_RE.sub(r"\1***", text)

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        auth: bool = True,
    ) -> httpx.Response:
        """Send one request and return the response.

        Raises:
            AIRAPIError: On transport failure or a non-2xx status.
        """
        headers: dict[str, str] = {}
        if auth:
            headers["Authorization"] = f"Bearer {self.config.api_token}"

        logger.debug("air_request", method=method, path=path)

        try:
            response = await self.http.request(
                method,
                path,
                params=params,
                json=json,
                headers=headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("air_request_failed", method=method, path=path, status=status)
            raise AIRAPIError(
                f"Request failed with status code {status}",
                status_code=status,
                body=_decode_body(e.response),
            ) from e
        except httpx.HTTPError as e:
            message = self.scrub(str(e)) or type(e).__name__
            logger.error("air_request_error", method=method, path=path, error=message)
            raise AIRAPIError(message) from e

        return response

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        auth: bool = True,
    ) -> Any:
        """Send one request and return the decoded JSON body."""
        response = await self.request(method, path, params=params, json=json, auth=auth)
        try:
            return response.json()
        except ValueError as e:
            raise AIRAPIError(
                f"Invalid JSON in response from {path}",
                status_code=response.status_code,
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self.http.aclose()

    async def __aenter__(self) -> AIRClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text

