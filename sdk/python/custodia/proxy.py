# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

"""
Server-side helpers: RPC-over-HTTP proxy for browser callers.

A browser posts {"methodName": "getWhoami", "params": [{...}]}; the
proxy checks the name against an allow-list and runs the binding with
the server's own credentials.

Usage (any framework):
    server = CustodiaServer(ServerConfig(api_base_url=..., default_organization_id=..., stamper=...))
    handler = ProxyHandler(server)

    async def endpoint(request):
        result = await handler.handle(await request.json())
        return JSONResponse(result.body, status_code=result.status)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from ._generated.sdk_client_base import API_METHODS
from .client import ActivityPollerConfig, ClientConfig, UnknownMethodError
from .sdk import CustodiaClient

logger = logging.getLogger(__name__)


API_PROXY_ALLOWED_METHODS = (
    "getActivity",
    "getActivities",
    "getOrganization",
    "getWallets",
    "getWalletAccounts",
    "getWhoami",
    "listPrivateKeyTags",
    "createSubOrganization",
    "emailAuth",
    "initUserEmailRecovery",
)


@dataclass(frozen=True)
class ServerConfig:
    """Credentials and defaults of the proxying server"""
    api_base_url: str
    default_organization_id: str
    stamper: Any
    activity_poller: ActivityPollerConfig = field(default_factory=ActivityPollerConfig)


@dataclass
class ProxyResponse:
    """Transport-neutral outcome; the host maps it onto its response type."""
    status: int
    body: Any


class CustodiaServer:
    """Builds server-credentialed clients and dispatches proxied calls."""

    def __init__(self, config: ServerConfig):
        self.config = config

    def api(self) -> CustodiaClient:
        return CustodiaClient(ClientConfig(
            base_url=self.config.api_base_url,
            organization_id=self.config.default_organization_id,
            stamper=self.config.stamper,
            activity_poller=self.config.activity_poller,
        ))

    async def api_proxy(self, method_name: str, params: List[Any]) -> Any:
        """
        Call a generated binding by its wire name.

        Raises:
            UnknownMethodError: If no binding is registered under method_name
        """
        method = API_METHODS.get(method_name)
        if method is None:
            raise UnknownMethodError(method_name)
        client = self.api()
        try:
            return await method(client, *params)
        finally:
            client.close()


class ProxyHandler:
    """
    Allow-listed proxy endpoint.

    400: methodName missing or not a string, or params missing
    401: methodName not allowed
    500: the call raised
    200: JSON result

    Only an absent (None) params is rejected; an empty list is a call
    with no arguments and any non-list value is passed as the single
    argument.
    """

    def __init__(self, server: CustodiaServer, allowed_methods: Optional[Iterable[str]] = None):
        self.server = server
        self.allowed_methods = frozenset(
            API_PROXY_ALLOWED_METHODS if allowed_methods is None else allowed_methods
        )

    async def handle(self, body: Optional[Dict[str, Any]]) -> ProxyResponse:
        body = body if isinstance(body, dict) else {}
        method_name = body.get("methodName")
        params = body.get("params")

        if not method_name or not isinstance(method_name, str) or params is None:
            return ProxyResponse(400, "methodName and params are required.")

        if method_name not in self.allowed_methods:
            logger.warning(f"Rejected proxy call to {method_name}")
            return ProxyResponse(401, "Unauthorized proxy method")

        if not isinstance(params, list):
            params = [params]

        try:
            result = await self.server.api_proxy(method_name, params)
        except Exception as e:
            logger.error(f"Proxy call {method_name} failed: {e}")
            return ProxyResponse(500, str(e) or "An unexpected error occurred")

        return ProxyResponse(200, result)
