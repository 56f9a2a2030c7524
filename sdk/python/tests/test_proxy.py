"""Tests for the allow-listed API proxy."""

import pytest

from custodia import (
    API_PROXY_ALLOWED_METHODS,
    CustodiaServer,
    ProxyHandler,
    ServerConfig,
    UnknownMethodError,
)

from conftest import FakeResponse, RecordingStamper


@pytest.fixture
def server(monkeypatch, client, session):
    server = CustodiaServer(ServerConfig(
        api_base_url="https://api.custodia.test",
        default_organization_id="org-root",
        stamper=RecordingStamper(),
    ))
    monkeypatch.setattr(server, "api", lambda: client)
    return server


class TestProxyHandler:
    @pytest.mark.asyncio
    async def test_disallowed_method_is_rejected(self, server, session):
        handler = ProxyHandler(server)

        response = await handler.handle({"methodName": "createWallet", "params": [{"walletName": "x"}]})

        assert response.status == 401
        assert response.body == "Unauthorized proxy method"
        assert session.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [
        {"params": []},
        {"methodName": "getWhoami"},
        {"methodName": "", "params": []},
        {"methodName": ["getWhoami"], "params": []},
        {"methodName": {"name": "getWhoami"}, "params": []},
        None,
    ])
    async def test_missing_fields(self, server, session, body):
        handler = ProxyHandler(server)

        response = await handler.handle(body)

        assert response.status == 400
        assert session.calls == []

    @pytest.mark.asyncio
    async def test_allowed_method_returns_result(self, server, session):
        session.responses.append(FakeResponse(200, {"userId": "u1", "organizationId": "org-default"}))
        handler = ProxyHandler(server)

        response = await handler.handle({"methodName": "getWhoami", "params": [{}]})

        assert response.status == 200
        assert response.body == {"userId": "u1", "organizationId": "org-default"}
        assert session.calls[0]["url"].endswith("/public/v1/query/whoami")

    @pytest.mark.asyncio
    async def test_single_params_value_is_wrapped(self, server, session):
        session.responses.append(FakeResponse(200, {"wallets": []}))
        handler = ProxyHandler(server)

        response = await handler.handle({"methodName": "getWallets", "params": {"organizationId": "org-sub"}})

        assert response.status == 200
        assert session.calls[0]["body"] == {"organizationId": "org-sub"}

    @pytest.mark.asyncio
    async def test_error_maps_to_500(self, server, session):
        session.responses.append(FakeResponse(500, text="", reason="Internal Server Error"))
        handler = ProxyHandler(server)

        response = await handler.handle({"methodName": "getWallets", "params": []})

        assert response.status == 500
        assert response.body == "500 Internal Server Error"

    @pytest.mark.asyncio
    async def test_custom_allow_list(self, server, session):
        handler = ProxyHandler(server, allowed_methods=["createWallet"])

        rejected = await handler.handle({"methodName": "getWhoami", "params": []})

        assert rejected.status == 401
        assert session.calls == []

    @pytest.mark.asyncio
    async def test_allowed_but_unregistered_method(self, server):
        handler = ProxyHandler(server, allowed_methods=["exportWallet"])

        response = await handler.handle({"methodName": "exportWallet", "params": []})

        assert response.status == 500
        assert "exportWallet" in response.body


class TestCustodiaServer:
    @pytest.mark.asyncio
    async def test_unknown_method(self, server):
        with pytest.raises(UnknownMethodError):
            await server.api_proxy("doesNotExist", [])

    def test_api_uses_server_credentials(self):
        stamper = RecordingStamper()
        server = CustodiaServer(ServerConfig(
            api_base_url="https://api.custodia.test",
            default_organization_id="org-root",
            stamper=stamper,
        ))

        client = server.api()

        assert client.config.organization_id == "org-root"
        assert client.config.stamper is stamper
        client.close()

    def test_default_allow_list_is_read_mostly(self):
        assert "getWhoami" in API_PROXY_ALLOWED_METHODS
        assert "signTransaction" not in API_PROXY_ALLOWED_METHODS
