"""Tests for configuration loading and wallet helpers."""

import pytest

from custodia import (
    ConfigError,
    CustodiaClient,
    CustodiaError,
    TokenStamper,
    load_config,
)
from custodia.client import DEFAULT_POLL_INTERVAL_MS

from conftest import FakeResponse, activity_response


CONFIG_YAML = """\
base_url: https://api.custodia.test
organization_id: org-from-file
activity_poller:
  interval_ms: 250
  num_retries: 12
"""


class TestLoadConfig:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(str(tmp_path))

        assert config.organization_id == ""
        assert config.activity_poller.interval_ms == DEFAULT_POLL_INTERVAL_MS

    def test_reads_yaml(self, tmp_path):
        (tmp_path / "config.yaml").write_text(CONFIG_YAML)

        config = load_config(str(tmp_path))

        assert config.base_url == "https://api.custodia.test"
        assert config.organization_id == "org-from-file"
        assert config.activity_poller.interval_ms == 250
        assert config.activity_poller.num_retries == 12

    def test_malformed_poller_block(self, tmp_path):
        (tmp_path / "config.yaml").write_text("activity_poller: fast\n")

        with pytest.raises(ConfigError):
            load_config(str(tmp_path))

    def test_quoted_numbers_are_coerced(self, tmp_path):
        (tmp_path / "config.yaml").write_text("activity_poller:\n  interval_ms: '250'\n  num_retries: '3'\n")

        config = load_config(str(tmp_path))

        assert config.activity_poller.interval_ms == 250
        assert config.activity_poller.num_retries == 3

    def test_null_num_retries_disables_bound(self, tmp_path):
        (tmp_path / "config.yaml").write_text("activity_poller:\n  num_retries: null\n")

        config = load_config(str(tmp_path))

        assert config.activity_poller.num_retries is None

    @pytest.mark.parametrize("poller", [
        "interval_ms: soon",
        "num_retries: many",
        "num_retries: [1, 2]",
    ])
    def test_non_numeric_poller_values(self, tmp_path, poller):
        (tmp_path / "config.yaml").write_text(f"activity_poller:\n  {poller}\n")

        with pytest.raises(ConfigError, match="activity_poller"):
            load_config(str(tmp_path))

    @pytest.mark.parametrize("content", ["42\n", "- a\n- b\n", "just text\n"])
    def test_top_level_must_be_mapping(self, tmp_path, content):
        (tmp_path / "config.yaml").write_text(content)

        with pytest.raises(ConfigError, match="mapping"):
            load_config(str(tmp_path))


class TestFromEnv:
    def test_builds_client_from_data_dir(self, tmp_path):
        (tmp_path / "config.yaml").write_text(CONFIG_YAML)
        (tmp_path / "custodia.token").write_text("tok-123\n")

        client = CustodiaClient.from_env(data_dir=str(tmp_path))

        assert client.config.organization_id == "org-from-file"
        assert isinstance(client.config.stamper, TokenStamper)
        assert client.config.stamper.stamp("{}").header_value == "custodia tok-123"
        client.close()

    def test_env_var_selects_data_dir(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text(CONFIG_YAML)
        (tmp_path / "custodia.token").write_text("tok-123")
        monkeypatch.setenv("CUSTODIA_DATA", str(tmp_path))

        client = CustodiaClient.from_env()

        assert client.config.base_url == "https://api.custodia.test"
        client.close()

    def test_missing_token(self, tmp_path):
        (tmp_path / "config.yaml").write_text(CONFIG_YAML)

        with pytest.raises(ConfigError, match="No token found"):
            CustodiaClient.from_env(data_dir=str(tmp_path))

    def test_missing_organization(self, tmp_path):
        (tmp_path / "custodia.token").write_text("tok-123")

        with pytest.raises(ConfigError, match="organization_id"):
            CustodiaClient.from_env(data_dir=str(tmp_path))


class TestWalletHelpers:
    @pytest.mark.asyncio
    async def test_create_wallet_with_account(self, client, session):
        session.responses.append(activity_response(
            "act-1", "ACTIVITY_STATUS_COMPLETED", {"createWalletResult": {"walletId": "w1", "addresses": ["0x1"]}}
        ))

        result = await client.create_wallet_with_account("treasury")

        assert result["walletId"] == "w1"
        parameters = session.calls[0]["body"]["parameters"]
        assert parameters["walletName"] == "treasury"
        assert parameters["accounts"][0]["addressFormat"] == "ADDRESS_FORMAT_ETHEREUM"

    @pytest.mark.asyncio
    async def test_unsupported_chain(self, client):
        with pytest.raises(ValueError):
            await client.create_wallet_with_account("treasury", chain="dogecoin")

    @pytest.mark.asyncio
    async def test_create_next_wallet_account(self, client, session):
        session.responses.extend([
            FakeResponse(200, {"accounts": [
                {"curve": "CURVE_SECP256K1", "pathFormat": "PATH_FORMAT_BIP32",
                 "path": "m/44'/60'/0'/0/0", "addressFormat": "ADDRESS_FORMAT_ETHEREUM"},
                {"curve": "CURVE_SECP256K1", "pathFormat": "PATH_FORMAT_BIP32",
                 "path": "m/44'/60'/1'/0/0", "addressFormat": "ADDRESS_FORMAT_ETHEREUM"},
            ]}),
            activity_response("act-2", "ACTIVITY_STATUS_COMPLETED", {"createWalletAccountsResult": {"addresses": ["0x2"]}}),
        ])

        result = await client.create_next_wallet_account("w1")

        assert result["addresses"] == ["0x2"]
        assert session.calls[0]["body"] == {"walletId": "w1", "organizationId": "org-default"}
        submitted = session.calls[1]["body"]["parameters"]
        assert submitted["walletId"] == "w1"
        assert submitted["accounts"][0]["path"] == "m/44'/60'/2'/0/0"

    @pytest.mark.asyncio
    async def test_create_next_wallet_account_without_accounts(self, client, session):
        session.responses.append(FakeResponse(200, {"accounts": []}))

        with pytest.raises(CustodiaError):
            await client.create_next_wallet_account("w1")
