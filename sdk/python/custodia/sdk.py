# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

"""
High-level client: generated bindings plus wallet helpers.

Usage:
    from custodia import CustodiaClient, ClientConfig, TokenStamper

    client = CustodiaClient(ClientConfig(
        base_url="https://api.custodia.example",
        organization_id="...",
        stamper=TokenStamper("..."),
    ))
    wallets = await client.get_wallets()
"""

import os
import re
from typing import Optional

from ._generated import sdk_api_types as api_types
from ._generated.sdk_client_base import SdkClientBase
from .client import (
    DEFAULT_DATA_DIR,
    ClientConfig,
    ConfigError,
    CustodiaError,
    TokenStamper,
    load_config,
    load_token,
)

ETHEREUM_ACCOUNT: api_types.WalletAccountParams = {
    "curve": "CURVE_SECP256K1",
    "pathFormat": "PATH_FORMAT_BIP32",
    "path": "m/44'/60'/0'/0/0",
    "addressFormat": "ADDRESS_FORMAT_ETHEREUM",
}

SOLANA_ACCOUNT: api_types.WalletAccountParams = {
    "curve": "CURVE_ED25519",
    "pathFormat": "PATH_FORMAT_BIP32",
    "path": "m/44'/501'/0'/0'",
    "addressFormat": "ADDRESS_FORMAT_SOLANA",
}

DEFAULT_ACCOUNTS = {
    "ethereum": ETHEREUM_ACCOUNT,
    "solana": SOLANA_ACCOUNT,
}

# Path segment holding the BIP32 account index (m/44'/60'/<account>'/...)
ACCOUNT_PATH_INDEX = 3


class CustodiaClient(SdkClientBase):
    """
    Client for the custody API.

    Every generated operation is available as a coroutine method,
    e.g. client.create_wallet(...), client.get_wallets().

    Or use as async context manager:
        async with CustodiaClient.from_env() as client:
            await client.get_whoami()
    """

    @classmethod
    def from_env(
        cls,
        data_dir: Optional[str] = None,
        timeout: int = 30
    ) -> "CustodiaClient":
        """
        Build a client from the data directory.

        Data directory (default: ~/.custodia):
            - config.yaml: base_url, organization_id, activity_poller
            - custodia.token: API token

        Args:
            data_dir: Override default (or set CUSTODIA_DATA env var)
            timeout: Request timeout in seconds

        Raises:
            ConfigError: If the token is missing or organization_id is unset
        """
        data_dir = data_dir or os.environ.get("CUSTODIA_DATA") or DEFAULT_DATA_DIR
        data_dir = os.path.expanduser(data_dir)

        file_config = load_config(data_dir)
        if not file_config.organization_id:
            raise ConfigError(f"organization_id missing from {data_dir}/config.yaml")

        token_path = os.path.join(data_dir, "custodia.token")
        if not os.path.exists(token_path):
            raise ConfigError(f"No token found at {token_path}")

        config = ClientConfig(
            base_url=file_config.base_url,
            organization_id=file_config.organization_id,
            stamper=TokenStamper(load_token(token_path)),
            activity_poller=file_config.activity_poller,
        )
        return cls(config, timeout=timeout)

    async def create_wallet_with_account(
        self,
        wallet_name: str,
        chain: str = "ethereum"
    ) -> api_types.CreateWalletResponse:
        """
        Create a wallet holding one default account for the given chain.

        Args:
            wallet_name: Human-readable wallet name
            chain: "ethereum" or "solana"
        """
        if chain not in DEFAULT_ACCOUNTS:
            raise ValueError(f"Unsupported chain: {chain}")
        return await self.create_wallet({
            "walletName": wallet_name,
            "accounts": [dict(DEFAULT_ACCOUNTS[chain])],
        })

    async def create_next_wallet_account(self, wallet_id: str) -> api_types.CreateWalletAccountsResponse:
        """
        Derive the next account of a wallet.

        Copies curve and formats from the wallet's last account and bumps
        the BIP32 account index of its path by one.

        Raises:
            CustodiaError: If the wallet has no accounts to extend
        """
        wallet_accounts = await self.get_wallet_accounts({"walletId": wallet_id})
        accounts = wallet_accounts.get("accounts") or []
        if not accounts:
            raise CustodiaError(f"Wallet {wallet_id} has no accounts")

        last = accounts[-1]
        segments = last["path"].split("/")
        if len(segments) <= ACCOUNT_PATH_INDEX:
            raise CustodiaError(f"Unexpected derivation path: {last['path']}")
        index = int(re.sub(r"[^0-9]", "", segments[ACCOUNT_PATH_INDEX]))
        segments[ACCOUNT_PATH_INDEX] = f"{index + 1}'"

        return await self.create_wallet_accounts({
            "walletId": wallet_id,
            "accounts": [{
                "curve": last["curve"],
                "pathFormat": last["pathFormat"],
                "addressFormat": last["addressFormat"],
                "path": "/".join(segments),
            }],
        })
