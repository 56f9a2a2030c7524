# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

"""
Custodia Python SDK - custody API client with activity polling

Data directory: ~/.custodia (override with CUSTODIA_DATA)

Usage:
    from custodia import CustodiaClient

    async with CustodiaClient.from_env() as client:
        wallet = await client.create_wallet_with_account("treasury")
        print(wallet["walletId"], wallet["activity"]["status"])

Regenerating bindings after an API update:
    custodia-codegen
"""

from .client import (
    # Dispatch core
    ActivityClient,

    # Configuration
    ClientConfig,
    ActivityPollerConfig,
    FileConfig,
    load_config,
    load_token,

    # Signing
    Stamp,
    Stamper,
    TokenStamper,

    # Exceptions
    CustodiaError,
    ConfigError,
    ApiUnavailableError,
    RequestError,
    ActivityTimeoutError,
    UnknownMethodError,

    # Constants
    ACTIVITY_STATUS_PENDING,
)
from .sdk import CustodiaClient
from .proxy import (
    API_PROXY_ALLOWED_METHODS,
    CustodiaServer,
    ProxyHandler,
    ProxyResponse,
    ServerConfig,
)
from .version import VERSION as __version__

__all__ = [
    # Clients
    "CustodiaClient",
    "ActivityClient",

    # Server / proxy
    "CustodiaServer",
    "ServerConfig",
    "ProxyHandler",
    "ProxyResponse",
    "API_PROXY_ALLOWED_METHODS",

    # Configuration
    "ClientConfig",
    "ActivityPollerConfig",
    "FileConfig",
    "load_config",
    "load_token",

    # Signing
    "Stamp",
    "Stamper",
    "TokenStamper",

    # Exceptions
    "CustodiaError",
    "ConfigError",
    "ApiUnavailableError",
    "RequestError",
    "ActivityTimeoutError",
    "UnknownMethodError",

    # Constants
    "ACTIVITY_STATUS_PENDING",
]
