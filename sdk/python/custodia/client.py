# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 Custodia Authors

"""
Custodia Python SDK - activity dispatch core

Every mutating call against the custody API is submitted as an activity.
The server executes activities out-of-band; the client polls them until
they reach a terminal status.

Data directory (default: ~/.custodia):
    ~/.custodia/
    ├── custodia.token       # API token (sent by TokenStamper)
    └── config.yaml          # Connection settings

Example config.yaml:
    base_url: https://api.custodia.example
    organization_id: 7f3c9a52-4d1e-4f7a-9c1e-2d6b8e0a1f33
    activity_poller:
      interval_ms: 1000
      num_retries: 3600

Usage:
    from custodia import CustodiaClient

    async with CustodiaClient.from_env() as client:
        wallet = await client.create_wallet({"walletName": "treasury", "accounts": []})
        print(wallet["walletId"], wallet["activity"]["status"])
"""

import asyncio
import inspect
import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

import requests

from .version import VERSION

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Constants
# -----------------------------------------------------------------------------

DEFAULT_BASE_URL = "https://api.custodia.example"
DEFAULT_DATA_DIR = "~/.custodia"

DEFAULT_POLL_INTERVAL_MS = 1000
# One hour of polling at the default interval
DEFAULT_POLL_RETRIES = 3600

CLIENT_VERSION_HEADER = "X-Client-Version"
CLIENT_VERSION = f"custodia-python@{VERSION}"

# Every other status ends polling
ACTIVITY_STATUS_PENDING = "ACTIVITY_STATUS_PENDING"

GET_ACTIVITY_PATH = "/public/v1/query/get_activity"


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------

class CustodiaError(Exception):
    """Base exception for SDK errors"""
    pass


class ConfigError(CustodiaError):
    """Configuration or token missing or malformed"""
    pass


class ApiUnavailableError(CustodiaError):
    """API not reachable"""
    pass


class RequestError(CustodiaError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
    ):
        self.code = code
        self.details = details
        self.status_code = status_code
        super().__init__(message)

    @classmethod
    def from_status(cls, payload: Dict[str, Any], status_code: Optional[int] = None) -> "RequestError":
        """Build from a structured error body {message, code, details}."""
        code = payload.get("code")
        details = payload.get("details")
        message = f"Custodia error {code}: {payload.get('message')}"
        if details is not None:
            message += f" (Details: {json.dumps(details)})"
        return cls(message, code=code, details=details, status_code=status_code)


class ActivityTimeoutError(CustodiaError):
    """Activity still pending after the configured number of polls."""

    def __init__(self, activity_id: str, status: str, attempts: int):
        self.activity_id = activity_id
        self.status = status
        self.attempts = attempts
        super().__init__(
            f"Activity {activity_id} still {status} after {attempts} polls"
        )


class UnknownMethodError(CustodiaError):
    """No generated binding is registered under the requested name."""

    def __init__(self, method_name: str):
        self.method_name = method_name
        super().__init__(f"Method: {method_name} does not exist on CustodiaClient")


# -----------------------------------------------------------------------------
# Types
# -----------------------------------------------------------------------------

@dataclass
class Stamp:
    """Signature header produced for one serialized request body"""
    header_name: str
    header_value: str


class Stamper(Protocol):
    """Signs a serialized request body. May be sync or async."""

    def stamp(self, payload: str) -> Stamp:
        ...


@dataclass(frozen=True)
class ActivityPollerConfig:
    """Polling tuning for pending activities"""
    interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    num_retries: Optional[int] = DEFAULT_POLL_RETRIES  # None = poll until terminal


@dataclass(frozen=True)
class ClientConfig:
    """Immutable per-client configuration shared by every binding"""
    base_url: str
    organization_id: str
    stamper: Any
    activity_poller: ActivityPollerConfig = field(default_factory=ActivityPollerConfig)


@dataclass
class FileConfig:
    """Connection settings loaded from config.yaml"""
    base_url: str = DEFAULT_BASE_URL
    organization_id: str = ""
    activity_poller: ActivityPollerConfig = field(default_factory=ActivityPollerConfig)


class TokenStamper:
    """Stamper that authenticates with a static API token."""

    header_name = "Authorization"

    def __init__(self, token: str):
        self.token = token

    def stamp(self, payload: str) -> Stamp:
        return Stamp(self.header_name, f"custodia {self.token}")


def load_config(data_dir: str) -> FileConfig:
    """
    Load client configuration from data_dir/config.yaml.

    Args:
        data_dir: Path to data directory

    Returns:
        FileConfig with values from file, defaults for missing fields

    Raises:
        ConfigError: If the file is not a YAML mapping or has a malformed
            activity_poller block
    """
    import yaml

    config_path = os.path.join(data_dir, "config.yaml")
    config = FileConfig()

    if not os.path.exists(config_path):
        return config

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Invalid config file {config_path}: expected a mapping")

    if "base_url" in data:
        config.base_url = str(data["base_url"])
    if "organization_id" in data:
        config.organization_id = str(data["organization_id"])

    if "activity_poller" in data and data["activity_poller"] is not None:
        poller = data["activity_poller"]
        if not isinstance(poller, dict):
            raise ConfigError("activity_poller must be a mapping")
        num_retries = poller.get("num_retries", DEFAULT_POLL_RETRIES)
        try:
            config.activity_poller = ActivityPollerConfig(
                interval_ms=int(poller.get("interval_ms", DEFAULT_POLL_INTERVAL_MS)),
                num_retries=int(num_retries) if num_retries is not None else None,
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid activity_poller in {config_path}: {e}")

    return config


def load_token(path: str) -> str:
    """
    Load API token from file.

    Args:
        path: Path to custodia.token file

    Returns:
        Token string
    """
    with open(path, "r") as f:
        return f.read().strip()


# -----------------------------------------------------------------------------
# Dispatch Core
# -----------------------------------------------------------------------------

class ActivityClient:
    """
    Executes signed calls against the custody API.

    Three primitives, layered bottom-up:
        request()            one signed POST, JSON in and out
        command()            request() + poll the activity to a terminal status
        activity_decision()  request() for approve/reject, whole result returned

    Generated bindings (SdkClientBase) call these; user code normally
    goes through CustodiaClient.
    """

    def __init__(self, config: ClientConfig, timeout: int = 30):
        """
        Args:
            config: Client configuration (never mutated)
            timeout: Per-request timeout in seconds
        """
        self.config = config
        self.timeout = timeout
        self.session = requests.Session()

    def close(self):
        """Close the underlying HTTP session."""
        self.session.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # -------------------------------------------------------------------------
    # Body helpers
    # -------------------------------------------------------------------------

    def query_body(self, input: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Query body with organizationId defaulted from config."""
        body = dict(input or {})
        if body.get("organizationId") is None:
            body["organizationId"] = self.config.organization_id
        return body

    def activity_body(self, input: Optional[Dict[str, Any]], activity_type: str) -> Dict[str, Any]:
        """
        Wrap caller parameters into an activity submission.

        organizationId and timestampMs are lifted out of the parameters;
        caller-supplied values win over the config default and the clock.
        """
        rest = dict(input or {})
        organization_id = rest.pop("organizationId", None)
        timestamp_ms = rest.pop("timestampMs", None)
        return {
            "parameters": rest,
            "organizationId": organization_id if organization_id is not None else self.config.organization_id,
            "timestampMs": timestamp_ms if timestamp_ms is not None else str(int(time.time() * 1000)),
            "type": activity_type,
        }

    # -------------------------------------------------------------------------
    # Primitives
    # -------------------------------------------------------------------------

    async def _stamp(self, payload: str) -> Stamp:
        stamp = self.config.stamper.stamp(payload)
        if inspect.isawaitable(stamp):
            stamp = await stamp
        return stamp

    def _safe_json(self, resp: requests.Response) -> Optional[Dict[str, Any]]:
        """
        Parse an error body.

        Returns None when the body is empty, not JSON, or not an object,
        so callers fall back to the HTTP status line.
        """
        if not resp.content:
            return None
        try:
            data = resp.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None

    async def request(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Perform one signed POST.

        Args:
            path: Operation path, e.g. "/public/v1/query/get_wallets"
            body: JSON-serializable request body

        Returns:
            Decoded JSON response

        Raises:
            ApiUnavailableError: If the API cannot be reached
            RequestError: On any non-2xx response
            CustodiaError: If a 2xx response is not JSON
        """
        url = self.config.base_url.rstrip("/") + path
        payload = json.dumps(body)
        stamp = await self._stamp(payload)
        headers = {
            stamp.header_name: stamp.header_value,
            CLIENT_VERSION_HEADER: CLIENT_VERSION,
            "Content-Type": "application/json",
        }

        logger.debug(f"POST {path}")
        try:
            resp = await asyncio.to_thread(
                self.session.post,
                url,
                data=payload,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=True,
            )
        except requests.RequestException as e:
            raise ApiUnavailableError(f"Failed to connect: {e}")

        if not resp.ok:
            data = self._safe_json(resp)
            if data is None:
                raise RequestError(f"{resp.status_code} {resp.reason}", status_code=resp.status_code)
            raise RequestError.from_status(data, status_code=resp.status_code)

        try:
            return resp.json()
        except ValueError:
            raise CustodiaError(f"Server returned invalid JSON: {resp.text[:200]}")

    send = request

    async def get_activity(self, input: Dict[str, Any]) -> Dict[str, Any]:
        return await self.request(GET_ACTIVITY_PATH, self.query_body(input))

    async def command(self, path: str, body: Dict[str, Any], result_key: str) -> Dict[str, Any]:
        """
        Submit an activity and wait for it to reach a terminal status.

        Args:
            path: Submit path of the operation
            body: Activity body (see activity_body)
            result_key: Versioned key of this operation inside activity.result

        Returns:
            activity.result[result_key] merged with {"activity": {"id", "status"}}

        Raises:
            ActivityTimeoutError: If the activity is still pending after
                activity_poller.num_retries polls
        """
        data = await self.request(path, body)
        activity = data["activity"]
        activity_id = activity["id"]
        status = activity["status"]

        poller = self.config.activity_poller
        attempts = 0
        while status == ACTIVITY_STATUS_PENDING:
            if poller.num_retries is not None and attempts >= poller.num_retries:
                raise ActivityTimeoutError(activity_id, status, attempts)
            await asyncio.sleep(poller.interval_ms / 1000)
            attempts += 1
            logger.debug(f"Polling activity {activity_id} (attempt {attempts})")
            activity = (await self.get_activity({"activityId": activity_id}))["activity"]
            status = activity["status"]

        if attempts:
            logger.info(f"Activity {activity_id} reached {status} after {attempts} polls")

        result = activity.get("result") or {}
        return {
            **(result.get(result_key) or {}),
            "activity": {"id": activity_id, "status": status},
        }

    async def activity_decision(self, path: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """
        Submit an approve/reject decision.

        Returns:
            The whole activity.result merged with {"activity": {"id", "status"}}
        """
        data = await self.request(path, body)
        activity = data["activity"]
        return {
            **(activity.get("result") or {}),
            "activity": {"id": activity["id"], "status": activity["status"]},
        }
