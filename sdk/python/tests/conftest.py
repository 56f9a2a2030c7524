"""
Pytest configuration and fixtures
"""
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import pytest

# Make the SDK importable without installing it
sdk_dir = Path(__file__).parent.parent
if str(sdk_dir) not in sys.path:
    sys.path.insert(0, str(sdk_dir))

from custodia import ActivityPollerConfig, ClientConfig, CustodiaClient, Stamp


class FakeResponse:
    """Subset of requests.Response used by the client."""

    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None, reason: str = "OK"):
        self.status_code = status_code
        self.reason = reason
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text
        self.content = text.encode()

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Replays scripted responses and records every POST."""

    def __init__(self, responses: Optional[List[Any]] = None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def post(self, url, data=None, headers=None, timeout=None, allow_redirects=True):
        self.calls.append({
            "url": url,
            "body": json.loads(data),
            "headers": headers,
        })
        if not self.responses:
            raise AssertionError(f"Unexpected request to {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


class RecordingStamper:
    def __init__(self):
        self.payloads = []

    def stamp(self, payload: str) -> Stamp:
        self.payloads.append(payload)
        return Stamp("X-Stamp", f"signed:{len(payload)}")


def activity_response(activity_id: str, status: str, result: Optional[dict] = None) -> FakeResponse:
    return FakeResponse(200, {
        "activity": {
            "id": activity_id,
            "status": status,
            "result": result or {},
        }
    })


@pytest.fixture
def stamper() -> RecordingStamper:
    return RecordingStamper()


@pytest.fixture
def config(stamper) -> ClientConfig:
    return ClientConfig(
        base_url="https://api.custodia.test",
        organization_id="org-default",
        stamper=stamper,
        activity_poller=ActivityPollerConfig(interval_ms=0, num_retries=5),
    )


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(config, session) -> CustodiaClient:
    c = CustodiaClient(config)
    c.session = session
    return c
