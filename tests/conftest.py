"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

# Ensure the repo root is on the import path (for local runs without installing)
ROOT_PATH = Path(__file__).resolve().parent.parent
if str(ROOT_PATH) not in sys.path:
    sys.path.insert(0, str(ROOT_PATH))

from pigeonfarm.client import PigeonFarmClient
from pigeonfarm.errors import NetworkError
from pigeonfarm.ledger import Ledger
from pigeonfarm.types import Action, AppContext, ClientConfig

TEMPLATE = "https://x/y?v=__VERSION__&l=__LANGUAGE__"


class MemoryStore:
    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = dict(data or {})
        self.writes: List[tuple] = []

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.writes.append((key, value))
        self.data[key] = value


class RecordingPresenter:
    def __init__(self):
        self.calls: List[Dict[str, Any]] = []

    def present(self, title: str, body: str, actions: List[Action], on_select: Callable[[int], None]) -> None:
        self.calls.append({"title": title, "body": body, "actions": actions, "on_select": on_select})

    def choose(self, index: int) -> None:
        self.calls[-1]["on_select"](index)


class FakeFetcher:
    """Returns a canned payload (dict -> JSON, bytes as-is) or raises."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None):
        self.payload = payload
        self.error = error
        self.urls: List[str] = []

    def fetch(self, url: str) -> bytes:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, bytes):
            return self.payload
        return json.dumps(self.payload).encode("utf-8")


def message_payload(message_id: int = 7, buttons: Optional[list] = None) -> Dict[str, Any]:
    if buttons is None:
        buttons = [
            {"title": "Open", "action": "url", "url": "https://example.com"},
            {"title": "OK", "action": "dismiss"},
        ]
    return {"id": message_id, "title": "T", "message": "M", "buttons": buttons}


@pytest.fixture(name="message_payload")
def message_payload_fixture():
    return message_payload


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def launched_store() -> MemoryStore:
    """A store of an installation that ran before."""
    return MemoryStore({"SMPigeonFarmClientLaunchedBefore": True})


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def opened() -> List[str]:
    return []


@pytest.fixture
def make_client(presenter: RecordingPresenter, opened: List[str]):
    def factory(
        store: MemoryStore,
        payload: Any = None,
        error: Optional[Exception] = None,
        show_on_first_launch: bool = False,
        template: Optional[str] = TEMPLATE,
    ) -> PigeonFarmClient:
        return PigeonFarmClient(
            config=ClientConfig(url_template=template, show_on_first_launch=show_on_first_launch),
            ledger=Ledger(store),
            presenter=presenter,
            context=AppContext(version="2.3", languages=["de", "en"]),
            fetcher=FakeFetcher(payload if payload is not None else message_payload(), error),
            opener=opened.append,
        )

    return factory


@pytest.fixture
def network_error() -> NetworkError:
    return NetworkError("https://x/y", ConnectionError("boom"))
