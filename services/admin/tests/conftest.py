"""Pytest configuration and shared fixtures."""

import httpx
import pytest

from billiards_admin.clients.pos_client import PosApiClient
from billiards_admin.services.table_session_service import TableSessionService
from tests.helpers import POS_BASE_URL, FakePosApi


@pytest.fixture
def pos_api() -> FakePosApi:
    return FakePosApi()


@pytest.fixture
def pos_client(pos_api: FakePosApi) -> PosApiClient:
    return PosApiClient(
        POS_BASE_URL,
        token="",
        timeout=5,
        transport=httpx.MockTransport(pos_api),
    )


@pytest.fixture
def sessions(pos_client: PosApiClient) -> TableSessionService:
    return TableSessionService(pos_client, fetch_concurrency=2)
