from typing import Callable

import httpx
import pytest

from freight_dashboard.config import Settings
from freight_dashboard.utils.upstream import UpstreamClient
from .helpers import API_KEY, BASE


@pytest.fixture
def settings() -> Settings:
    return Settings(api_base_url=BASE, api_key=API_KEY, refresh_on_startup=False)


@pytest.fixture
def upstream(settings) -> Callable:
    """Build an UpstreamClient whose requests are answered by `handler`."""

    def build(handler: Callable[[httpx.Request], httpx.Response]) -> UpstreamClient:
        return UpstreamClient(settings, transport=httpx.MockTransport(handler))

    return build
