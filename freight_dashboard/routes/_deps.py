from freight_dashboard.config import get_settings
from freight_dashboard.utils.upstream import UpstreamClient


def get_upstream_client() -> UpstreamClient:
    return UpstreamClient(get_settings())
