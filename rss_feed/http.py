"""Default network client for fetching the feed through the proxy."""

import requests

from .logging_config import create_execution_logger

USER_AGENT = "RSS-Feed-Widget/1.0 (DistroWatch news widget)"


class NetworkClient:
    """Callable fetch capability backed by a requests session.

    Calling the client with a URL returns the ``requests.Response``, which
    already offers the ``ok`` flag and ``json()`` accessor the feed manager
    consumes.
    """

    def __init__(self, timeout: int = 30, execution_id: str | None = None):
        """Initialize the client.

        Args:
            timeout: HTTP request timeout in seconds
            execution_id: Execution ID for logging context
        """
        self.timeout = timeout
        self.logger = create_execution_logger("http", execution_id)
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def __call__(self, url: str) -> requests.Response:
        self.logger.debug("Requesting feed through proxy", request_url=url)
        response = self.session.get(url, timeout=self.timeout)
        if not response.ok:
            self.logger.warning(
                f"Proxy returned status {response.status_code}",
                request_url=url,
            )
        return response


_default_client: NetworkClient | None = None


def get_default_client() -> NetworkClient:
    """Return the shared client, creating it on first use."""
    global _default_client
    if _default_client is None:
        _default_client = NetworkClient()
    return _default_client


def default_network_client(url: str) -> requests.Response:
    """Fetch ``url`` with the shared client and the default timeout."""
    return get_default_client()(url)
