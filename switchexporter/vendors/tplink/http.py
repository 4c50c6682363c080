"""HTTP transport for the TP-Link Easy Smart web interface."""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

from switchexporter.base.transport import DEFAULT_TIMEOUT, BaseTransport
from switchexporter.exceptions import AuthenticationError, FetchError, TransportError
from switchexporter.metrics import RequestMetrics

LOGIN_PATH = "logon.cgi"
PORT_STATISTICS_PATH = "PortStatisticsRpm.htm"


class TPLinkHTTPTransport(BaseTransport):
    """Form-login HTTP transport.

    The switch tracks logins per client address, so a login is sent before
    every page fetch. Each scrape gets its own ``requests.Session``; all
    sessions share one ``HTTPAdapter`` and therefore one connection pool.
    """

    def __init__(
        self,
        host: str,
        username: str = "admin",
        password: str = "",
        timeout: float | None = DEFAULT_TIMEOUT,
        metrics: RequestMetrics | None = None,
        pool_maxsize: int = 10,
    ):
        super().__init__(host, username, password, timeout)
        self.base_url = f"http://{host}"
        self.metrics = metrics if metrics is not None else RequestMetrics()
        self._adapter = HTTPAdapter(pool_maxsize=pool_maxsize)

    def new_session(self) -> requests.Session:
        """Create a session bound to the shared connection pool."""
        session = requests.Session()
        session.mount("http://", self._adapter)
        session.mount("https://", self._adapter)
        return session

    def close(self) -> None:
        self._adapter.close()

    def _read(self, session: requests.Session, method: str, path: str, **kwargs) -> tuple[int, bytes]:
        """Send a request and return its status code and full body."""
        url = f"{self.base_url}/{path}"
        try:
            resp = self.metrics.instrument(
                method,
                lambda: session.request(method, url, timeout=self.timeout, stream=True, **kwargs),
            )
            try:
                body = resp.content
            finally:
                resp.close()
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        return resp.status_code, body

    def login(self, session: requests.Session) -> None:
        """POST the login form; the response body is read and discarded.

        Raises:
            TransportError: The request could not be completed.
            AuthenticationError: The switch answered with a non-2xx status.
        """
        data = {"username": self.username, "password": self.password, "logon": "Login"}
        status_code, _ = self._read(session, "POST", LOGIN_PATH, data=data)
        if status_code // 100 != 2:
            raise AuthenticationError(f"unexpected status code {status_code} after login", status_code=status_code)

    def get_port_statistics_page(self, session: requests.Session) -> bytes:
        """GET the raw port statistics page.

        Raises:
            TransportError: The request could not be completed.
            FetchError: The switch answered with a non-2xx status.
        """
        status_code, body = self._read(session, "GET", PORT_STATISTICS_PATH)
        if status_code // 100 != 2:
            raise FetchError(f"unexpected status code {status_code} for port statistics", status_code=status_code)
        return body
