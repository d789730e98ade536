"""HTTP session used to fetch remote recipe files."""

from typing import Optional

import requests

from ..config import REQUEST_TIMEOUT, USER_AGENT
from .retry import retry_fetch


class HttpSession:
    """A requests session with a fixed user agent, default timeout and retries.

    Attributes:
        session: The underlying requests session
        user_agent: User agent string sent with every request
        timeout: Default request timeout in seconds
    """

    def __init__(
        self,
        user_agent: str = USER_AGENT,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = user_agent
        self.user_agent = user_agent
        self.timeout = timeout

    @retry_fetch()
    def get(self, url: str, **kwargs) -> requests.Response:
        """GET ``url`` and fail on any non-success status.

        Args:
            url: URL to request
            **kwargs: Additional arguments passed to requests.Session.get()

        Returns:
            Response object

        Raises:
            requests.exceptions.HTTPError: If the server answered with an error status
        """
        kwargs.setdefault("timeout", self.timeout)
        response = self.session.get(url, **kwargs)
        response.raise_for_status()
        return response

    def get_text(self, url: str) -> str:
        """Fetch ``url`` and return the body decoded as text."""
        response = self.get(url)
        if not response.encoding or response.encoding.lower() == "iso-8859-1":
            # requests falls back to latin-1 for text/* without a charset
            response.encoding = "utf-8"
        return response.text

    def close(self) -> None:
        self.session.close()
