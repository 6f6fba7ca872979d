"""
Shared HTTP client with a uniform default timeout.

Provides a pre-configured ``requests.Session`` used by every outbound call
(geocoding and archive).  Each request gets the same default timeout unless
the caller passes one explicitly.  Retries are off by default: a failed call
surfaces immediately through ``resp.raise_for_status()`` or a
``requests.RequestException``.

Usage::

    from weather_trends.services.http import session

    resp = session.get("https://api.example.com/v1/data", params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from weather_trends import __version__
from weather_trends.config import get_settings

#: No automatic retries; the adapter still owns connection pooling.
DEFAULT_RETRY = Retry(total=0, raise_on_status=False)

DEFAULT_TIMEOUT = 15.0  # seconds

USER_AGENT = f"weather-trends/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with an adapter and default timeout.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``, no retries).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Wrap send to inject a default timeout so callers don't need to
    # remember to pass ``timeout=`` every time.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session(timeout=get_settings().http_timeout)
