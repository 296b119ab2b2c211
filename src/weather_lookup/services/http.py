"""
HTTP session used by the OpenWeatherMap datasource.

A city lookup is answered while the user waits, so a request that fails is
reported at once instead of being retried. Every request carries the
package User-Agent and, unless the caller passes one, ``DEFAULT_TIMEOUT``.

Usage::

    from weather_lookup.services.http import session

    resp = session.get(url, params={"q": "London", "appid": key})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter

from weather_lookup import __version__

DEFAULT_TIMEOUT = 10  # seconds

USER_AGENT = f"weather-lookup/{__version__}"


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """
    Build the lookup session: single-attempt adapters and a default timeout.

    Args:
        timeout: Seconds to wait on requests that don't set ``timeout=``.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=0)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Session has no default timeout setting; wrap send.
    _send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Shared by the current-conditions and forecast fetchers.
session: requests.Session = create_session()
