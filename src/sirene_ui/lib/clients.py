"""
HTTP client factory shared by every upstream API module.

A single requests.Session is reused for the whole process. It asks every
hop not to serve cached answers, so repeated identical queries always
reach the upstream service.
"""

import functools

import requests

_DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-cache",
    "Pragma": "no-cache",
}


@functools.cache
def http_session() -> requests.Session:
    """
    Return the shared HTTP session, creating it on first use.

    Returns:
        requests.Session with JSON and no-cache headers preset.
    """
    session = requests.Session()
    session.headers.update(_DEFAULT_HEADERS)
    return session
