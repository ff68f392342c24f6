"""
Request helper and result boundary shared by the upstream API clients.

get_json() performs one GET and classifies its failures. api_boundary()
wraps a client function so it always returns an OperationResult and never
lets an exception escape.
"""

import functools
from typing import Any, Callable, Mapping, TypeVar
from urllib.parse import quote, urlencode

import requests

from sirene_ui.errors import ApiError, SireneUIError, TransportError
from sirene_ui.lib import clients, logs
from sirene_ui.models import OperationResult

LOG = logs.logger(__file__)

T = TypeVar("T")


def api_boundary(
    operation: str,
) -> Callable[[Callable[..., T]], Callable[..., OperationResult[T]]]:
    """
    Convert the return value or exception of a client call into a result.

    Classified errors (SireneUIError) keep their message. Anything else is
    reported as a transport failure with the exception text.

    Args:
        operation: Short description used in log lines.
    """

    def decorate(func: Callable[..., T]) -> Callable[..., OperationResult[T]]:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> OperationResult[T]:
            try:
                return OperationResult.ok(func(*args, **kwargs))
            except SireneUIError as exc:
                LOG.warning("%s failed: %s: %s", operation, type(exc).__name__, exc)
                return OperationResult.fail(str(exc))
            except Exception as exc:
                LOG.error("%s failed unexpectedly: %s", operation, exc, exc_info=True)
                return OperationResult.fail(str(TransportError(str(exc))))

        return wrapper

    return decorate


def get_json(
    url: str,
    params: Mapping[str, Any],
    *,
    timeout: float,
    headers: Mapping[str, str] | None = None,
) -> Mapping[str, Any]:
    """
    Issue a GET request and return the decoded JSON object.

    Query values are percent-encoded with %20 for spaces.

    Raises:
        ApiError: On a non-2xx status.
        TransportError: On network failure or an undecodable body.
    """
    query = urlencode(params, quote_via=quote)
    LOG.debug("GET %s?%s", url, query)
    try:
        response = clients.http_session().get(
            url, params=query, headers=headers, timeout=timeout
        )
    except requests.RequestException as exc:
        raise TransportError(str(exc)) from exc

    if not response.ok:
        raise ApiError(response.status_code)

    try:
        payload = response.json()
    except ValueError as exc:
        raise TransportError(str(exc)) from exc
    if not isinstance(payload, Mapping):
        raise TransportError("malformed response body")
    return payload
