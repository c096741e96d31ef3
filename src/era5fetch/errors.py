"""Errors raised by the fetcher, mapped from whatever the CDS client surfaces."""

import requests

AUTH_STATUS = {401, 403}
QUOTA_STATUS = {413, 429}

_AUTH_HINTS = ("configuration file", "api key", "missing/incomplete", "unauthorized", "authentication")
_QUOTA_HINTS = ("quota", "rate limit", "too many requests", "cost limits", "too large")


class FetchError(Exception):
    """Base class for failed ERA5 retrievals."""


class NetworkError(FetchError):
    """The CDS service could not be reached."""


class AuthError(FetchError):
    """Credentials are missing or were rejected."""


class ServerError(FetchError):
    """The service failed or rejected the request."""


class QuotaError(FetchError):
    """A rate or request-size limit was hit."""


def map_client_error(exc: Exception) -> FetchError:
    """Translate a client exception into a FetchError subtype.

    Only classifies; the caller is expected to ``raise ... from exc``.
    """
    if isinstance(exc, FetchError):
        return exc
    message = str(exc)

    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return NetworkError(message)

    status = None
    if isinstance(exc, requests.HTTPError) and exc.response is not None:
        status = exc.response.status_code
    if status in AUTH_STATUS:
        return AuthError(message)
    if status in QUOTA_STATUS:
        return QuotaError(message)

    lowered = message.lower()
    if any(hint in lowered for hint in _AUTH_HINTS):
        return AuthError(message)
    if any(hint in lowered for hint in _QUOTA_HINTS):
        return QuotaError(message)
    return ServerError(message)
