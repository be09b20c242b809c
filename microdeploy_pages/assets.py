r"""Resolve and audit externally hosted page assets.

Rendering never touches the network: :class:`AssetResolver` only checks that a
URI is something a browser can fetch and hands it back unchanged.
:class:`AssetProbe` is the offline audit used by ``pages check-asset``; it
issues a HEAD request (with retries) and reports whether the host answers.

Example
-------
>>> from microdeploy_pages.assets import AssetResolver
>>> AssetResolver().resolve("https://example.com/diagram.png").uri
'https://example.com/diagram.png'
>>> probe = AssetProbe(timeout=5)  # doctest: +SKIP
>>> probe.check("https://example.com/diagram.png").reachable  # doctest: +SKIP
True
"""

from __future__ import annotations

import dataclasses as dc
from http import HTTPStatus
from urllib.parse import urlsplit

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .errors import ResolutionMiss

_FETCHABLE_SCHEMES = frozenset({"http", "https"})


class AssetNotFoundError(ResolutionMiss):
    """Raised when an asset URI cannot be handed to the rendering surface."""


@dc.dataclass(slots=True, frozen=True)
class AssetHandle:
    """Renderable asset reference; ``uri`` is exactly the catalog value."""

    uri: str


class AssetResolver:
    """Pass asset URIs through untouched, rejecting ones a browser cannot load."""

    def __init__(self, schemes: frozenset[str] = _FETCHABLE_SCHEMES) -> None:
        self._schemes = schemes

    def resolve(self, uri: str) -> AssetHandle:
        """Return a handle for ``uri`` or raise :class:`AssetNotFoundError`."""
        parts = urlsplit(uri)
        if parts.scheme.lower() not in self._schemes or not parts.netloc:
            msg = f"Asset URI '{uri}' is not an absolute http(s) URL."
            raise AssetNotFoundError(uri, msg)
        return AssetHandle(uri=uri)


@dc.dataclass(slots=True)
class ProbeResult:
    """Outcome of an asset reachability check.

    Attributes
    ----------
    uri : str
        URI that was probed.
    status : int | None
        HTTP status code, or ``None`` when no response arrived.
    error : str | None
        Transport error description when the request failed outright.
    """

    uri: str
    status: int | None = None
    error: str | None = None

    @property
    def reachable(self) -> bool:
        """Return True when the host answered with a non-error status."""
        return self.status is not None and self.status < HTTPStatus.BAD_REQUEST


class AssetProbe:
    """Check that an external asset host serves a URI."""

    def __init__(
        self, *, session: requests.Session | None = None, timeout: float = 10.0
    ) -> None:
        """Initialise the probe with an optional transport.

        Parameters
        ----------
        session : requests.Session, optional
            Preconfigured session. Defaults to a new session with retrying
            adapters mounted for ``http`` and ``https``.
        timeout : float, optional
            Per-request timeout in seconds. Defaults to ``10.0``.
        """
        self._session = session or _retrying_session()
        self.timeout = timeout

    def check(self, uri: str) -> ProbeResult:
        """Probe ``uri`` with a HEAD request and return the result."""
        try:
            response = self._session.head(
                uri, timeout=self.timeout, allow_redirects=True
            )
        except requests.RequestException as exc:
            return ProbeResult(uri=uri, error=str(exc))
        return ProbeResult(uri=uri, status=response.status_code)

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self._session.close()


def _retrying_session() -> requests.Session:
    """Return a session that retries transient upstream failures."""
    session = requests.Session()
    retry = Retry(
        total=3,
        connect=3,
        read=3,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


__all__ = [
    "AssetHandle",
    "AssetNotFoundError",
    "AssetProbe",
    "AssetResolver",
    "ProbeResult",
]
