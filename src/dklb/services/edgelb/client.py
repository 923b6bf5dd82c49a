""" EdgeLB api client used to look up existing pools."""

import os
import logging
from typing import Any, Dict, Optional, Protocol

import httpx

from dklb.constants import DEFAULT_EDGELB_POOL_GROUP, DEFAULT_EDGELB_URL
from dklb.errors import PoolNotFoundError, RegistryError

logger = logging.getLogger(__name__)

DEFAULT_LOOKUP_TIMEOUT = 5.0


def get_verify_tls():
    """ Get TLS verification from environment.
    """
    verify_tls = os.environ.get("EDGELB_VERIFY_TLS", "true").lower()
    return verify_tls in ("true", "1", "yes")


def get_edgelb_url():
    """ Get URL from environment.
    """
    return os.environ.get("EDGELB_URL", DEFAULT_EDGELB_URL)


def get_edgelb_token():
    """ Get the (optional) bearer token for the EdgeLB API server.
    """
    return os.environ.get("EDGELB_BEARER_TOKEN")


def get_pool_group():
    """ Get the DC/OS service group in which EdgeLB pools are created.
    """
    return os.environ.get("EDGELB_POOL_GROUP", DEFAULT_EDGELB_POOL_GROUP)


def is_edgelb_enabled():
    """ Check if pool lookups against EdgeLB are enabled.
    """
    return os.environ.get("EDGELB_ENABLED", "true").lower() in ("true", "1", "yes")


class PoolRegistry(Protocol):
    """ Anything that can tell whether an EdgeLB pool exists.

    Implementations raise PoolNotFoundError when the pool does not exist and
    RegistryError for any other failure.
    """

    def get_pool(self, name: str, timeout: float = DEFAULT_LOOKUP_TIMEOUT) -> Dict[str, Any]:
        ...


class EdgeLBClient:
    """ HTTP client for the EdgeLB API server.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        verify_tls: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = (base_url or get_edgelb_url()).rstrip("/")
        self.token = token if token is not None else get_edgelb_token()
        self.verify_tls = get_verify_tls() if verify_tls is None else verify_tls
        self.transport = transport

    def _get_headers(self):
        """ Get headers for API requests.
        """
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def get_pool(self, name, timeout=DEFAULT_LOOKUP_TIMEOUT):
        """ Return the EdgeLB pool with the specified name.
        """
        url = f"{self.base_url}/v2/pools/{name}"
        logger.debug(f"GET {url}")
        try:
            with httpx.Client(
                verify=self.verify_tls, timeout=timeout, transport=self.transport
            ) as client:
                response = client.get(url, headers=self._get_headers())
        except httpx.TimeoutException as e:
            raise RegistryError(f"timed out looking up edgelb pool {name!r}: {e}", transient=True) from e
        except httpx.TransportError as e:
            raise RegistryError(f"failed to reach edgelb looking up pool {name!r}: {e}", transient=True) from e

        if response.status_code == 404:
            raise PoolNotFoundError(name)
        if response.status_code == 429 or response.status_code >= 500:
            raise RegistryError(
                f"edgelb returned {response.status_code} for pool {name!r}", transient=True
            )
        if response.status_code >= 400:
            raise RegistryError(
                f"edgelb returned {response.status_code} for pool {name!r}: {response.text}"
            )
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RegistryError(
                f"edgelb returned an unreadable body for pool {name!r}: {e}"
            ) from e


def get_edgelb_client():
    """ Get a new EdgeLB client instance, or None when lookups are disabled.
    """
    if not is_edgelb_enabled():
        return None
    return EdgeLBClient()
