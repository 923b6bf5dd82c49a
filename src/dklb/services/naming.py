""" Generation of unique, length-bounded EdgeLB pool names.
"""

import os
import time
import random
import logging

from dklb.constants import (
    DEFAULT_EDGELB_POOL_GROUP,
    EDGELB_POOL_NAME_COMPONENT_SEPARATOR,
    EDGELB_POOL_NAME_MAX_LENGTH,
    EDGELB_POOL_NAME_SUFFIX_LENGTH,
)
from dklb.errors import NameGenerationError, PoolNotFoundError, RegistryError
from dklb.services.edgelb.client import (
    DEFAULT_LOOKUP_TIMEOUT,
    get_edgelb_client,
    get_pool_group,
)
from dklb.utils.strings import (
    random_string_with_length,
    replace_forward_slashes,
    to_dns_label_chars,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10


def get_cluster_name():
    """ Get the name of the current Kubernetes cluster from environment.
    """
    return os.environ.get("DKLB_CLUSTER_NAME", "")


def get_max_attempts():
    return int(os.environ.get("DKLB_NAME_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS)))


def sanitize_cluster_name(cluster_name):
    """ Turn a (possibly foldered) cluster name into a pool name component.

    "/dev/kubernetes01" becomes "dev--kubernetes01".
    """
    value = replace_forward_slashes(
        cluster_name.strip("/"), EDGELB_POOL_NAME_COMPONENT_SEPARATOR
    )
    return to_dns_label_chars(value).strip("-")


class PoolNameGenerator:
    """ Generates names of the form "[<prefix>--]<cluster-name>--<suffix>".

    Names never exceed 63 characters once the pool group (if any) is accounted
    for. When a registry is given, candidates that already exist in EdgeLB are
    discarded, up to max_attempts tries.
    """

    def __init__(
        self,
        cluster_name="",
        pool_group=DEFAULT_EDGELB_POOL_GROUP,
        registry=None,
        max_attempts=DEFAULT_MAX_ATTEMPTS,
        lookup_timeout=DEFAULT_LOOKUP_TIMEOUT,
        backoff_base=0.1,
        backoff_max=2.0,
        sleep=time.sleep,
    ):
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.cluster_name = cluster_name
        self.pool_group = pool_group
        self.registry = registry
        self.max_attempts = max_attempts
        self.lookup_timeout = lookup_timeout
        self.backoff_base = backoff_base
        self.backoff_max = backoff_max
        self._sleep = sleep

    @classmethod
    def from_env(cls, registry=None):
        """ Build a generator from environment, looking pools up in EdgeLB unless disabled.
        """
        return cls(
            cluster_name=get_cluster_name(),
            pool_group=get_pool_group(),
            registry=registry if registry is not None else get_edgelb_client(),
            max_attempts=get_max_attempts(),
        )

    def candidate(self, prefix=""):
        """ Build a single candidate name without consulting the registry.
        """
        separator = EDGELB_POOL_NAME_COMPONENT_SEPARATOR
        suffix = random_string_with_length(EDGELB_POOL_NAME_SUFFIX_LENGTH)

        # Pools are created as "<pool-group>/<name>", and the whole path (minus slashes) must fit.
        budget = EDGELB_POOL_NAME_MAX_LENGTH
        if self.pool_group:
            budget -= len(self.pool_group) + 1
        budget -= len(separator) + len(suffix)
        if budget < 0:
            raise NameGenerationError(
                f"pool group {self.pool_group!r} leaves no room for an edgelb pool name"
            )

        head = to_dns_label_chars(prefix).strip("-")
        if head:
            head = head[: max(budget - len(separator), 0)].rstrip("-")
        if head:
            head += separator

        cluster_name = sanitize_cluster_name(self.cluster_name)
        cluster_name = cluster_name[: max(budget - len(head), 0)]

        if cluster_name:
            return head + cluster_name + separator + suffix
        return head + suffix

    def generate(self, prefix=""):
        """ Return a name for a new EdgeLB pool that does not clash with an existing one.
        """
        for attempt in range(1, self.max_attempts + 1):
            candidate = self.candidate(prefix)
            if self.registry is None:
                return candidate

            try:
                self.registry.get_pool(candidate, timeout=self.lookup_timeout)
            except PoolNotFoundError:
                logger.debug(f"Using edgelb pool name {candidate}")
                return candidate
            except RegistryError as e:
                if not e.transient:
                    logger.error(f"Failed to check edgelb pool name {candidate}: {e}")
                    raise NameGenerationError(
                        f"failed to check whether edgelb pool {candidate!r} exists: {e}"
                    ) from e
                delay = self._backoff(attempt)
                logger.warning(
                    f"Transient error checking edgelb pool name {candidate} "
                    f"(attempt {attempt}/{self.max_attempts}), retrying in {delay:.2f}s: {e}"
                )
                if attempt < self.max_attempts:
                    self._sleep(delay)
                continue

            logger.debug(f"Edgelb pool {candidate} already exists, trying another name")

        logger.error(
            f"Giving up generating an edgelb pool name after {self.max_attempts} attempts"
        )
        raise NameGenerationError(
            f"failed to generate a unique edgelb pool name after {self.max_attempts} attempts"
        )

    def _backoff(self, attempt):
        delay = min(self.backoff_max, self.backoff_base * 2 ** (attempt - 1))
        return delay * random.uniform(0.5, 1.0)
