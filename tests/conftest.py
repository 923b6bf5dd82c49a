"""Shared fixtures for dklb tests."""

import pytest
from kubernetes import client

from dklb.constants import DKLB_CONFIG_ANNOTATION_KEY
from dklb.errors import PoolNotFoundError
from dklb.services.naming import PoolNameGenerator

POOL_NAME_REGEX = r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$"


class FakeRegistry:
    """Pool registry answering lookups from a scripted list of outcomes.

    Each outcome is "exists", "missing" or an exception to raise. Lookups past
    the end of the script report the pool as missing.
    """

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.calls = []

    def get_pool(self, name, timeout=5.0):
        self.calls.append((name, timeout))
        outcome = self.outcomes.pop(0) if self.outcomes else "missing"
        if isinstance(outcome, Exception):
            raise outcome
        if outcome == "missing":
            raise PoolNotFoundError(name)
        return {"name": name}


@pytest.fixture
def names():
    return PoolNameGenerator(cluster_name="test-cluster")


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def make_names(sleeps):
    def _make_names(registry=None, cluster_name="test-cluster", **kwargs):
        return PoolNameGenerator(
            cluster_name=cluster_name, registry=registry, sleep=sleeps.append, **kwargs
        )

    return _make_names


def make_ingress(config=None, tls=False, annotations=None):
    annotations = dict(annotations or {})
    if config is not None:
        annotations[DKLB_CONFIG_ANNOTATION_KEY] = config
    return client.V1Ingress(
        metadata=client.V1ObjectMeta(
            namespace="test-namespace", name="test-ingress", annotations=annotations or None
        ),
        spec=client.V1IngressSpec(
            tls=[client.V1IngressTLS(secret_name="test-secret")] if tls else None
        ),
    )


def make_service(ports=(6379,), config=None, protocols=None):
    annotations = {DKLB_CONFIG_ANNOTATION_KEY: config} if config is not None else None
    protocols = protocols or ["TCP"] * len(ports)
    return client.V1Service(
        metadata=client.V1ObjectMeta(
            namespace="test-namespace", name="test-service", annotations=annotations
        ),
        spec=client.V1ServiceSpec(
            type="LoadBalancer",
            ports=[
                client.V1ServicePort(port=port, protocol=protocol)
                for port, protocol in zip(ports, protocols)
            ],
        ),
    )
