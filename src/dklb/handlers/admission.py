""" Admission handlers validating and defaulting EdgeLB pool configuration.

The mutating handlers write the fully resolved pool specification back into
the configuration annotation; the validating handlers reject invalid
configuration and changes to immutable pool properties.
"""

import logging

import kopf

from dklb.constants import DKLB_CONFIG_ANNOTATION_KEY
from dklb.errors import PoolSpecError
from dklb.services.naming import PoolNameGenerator
from dklb.specs.codec import (
    encode_pool_spec,
    get_ingress_pool_spec,
    get_service_pool_spec,
    has_pool_spec_annotation,
    inherit_pool_spec_annotation,
)
from dklb.utils.kubernetes import (
    is_edgelb_ingress,
    is_load_balancer_service,
    object_key,
)

logger = logging.getLogger(__name__)


def get_pool_name_generator():
    """ Get the name generator configured at operator startup.
    """
    from dklb.main import pool_name_generator

    if pool_name_generator is None:
        logger.warning("Pool name generator not initialised, building one from environment")
        return PoolNameGenerator.from_env()
    return pool_name_generator


def patch_config_annotation(patch, value):
    patch.setdefault("metadata", {}).setdefault("annotations", {})[
        DKLB_CONFIG_ANNOTATION_KEY
    ] = value


def _resolve(get_spec, body, old):
    """ Resolve the current spec and, if old was admitted with one, validate the transition.
    """
    names = get_pool_name_generator()
    current = get_spec(inherit_pool_spec_annotation(body, old), names)
    if old and has_pool_spec_annotation(old):
        previous = get_spec(old, names)
        current.validate_transition(previous)
    return current


@kopf.on.validate("networking.k8s.io", "v1", "ingresses", id="dklb-validate-ingress")
def validate_ingress(body, old=None, **kwargs):
    """ Reject EdgeLB Ingresses with invalid pool configuration or forbidden changes.
    """
    if not is_edgelb_ingress(body):
        return
    try:
        _resolve(get_ingress_pool_spec, body, old)
    except PoolSpecError as e:
        logger.warning(f"Rejecting ingress {object_key(body)}: {e}")
        raise kopf.AdmissionError(str(e))


@kopf.on.validate("v1", "services", id="dklb-validate-service")
def validate_service(body, old=None, **kwargs):
    """ Reject LoadBalancer Services with invalid pool configuration or forbidden changes.
    """
    if not is_load_balancer_service(body):
        return
    try:
        _resolve(get_service_pool_spec, body, old)
    except PoolSpecError as e:
        logger.warning(f"Rejecting service {object_key(body)}: {e}")
        raise kopf.AdmissionError(str(e))


@kopf.on.mutate("networking.k8s.io", "v1", "ingresses", id="dklb-default-ingress")
def mutate_ingress(body, patch, old=None, **kwargs):
    """ Store the resolved pool specification on EdgeLB Ingresses.
    """
    if not is_edgelb_ingress(body):
        return
    try:
        spec = _resolve(get_ingress_pool_spec, body, old)
    except PoolSpecError as e:
        logger.warning(f"Rejecting ingress {object_key(body)}: {e}")
        raise kopf.AdmissionError(str(e))
    patch_config_annotation(patch, encode_pool_spec(spec))
    logger.info(f"Resolved edgelb pool {spec.base.name} for ingress {object_key(body)}")


@kopf.on.mutate("v1", "services", id="dklb-default-service")
def mutate_service(body, patch, old=None, **kwargs):
    """ Store the resolved pool specification on LoadBalancer Services.
    """
    if not is_load_balancer_service(body):
        return
    try:
        spec = _resolve(get_service_pool_spec, body, old)
    except PoolSpecError as e:
        logger.warning(f"Rejecting service {object_key(body)}: {e}")
        raise kopf.AdmissionError(str(e))
    patch_config_annotation(patch, encode_pool_spec(spec))
    logger.info(f"Resolved edgelb pool {spec.base.name} for service {object_key(body)}")
