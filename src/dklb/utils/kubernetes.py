""" Accessors that work on both kubernetes.client models and plain mappings.

kopf hands resources to handlers as mappings, while the kubernetes client
returns V1Ingress/V1Service objects. The spec code only needs a handful of
fields, read through the helpers below.
"""

from collections.abc import Mapping

from dklb.constants import (
    INGRESS_CLASS_ANNOTATION_KEY,
    INGRESS_CLASS_EDGELB,
    SERVICE_TYPE_LOAD_BALANCER,
)


def _get(obj, attr, key=None):
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key or attr)
    return getattr(obj, attr, None)


def get_metadata(obj):
    return _get(obj, "metadata")


def get_annotations(obj):
    """ Return the annotations of obj (never None).
    """
    return _get(get_metadata(obj), "annotations") or {}


def get_annotation(obj, key):
    return get_annotations(obj).get(key)


def set_annotation(obj, key, value):
    """ Set a single annotation on obj, initialising the annotations as necessary.
    """
    metadata = get_metadata(obj)
    if isinstance(obj, Mapping):
        if metadata is None:
            metadata = obj["metadata"] = {}
        if metadata.get("annotations") is None:
            metadata["annotations"] = {}
        metadata["annotations"][key] = value
        return

    if metadata.annotations is None:
        metadata.annotations = {}
    metadata.annotations[key] = value


def get_spec(obj):
    return _get(obj, "spec")


def get_ingress_tls(obj):
    return _get(get_spec(obj), "tls") or []


def get_ingress_class_name(obj):
    return _get(get_spec(obj), "ingress_class_name", "ingressClassName")


def get_service_type(obj):
    return _get(get_spec(obj), "type")


def get_service_ports(obj):
    """ Return the port numbers defined on a Service, in definition order.
    """
    ports = _get(get_spec(obj), "ports") or []
    return [_get(port, "port") for port in ports]


def object_key(obj):
    """ Return the "<namespace>/<name>" key of obj, for logging.
    """
    metadata = get_metadata(obj)
    name = _get(metadata, "name")
    if not name:
        return "(unknown)"
    namespace = _get(metadata, "namespace")
    return f"{namespace}/{name}" if namespace else name


def is_edgelb_ingress(obj):
    """ Whether the Ingress resource is meant to be provisioned by EdgeLB.
    """
    if get_annotation(obj, INGRESS_CLASS_ANNOTATION_KEY) == INGRESS_CLASS_EDGELB:
        return True
    return get_ingress_class_name(obj) == INGRESS_CLASS_EDGELB


def is_load_balancer_service(obj):
    return get_service_type(obj) == SERVICE_TYPE_LOAD_BALANCER
