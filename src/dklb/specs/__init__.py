"""EdgeLB pool specifications for Ingress and Service resources."""

from .base import BaseEdgeLBPoolSpec, EdgeLBPoolManagementStrategies, PoolSpecModel
from .codec import (
    decode_base_pool_spec,
    decode_ingress_pool_spec,
    decode_service_pool_spec,
    encode_pool_spec,
    get_ingress_pool_spec,
    get_service_pool_spec,
    has_pool_spec_annotation,
    inherit_pool_spec_annotation,
    set_ingress_pool_spec,
    set_service_pool_spec,
)
from .ingress import (
    IngressEdgeLBPoolFrontendsSpec,
    IngressEdgeLBPoolHTTPFrontendSpec,
    IngressEdgeLBPoolHTTPSFrontendSpec,
    IngressEdgeLBPoolSpec,
    is_ingress_tls_enabled,
)
from .service import ServiceEdgeLBPoolFrontendSpec, ServiceEdgeLBPoolSpec
from .strategies import EdgeLBPoolCreationStrategy

__all__ = [
    "BaseEdgeLBPoolSpec",
    "EdgeLBPoolCreationStrategy",
    "EdgeLBPoolManagementStrategies",
    "IngressEdgeLBPoolFrontendsSpec",
    "IngressEdgeLBPoolHTTPFrontendSpec",
    "IngressEdgeLBPoolHTTPSFrontendSpec",
    "IngressEdgeLBPoolSpec",
    "PoolSpecModel",
    "ServiceEdgeLBPoolFrontendSpec",
    "ServiceEdgeLBPoolSpec",
    "decode_base_pool_spec",
    "decode_ingress_pool_spec",
    "decode_service_pool_spec",
    "encode_pool_spec",
    "get_ingress_pool_spec",
    "get_service_pool_spec",
    "has_pool_spec_annotation",
    "inherit_pool_spec_annotation",
    "is_ingress_tls_enabled",
    "set_ingress_pool_spec",
    "set_service_pool_spec",
]
