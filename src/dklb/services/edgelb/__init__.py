""" EdgeLB integration services for dklb.
"""

from .client import (
    EdgeLBClient,
    PoolRegistry,
    get_edgelb_client,
    get_edgelb_url,
    get_pool_group,
    get_verify_tls,
    is_edgelb_enabled,
)

__all__ = [
    "EdgeLBClient",
    "PoolRegistry",
    "get_edgelb_client",
    "get_edgelb_url",
    "get_pool_group",
    "get_verify_tls",
    "is_edgelb_enabled",
]
