"""dklb: EdgeLB pool specifications for Kubernetes Ingress and Service resources."""

__version__ = "0.1.0"
