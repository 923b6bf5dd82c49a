"""Constants shared across dklb."""

# Annotation holding the EdgeLB pool configuration object of an Ingress/Service.
DKLB_CONFIG_ANNOTATION_KEY = "kubernetes.dcos.io/dklb-config"

# Ingress class selecting EdgeLB as the ingress controller.
INGRESS_CLASS_ANNOTATION_KEY = "kubernetes.io/ingress.class"
INGRESS_CLASS_EDGELB = "edgelb"

SERVICE_TYPE_LOAD_BALANCER = "LoadBalancer"

# Prefix used in the names of EdgeLB pools requesting a cloud load-balancer.
EDGELB_CLOUD_PROVIDER_POOL_NAME_PREFIX = "cloud"

EDGELB_ROLE_PUBLIC = "slave_public"
EDGELB_ROLE_PRIVATE = "*"

# The host network is denoted by the empty network name.
EDGELB_HOST_NETWORK = ""
DEFAULT_DCOS_VIRTUAL_NETWORK_NAME = "dcos"

EDGELB_POOL_NAME_REGEX = r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$"
EDGELB_POOL_NAME_MAX_LENGTH = 63
EDGELB_POOL_NAME_COMPONENT_SEPARATOR = "--"
EDGELB_POOL_NAME_SUFFIX_LENGTH = 5

DEFAULT_EDGELB_POOL_GROUP = "dcos-edgelb/pools"
DEFAULT_EDGELB_URL = "http://api.edgelb.marathon.l4lb.thisdcos.directory/"

MIN_PORT = 1
MAX_PORT = 65535
