import kopf
import logging
import kubernetes
import os

from dklb.services.naming import PoolNameGenerator
from dklb import handlers  # noqa: F401  (registers the admission handlers)

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Name generator shared by the admission handlers
pool_name_generator = None


def load_cluster_config():
    """ Point the kubernetes client at the cluster, preferring the pod service account.
    """
    loaders = (
        ("in-cluster", kubernetes.config.load_incluster_config),
        ("kubeconfig", kubernetes.config.load_kube_config),
    )
    for source, load in loaders:
        try:
            load()
        except kubernetes.config.ConfigException as e:
            logger.debug(f"No {source} kubernetes configuration: {e}")
            continue
        logger.info(f"Using {source} kubernetes configuration")
        return source
    logger.warning("No kubernetes configuration found, admission reviews still work without it")
    return None


@kopf.on.startup()
def startup_fn(settings: kopf.OperatorSettings, **kwargs):
    """Configure the operator and its admission webhook server."""
    global pool_name_generator

    logger.info("dklb operator is starting up...")

    load_cluster_config()

    pool_name_generator = PoolNameGenerator.from_env()
    if pool_name_generator.registry is None:
        logger.warning("EdgeLB lookups disabled, pool names will not be checked for collisions")
    if not pool_name_generator.cluster_name:
        logger.warning("DKLB_CLUSTER_NAME is not set, pool names will not include the cluster name")

    settings.admission.server = kopf.WebhookServer(
        addr=os.getenv("ADMISSION_HOST", "0.0.0.0"),
        port=int(os.getenv("ADMISSION_PORT", "9443")),
        host=os.getenv("ADMISSION_SERVICE_HOST") or None,
    )
    managed = os.getenv("ADMISSION_MANAGED")
    if managed:
        settings.admission.managed = managed
    settings.posting.enabled = os.getenv("POSTING_ENABLED", "false").lower() == "true"

    logger.info(f"Cluster name: {pool_name_generator.cluster_name!r}")
    logger.info(f"Pool group: {pool_name_generator.pool_group!r}")
    logger.info("dklb operator startup complete")


@kopf.on.cleanup()
def cleanup_fn(**kwargs):
    """Cleanup operator resources."""
    logger.info("dklb operator is shutting down...")

    global pool_name_generator
    pool_name_generator = None

    logger.info("dklb operator shutdown complete")


def main():
    """ Run the admission webhook operator until interrupted.
    """
    try:
        kopf.run(clusterwide=True)
    except KeyboardInterrupt:
        logger.info("dklb operator interrupted")


if __name__ == "__main__":
    main()
