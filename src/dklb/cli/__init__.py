import sys
from pathlib import Path
from typing import Optional

import typer
import yaml
from typing_extensions import Annotated
from dotenv import load_dotenv, find_dotenv

from dklb.errors import PoolSpecError
from dklb.services.edgelb.client import get_edgelb_client, get_pool_group
from dklb.services.naming import PoolNameGenerator, get_cluster_name, get_max_attempts
from dklb.specs.codec import (
    encode_pool_spec,
    get_ingress_pool_spec,
    get_service_pool_spec,
    has_pool_spec_annotation,
    inherit_pool_spec_annotation,
)

load_dotenv(find_dotenv(usecwd=True))

app = typer.Typer(
    help="dklb: EdgeLB pool specifications for Kubernetes Ingress and Service resources",
    add_completion=False,
)

SPEC_GETTERS = {
    "Ingress": get_ingress_pool_spec,
    "Service": get_service_pool_spec,
}


def load_manifest(path):
    """Load a single Ingress/Service manifest from a YAML file."""
    with open(path) as f:
        manifest = yaml.safe_load(f)
    if not isinstance(manifest, dict):
        raise typer.BadParameter(f"{path} does not contain a kubernetes object")
    kind = manifest.get("kind")
    if kind not in SPEC_GETTERS:
        raise typer.BadParameter(f"{path}: unsupported kind {kind!r} (expected Ingress or Service)")
    return manifest


@app.command("resolve")
def resolve(
    manifest: Annotated[Path, typer.Argument(help="Ingress or Service manifest", exists=True)],
    previous: Annotated[
        Optional[Path],
        typer.Option("--previous", help="Previous version of the manifest to validate the update against", exists=True),
    ] = None,
    cluster_name: Annotated[
        Optional[str], typer.Option("--cluster-name", help="Cluster name used in generated pool names")
    ] = None,
    offline: Annotated[
        bool, typer.Option("--offline", help="Do not check generated pool names against EdgeLB")
    ] = False,
):
    """Print the resolved EdgeLB pool configuration of a manifest."""
    current = load_manifest(manifest)
    get_spec = SPEC_GETTERS[current["kind"]]

    names = PoolNameGenerator(
        cluster_name=cluster_name if cluster_name is not None else get_cluster_name(),
        pool_group=get_pool_group(),
        registry=None if offline else get_edgelb_client(),
        max_attempts=get_max_attempts(),
    )

    previous_manifest = None
    if previous is not None:
        previous_manifest = load_manifest(previous)
        if previous_manifest["kind"] != current["kind"]:
            raise typer.BadParameter("the previous manifest must be of the same kind")

    try:
        spec = get_spec(inherit_pool_spec_annotation(current, previous_manifest), names)
        if previous_manifest is not None and has_pool_spec_annotation(previous_manifest):
            spec.validate_transition(get_spec(previous_manifest, names))
    except PoolSpecError as e:
        typer.echo(f"Invalid pool configuration: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(encode_pool_spec(spec), nl=False)


@app.command("operator")
def run_operator():
    """Run the Kubernetes operator (connects to cluster)."""
    from dklb.main import main

    main()


if __name__ == "__main__":
    sys.exit(app())
