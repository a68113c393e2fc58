"""
Client bundle domain models.
"""

from dataclasses import dataclass, field
from enum import StrEnum


class StackOrchestrator(StrEnum):
    """Known orchestrator kinds. An empty value means both (swarm and kubernetes)."""

    DOCKER = "docker"
    KUBERNETES = "kubernetes"


class MetaEndpoint(StrEnum):
    """Endpoint keys consulted in the bundle meta document."""

    DOCKER = "docker"
    KUBERNETES = "kubernetes"


@dataclass(frozen=True, kw_only=True)
class ClientBundleKube:
    """
    Kubernetes connection details of a client bundle.

    Attributes:
        config: kube.yml text, verbatim.
        host: Server URL of the current context's cluster.
        client_key: Decoded client key of the current context's user.
        client_certificate: Decoded client certificate of the current context's user.
        ca_certificate: Decoded CA of the current context's cluster.
        insecure: Whether TLS verification of the kubernetes endpoint is skipped.
    """

    config: str
    host: str = ""
    client_key: str = field(default="", repr=False)
    client_certificate: str = ""
    ca_certificate: str = ""
    insecure: bool = False


@dataclass(frozen=True, kw_only=True)
class ClientBundleMeta:
    """Flattened meta.json from the nested docker bundle."""

    name: str = ""
    description: str = ""
    stack_orchestrator: str = ""
    docker_host: str = ""
    docker_skip_verify_tls: bool = False
    kubernetes_host: str = ""
    kubernetes_skip_verify_tls: bool = False


@dataclass(kw_only=True)
class ClientBundle:
    """
    Decoded client bundle.

    Assembled entry by entry while the archive is walked, hence mutable.
    ``kube`` is None when the cluster exposes no kubernetes endpoint.
    """

    id: str = ""
    private_key: str = field(default="", repr=False)
    public_key: str = ""
    cert: str = ""
    ca_cert: str = ""
    kube: ClientBundleKube | None = None
    meta: ClientBundleMeta = field(default_factory=ClientBundleMeta)
