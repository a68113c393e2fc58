"""
Decoding of the kube.yml connection config found in client bundles.

The document is parsed strictly: duplicate keys, unknown fields and wrongly
typed fields are errors. References that do not resolve (a current-context
naming a missing context, a context naming a missing cluster or user) are
not; the affected fields are left empty.
"""

import base64
import binascii
from collections.abc import Hashable
from typing import Any

import structlog
import yaml

from mke_client.exceptions import KubeConfigError
from mke_client.models.client_bundle import ClientBundleKube

logger = structlog.get_logger(__name__)

_TOP_LEVEL_FIELDS = frozenset(
    {"apiVersion", "kind", "preferences", "clusters", "contexts", "current-context", "users"}
)


class _StrictLoader(yaml.SafeLoader):
    """SafeLoader that rejects duplicate and unhashable mapping keys."""


def _construct_unique_mapping(loader: _StrictLoader, node: yaml.MappingNode) -> dict[Any, Any]:
    loader.flatten_mapping(node)
    seen = set()
    for key_node, _ in node.value:
        key = loader.construct_object(key_node)
        if not isinstance(key, Hashable):
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                "found unhashable key",
                key_node.start_mark,
            )
        if key in seen:
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                f"found duplicate key {key!r}",
                key_node.start_mark,
            )
        seen.add(key)
    return loader.construct_mapping(node)


_StrictLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_unique_mapping
)


def _mapping(value: Any, where: str, allowed: frozenset[str]) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"{where}: expected a mapping, got {type(value).__name__}"
        raise KubeConfigError(msg)
    unknown = sorted(str(k) for k in value if k not in allowed)
    if unknown:
        msg = f"{where}: unknown field(s) {', '.join(unknown)}"
        raise KubeConfigError(msg)
    return value


def _string(mapping: dict[str, Any], key: str, where: str) -> str:
    value = mapping.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        msg = f"{where}.{key}: expected a string, got {type(value).__name__}"
        raise KubeConfigError(msg)
    return value


def _sequence(mapping: dict[str, Any], key: str, where: str) -> list[Any]:
    value = mapping.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"{where}.{key}: expected a list, got {type(value).__name__}"
        raise KubeConfigError(msg)
    return value


def _named_entries(
    document: dict[str, Any], key: str, inner: str, inner_fields: frozenset[str]
) -> dict[str, dict[str, Any]]:
    """Map entry name to its inner mapping; the first entry of a name wins."""
    entries: dict[str, dict[str, Any]] = {}
    for index, raw in enumerate(_sequence(document, key, "kubeconfig")):
        where = f"kubeconfig.{key}[{index}]"
        entry = _mapping(raw, where, frozenset({"name", inner}))
        name = _string(entry, "name", where)
        body = _mapping(entry.get(inner), f"{where}.{inner}", inner_fields)
        for field_name in inner_fields:
            _string(body, field_name, f"{where}.{inner}")
        entries.setdefault(name, body)
    return entries


def _decode_base64(value: str, field_name: str) -> str:
    if not value:
        return ""
    try:
        return base64.b64decode(value.replace("\r", "").replace("\n", ""), validate=True).decode(
            "utf-8"
        )
    except (binascii.Error, UnicodeDecodeError):
        logger.warning("Ignoring undecodable base64 field", field=field_name)
        return ""


def load_kube_config(text: str) -> dict[str, Any]:
    """
    Parse and validate a kubeconfig document.

    Raises:
        KubeConfigError: If the text is not a valid kubeconfig document.
    """
    try:
        document = yaml.load(text, Loader=_StrictLoader)
    except yaml.YAMLError as e:
        msg = f"kube.yml is not valid YAML: {e}"
        raise KubeConfigError(msg) from e

    document = _mapping(document, "kubeconfig", _TOP_LEVEL_FIELDS)
    for required in ("apiVersion", "kind"):
        if not _string(document, required, "kubeconfig"):
            msg = f"kubeconfig: missing {required}"
            raise KubeConfigError(msg)

    preferences = document.get("preferences")
    if preferences is not None and not isinstance(preferences, dict):
        msg = "kubeconfig.preferences: expected a mapping"
        raise KubeConfigError(msg)
    _string(document, "current-context", "kubeconfig")
    return document


def decode_kube_config(text: str) -> ClientBundleKube:
    """
    Decode kube.yml into the kubernetes part of a client bundle.

    The current context selects a cluster (server, CA) and a user (client
    certificate, client key). The raw text is kept as ``config``.

    Args:
        text: kube.yml contents.

    Returns:
        Kubernetes connection details.

    Raises:
        KubeConfigError: If the document does not parse.
    """
    document = load_kube_config(text)

    clusters = _named_entries(
        document, "clusters", "cluster", frozenset({"certificate-authority-data", "server"})
    )
    contexts = _named_entries(document, "contexts", "context", frozenset({"cluster", "user"}))
    users = _named_entries(
        document, "users", "user", frozenset({"client-certificate-data", "client-key-data"})
    )

    context = contexts.get(document.get("current-context") or "", {})
    cluster = clusters.get(context.get("cluster") or "", {})
    user = users.get(context.get("user") or "", {})

    return ClientBundleKube(
        config=text,
        host=cluster.get("server") or "",
        ca_certificate=_decode_base64(
            cluster.get("certificate-authority-data") or "", "certificate-authority-data"
        ),
        client_certificate=_decode_base64(
            user.get("client-certificate-data") or "", "client-certificate-data"
        ),
        client_key=_decode_base64(user.get("client-key-data") or "", "client-key-data"),
    )
