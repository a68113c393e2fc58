"""
Decoding of meta.json from the docker bundle nested in client bundles.
"""

import json
from typing import Any

from mke_client.exceptions import MetaDocumentError
from mke_client.models.client_bundle import ClientBundleMeta, MetaEndpoint


def _object(mapping: dict[str, Any], key: str) -> dict[str, Any]:
    value = mapping.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"meta.json: {key} must be an object"
        raise MetaDocumentError(msg)
    return value


def _typed(mapping: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    value = mapping.get(key)
    if value is None:
        return default
    if not isinstance(value, expected):
        msg = f"meta.json: {key} must be of type {expected.__name__}"
        raise MetaDocumentError(msg)
    return value


def decode_meta(payload: bytes) -> ClientBundleMeta:
    """
    Decode meta.json into flattened bundle metadata.

    Only the docker and kubernetes endpoints are read. Missing keys leave
    the corresponding fields at their zero value.

    Args:
        payload: meta.json contents.

    Returns:
        Bundle metadata.

    Raises:
        MetaDocumentError: If the payload is not a valid meta document.
    """
    try:
        document = json.loads(payload)
    except ValueError as e:
        msg = f"meta.json is not valid JSON: {e}"
        raise MetaDocumentError(msg) from e

    if not isinstance(document, dict):
        msg = "meta.json: top level must be an object"
        raise MetaDocumentError(msg)

    metadata = _object(document, "Metadata")
    endpoints = _object(document, "Endpoints")

    fields: dict[str, Any] = {
        "name": _typed(document, "Name", str, ""),
        "description": _typed(metadata, "Description", str, ""),
        "stack_orchestrator": _typed(metadata, "StackOrchestrator", str, ""),
    }

    for endpoint in MetaEndpoint:
        if endpoint not in endpoints:
            continue
        settings = _object(endpoints, endpoint)
        fields[f"{endpoint}_host"] = _typed(settings, "Host", str, "")
        fields[f"{endpoint}_skip_verify_tls"] = _typed(settings, "SkipTLSVerify", bool, False)

    return ClientBundleMeta(**fields)
