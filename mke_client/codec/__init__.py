"""
Decoders for the client bundle archive and the documents inside it.
"""

from mke_client.codec.archive import ArchiveOutcome, open_archive, walk_archive
from mke_client.codec.client_bundle import decode_client_bundle
from mke_client.codec.kubeconfig import decode_kube_config
from mke_client.codec.meta import decode_meta

__all__ = [
    "ArchiveOutcome",
    "decode_client_bundle",
    "decode_kube_config",
    "decode_meta",
    "open_archive",
    "walk_archive",
]
