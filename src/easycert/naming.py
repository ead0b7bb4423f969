from __future__ import annotations
import os
from dataclasses import dataclass

CA_SUFFIX = "_CA"
DIR_MODE = 0o700


# "www.example.com" -> "www_example_com"
def safe_name(identity: str) -> str:
    return (identity or "").replace(".", "_")


def ca_base_name(ca_name: str) -> str:
    return safe_name(ca_name) + CA_SUFFIX


def host_base_name(fqdn: str) -> str:
    return safe_name(fqdn)


@dataclass
class CertPair:
    key_file: str
    crt_file: str


@dataclass
class ServerArtifacts(CertPair):
    req_file: str
    serial_file: str


def ca_paths(output_dir: str, ca_name: str) -> CertPair:
    base = ca_base_name(ca_name)
    folder = os.path.join(output_dir, base)
    return CertPair(
        key_file=os.path.join(folder, base + ".key"),
        crt_file=os.path.join(folder, base + ".crt"),
    )


def server_paths(output_dir: str, fqdn: str) -> ServerArtifacts:
    base = host_base_name(fqdn)
    folder = os.path.join(output_dir, base)
    return ServerArtifacts(
        key_file=os.path.join(folder, base + ".key"),
        crt_file=os.path.join(folder, base + ".crt"),
        req_file=os.path.join(folder, base + ".req"),
        serial_file=os.path.join(folder, "serial"),
    )


def make_output_dir(path: str) -> None:
    """Create the folder holding one key/cert set. Re-runs reuse an existing folder."""
    os.makedirs(path, mode=DIR_MODE, exist_ok=True)
