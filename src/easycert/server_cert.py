from __future__ import annotations
import logging
import os

from .config import Config
from .errors import CertificateError, CommandError
from .naming import CertPair, ServerArtifacts, make_output_dir, server_paths
from .openssl import OpenSSL

logger = logging.getLogger(__name__)


def create_server_cert_key(config: Config, ca: CertPair, signer: OpenSSL) -> ServerArtifacts:
    """Key -> signing request -> CA-signed certificate for config.fqdn. Stops at the first failing step."""
    out = server_paths(config.output_dir, config.fqdn)
    try:
        make_output_dir(os.path.dirname(out.key_file))
    except OSError as e:
        raise CertificateError(f"Could not create server directory: {e}") from e

    logger.info("Generating private server key: %s", out.key_file)
    try:
        signer.genrsa(out.key_file)
    except CommandError as e:
        raise CertificateError("Could not create private server key") from e

    logger.info("Generating certificate signing request: %s", out.req_file)
    try:
        signer.req_new(out.key_file, out.req_file, config.fqdn)
    except CommandError as e:
        raise CertificateError("Could not create private server certificate signing request") from e

    # serial lives next to the host files, so every host starts its own sequence
    logger.info("Signing server certificate with %s", ca.crt_file)
    try:
        signer.x509_sign(
            out.req_file, out.crt_file, ca.key_file, ca.crt_file, out.serial_file,
            days=config.days, digest=config.digest,
        )
    except CommandError as e:
        raise CertificateError("Could not create private server certificate") from e

    return out
