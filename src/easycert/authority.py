from __future__ import annotations
import logging
import os

from .config import Config
from .errors import CertificateError, CommandError
from .naming import CertPair, ca_paths, make_output_dir
from .openssl import OpenSSL

logger = logging.getLogger(__name__)


def create_private_ca(config: Config, signer: OpenSSL) -> CertPair:
    """
    Generate a fresh CA key and a self-signed CA certificate for config.ca_name.

    Files land in <output_dir>/<name>_CA/. A failed step raises CertificateError;
    whatever the earlier steps wrote is left on disk.
    """
    ca = ca_paths(config.output_dir, config.ca_name)
    try:
        make_output_dir(os.path.dirname(ca.key_file))
    except OSError as e:
        raise CertificateError(f"Could not create Certificate Authority directory: {e}") from e

    logger.info("Generating private Certificate Authority key: %s", ca.key_file)
    try:
        signer.genrsa(ca.key_file)
    except CommandError as e:
        raise CertificateError("Could not create private Certificate Authority key") from e

    logger.info("Self-signing Certificate Authority certificate: %s", ca.crt_file)
    try:
        signer.req_self_signed(
            ca.key_file, ca.crt_file, config.ca_name,
            days=config.days, digest=config.digest, extensions=config.ca_extensions,
        )
    except CommandError as e:
        raise CertificateError("Could not create private Certificate Authority certificate") from e

    return ca
