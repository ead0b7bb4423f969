# Read back what openssl wrote, so -verify can confirm the chain without shelling out again
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime

from cryptography import x509
from cryptography.exceptions import InvalidSignature
from cryptography.x509.oid import NameOID

from .errors import CertificateError


@dataclass
class CertSummary:
    subject_cn: str
    issuer_cn: str
    serial_number: int
    not_after: datetime


def _common_name(name: x509.Name) -> str:
    attrs = name.get_attributes_for_oid(NameOID.COMMON_NAME)
    return str(attrs[0].value) if attrs else ""


def load_certificate(path: str) -> x509.Certificate:
    try:
        with open(path, "rb") as f:
            return x509.load_pem_x509_certificate(f.read())
    except (OSError, ValueError) as e:
        raise CertificateError(f"Could not read certificate {path}: {e}") from e


def describe_certificate(path: str) -> CertSummary:
    cert = load_certificate(path)
    return CertSummary(
        subject_cn=_common_name(cert.subject),
        issuer_cn=_common_name(cert.issuer),
        serial_number=cert.serial_number,
        not_after=cert.not_valid_after_utc,
    )


def verify_issued_by(crt_file: str, ca_crt_file: str) -> None:
    """Raise CertificateError unless crt_file's issuer and signature match the CA at ca_crt_file."""
    cert = load_certificate(crt_file)
    ca_cert = load_certificate(ca_crt_file)
    try:
        cert.verify_directly_issued_by(ca_cert)
    except (ValueError, TypeError, InvalidSignature) as e:
        raise CertificateError(f"{crt_file} was not issued by {ca_crt_file}") from e


def format_summary(label: str, s: CertSummary) -> str:
    return f"{label}: CN={s.subject_cn} issued by CN={s.issuer_cn}, serial {s.serial_number:x}, expires {s.not_after:%Y-%m-%d}"
