from datetime import datetime, timedelta, UTC

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from easycert.certinfo import describe_certificate, format_summary, verify_issued_by
from easycert.errors import CertificateError

# -------- helpers --------

def _key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


def _name(cn: str) -> x509.Name:
    return x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, cn)])


def mk_cert(path, subject_cn, key, *, issuer_cn=None, signing_key=None, serial=1, days=30, ca=False):
    now = datetime.now(UTC)
    cert = (
        x509.CertificateBuilder()
        .subject_name(_name(subject_cn))
        .issuer_name(_name(issuer_cn or subject_cn))
        .public_key(key.public_key())
        .serial_number(serial)
        .not_valid_before(now - timedelta(days=1))
        .not_valid_after(now + timedelta(days=days))
        .add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
        .sign(private_key=signing_key or key, algorithm=hashes.SHA256())
    )
    path.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    return str(path)


@pytest.fixture
def chain(tmp_path):
    ca_key = _key()
    ca_crt = mk_cert(tmp_path / "ca.crt", "Example CA", ca_key, ca=True, days=7300)
    srv = mk_cert(tmp_path / "srv.crt", "www.example.com", _key(), issuer_cn="Example CA",
                  signing_key=ca_key, serial=0x1F, days=365)
    return ca_crt, srv

# -------- tests --------

def test_describe_reads_names_serial_and_expiry(chain):
    _, srv = chain
    s = describe_certificate(srv)
    assert s.subject_cn == "www.example.com"
    assert s.issuer_cn == "Example CA"
    assert s.serial_number == 0x1F
    assert s.not_after > datetime.now(UTC) + timedelta(days=360)


def test_format_summary(chain):
    _, srv = chain
    line = format_summary("Server", describe_certificate(srv))
    assert line.startswith("Server: CN=www.example.com issued by CN=Example CA, serial 1f")


def test_verify_accepts_real_chain(chain):
    ca_crt, srv = chain
    verify_issued_by(srv, ca_crt)


def test_verify_rejects_other_ca(chain, tmp_path):
    _, srv = chain
    other = mk_cert(tmp_path / "other.crt", "Example CA", _key(), ca=True)
    # same issuer name, different key -> signature must not check out
    with pytest.raises(CertificateError, match="was not issued by"):
        verify_issued_by(srv, other)


def test_not_a_certificate(tmp_path):
    bogus = tmp_path / "bogus.crt"
    bogus.write_text("fake\n")
    with pytest.raises(CertificateError, match="Could not read certificate"):
        describe_certificate(str(bogus))
