# Command line front end: flags -> Config -> validate -> (CA) -> server cert
from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from . import config
from .authority import create_private_ca
from .certinfo import describe_certificate, format_summary, verify_issued_by
from .config import Config
from .errors import EasyCertError, UsageError
from .naming import CertPair
from .openssl import OpenSSL
from .server_cert import create_server_cert_key
from .validate import validate_config

logger = logging.getLogger(__name__)

USAGE = """Usage: easycert [options...]

Options:
  -cn      Certificate Authority Name (can be any name, but should reflect your company name.)
  -cakey   Certificate Authority Key File (use existing CA Key file, can not be used with -cn.)
  -cacrt   Certificate Authority Crt File (use existing CA Crt file, can not be used with -cn.)
  -fqdn    Fully qualified domain name of TLS server to install the private cert/key
  -days    Validity of the generated certificates in days (default: {days})
  -hash    Message digest used for signing (default: {digest})
  -ext     Extensions section for the CA certificate (default: {ext})
  -out     Directory the CA and server folders are written to (default: {out})
  -openssl Path to the openssl binary (default: {openssl})
  -verify  Check the server certificate against the CA once it is written
  -v       Verbose logging
"""


def usage_text() -> str:
    days = os.getenv("EASYCERT_DAYS", "").strip() or config.DEFAULT_DAYS
    return USAGE.format(days=days, digest=config.DEFAULT_HASH, ext=config.CA_EXTENSIONS,
                        out=config.OUTPUT_DIR, openssl=config.OPENSSL_BIN)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="easycert", usage=argparse.SUPPRESS, add_help=False, allow_abbrev=False)
    p.add_argument("-cn", dest="ca_name", default="")
    p.add_argument("-cakey", dest="ca_key_file", default="")
    # -cacer is what older scripts pass
    p.add_argument("-cacrt", "-cacer", dest="ca_crt_file", default="")
    p.add_argument("-fqdn", dest="fqdn", default="")
    p.add_argument("-days", dest="days", type=int, default=None)
    p.add_argument("-hash", dest="digest", default=config.DEFAULT_HASH)
    p.add_argument("-ext", dest="ca_extensions", default=config.CA_EXTENSIONS)
    p.add_argument("-out", dest="output_dir", default=config.OUTPUT_DIR)
    p.add_argument("-openssl", dest="openssl_bin", default=config.OPENSSL_BIN)
    p.add_argument("-verify", dest="verify", action="store_true")
    p.add_argument("-v", "--verbose", dest="verbose", action="store_true")
    p.add_argument("-h", "--help", dest="help", action="store_true")
    return p


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        ca_name=args.ca_name.strip(),
        ca_key_file=args.ca_key_file.strip(),
        ca_crt_file=args.ca_crt_file.strip(),
        fqdn=args.fqdn.strip(),
        days=args.days if args.days is not None else config.env_days(),
        digest=args.digest.strip().lstrip("-"),
        ca_extensions=args.ca_extensions.strip(),
        output_dir=args.output_dir,
        openssl_bin=args.openssl_bin,
        verify=args.verify,
    )


def _usage_error(message: str) -> int:
    if message:
        print(message, file=sys.stderr)
        print("", file=sys.stderr)
    print(usage_text(), file=sys.stderr)
    return 1


def run(cfg: Config, signer: OpenSSL) -> CertPair:
    """Issue the server certificate, generating a CA first when none was handed in. Returns the server pair."""
    validate_config(cfg)

    if cfg.has_ca_files:
        ca = CertPair(key_file=cfg.ca_key_file, crt_file=cfg.ca_crt_file)
    else:
        ca = create_private_ca(cfg, signer)
        print(f"Private root certificate created: {ca.crt_file}")
        print(f"Private root key created: {ca.key_file}")

    server = create_server_cert_key(cfg, ca, signer)
    print(f"Web server certificate created: {server.crt_file}")
    print(f"Web server key created: {server.key_file}")

    if cfg.verify:
        verify_issued_by(server.crt_file, ca.crt_file)
        print(format_summary("CA", describe_certificate(ca.crt_file)))
        print(format_summary("Server", describe_certificate(server.crt_file)))
    return server


def main(argv: List[str] | None = None, *, signer: Optional[OpenSSL] = None) -> int:
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    if args.help:
        print(usage_text())
        return 0
    if extra:
        return _usage_error(f"Unknown arguments: {' '.join(extra)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        cfg = config_from_args(args)
        logger.debug("resolved config: %s", cfg)
        if signer is None:
            signer = OpenSSL(cfg.openssl_bin)
        run(cfg, signer)
    except UsageError as e:
        return _usage_error(str(e))
    except EasyCertError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
