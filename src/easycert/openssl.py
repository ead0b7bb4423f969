# Thin wrapper that turns each certificate step into an openssl command line.
from __future__ import annotations
from typing import Callable, List

from .config import KEY_BITS, OPENSSL_BIN
from .runner import call_command

Runner = Callable[..., str]


class OpenSSL:
    def __init__(self, binary: str = OPENSSL_BIN, *, runner: Runner = call_command):
        self.binary = binary
        self._runner = runner

    def _run(self, args: List[str]) -> str:
        return self._runner(self.binary, *args)

    def genrsa(self, key_file: str, bits: int = KEY_BITS) -> str:
        return self._run(["genrsa", "-out", key_file, str(bits)])

    def req_self_signed(self, key_file: str, crt_file: str, subject_cn: str, *, days: int,
                        digest: str, extensions: str) -> str:
        """Self-signed certificate straight from a key, used for the CA root."""
        args = ["req", "-x509", "-new", "-key", key_file, "-out", crt_file, "-days", str(days)]
        if digest:
            args.append("-" + digest)
        if extensions:
            args += ["-extensions", extensions]
        args += ["-subj", "/CN=" + subject_cn]
        return self._run(args)

    def req_new(self, key_file: str, req_file: str, subject_cn: str) -> str:
        return self._run(["req", "-new", "-out", req_file, "-key", key_file, "-subj", "/CN=" + subject_cn])

    def x509_sign(self, req_file: str, crt_file: str, ca_key_file: str, ca_crt_file: str,
                  serial_file: str, *, days: int, digest: str) -> str:
        args = ["x509", "-req", "-in", req_file, "-out", crt_file,
                "-CAkey", ca_key_file, "-CA", ca_crt_file, "-days", str(days)]
        if digest:
            args.append("-" + digest)
        # -CAcreateserial only kicks in when the serial file doesn't exist yet
        args += ["-CAcreateserial", "-CAserial", serial_file]
        return self._run(args)
