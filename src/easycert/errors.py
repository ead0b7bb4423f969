from __future__ import annotations
from typing import Optional, Sequence


class EasyCertError(Exception):
    pass


class UsageError(EasyCertError):
    """Bad flag combination or a CA file that isn't on disk. Raised before anything runs."""


class CommandError(EasyCertError):
    def __init__(self, argv: Sequence[str], returncode: Optional[int] = None, stderr: str = ""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr
        if returncode is None:
            msg = f"could not run {self.argv[0]!r}"
        else:
            msg = f"{self.argv[0]!r} exited with status {returncode}"
        super().__init__(msg)


class CertificateError(EasyCertError):
    """One step of building the CA or the server certificate failed."""
