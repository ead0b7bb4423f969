# Defaults for one easycert run: .env / environment first, command line flags on top
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

from .errors import UsageError

# usecwd: look for .env next to where the command runs, not next to the installed package
load_dotenv(find_dotenv(usecwd=True), override=False)

OPENSSL_BIN  = os.getenv("EASYCERT_OPENSSL", "openssl")
DEFAULT_HASH = os.getenv("EASYCERT_HASH", "sha256")
OUTPUT_DIR   = os.getenv("EASYCERT_OUTPUT_DIR", ".")

DEFAULT_DAYS = 7300
CA_EXTENSIONS = "v3_ca"
KEY_BITS = 2048


def env_days() -> int:
    """EASYCERT_DAYS as an int, DEFAULT_DAYS when unset. Read per call so a bad value surfaces as a UsageError."""
    raw = os.getenv("EASYCERT_DAYS", "").strip()
    if not raw:
        return DEFAULT_DAYS
    try:
        return int(raw)
    except ValueError:
        raise UsageError(f"EASYCERT_DAYS must be a whole number of days, got {raw!r}") from None


@dataclass(frozen=True)
class Config:
    """Everything one run needs, filled once from the command line."""
    ca_name: str = ""
    ca_key_file: str = ""
    ca_crt_file: str = ""
    fqdn: str = ""
    days: int = DEFAULT_DAYS
    digest: str = DEFAULT_HASH
    ca_extensions: str = CA_EXTENSIONS
    output_dir: str = OUTPUT_DIR
    openssl_bin: str = OPENSSL_BIN
    verify: bool = False

    @property
    def has_ca_files(self) -> bool:
        return bool(self.ca_key_file or self.ca_crt_file)
