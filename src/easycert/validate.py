# Pre-flight checks on the flag combination. Nothing here touches openssl or writes files.
from __future__ import annotations
import os

from .config import Config
from .errors import UsageError

NO_ARGUMENTS = ""

AMBIGUOUS_CA = (
    "There is no need to supply -cn (certificate authority name) when a -cakey "
    "(certificate authority key file) or -cacrt (certificate authority crt file) is already available"
)
NEED_NAME_AND_FQDN = (
    "You must supply both a -cn (certificate authority name) and -fqdn (fully qualified domain name) parameter"
)
NEED_FILES_AND_FQDN = (
    "You must supply a -cakey (certificate authority key file), -cacrt (certificate authority crt file) "
    "and -fqdn (fully qualified domain name) parameter"
)
MISSING_CA_KEY = "The -cakey (certificate authority key file) can not be found"
MISSING_CA_CRT = "The -cacrt (certificate authority crt file) can not be found"
BAD_DAYS = "The -days (certificate validity) must be at least 1"


def validate_config(config: Config) -> None:
    """
    Raise UsageError unless the config names exactly one CA source and a host.

    Either -cn alone (a new CA gets generated) or the -cakey/-cacrt pair
    (an existing CA is reused), always together with -fqdn.
    An empty message means nothing at all was supplied.
    """
    if not (config.ca_name or config.ca_key_file or config.ca_crt_file or config.fqdn):
        raise UsageError(NO_ARGUMENTS)

    if config.ca_name and config.has_ca_files:
        raise UsageError(AMBIGUOUS_CA)

    if config.days < 1:
        raise UsageError(BAD_DAYS)

    if not config.has_ca_files:
        if not (config.ca_name and config.fqdn):
            raise UsageError(NEED_NAME_AND_FQDN)
        return

    if not (config.ca_key_file and config.ca_crt_file and config.fqdn):
        raise UsageError(NEED_FILES_AND_FQDN)
    if not os.path.exists(config.ca_key_file):
        raise UsageError(MISSING_CA_KEY)
    if not os.path.exists(config.ca_crt_file):
        raise UsageError(MISSING_CA_CRT)
