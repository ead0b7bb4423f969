import os

import pytest

from easycert.errors import CommandError
from easycert.openssl import OpenSSL


class FakeRunner:
    """Stands in for call_command: records every argv and touches the files openssl would write."""

    def __init__(self, fail_on: str | None = None):
        self.fail_on = fail_on
        self.calls: list[list[str]] = []

    def __call__(self, program: str, *args: str) -> str:
        argv = [program, *args]
        self.calls.append(argv)
        if self.fail_on is not None and self._step(args) == self.fail_on:
            raise CommandError(argv, 1, "simulated failure")
        if "-out" in args:
            _touch(args[args.index("-out") + 1])
        if "-CAserial" in args:
            _touch(args[args.index("-CAserial") + 1], "01\n")
        return ""

    @staticmethod
    def _step(args) -> str:
        if args[0] == "req":
            return "req -x509" if "-x509" in args else "req -new"
        return args[0]

    @property
    def steps(self) -> list[str]:
        return [self._step(c[1:]) for c in self.calls]


def _touch(path: str, content: str = "fake\n") -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


@pytest.fixture
def runner():
    return FakeRunner()


@pytest.fixture
def signer(runner):
    return OpenSSL("openssl", runner=runner)


@pytest.fixture
def existing_ca(tmp_path):
    folder = tmp_path / "corp_CA"
    folder.mkdir()
    key = folder / "corp_CA.key"
    crt = folder / "corp_CA.crt"
    key.write_text("key\n")
    crt.write_text("crt\n")
    return str(key), str(crt)


@pytest.fixture
def failing():
    """failing("genrsa") -> (runner, signer) where that openssl step exits non-zero."""
    def make(step: str):
        r = FakeRunner(fail_on=step)
        return r, OpenSSL("openssl", runner=r)
    return make
