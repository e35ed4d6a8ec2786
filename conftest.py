"""Configures pytest further and provides the shared reference keys."""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import functools
import typing

from cryptography.hazmat.primitives.asymmetric import rsa
import pytest

# Larger moduli are only generated on request.
KEY_SIZES = [
    1024,
    2048,
    pytest.param(3072, marks=pytest.mark.slow, id="3072"),
    pytest.param(4096, marks=pytest.mark.extreme, id="4096"),
]


class ToyKey(typing.NamedTuple):
    """Bare (n, e, d) triple standing in for any foreign key representation."""
    n: int
    e: int
    d: int

    def public_pair(self) -> tuple[int, int]:
        return self.n, self.e

    def private_pair(self) -> tuple[int, int]:
        return self.n, self.d


# n = 61 * 53, the classic textbook example.
TOY_KEY = ToyKey(3233, 17, 2753)


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests and larger keys")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run tests on the largest keys")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


@functools.cache
def reference_key(size: int) -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=size)


@pytest.fixture(scope="session", params=KEY_SIZES)
def refkey(request) -> rsa.RSAPrivateKey:
    return reference_key(request.param)


@pytest.fixture(scope="session")
def toy_key() -> ToyKey:
    return TOY_KEY
