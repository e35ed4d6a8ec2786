"""Provides the PKCS #1 data conversion and RSA cryptographic primitives.

Implements the primitives of RFC 3447 sections 4 and 5 (PKCS #1 v2.1): I2OSP and OS2IP for moving between integers and
octet strings, as well as RSAEP, RSADP, RSASP1 and RSAVP1. These are the raw "textbook" building blocks, no padding,
hashing or blinding takes place here.

Typical usage example:

    m = os2ip(b"Hi there!")
    c = rsaep(pub, m)
    blob = i2osp(c, pub.bsize)
    r = i2osp(rsadp(priv, os2ip(blob)))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import typing

logger = logging.getLogger(__name__)

ModPow = typing.Callable[[int, int, int], int]

# How `i2osp` treats the integer 0 when no length was requested.
ZERO_POLICIES = {
    "empty": b"",
    "octet": b"\x00",
    "strict": None,
}


class PKCS1Error(ValueError):
    """Base for the errors raised by the PKCS #1 primitives."""


class IntegerTooLarge(PKCS1Error):
    """The integer cannot be represented as an octet string of the requested length.

    Attributes:
        length: The requested length in bytes.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Integer too large for a {length} byte octet string")


class OutOfRange(PKCS1Error):
    """A representative handed to an RSA primitive is not in range [0, n-1].

    Attributes:
        representative: Which representative was rejected (message, ciphertext or signature).
        operation: The primitive that rejected it.
    """

    def __init__(self, representative: str, operation: str) -> None:
        self.representative = representative
        self.operation = operation
        super().__init__(f"{representative.capitalize()} representative out of range for {operation}")


@typing.runtime_checkable
class PublicKeyView(typing.Protocol):
    """Anything able to hand out a public key as a (modulus, public exponent) pair."""

    def public_pair(self) -> tuple[int, int]:
        ...


@typing.runtime_checkable
class PrivateKeyView(typing.Protocol):
    """Anything able to hand out a private key as a (modulus, private exponent) pair."""

    def private_pair(self) -> tuple[int, int]:
        ...


def modpow(base: int, exponent: int, modulus: int) -> int:
    """Computes `base` to the power of `exponent`, modulo `modulus`.

    The default exponentiation used by the RSA primitives. Replaceable per call via their `modpow` argument.

    Args:
        base: Nonnegative base.
        exponent: Nonnegative exponent.
        modulus: Positive modulus.

    Returns:
        The nonnegative residue.
    """
    return pow(base, exponent, modulus)


def i2osp(x: int, length: int | None = None, zero: str = "empty") -> bytes:
    """Converts a nonnegative integer into an octet string. (I2OSP, RFC 3447 section 4.1)

    With a `length`, the result is left-padded with zero bytes to exactly that many bytes. Without one, the minimal
    big-endian encoding is returned.

    Examples:
        i2osp(9_202_000, 2) -> IntegerTooLarge
        i2osp(9_202_000, 3) -> b"\\x8c\\x69\\x50"
        i2osp(9_202_000, 4) -> b"\\x00\\x8c\\x69\\x50"

    Args:
        x: The nonnegative integer to convert.
        length: Intended length of the octet string. Optional.
        zero: How to encode 0 when `length` is omitted, one of `ZERO_POLICIES`.
            "empty" yields b"", "octet" yields b"\\x00" and "strict" refuses. Defaults to "empty".

    Returns:
        The octet string representing `x`.

    Raises:
        IntegerTooLarge: If `x` >= 256**`length`.
        ValueError: If `x` or `length` is negative, or zero cannot be encoded under the `zero` policy.
    """
    if zero not in ZERO_POLICIES:
        raise ValueError(f"Unknown zero encoding policy: {zero}")
    if x < 0:
        raise ValueError("Integer must be nonnegative")
    if length is None:
        if x == 0:
            if ZERO_POLICIES[zero] is None:
                raise ValueError("An explicit length is required to encode zero")
            return ZERO_POLICIES[zero]
        length = (x.bit_length() + 7) // 8
    elif length < 0:
        raise ValueError("Length must be nonnegative")
    elif x >> (8 * length):
        logger.debug("Refusing to encode a %d bit integer into %d bytes", x.bit_length(), length)
        raise IntegerTooLarge(length)
    return x.to_bytes(length, byteorder="big", signed=False)


def os2ip(octets: bytes) -> int:
    """Converts an octet string into a nonnegative integer. (OS2IP, RFC 3447 section 4.2)

    Example:
        os2ip(b"\\x8c\\x69\\x50") -> 9_202_000

    Args:
        octets: The bytes to convert, most significant first. May be empty.

    Returns:
        The representative integer.
    """
    return int.from_bytes(octets, byteorder="big", signed=False)


def _apply(pair: tuple[int, int], rep: int, name: str, operation: str, exp_fn: ModPow) -> int:
    mod, expo = pair
    if not 0 <= rep < mod:
        logger.debug("%s rejected a %s representative outside [0, n-1]", operation, name)
        raise OutOfRange(name, operation)
    return exp_fn(rep, expo, mod)


def rsaep(key: PublicKeyView, m: int, *, modpow: ModPow = modpow) -> int:
    """Produces a ciphertext representative from a message representative. (RSAEP, RFC 3447 section 5.1.1)

    Args:
        key: RSA public key (n, e).
        m: Message representative, between 0 and n-1.
        modpow: Modular exponentiation to use.

    Returns:
        The ciphertext representative c = m^e mod n.

    Raises:
        OutOfRange: If `m` is not between 0 and n-1.
    """
    return _apply(key.public_pair(), m, "message", "RSAEP", modpow)


def rsadp(key: PrivateKeyView, c: int, *, modpow: ModPow = modpow) -> int:
    """Recovers the message representative from a ciphertext representative. (RSADP, RFC 3447 section 5.1.2)

    Args:
        key: RSA private key (n, d).
        c: Ciphertext representative, between 0 and n-1.
        modpow: Modular exponentiation to use.

    Returns:
        The message representative m = c^d mod n.

    Raises:
        OutOfRange: If `c` is not between 0 and n-1.
    """
    return _apply(key.private_pair(), c, "ciphertext", "RSADP", modpow)


def rsasp1(key: PrivateKeyView, m: int, *, modpow: ModPow = modpow) -> int:
    """Produces a signature representative from a message representative. (RSASP1, RFC 3447 section 5.2.1)

    Args:
        key: RSA private key (n, d).
        m: Message representative, between 0 and n-1.
        modpow: Modular exponentiation to use.

    Returns:
        The signature representative s = m^d mod n.

    Raises:
        OutOfRange: If `m` is not between 0 and n-1.
    """
    return _apply(key.private_pair(), m, "message", "RSASP1", modpow)


def rsavp1(key: PublicKeyView, s: int, *, modpow: ModPow = modpow) -> int:
    """Recovers the message representative from a signature representative. (RSAVP1, RFC 3447 section 5.2.2)

    Args:
        key: RSA public key (n, e).
        s: Signature representative, between 0 and n-1.
        modpow: Modular exponentiation to use.

    Returns:
        The message representative m = s^e mod n.

    Raises:
        OutOfRange: If `s` is not between 0 and n-1.
    """
    return _apply(key.public_pair(), s, "signature", "RSAVP1", modpow)
