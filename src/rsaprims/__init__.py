"""PKCS #1 RSA Primitives in an Academic Sense.

Provides the RFC 3447 data conversion primitives (I2OSP, OS2IP) and the RSA cryptographic primitives (RSAEP, RSADP,
RSASP1, RSAVP1), along with key holders able to import PKCS #1 and PKCS #8 key files to drive them.

Typical usage example:

    pk = RSAPrivKey.import_key(pathlib.Path("rsa_3072"))
    c = rsaep(pk.pub, os2ip(b"Hi there!"))
    r = i2osp(rsadp(pk, c))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from rsaprims.keys import RSAPrivKey
from rsaprims.keys import RSAPubKey
from rsaprims.pkcs1 import i2osp
from rsaprims.pkcs1 import IntegerTooLarge
from rsaprims.pkcs1 import modpow
from rsaprims.pkcs1 import os2ip
from rsaprims.pkcs1 import OutOfRange
from rsaprims.pkcs1 import PKCS1Error
from rsaprims.pkcs1 import PrivateKeyView
from rsaprims.pkcs1 import PublicKeyView
from rsaprims.pkcs1 import rsadp
from rsaprims.pkcs1 import rsaep
from rsaprims.pkcs1 import rsasp1
from rsaprims.pkcs1 import rsavp1

__version__ = "0.1.0"
__all__ = [
    "RSAPrivKey",
    "RSAPubKey",
    "PublicKeyView",
    "PrivateKeyView",
    "PKCS1Error",
    "IntegerTooLarge",
    "OutOfRange",
    "i2osp",
    "os2ip",
    "modpow",
    "rsaep",
    "rsadp",
    "rsasp1",
    "rsavp1",
]
