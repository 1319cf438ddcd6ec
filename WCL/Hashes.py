# Reticulum License
#
# Copyright (c) 2016-2025 Mark Qvist
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# - The Software shall not be used in any kind of system which includes amongst
#   its functions the ability to purposefully do harm to human beings.
#
# - The Software shall not be used, directly or indirectly, in the creation of
#   an artificial intelligence, machine learning or language model training
#   dataset, including but not limited to any use that contributes to the
#   training or development of such a model or algorithm.
#
# - The above copyright notice and this permission notice shall be included in
#   all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

import WCL
import WCL.Provider as cp

from .WordArray import WordArray
from .Algorithms.SHA256 import SHA256
from .Algorithms.HMAC import HMAC

if cp.PROVIDER == cp.PROVIDER_PYCA:
    from cryptography.hazmat.primitives import hashes as pyca_hashes
    from cryptography.hazmat.primitives import hmac as pyca_hmac

"""
One-shot bytes interface to the hash primitives. Calls are routed
to the selected provider, which is either the internal word array
implementation or OpenSSL through PyCA. Both produce identical
output; the internal implementation is always used when
``WCL.Provider.FORCE_INTERNAL`` is set or PyCA is unavailable.
"""

def _as_bytes(data, name):
    if isinstance(data, WordArray): return data.to_bytes()
    elif isinstance(data, str): return data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)): return bytes(data)
    else: raise TypeError(f"{name} must be bytes, str or WordArray, not {type(data).__name__}")

_announced = False

def _use_pyca():
    global _announced
    if not _announced:
        _announced = True
        WCL.log("Hash primitives provided by "+cp.backend(), WCL.LOG_DEBUG)

    return cp.PROVIDER == cp.PROVIDER_PYCA and not cp.FORCE_INTERNAL

def sha256(data):
    data = _as_bytes(data, "Data")
    if _use_pyca():
        digest = pyca_hashes.Hash(pyca_hashes.SHA256())
        digest.update(data)
        return digest.finalize()

    else:
        return SHA256.create().finalize(WordArray.from_bytes(data)).to_bytes()

def hmac_sha256(key, data):
    key = _as_bytes(key, "Key")
    data = _as_bytes(data, "Data")
    if _use_pyca():
        mac = pyca_hmac.HMAC(key, pyca_hashes.SHA256())
        mac.update(data)
        return mac.finalize()

    else:
        return HMAC.create(SHA256, WordArray.from_bytes(key)).finalize(WordArray.from_bytes(data)).to_bytes()
