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

import copy
import WCL

from ..WordArray import WordArray

class HMAC:
    """
    Keyed-hash message authentication code, as specified in RFC 2104,
    wrapping any concrete :ref:`Hasher<api-hasher>`.

    Like the hasher it wraps, :func:`finalize` is destructive. The
    instance can be reused for another message under the same key by
    calling :func:`reset`.
    """
    OPAD = 0x5c5c5c5c
    IPAD = 0x36363636

    def __init__(self, hasher, key):
        self._hasher = hasher

        hasher_block_size = hasher.block_size
        hasher_block_size_bytes = hasher_block_size*4

        if key.sig_bytes > hasher_block_size_bytes:
            WCL.log("HMAC key of "+str(key.sig_bytes)+" bytes exceeds block size, compressing key", WCL.LOG_DEBUG)
            hasher.reset()
            key = hasher.finalize(key)
        else:
            key = key.clone()

        key.clamp()

        o_key = key.clone()
        i_key = key.clone()
        missing = hasher_block_size - len(key.words)
        if missing > 0:
            o_key.words.extend([0]*missing)
            i_key.words.extend([0]*missing)

        for i in range(hasher_block_size):
            o_key.words[i] ^= HMAC.OPAD
            i_key.words[i] ^= HMAC.IPAD

        o_key.sig_bytes = hasher_block_size_bytes
        i_key.sig_bytes = hasher_block_size_bytes

        self._o_key = o_key
        self._i_key = i_key

        self.reset()

    @staticmethod
    def create(hasher_class, key):
        """
        Creates an HMAC instance for a hasher class and a secret key.

        :param hasher_class: A concrete hasher class, such as ``WCL.Algorithms.SHA256``.
        :param key: The secret key, as str (UTF-8 encoded), bytes or :ref:`WordArray<api-wordarray>`.
        """
        if isinstance(key, str):
            from ..Encoders import UTF8
            key = UTF8.parse(key)
        elif not isinstance(key, WordArray):
            key = WordArray.create(key)

        return HMAC(hasher_class.create(), key)

    @property
    def state(self):
        return self._hasher.state

    def reset(self):
        """
        Resets the HMAC to its initial state, ready to process a new
        message under the same key.
        """
        self._hasher.reset()
        self._hasher.update(self._i_key)

    def update(self, message_update):
        """
        :param message_update: The message to append, as str or :ref:`WordArray<api-wordarray>`.
        :returns: This HMAC instance.
        """
        self._hasher.update(message_update)
        return self

    def finalize(self, message_update=None):
        """
        Finalizes the HMAC computation. This is a destructive, read-once
        operation.

        :param message_update: Optional final message to append.
        :returns: The MAC as a new :ref:`WordArray<api-wordarray>`.
        """
        hasher = self._hasher
        inner_hash = hasher.finalize(message_update)
        hasher.reset()

        return hasher.finalize(self._o_key.clone().concat(inner_hash))

    def clone(self):
        return copy.deepcopy(self)
