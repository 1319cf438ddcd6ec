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

import enum
import WCL
from abc import abstractmethod

from .BufferedBlockAlgorithm import BufferedBlockAlgorithm
from .Exceptions import LifecycleError

class HasherState(enum.IntEnum):
    """
    Lifecycle states of a hasher
    """
    FRESH        = 0x00
    ACCUMULATING = 0x01
    FINALIZED    = 0x02


class Hasher(BufferedBlockAlgorithm):
    """
    Abstract hasher template. Concrete hashers implement
    :func:`_do_reset`, :func:`_do_process_block` and :func:`_do_finalize`.

    A hasher moves from ``FRESH`` to ``ACCUMULATING`` on :func:`update`
    and to ``FINALIZED`` on :func:`finalize`. A finalized hasher only
    accepts :func:`reset`, which returns it to ``FRESH``.
    """
    block_size  = 512//32
    digest_size = None

    def __init__(self):
        super().__init__()
        self._hash = None
        self.state = HasherState.FRESH
        self.reset()

    @classmethod
    def create(cls):
        return cls()

    @abstractmethod
    def _do_reset(self):
        raise NotImplementedError()

    @abstractmethod
    def _do_finalize(self):
        raise NotImplementedError()

    def _require_open(self, operation):
        if self.state == HasherState.FINALIZED:
            WCL.log("Attempt to "+operation+" a finalized "+type(self).__name__+" hasher without resetting it", WCL.LOG_ERROR)
            raise LifecycleError(self.state, "Cannot "+operation+" a finalized hasher, call reset() first")

    def reset(self):
        """
        Resets the hasher to its initial state. This is valid from any
        state, and is the only way to reuse a finalized hasher.
        """
        super().reset()
        self._do_reset()
        self.state = HasherState.FRESH

    def update(self, message_update):
        """
        Updates the hasher with a message. Strings are UTF-8 encoded,
        bytes-like objects are packed as they are.

        :param message_update: The message to append, as str, bytes or :ref:`WordArray<api-wordarray>`.
        :returns: The hasher itself, not a copy. Chained calls keep mutating the same instance.
        :raises: ``LifecycleError`` if the hasher has already been finalized.
        """
        self._require_open("update")
        self._append(message_update)
        self._process()
        self.state = HasherState.ACCUMULATING

        return self

    def finalize(self, message_update=None):
        """
        Finalizes the hash computation. This is a destructive, read-once
        operation; the hasher must be reset before it can be used again.

        :param message_update: Optional final message to append.
        :returns: The digest as a new, independent :ref:`WordArray<api-wordarray>`.
        :raises: ``LifecycleError`` if the hasher has already been finalized.
        """
        self._require_open("finalize")
        if message_update != None:
            self._append(message_update)

        digest = self._do_finalize()
        self.state = HasherState.FINALIZED

        return digest.clone()

    @staticmethod
    def create_helper(hasher_class):
        """
        Creates a shortcut function that hashes a complete message
        in one call.

        :param hasher_class: The concrete hasher class to use.
        :returns: A function taking a message and returning the digest.
        """
        def helper(message):
            return hasher_class.create().finalize(message)

        helper.__name__ = hasher_class.__name__
        return helper

    @staticmethod
    def create_hmac_helper(hasher_class):
        """
        Creates a shortcut function that computes an HMAC over a
        complete message in one call.

        :param hasher_class: The concrete hasher class to use.
        :returns: A function taking a message and a key and returning the MAC.
        """
        from .Algorithms.HMAC import HMAC
        def helper(message, key):
            return HMAC.create(hasher_class, key).finalize(message)

        helper.__name__ = "Hmac"+hasher_class.__name__
        return helper
