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

import os
import WCL

class WordArray:
    """
    A mutable array of 32-bit words, holding bytes packed big-endian
    into each word. Only the first ``sig_bytes`` bytes are meaningful,
    any bits beyond that in the last word are undefined until the
    array is clamped.

    Instances are exclusively owned. Operations that mutate an array
    (:func:`concat` and :func:`clamp`) act on the receiver in place;
    use :func:`clone` whenever an independent copy is needed.
    """
    WORD_MASK = 0xFFFFFFFF

    def __init__(self, words=None, sig_bytes=None):
        if words == None:
            words = []

        self.words = [w & WordArray.WORD_MASK for w in words]

        if sig_bytes == None:
            self.sig_bytes = len(self.words)*4
        else:
            if sig_bytes < 0: raise ValueError("Significant byte count cannot be negative")
            self.sig_bytes = sig_bytes

    @staticmethod
    def create(words=None, sig_bytes=None):
        """
        Creates a word array from either a sequence of 32-bit words or
        any raw byte source, such as ``bytes``, ``bytearray``, ``memoryview``
        or an ``array.array``.

        :param words: A list or tuple of words, or a raw byte source.
        :param sig_bytes: Number of significant bytes when creating from words. Defaults to four bytes per word.
        :returns: A new :ref:`WordArray<api-wordarray>` instance.
        """
        if words == None:
            return WordArray([], sig_bytes if sig_bytes != None else 0)

        if isinstance(words, WordArray):
            return words.clone()

        if isinstance(words, (list, tuple)):
            return WordArray(words, sig_bytes)

        if isinstance(words, str):
            raise TypeError("Cannot create a word array directly from str, use an encoder to parse text")

        try:
            raw = memoryview(words).cast("B")
        except TypeError:
            raise TypeError(f"Cannot create a word array from {type(words).__name__}")

        return WordArray.from_bytes(bytes(raw))

    @staticmethod
    def from_bytes(data):
        length = len(data)
        words = [0]*((length+3)//4)
        for i in range(length):
            words[i >> 2] |= data[i] << (24 - (i % 4)*8)

        return WordArray(words, length)

    @staticmethod
    def random(n_bytes):
        """
        Creates a word array filled with bytes from the platform CSPRNG.

        :param n_bytes: Number of random bytes.
        """
        if n_bytes < 0: raise ValueError("Cannot generate a negative number of random bytes")
        WCL.log("Generating random word array of "+str(n_bytes)+" bytes", WCL.LOG_EXTREME)
        return WordArray.from_bytes(os.urandom(n_bytes))

    def clone(self):
        return WordArray(list(self.words), self.sig_bytes)

    def clamp(self):
        """
        Zeroes all bits beyond the significant bytes and trims the word
        list to exactly the number of words needed to hold them.
        """
        words = self.words
        sig_bytes = self.sig_bytes
        n_words = (sig_bytes+3)//4

        if len(words) < n_words:
            words.extend([0]*(n_words-len(words)))

        if sig_bytes % 4:
            words[sig_bytes >> 2] &= (WordArray.WORD_MASK << (32 - (sig_bytes % 4)*8)) & WordArray.WORD_MASK

        del words[n_words:]

    def concat(self, word_array):
        """
        Appends the significant bytes of another word array to this
        one. The receiver is mutated in place.

        :param word_array: The :ref:`WordArray<api-wordarray>` to append.
        :returns: This word array, *not* a copy of it.
        """
        if word_array is self or len(word_array.words)*4 < word_array.sig_bytes:
            word_array = word_array.clone()
            word_array.clamp()

        that_words = word_array.words
        that_sig_bytes = word_array.sig_bytes

        self.clamp()
        this_words = self.words
        this_sig_bytes = self.sig_bytes

        total_words = (this_sig_bytes+that_sig_bytes+3)//4
        if len(this_words) < total_words:
            this_words.extend([0]*(total_words-len(this_words)))

        if this_sig_bytes % 4:
            # Unaligned, copy one byte at a time
            for i in range(that_sig_bytes):
                that_byte = (that_words[i >> 2] >> (24 - (i % 4)*8)) & 0xFF
                this_words[(this_sig_bytes+i) >> 2] |= that_byte << (24 - ((this_sig_bytes+i) % 4)*8)
        else:
            for i in range(0, that_sig_bytes, 4):
                this_words[(this_sig_bytes+i) >> 2] = that_words[i >> 2]

        self.sig_bytes += that_sig_bytes
        return self

    def to_bytes(self):
        words = self.words
        return bytes((words[i >> 2] >> (24 - (i % 4)*8)) & 0xFF if (i >> 2) < len(words) else 0 for i in range(self.sig_bytes))

    def to_string(self, encoder=None):
        """
        :param encoder: Encoder to stringify with. Defaults to ``WCL.Encoders.Hex``.
        """
        if encoder == None:
            from .Encoders import Hex
            encoder = Hex

        return encoder.stringify(self)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return "<WordArray "+str(self.sig_bytes)+" bytes: "+self.to_string()+">"

    def __len__(self):
        return self.sig_bytes

    def __eq__(self, other):
        if not isinstance(other, WordArray):
            return NotImplemented
        return self.sig_bytes == other.sig_bytes and self.to_bytes() == other.to_bytes()

    __hash__ = None
