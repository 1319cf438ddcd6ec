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

from . import Encoder
from ..WordArray import WordArray
from ..Exceptions import DecodeError

class Base64(Encoder):
    """
    Base64 encoding strategy, using the standard alphabet and ``=``
    padding.
    """
    MAP         = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
    PADDING     = "="
    REVERSE_MAP = {c: i for i, c in enumerate(MAP)}

    @staticmethod
    def parse(base64_str):
        """
        Converts a Base64 string to a word array. Decoding stops at
        the first padding character.

        :raises: ``DecodeError`` if a character outside the alphabet occurs before the padding.
        """
        reverse_map = Base64.REVERSE_MAP

        length = base64_str.find(Base64.PADDING)
        if length == -1:
            length = len(base64_str)

        words = [0]*((length*3//4+3)//4)
        n_bytes = 0
        previous = 0
        for i in range(length):
            bits = reverse_map.get(base64_str[i])
            if bits == None:
                raise DecodeError("base64", i)

            if i % 4:
                combined = ((previous << ((i % 4)*2)) | (bits >> (6 - (i % 4)*2))) & 0xFF
                words[n_bytes >> 2] |= combined << (24 - (n_bytes % 4)*8)
                n_bytes += 1

            previous = bits

        return WordArray(words, n_bytes)

    @staticmethod
    def stringify(word_array):
        word_array.clamp()
        data = word_array.to_bytes()
        sig_bytes = len(data)
        base64_map = Base64.MAP

        chars = []
        for i in range(0, sig_bytes, 3):
            chunk = data[i:i+3]
            triplet = int.from_bytes(chunk.ljust(3, b"\x00"), "big")
            for j in range(len(chunk)+1):
                chars.append(base64_map[(triplet >> (6*(3-j))) & 0x3F])

        while len(chars) % 4:
            chars.append(Base64.PADDING)

        return "".join(chars)
