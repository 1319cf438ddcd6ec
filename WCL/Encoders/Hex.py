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

class Hex(Encoder):
    """
    Hex encoding strategy. Bytes are written as two lowercase hex
    digits each, most significant nibble first.
    """
    VALUES = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}

    @staticmethod
    def parse(hex_str):
        """
        Converts a hex string to a word array. Upper and lower case
        digits are accepted, and a trailing unpaired digit is ignored.

        :raises: ``DecodeError`` if the string contains a non-hex character.
        """
        values = Hex.VALUES
        n_bytes = len(hex_str)//2
        words = [0]*((n_bytes+3)//4)
        for i in range(n_bytes*2):
            nibble = values.get(hex_str[i])
            if nibble == None:
                raise DecodeError("hex", i)

            words[i >> 3] |= nibble << (28 - (i % 8)*4)

        return WordArray(words, n_bytes)

    @staticmethod
    def stringify(word_array):
        return word_array.to_bytes().hex()
