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
from abc import ABC, abstractmethod

from .WordArray import WordArray

class BufferedBlockAlgorithm(ABC):
    """
    Abstract buffered block algorithm. Data is accumulated in an
    internal :ref:`WordArray<api-wordarray>` and released to
    :func:`_do_process_block` one whole block at a time.

    Concrete subclasses must define ``block_size``, the number of
    32-bit words in one block, and may override ``min_buffer_size``,
    the number of ready blocks to keep unprocessed in the buffer.
    """
    block_size      = None
    min_buffer_size = 0

    def __init__(self):
        if self.block_size == None or self.block_size <= 0:
            raise ValueError("Invalid block size "+str(self.block_size)+" for "+type(self).__name__)

        self.block_size_bytes = self.block_size*4
        self._data = WordArray()
        self._n_data_bytes = 0

    @abstractmethod
    def _do_process_block(self, data, offset):
        raise NotImplementedError()

    def reset(self):
        self._data = WordArray()
        self._n_data_bytes = 0

    def _append(self, data):
        if isinstance(data, str):
            from .Encoders import UTF8
            data = UTF8.parse(data)
        elif not isinstance(data, WordArray):
            data = WordArray.create(data)

        self._data.concat(data)
        self._n_data_bytes += data.sig_bytes

    def _process(self, flush=False):
        """
        Processes all ready blocks in the buffer, in the order they
        were appended.

        :param flush: If ``True``, partial trailing blocks are processed as well.
        :returns: A new :ref:`WordArray<api-wordarray>` with the processed words.
        """
        data = self._data
        data_sig_bytes = data.sig_bytes
        block_size = self.block_size
        block_size_bytes = self.block_size_bytes

        if flush:
            n_blocks_ready = -(-data_sig_bytes // block_size_bytes)
        else:
            n_blocks_ready = max(data_sig_bytes // block_size_bytes - self.min_buffer_size, 0)

        n_words_ready = n_blocks_ready*block_size
        n_bytes_ready = min(n_words_ready*4, data_sig_bytes)

        if n_words_ready == 0:
            return WordArray()

        for offset in range(0, n_words_ready, block_size):
            self._do_process_block(data, offset)

        processed_words = data.words[:n_words_ready]
        del data.words[:n_words_ready]
        data.sig_bytes -= n_bytes_ready

        return WordArray(processed_words, n_bytes_ready)

    def clone(self):
        """
        :returns: A deep copy of this algorithm instance, including any buffered data.
        """
        return copy.deepcopy(self)
