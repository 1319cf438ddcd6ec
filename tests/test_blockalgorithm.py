# Tests for WCL.BufferedBlockAlgorithm

import pytest

from WCL.BufferedBlockAlgorithm import BufferedBlockAlgorithm
from WCL.WordArray import WordArray

class RecordingAlgorithm(BufferedBlockAlgorithm):
    block_size = 2

    def __init__(self):
        super().__init__()
        self.offsets = []
        self.blocks = []

    def _do_process_block(self, data, offset):
        self.offsets.append(offset)
        self.blocks.append(data.words[offset:offset+self.block_size])

    def append(self, data):
        self._append(data)

    def process(self, flush=False):
        return self._process(flush)

class BufferingAlgorithm(RecordingAlgorithm):
    min_buffer_size = 1

def test_processes_whole_blocks_in_order():
    alg = RecordingAlgorithm()
    alg.append(WordArray([1, 2, 3, 4, 5]))
    processed = alg.process()

    assert alg.offsets == [0, 2]
    assert alg.blocks == [[1, 2], [3, 4]]
    assert processed.words == [1, 2, 3, 4]
    assert processed.sig_bytes == 16
    assert alg._data.words == [5]
    assert alg._data.sig_bytes == 4

def test_nothing_ready():
    alg = RecordingAlgorithm()
    alg.append(WordArray([1], 3))
    processed = alg.process()

    assert processed.sig_bytes == 0
    assert alg.offsets == []
    assert alg._data.sig_bytes == 3

def test_flush_includes_partial_block():
    alg = RecordingAlgorithm()
    alg.append(WordArray([1, 2, 3], 10))
    processed = alg.process(flush=True)

    assert alg.offsets == [0, 2]
    assert processed.sig_bytes == 10
    assert alg._data.sig_bytes == 0

def test_min_buffer_size():
    alg = BufferingAlgorithm()
    alg.append(WordArray([1, 2, 3, 4, 5, 6]))
    alg.process()
    assert alg.offsets == [0, 2]
    assert alg._data.words == [5, 6]

    alg.process(flush=True)
    assert alg.blocks[-1] == [5, 6]

def test_append_counts_bytes():
    alg = RecordingAlgorithm()
    alg.append("abc")
    alg.append(WordArray([0], 2))
    assert alg._n_data_bytes == 5
    alg.reset()
    assert alg._n_data_bytes == 0
    assert alg._data.sig_bytes == 0
    pytest.raises(TypeError, alg.append, 1234)

def test_append_packs_bytes():
    alg = RecordingAlgorithm()
    alg.append(b"\x01\x02\x03\x04\x05")
    alg.append(bytearray(b"\x06"))
    assert alg._n_data_bytes == 6
    assert alg._data.words == [0x01020304, 0x05060000]

def test_clone_copies_buffer():
    alg = RecordingAlgorithm()
    alg.append(WordArray([1]))
    fork = alg.clone()
    fork.append(WordArray([2]))
    assert alg._data.words == [1]
    assert fork._data.words == [1, 2]

def test_invalid_block_size():
    class Broken(RecordingAlgorithm):
        block_size = 0

    pytest.raises(ValueError, Broken)
