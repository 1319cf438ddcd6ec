# MIT License
#
# Copyright (c) 2017 Thomas Dixon
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

from math import isqrt

from ..Hasher import Hasher
from ..WordArray import WordArray

_k = (0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
      0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
      0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
      0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
      0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
      0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
      0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
      0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
      0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
      0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
      0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
      0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
      0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
      0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
      0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
      0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2)

_h = (0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
      0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19)

def _icbrt(n):
    # Integer cube root, floor(n ** (1/3)) without floating point
    x = 1 << ((n.bit_length()+2)//3)
    while True:
        y = (2*x + n//(x*x))//3
        if y >= x: break
        x = y
    while x*x*x > n: x -= 1
    while (x+1)*(x+1)*(x+1) <= n: x += 1
    return x

def _primes(count):
    primes = []
    n = 2
    while len(primes) < count:
        if all(n % p for p in primes if p*p <= n):
            primes.append(n)
        n += 1
    return primes

def derive_constants():
    """
    Derives the SHA-256 initial hash values and round constants from
    the fractional parts of the square and cube roots of the first
    primes, using exact integer arithmetic.

    :returns: A tuple of ``(H, K)`` where H has 8 words and K has 64.
    """
    primes = _primes(64)
    h = tuple(isqrt(p << 64) & 0xFFFFFFFF for p in primes[:8])
    k = tuple(_icbrt(p << 96) & 0xFFFFFFFF for p in primes)
    return h, k

def _rotr(x, y):
    return ((x >> y) | (x << (32-y))) & 0xFFFFFFFF


class SHA256(Hasher):
    """
    SHA-256 hash algorithm, operating on 512-bit blocks and producing
    a 256-bit digest.
    """
    block_size  = 512//32
    digest_size = 32

    def _do_reset(self):
        self._hash = WordArray(_h)

    def _do_process_block(self, m, offset):
        w = m.words[offset:offset+16]
        if len(w) < 16: w.extend([0]*(16-len(w)))
        w.extend([0]*48)

        for i in range(16, 64):
            s0 = _rotr(w[i-15], 7) ^ _rotr(w[i-15], 18) ^ (w[i-15] >> 3)
            s1 = _rotr(w[i-2], 17) ^ _rotr(w[i-2], 19) ^ (w[i-2] >> 10)
            w[i] = (w[i-16] + s0 + w[i-7] + s1) & 0xFFFFFFFF

        h_words = self._hash.words
        a, b, c, d, e, f, g, h = h_words

        for i in range(64):
            s0 = _rotr(a, 2) ^ _rotr(a, 13) ^ _rotr(a, 22)
            maj = (a & b) ^ (a & c) ^ (b & c)
            t2 = s0 + maj
            s1 = _rotr(e, 6) ^ _rotr(e, 11) ^ _rotr(e, 25)
            ch = (e & f) ^ ((~e) & g)
            t1 = h + s1 + ch + _k[i] + w[i]

            h = g
            g = f
            f = e
            e = (d + t1) & 0xFFFFFFFF
            d = c
            c = b
            b = a
            a = (t1 + t2) & 0xFFFFFFFF

        for i, x in enumerate((a, b, c, d, e, f, g, h)):
            h_words[i] = (h_words[i] + x) & 0xFFFFFFFF

    def _do_finalize(self):
        data = self._data
        data.clamp()
        data_words = data.words

        n_bits_total = self._n_data_bytes*8
        n_bits_left = data.sig_bytes*8

        # Padding bit, then the 64-bit message length in the
        # last two words of the final block
        length_index = (((n_bits_left + 64) >> 9) << 4) + 15
        data_words.extend([0]*(length_index+1-len(data_words)))
        data_words[n_bits_left >> 5] |= 0x80 << (24 - (n_bits_left % 32))
        data_words[length_index-1] = (n_bits_total >> 32) & 0xFFFFFFFF
        data_words[length_index] = n_bits_total & 0xFFFFFFFF
        data.sig_bytes = len(data_words)*4

        self._process(flush=True)

        return self._hash
