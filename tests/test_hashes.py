import hashlib
import random
import os
import unittest

import WCL
from WCL.Algorithms import SHA256
from WCL.Algorithms.SHA256 import derive_constants, _h, _k
from WCL.Encoders import Hex, Latin1
from WCL.WordArray import WordArray
from WCL.Hasher import HasherState

class TestSHA256(unittest.TestCase):
    def setUp(self):
        self.f = lambda m: SHA256.create().finalize(m).to_string()

    def test_empty(self):
        self.assertEqual(
            self.f(""),
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855")

    def test_less_than_block_length(self):
        self.assertEqual(
            self.f("abc"),
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")

    def test_two_block_message(self):
        self.assertEqual(
            self.f("abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"),
            "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1")

    def test_block_length(self):
        self.assertEqual(
            self.f("a"*64),
            "ffe054fe7ae0cb6dc65c3af9b61d5209f439851db43d0ba5997337df154668eb")

    def test_several_blocks(self):
        self.assertEqual(
            self.f("a"*1000000),
            "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0")

    def test_padding_boundaries(self):
        # 55 bytes fits the length in the same block, 56 needs an extra block
        for length in [0, 1, 3, 4, 5, 54, 55, 56, 57, 63, 64, 65, 119, 120, 128]:
            msg = bytes([(i*7) & 0xFF for i in range(length)])
            self.assertEqual(
                SHA256.create().finalize(WordArray.create(msg)).to_bytes(),
                hashlib.sha256(msg).digest(),
                f"Digest mismatch for {length} byte message")

    def test_digest_size(self):
        digest = SHA256.create().finalize("abc")
        self.assertEqual(digest.sig_bytes, SHA256.digest_size)
        self.assertEqual(len(digest.words), 8)

    def test_random_blocks(self):
        max_rounds = 40

        for i in range(max_rounds):
            rlen = random.randint(0, 1024)
            msg = os.urandom(rlen)
            self.assertEqual(
                SHA256.create().finalize(WordArray.create(msg)).to_bytes(),
                hashlib.sha256(msg).digest(),
                "Failed at round "+str(i))

    def test_incremental_equivalence(self):
        msg = Latin1.parse("".join(chr(i) for i in range(150)))
        expected = SHA256.create().finalize(msg.clone())

        for split in range(msg.sig_bytes+1):
            head = WordArray.create(msg.to_bytes()[:split])
            tail = WordArray.create(msg.to_bytes()[split:])
            hasher = SHA256.create()
            hasher.update(head)
            hasher.update(tail)
            self.assertEqual(hasher.finalize(), expected, f"Split at {split} produced a different digest")

    def test_many_small_updates(self):
        msg = os.urandom(300)
        hasher = SHA256.create()
        for i in range(0, len(msg), 7):
            hasher.update(WordArray.create(msg[i:i+7]))

        self.assertEqual(hasher.finalize().to_bytes(), hashlib.sha256(msg).digest())

    def test_unclamped_input(self):
        # Garbage beyond sig_bytes must not leak into the digest
        dirty = WordArray([0x61626364, 0xFFFFFFFF], 5)
        dirty.words[1] = 0x65FFFFFF
        self.assertEqual(
            SHA256.create().finalize(dirty).to_string(),
            hashlib.sha256(b"abcde").hexdigest())

        hasher = SHA256.create()
        hasher.update(WordArray([0x61FFFFFF], 1)).update("bcde")
        self.assertEqual(hasher.finalize().to_string(), hashlib.sha256(b"abcde").hexdigest())

    def test_update_is_chainable(self):
        hasher = SHA256.create()
        self.assertIs(hasher.update("a"), hasher)
        self.assertEqual(
            hasher.update("b").update("c").finalize().to_string(),
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")

    def test_clone_forks_prefix(self):
        prefix = SHA256.create().update("prefix data "*10)
        fork = prefix.clone()

        a = prefix.finalize("first").to_bytes()
        b = fork.finalize("second").to_bytes()

        self.assertEqual(a, hashlib.sha256(b"prefix data "*10+b"first").digest())
        self.assertEqual(b, hashlib.sha256(b"prefix data "*10+b"second").digest())

    def test_digest_is_independent(self):
        hasher = SHA256.create()
        digest = hasher.finalize("abc")
        hasher.reset()
        hasher.update("something else")
        self.assertEqual(digest.to_string(), "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")

    def test_helper(self):
        self.assertEqual(WCL.SHA256("abc"), SHA256.create().finalize("abc"))
        self.assertEqual(WCL.SHA256(Hex.parse("616263")).to_string(), hashlib.sha256(b"abc").hexdigest())

    def test_constants(self):
        h, k = derive_constants()
        self.assertEqual(len(h), 8)
        self.assertEqual(len(k), 64)
        self.assertEqual(h, _h)
        self.assertEqual(k, _k)

    def test_rejects_unsupported_input(self):
        with self.assertRaises(TypeError):
            SHA256.create().update(12345)

    def test_accepts_bytes_like_input(self):
        expected = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        hasher = SHA256.create()
        hasher.update(b"ab").update(bytearray(b"c"))
        self.assertEqual(hasher.finalize().to_string(), expected)
        self.assertEqual(SHA256.create().finalize(memoryview(b"abc")).to_string(), expected)

    def test_length_high_word(self):
        # A length of 2**32 bits or more spills into the high length word
        hasher = SHA256.create()
        hasher._n_data_bytes = (1 << 29)+1
        self.assertEqual(hasher.finalize().to_string(),
            "a0ef87b23934e7437ff50e5c857dafa73bb052ce27bd4df58f24fd7178e28377")


class TestHasherLifecycle(unittest.TestCase):
    def test_states(self):
        hasher = SHA256.create()
        self.assertEqual(hasher.state, HasherState.FRESH)
        hasher.update("a")
        self.assertEqual(hasher.state, HasherState.ACCUMULATING)
        hasher.finalize()
        self.assertEqual(hasher.state, HasherState.FINALIZED)
        hasher.reset()
        self.assertEqual(hasher.state, HasherState.FRESH)

    def test_finalize_twice(self):
        hasher = SHA256.create()
        hasher.finalize("abc")
        with self.assertRaises(WCL.LifecycleError) as cm:
            hasher.finalize()
        self.assertEqual(cm.exception.state, HasherState.FINALIZED)

    def test_update_after_finalize(self):
        hasher = SHA256.create()
        hasher.finalize()
        self.assertRaises(WCL.LifecycleError, hasher.update, "more")

    def test_reset_recovers(self):
        hasher = SHA256.create()
        hasher.update("garbage")
        hasher.finalize()
        hasher.reset()
        self.assertEqual(
            hasher.finalize().to_string(),
            "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855")

    def test_reset_discards_buffered_data(self):
        hasher = SHA256.create()
        hasher.update("a"*100)
        hasher.reset()
        self.assertEqual(hasher.finalize("abc").to_string(),
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad")

    def test_misuse_is_logged(self):
        messages = []
        saved = (WCL.loglevel, WCL.logdest, WCL.logcall)
        try:
            WCL.loglevel = WCL.LOG_ERROR
            WCL.logdest = WCL.LOG_CALLBACK
            WCL.logcall = messages.append

            hasher = SHA256.create()
            hasher.finalize()
            self.assertRaises(WCL.LifecycleError, hasher.finalize)

        finally:
            WCL.loglevel, WCL.logdest, WCL.logcall = saved

        self.assertEqual(len(messages), 1)
        self.assertIn("[Error]", messages[0])
        self.assertIn("finalized SHA256 hasher", messages[0])


if __name__ == '__main__':
    unittest.main(verbosity=2)
