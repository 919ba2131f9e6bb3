"""Unit tests for blake2kit.crypto.compress module."""

import hashlib

from blake2kit.crypto.compress import compress, mix, run_round
from blake2kit.crypto.constants import (
    BLAKE2B_IV,
    BLAKE2B_PARAMS,
    BLAKE2S_IV,
    BLAKE2S_PARAMS,
    SIGMA,
    parameter_word,
)
from blake2kit.crypto.words import WORD32, WORD64


class TestConstants:
    """Test the constant tables."""

    def test_sigma_rows_are_permutations(self):
        """Test every schedule row is a permutation of 0..15."""
        assert len(SIGMA) == 10
        for row in SIGMA:
            assert sorted(row) == list(range(16))

    def test_blake2s_iv_is_high_half_of_blake2b_iv(self):
        """Test both IVs derive from the SHA-2 constants."""
        assert [w >> 32 for w in BLAKE2B_IV] == list(BLAKE2S_IV)

    def test_parameter_word(self):
        """Test parameter block encoding."""
        assert parameter_word(0, 64) == 0x01010040
        assert parameter_word(32, 32) == 0x01012020

    def test_params(self):
        """Test per-variant parameters."""
        assert (BLAKE2B_PARAMS.rounds, BLAKE2B_PARAMS.block_size) == (12, 128)
        assert (BLAKE2S_PARAMS.rounds, BLAKE2S_PARAMS.block_size) == (10, 64)
        assert BLAKE2B_PARAMS.rotations == (32, 24, 16, 63)
        assert BLAKE2S_PARAMS.rotations == (16, 12, 8, 7)


class TestMix:
    """Test the G function."""

    def test_zero_vector_is_fixed_point(self):
        """Test that G of all zeros stays all zeros."""
        v = [0] * 16
        mix(v, 0, 4, 8, 12, 0, 0, WORD64, BLAKE2B_PARAMS.rotations)
        assert v == [0] * 16

    def test_only_touches_its_four_positions(self):
        """Test that G leaves other working words alone."""
        v = list(range(1, 17))
        mix(v, 0, 5, 10, 15, 0xDEADBEEF, 0xCAFEBABE, WORD32, BLAKE2S_PARAMS.rotations)
        for i in set(range(16)) - {0, 5, 10, 15}:
            assert v[i] == i + 1
        assert all(0 <= w <= WORD32.mask for w in v)

    def test_additions_wrap(self):
        """Test that every word stays within W bits."""
        v = [WORD64.mask] * 16
        mix(v, 0, 4, 8, 12, WORD64.mask, WORD64.mask, WORD64, BLAKE2B_PARAMS.rotations)
        assert all(0 <= w <= WORD64.mask for w in v)

    def test_single_step_values(self):
        """Test the first add/xor/rotate step by hand."""
        v = [0] * 16
        mix(v, 0, 4, 8, 12, 1, 0, WORD32, (16, 12, 8, 7))
        # a = 1, d = rotr(1, 16) = 0x10000, c = 0x10000, b = rotr(0x10000, 12) = 0x10
        # a = 1 + 0x10 = 0x11, d = rotr(0x10000 ^ 0x11, 8), ...
        d1 = WORD32.rotr(0x10000 ^ 0x11, 8)
        c1 = 0x10000 + d1
        b1 = WORD32.rotr(0x10 ^ c1, 7)
        assert v[0] == 0x11
        assert v[12] == d1
        assert v[8] == c1
        assert v[4] == b1


class TestCompress:
    """Test the compression function."""

    def test_round_fn_matches_blake2s(self):
        """Test a single-block BLAKE2s digest assembled by hand."""
        message = b"hello world"
        block = message.ljust(64, b"\x00")
        state = list(BLAKE2S_IV)
        state[0] ^= parameter_word(0, 32)

        out = compress(BLAKE2S_PARAMS, state, block, len(message), True)

        assert WORD32.bytes_from_words(out) == hashlib.blake2s(message).digest()

    def test_manual_rounds_match_compress(self):
        """Test compress against rounds driven directly."""
        block = b"abc".ljust(128, b"\x00")
        h = list(BLAKE2B_IV)
        h[0] ^= parameter_word(0, 64)

        v = h + list(BLAKE2B_IV)
        v[12] ^= 3
        v[14] ^= WORD64.mask
        m = WORD64.words_from_bytes(block)
        for r in range(12):
            run_round(v, m, SIGMA[r % 10], BLAKE2B_PARAMS)
        expected = [h[i] ^ v[i] ^ v[i + 8] for i in range(8)]

        assert compress(BLAKE2B_PARAMS, h, block, 3, True) == expected
        assert WORD64.bytes_from_words(expected) == hashlib.blake2b(b"abc").digest()

    def test_state_not_mutated(self):
        """Test that compress returns a new state."""
        state = list(BLAKE2S_IV)
        before = list(state)
        compress(BLAKE2S_PARAMS, state, bytes(64), 64, False)
        assert state == before

    def test_final_flag_changes_output(self):
        """Test that the finalization flag is folded in."""
        state = list(BLAKE2B_IV)
        block = bytes(128)
        assert compress(BLAKE2B_PARAMS, state, block, 128, False) != compress(
            BLAKE2B_PARAMS, state, block, 128, True
        )

    def test_counter_high_word_used(self):
        """Test that counters beyond 2**W reach working word 13."""
        state = list(BLAKE2S_IV)
        block = bytes(64)
        assert compress(BLAKE2S_PARAMS, state, block, 64, False) != compress(
            BLAKE2S_PARAMS, state, block, 64 + (1 << 32), False
        )
