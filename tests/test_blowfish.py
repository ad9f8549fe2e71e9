"""
Unit Tests for the Blowfish Primitive
=====================================
Initial state, key schedule and block encryption.
"""

from array import array


class TestInitialState:
    """Tests for the pi-derived P-array and S-boxes."""

    def test_p_array_digits(self):
        """P-array should hold the first fractional hex digits of pi."""
        from slice_bcrypt.blowfish import initial_state

        p, _ = initial_state()

        assert len(p) == 18
        assert p[0] == 0x243F6A88
        assert p[1] == 0x85A308D3
        assert p[17] == 0x8979FB1B

    def test_s_boxes_continue_digits(self):
        """S-boxes should continue right after the P-array."""
        from slice_bcrypt.blowfish import initial_state

        _, s = initial_state()

        assert len(s) == 4
        assert all(len(box) == 256 for box in s)
        assert s[0][0] == 0xD1310BA6
        assert s[0][1] == 0x98DFB5AC
        assert s[3][255] == 0x3AC372E6

    def test_initial_state_cached(self):
        """Digits should be computed once per process."""
        from slice_bcrypt.blowfish import initial_state

        assert initial_state() is initial_state()

    def test_initial_state_ready_at_import(self):
        """Importing the package should already have computed the digits."""
        from slice_bcrypt.blowfish import BlowfishState, initial_state

        assert initial_state.cache_info().currsize == 1
        misses = initial_state.cache_info().misses

        BlowfishState.initial()

        assert initial_state.cache_info().misses == misses

    def test_states_are_independent(self):
        """Each state should own its own buffers."""
        from slice_bcrypt.blowfish import BlowfishState

        a = BlowfishState.initial()
        b = BlowfishState.initial()
        a.p[0] = 0

        assert b.p[0] == 0x243F6A88


class TestStream2Word:
    """Tests for cyclic stream packing."""

    def test_big_endian_packing(self):
        """Should pack four bytes big-endian."""
        from slice_bcrypt.blowfish import stream2word

        word, j = stream2word(b"\x01\x02\x03\x04\x05", 5, 0)

        assert word == 0x01020304
        assert j == 4

    def test_wraps_around(self):
        """Reading should restart at 0 once the end is reached."""
        from slice_bcrypt.blowfish import stream2word

        word, j = stream2word(b"abc", 3, 2)

        assert word == int.from_bytes(b"cabc", "big")
        assert j == 3

    def test_respects_declared_length(self):
        """Bytes past `databytes` should never be read."""
        from slice_bcrypt.blowfish import stream2word

        word, _ = stream2word(b"ab\x00zzzz", 3, 0)

        assert word == int.from_bytes(b"ab\x00a", "big")


class TestCipher:
    """Tests for Blowfish encryption."""

    def test_zero_key_vector(self):
        """Key 00..00 should encrypt block 00..00 to 4EF997456198DD78."""
        from slice_bcrypt.blowfish import BlowfishState

        state = BlowfishState.initial()
        state.expand0state(bytes(8), 8)

        assert state.encipher(0, 0) == (0x4EF99745, 0x6198DD78)

    def test_ones_key_vector(self):
        """Key FF..FF should encrypt block FF..FF to 51866FD5B85ECB8A."""
        from slice_bcrypt.blowfish import BlowfishState

        state = BlowfishState.initial()
        state.expand0state(b"\xff" * 8, 8)

        assert state.encipher(0xFFFFFFFF, 0xFFFFFFFF) == (0x51866FD5, 0xB85ECB8A)

    def test_encrypt_blocks_in_place(self):
        """encrypt should apply encipher to each block of the buffer."""
        from slice_bcrypt.blowfish import BlowfishState

        state = BlowfishState.initial()
        state.expand0state(bytes(8), 8)
        words = array("I", [0, 0, 0, 0])

        state.encrypt(words, 2)

        assert list(words) == [0x4EF99745, 0x6198DD78, 0x4EF99745, 0x6198DD78]

    def test_expandstate_uses_salt(self):
        """Different salts should produce different states."""
        from slice_bcrypt.blowfish import BlowfishState

        a = BlowfishState.initial()
        b = BlowfishState.initial()
        a.expandstate(bytes(16), 16, b"key\x00", 4)
        b.expandstate(b"\x01" + bytes(15), 16, b"key\x00", 4)

        assert a.p != b.p

    def test_expandstate_zero_salt_matches_expand0state(self):
        """An all-zero salt should behave like the zero-salt expansion."""
        from slice_bcrypt.blowfish import BlowfishState

        a = BlowfishState.initial()
        b = BlowfishState.initial()
        a.expandstate(bytes(16), 16, b"key\x00", 4)
        b.expand0state(b"key\x00", 4)

        assert a.p == b.p
        assert a.s == b.s

    def test_erase(self):
        """erase should zero the P-array and all S-boxes."""
        from slice_bcrypt.blowfish import BlowfishState

        state = BlowfishState.initial()
        state.expand0state(b"secret\x00", 7)
        state.erase()

        assert not any(state.p)
        assert all(not any(box) for box in state.s)
