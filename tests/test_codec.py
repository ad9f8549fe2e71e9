"""
Unit Tests for the Crypt-String Codec
=====================================
bcrypt base64 and $2x$NN$ parsing/rendering.
"""

import os

import pytest


SALT_STRING = "$2a$05$CCCCCCCCCCCCCCCCCCCCC."
FULL_HASH = "$2a$05$CCCCCCCCCCCCCCCCCCCCC.E5YPO9kmyuRGyh0XouQYb4YMJKvyOeW"


class TestBcrypt64:
    """Tests for the bcrypt base64 variant."""

    def test_alphabet_order(self):
        """Alphabet should start with ./ and end with digits."""
        from slice_bcrypt.codec import bcrypt64

        assert bcrypt64.ALPHABET[:2] == "./"
        assert bcrypt64.ALPHABET[2:28] == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
        assert bcrypt64.ALPHABET.endswith("0123456789")
        assert len(bcrypt64.ALPHABET) == 64

    def test_encode_lengths(self):
        """16 bytes should encode to 22 chars and 23 bytes to 31, unpadded."""
        from slice_bcrypt.codec import bcrypt64

        salt = bcrypt64.encode(bytes(16))
        digest = bcrypt64.encode(bytes(23))

        assert len(salt) == 22
        assert len(digest) == 31
        assert "=" not in salt + digest
        assert salt == "." * 22

    def test_encode_known_value(self):
        """Should use the bcrypt table, not the RFC 4648 one."""
        from slice_bcrypt.codec import bcrypt64

        # 0xFF 0xFF 0xFF -> four 63s -> "9999"
        assert bcrypt64.encode(b"\xff\xff\xff") == "9999"
        assert bcrypt64.encode(b"\x00\x00\x00") == "...."

    def test_decode_roundtrip(self):
        """Should decode what it encodes."""
        from slice_bcrypt.codec import bcrypt64

        raw = os.urandom(23)
        assert bytes(bcrypt64.decode(bcrypt64.encode(raw), 23)) == raw

    def test_decode_rejects_foreign_character(self):
        """Characters outside the alphabet should raise InvalidSaltError."""
        from slice_bcrypt.codec import bcrypt64
        from slice_bcrypt.exceptions import InvalidSaltError

        with pytest.raises(InvalidSaltError):
            bcrypt64.decode("CCCCCCCCCC+CCCCCCCCCC.", 16)

        with pytest.raises(InvalidSaltError):
            bcrypt64.decode("CCCCCCCCCC=CCCCCCCCCC.", 16)

    def test_decode_rejects_short_input(self):
        """Running out of characters should raise InvalidSaltError."""
        from slice_bcrypt.codec import bcrypt64
        from slice_bcrypt.exceptions import InvalidSaltError

        with pytest.raises(InvalidSaltError):
            bcrypt64.decode("CCCC", 16)


class TestEncodeSalt:
    """Tests for salt prefix rendering."""

    def test_encode_salt_format(self):
        """Should render $2b$NN$ followed by 22 characters."""
        from slice_bcrypt.codec import encode_salt

        salt = encode_salt(bytes(16), 12)

        assert salt == "$2b$12$" + "." * 22
        assert len(salt) == 29

    def test_encode_salt_clamps_cost(self):
        """Cost should be clamped into [4, 31]."""
        from slice_bcrypt.codec import encode_salt

        assert encode_salt(bytes(16), 1).startswith("$2b$04$")
        assert encode_salt(bytes(16), 99).startswith("$2b$31$")
        assert encode_salt(bytes(16), 7).startswith("$2b$07$")

    def test_encode_salt_wrong_length(self):
        """Salts that are not 16 bytes should be rejected."""
        from slice_bcrypt.codec import encode_salt
        from slice_bcrypt.exceptions import InvalidSaltError

        with pytest.raises(InvalidSaltError):
            encode_salt(bytes(15), 10)

    def test_decode_recovers_salt_and_cost(self):
        """decode(encode_salt(raw, cost)) should recover raw and cost."""
        from slice_bcrypt.codec import decode, encode_salt

        for cost in range(4, 32):
            raw = os.urandom(16)
            parsed = decode(encode_salt(raw, cost))

            assert parsed.raw_salt == raw
            assert parsed.cost == cost
            assert parsed.minor == "b"
            assert parsed.raw_digest is None


class TestDecode:
    """Tests for crypt-string parsing."""

    def test_decode_salt_string(self):
        """Should parse a bare salt string."""
        from slice_bcrypt.codec import decode

        parsed = decode(SALT_STRING)

        assert parsed.version == "2"
        assert parsed.minor == "a"
        assert parsed.cost == 5
        assert parsed.rounds == 32
        assert len(parsed.raw_salt) == 16
        assert parsed.raw_digest is None
        assert str(parsed) == SALT_STRING

    def test_decode_full_hash(self):
        """Should parse the 23-byte digest of a full crypt string."""
        from slice_bcrypt.codec import decode

        parsed = decode(FULL_HASH)

        assert len(parsed.raw_digest) == 23
        assert parsed.prefix == SALT_STRING
        assert str(parsed) == FULL_HASH

    def test_decode_bytes(self):
        """Should accept ASCII bytes."""
        from slice_bcrypt.codec import decode

        assert decode(FULL_HASH.encode()) == decode(FULL_HASH)

    def test_unsupported_major_version(self):
        """'$3$04$...' should raise UnsupportedVersionError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import UnsupportedVersionError

        with pytest.raises(UnsupportedVersionError):
            decode("$3$04$CCCCCCCCCCCCCCCCCCCCC.")

    def test_unsupported_minor_version(self):
        """Minors other than a and b should be rejected."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import UnsupportedVersionError

        for prefix in ("$2c$", "$2y$", "$2x$", "$2$0"):
            with pytest.raises(UnsupportedVersionError):
                decode(prefix + "04$CCCCCCCCCCCCCCCCCCCCC.")

    def test_cost_out_of_range(self):
        """'$2b$03$...' should raise InvalidCostError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import InvalidCostError

        with pytest.raises(InvalidCostError):
            decode("$2b$03$CCCCCCCCCCCCCCCCCCCCC.")

        with pytest.raises(InvalidCostError):
            decode("$2b$32$CCCCCCCCCCCCCCCCCCCCC.")

    def test_short_salt(self):
        """A salt of insufficient length should raise InvalidSaltError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import InvalidSaltError

        with pytest.raises(InvalidSaltError):
            decode("$2b$04$CCCCCCCCCCCCCCCCCCCC")

    def test_bad_salt_character(self):
        """A salt with a character outside the alphabet should raise InvalidSaltError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import InvalidSaltError

        with pytest.raises(InvalidSaltError):
            decode("$2b$04$CCCCCCCCCC!CCCCCCCCCC.")

    def test_missing_delimiter(self):
        """A string missing a '$' delimiter should raise ParseError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import ParseError

        for value in (
            "2b$04$CCCCCCCCCCCCCCCCCCCCC.",
            "$2b04$CCCCCCCCCCCCCCCCCCCCC.",
            "$2b$04CCCCCCCCCCCCCCCCCCCCC.",
            "",
        ):
            with pytest.raises(ParseError):
                decode(value)

    def test_non_digit_cost(self):
        """Cost must be exactly two digits."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import ParseError

        with pytest.raises(ParseError):
            decode("$2b$1a$CCCCCCCCCCCCCCCCCCCCC.")

        with pytest.raises(ParseError):
            decode("$2b$4$CCCCCCCCCCCCCCCCCCCCC.")

    def test_truncated_digest(self):
        """A digest that is not 31 characters should raise ParseError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import ParseError

        with pytest.raises(ParseError):
            decode(FULL_HASH[:-1])

    @pytest.mark.parametrize("tail", ["x", "x" * 30, "x" * 32])
    def test_digest_must_be_exactly_31_chars(self, tail):
        """Anything after the salt other than a full digest should be rejected."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import ParseError

        with pytest.raises(ParseError):
            decode("$2b$04$CCCCCCCCCCCCCCCCCCCCC." + tail)

    def test_errors_share_base_class(self):
        """Every codec error should be catchable as BcryptError and ValueError."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.exceptions import BcryptError

        for value in ("$3$04$x", "$2b$03$x", "$2b$04$short", "nope"):
            with pytest.raises(BcryptError) as exc_info:
                decode(value)
            assert isinstance(exc_info.value, ValueError)


class TestSaltGenerator:
    """Tests for random salt generation."""

    def test_generate_salt(self):
        """Should produce a parseable 29-character prefix."""
        from slice_bcrypt.codec import decode
        from slice_bcrypt.salt import generate

        salt = generate(10)

        assert len(salt.prefix) == 29
        assert salt.prefix.startswith("$2b$10$")
        assert len(salt.raw) == 16
        assert decode(salt.prefix).raw_salt == salt.raw

    def test_generate_salt_unique(self):
        """Consecutive salts should differ."""
        from slice_bcrypt.salt import generate_salt

        assert generate_salt(4) != generate_salt(4)

    def test_generate_salt_default_cost(self, monkeypatch, fast_config):
        """Without a cost, the configured default should be used."""
        from slice_bcrypt import salt as salt_module

        monkeypatch.setattr(salt_module, "get_config", lambda: fast_config)

        assert salt_module.generate_salt().startswith("$2b$04$")

    def test_entropy_failure(self, monkeypatch):
        """A failing random source should raise EntropySourceError."""
        from slice_bcrypt import salt as salt_module
        from slice_bcrypt.exceptions import EntropySourceError

        def broken(n):
            raise OSError("no entropy")

        monkeypatch.setattr(salt_module.secrets, "token_bytes", broken)

        with pytest.raises(EntropySourceError) as exc_info:
            salt_module.generate(4)

        assert isinstance(exc_info.value.__cause__, OSError)
