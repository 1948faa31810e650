"""Tests for the password reset token value object."""

import re

import pytest

from src.domain.value_objects.reset_token import ResetToken, generate_reset_token

HEX_64 = re.compile(r"^[0-9a-f]{64}$")


class TestResetToken:
    def test_generated_token_is_64_lowercase_hex_characters(self):
        token = ResetToken.generate()

        assert HEX_64.match(token.value)
        assert len(bytes.fromhex(token.value)) == 32

    def test_generate_reset_token_returns_plain_string(self):
        token = generate_reset_token()

        assert isinstance(token, str)
        assert HEX_64.match(token)

    def test_tokens_do_not_repeat(self):
        tokens = {generate_reset_token() for _ in range(10_000)}

        assert len(tokens) == 10_000

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "A" * 64, "g" * 64, "0" * 63, "0" * 65, "0" * 64 + "\n"],
    )
    def test_rejects_malformed_values(self, value):
        with pytest.raises(ValueError):
            ResetToken(value)

    def test_mask_for_logging_hides_most_of_the_token(self):
        token = ResetToken("0123456789abcdef" * 4)

        assert token.mask_for_logging() == "01234567..."
        assert str(token) == "0123456789abcdef" * 4
