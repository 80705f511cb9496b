"""Tests for the tokenizer."""

import pytest

from arpquery.parser.tokenizer import Token, TokenType, Tokenizer, classify_run, tokenize


def _types(tokens):
    return [t.type for t in tokens]


class TestTokenizeBasics:
    """Test single-token inputs."""

    def test_whitespace_only_yields_end(self):
        tokens = tokenize("  \n\t \r\n ")
        assert _types(tokens) == [TokenType.END]

    def test_empty_input_yields_end(self):
        assert _types(tokenize("")) == [TokenType.END]

    def test_net_address(self):
        tokens = tokenize("192.168.1.1")
        assert tokens[0] == Token("192.168.1.1", TokenType.NET_ADDRESS, 1)
        assert _types(tokens) == [TokenType.NET_ADDRESS, TokenType.END]

    def test_mac_address(self):
        tokens = tokenize("aa-bb-cc-dd-ee-ff")
        assert _types(tokens) == [TokenType.MAC_ADDRESS, TokenType.END]
        assert tokens[0].text == "aa-bb-cc-dd-ee-ff"

    def test_mac_address_starting_with_digit(self):
        tokens = tokenize("01-00-5e-00-00-16")
        assert tokens[0].type == TokenType.MAC_ADDRESS

    def test_hex_number(self):
        tokens = tokenize("0x1a")
        assert tokens[0] == Token("0x1a", TokenType.NUMBER, 1)
        assert len(tokens) == 2

    def test_uppercase_hex_marker(self):
        assert tokenize("0X1F")[0].type == TokenType.NUMBER

    def test_word(self):
        assert tokenize("dynamic")[0] == Token("dynamic", TokenType.WORD, 1)

    def test_exactly_one_end(self):
        tokens = tokenize("Interface: 10.0.0.1 --- 0x2")
        assert _types(tokens).count(TokenType.END) == 1
        assert tokens[-1].type == TokenType.END


class TestTokenizeFallbacks:
    """Test lookahead, rollback, and unclassifiable runs."""

    def test_invalid_hex_falls_back_to_run(self):
        tokens = tokenize("0xzz")
        assert tokens[0] == Token("0xzz", TokenType.NONE, 1)

    def test_digit_then_x_that_is_not_hex(self):
        tokens = tokenize("5x")
        assert tokens[0] == Token("5x", TokenType.NONE, 1)

    def test_failed_hex_rescans_whole_run(self):
        tokens = tokenize("0xg-1")
        assert [(t.text, t.type) for t in tokens] == [
            ("0xg-1", TokenType.NONE),
            ("", TokenType.END),
        ]

    def test_hex_number_stops_at_period(self):
        tokens = tokenize("0x1a.5")
        assert [(t.text, t.type) for t in tokens[:-1]] == [
            ("0x1a", TokenType.NUMBER),
            (".", TokenType.NONE),
            ("5", TokenType.NET_ADDRESS),
        ]

    def test_triple_dash(self):
        assert tokenize("---")[0] == Token("---", TokenType.TRIPLE_DASH, 1)

    def test_single_dash_is_punct(self):
        assert _types(tokenize("-")) == [TokenType.PUNCT, TokenType.END]

    def test_double_dash_rolls_back(self):
        tokens = tokenize("--")
        assert _types(tokens) == [TokenType.PUNCT, TokenType.PUNCT, TokenType.END]
        assert [t.text for t in tokens[:2]] == ["-", "-"]

    def test_four_dashes(self):
        assert _types(tokenize("----")) == [TokenType.TRIPLE_DASH, TokenType.PUNCT, TokenType.END]

    def test_underscore_run_is_none(self):
        assert tokenize("foo_bar")[0] == Token("foo_bar", TokenType.NONE, 1)

    def test_non_ascii_is_none(self):
        tokens = tokenize("é")
        assert tokens[0] == Token("é", TokenType.NONE, 1)

    def test_punctuation_splits_runs(self):
        tokens = tokenize("192.168.1.1:")
        assert [(t.text, t.type) for t in tokens[:-1]] == [
            ("192.168.1.1", TokenType.NET_ADDRESS),
            (":", TokenType.PUNCT),
        ]


class TestTokenizeArpOutput:
    """Test tokenizing real 'arp -a' lines."""

    def test_interface_header(self):
        tokens = tokenize("Interface: 192.168.1.1 --- 0x3")
        assert [(t.text, t.type) for t in tokens] == [
            ("Interface", TokenType.WORD),
            (":", TokenType.PUNCT),
            ("192.168.1.1", TokenType.NET_ADDRESS),
            ("---", TokenType.TRIPLE_DASH),
            ("0x3", TokenType.NUMBER),
            ("", TokenType.END),
        ]

    def test_entry_line(self):
        tokens = tokenize("  192.168.1.10   aa-bb-cc-dd-ee-ff   static\n")
        assert _types(tokens) == [
            TokenType.NET_ADDRESS,
            TokenType.MAC_ADDRESS,
            TokenType.WORD,
            TokenType.END,
        ]

    def test_line_numbers(self, single_interface_output):
        tokens = tokenize(single_interface_output)
        by_text = {t.text: t.line_num for t in tokens}
        assert by_text["Interface"] == 1
        assert by_text["Internet"] == 2
        assert by_text["192.168.1.10"] == 3

    def test_tokens_iterator_has_no_end(self):
        tokens = list(Tokenizer("Interface: 10.0.0.1").tokens())
        assert TokenType.END not in _types(tokens)
        assert len(tokens) == 3


class TestClassifyRun:
    """Test run shape classification in isolation."""

    @pytest.mark.parametrize("text,expected", [
        ("Interface", TokenType.WORD),
        ("dead", TokenType.WORD),
        ("10.0.0.1", TokenType.NET_ADDRESS),
        ("10", TokenType.NET_ADDRESS),
        ("1a", TokenType.MAC_ADDRESS),
        ("00-11-22-33-44-55", TokenType.MAC_ADDRESS),
        ("foo_bar", TokenType.NONE),
        ("10.0.0.1-x", TokenType.NONE),
        ("", TokenType.NONE),
    ])
    def test_shapes(self, text, expected):
        assert classify_run(text) == expected


class TestTokenTypeDescribe:

    def test_labels(self):
        assert TokenType.NET_ADDRESS.describe() == "Network Address"
        assert TokenType.END.describe() == "(eof)"
        assert TokenType.NONE.describe() == "(null)"
