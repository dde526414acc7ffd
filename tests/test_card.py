"""Tests for Card parsing and card-input formatting."""

import pytest

from poker_overlay.errors import CardParseError
from poker_overlay.utils.card import Card, format_card_input, parse_cards
from poker_overlay.utils.constants import Rank, Suit


class TestCardFromStr:
    def test_letter_suit(self):
        card = Card.from_str("Ah")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.HEARTS

    def test_symbol_suit(self):
        assert Card.from_str("K♠") == Card(Rank.KING, Suit.SPADES)
        assert Card.from_str("T♦") == Card(Rank.TEN, Suit.DIAMONDS)

    def test_str_and_symbol(self):
        card = Card(Rank.QUEEN, Suit.CLUBS)
        assert str(card) == "Qc"
        assert card.symbol == "Q♣"

    @pytest.mark.parametrize("bad", ["", "A", "Ahh", "1h", "Ax", "ah"])
    def test_invalid_raises(self, bad):
        with pytest.raises(CardParseError):
            Card.from_str(bad)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Card.from_str("Zz")

    def test_ordering_by_rank(self):
        assert Card.from_str("2c") < Card.from_str("Ah")
        assert max(Card.from_str("9s"), Card.from_str("Td")) == Card.from_str("Td")

    def test_ordering_breaks_rank_ties_by_suit(self):
        spade, heart = Card.from_str("As"), Card.from_str("Ah")
        assert heart < spade
        assert not spade < heart
        assert sorted([spade, heart], reverse=True) == [spade, heart]

    def test_ordering_consistent_with_equality(self):
        card = Card.from_str("Qd")
        assert card <= Card.from_str("Qd")
        assert not card < Card.from_str("Qd")


class TestParseCards:
    def test_concatenated(self):
        assert parse_cards("AsKh") == [Card.from_str("As"), Card.from_str("Kh")]

    def test_space_separated(self):
        assert parse_cards("Ah Kd 2c") == [
            Card.from_str("Ah"), Card.from_str("Kd"), Card.from_str("2c"),
        ]

    def test_comma_separated(self):
        assert len(parse_cards("Ah,Kd,2c")) == 3

    def test_lowercase_input(self):
        assert parse_cards("askh") == [Card.from_str("As"), Card.from_str("Kh")]

    def test_symbols(self):
        assert parse_cards("A♠K♥") == [Card.from_str("As"), Card.from_str("Kh")]

    def test_empty(self):
        assert parse_cards("   ") == []

    def test_odd_length_raises(self):
        with pytest.raises(CardParseError):
            parse_cards("AsK")


class TestFormatCardInput:
    def test_formats_two_cards(self):
        assert format_card_input("askh") == "A♠K♥"

    def test_limits_to_two_cards(self):
        assert format_card_input("askhqd") == "A♠K♥"

    def test_strips_invalid_characters(self):
        assert format_card_input("a-s / k!h") == "A♠K♥"

    def test_single_character_unchanged(self):
        assert format_card_input("a") == "A"

    def test_trailing_rank_kept_while_typing(self):
        assert format_card_input("ask") == "A♠K"

    def test_trailing_character_dropped_at_card_limit(self):
        assert format_card_input("askhq") == "A♠K♥"

    def test_already_formatted_text_unchanged(self):
        assert format_card_input("A♠K♥") == "A♠K♥"
        assert format_card_input("A♠") == "A♠"

    def test_keystroke_sequence(self):
        # Each keystroke appends to the previously formatted field text.
        field = ""
        seen = []
        for key in "askh":
            field = format_card_input(field + key)
            seen.append(field)
        assert seen == ["A", "A♠", "A♠K", "A♠K♥"]
        assert parse_cards(field) == [Card.from_str("As"), Card.from_str("Kh")]

    def test_max_cards_argument(self):
        assert format_card_input("ah kd 2c", max_cards=3) == "A♥K♦2♣"
