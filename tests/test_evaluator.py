"""Tests for best-hand evaluation."""

import itertools
import random

import pytest
from treys import Evaluator

from holdem.errors import (
    DuplicateCardError, InvalidCommunityCount, InvalidHandSize, InvalidHoleCount
)
from holdem.game.cards import Rank, Suit
from holdem.game.evaluator import (
    Winner, detect_flush, detect_straight, determine_winner,
    evaluate_best_hand, evaluate_five, next_combination
)
from holdem.game.hand_value import HandCategory, compare_hand_values


def ranks(*values):
    return tuple(Rank(v) for v in values)


class TestCombinations:
    def test_twenty_one_subsets_in_order(self):
        indexes = [0, 1, 2, 3, 4]
        seen = [tuple(indexes)]
        while next_combination(indexes, 7):
            seen.append(tuple(indexes))

        assert len(seen) == 21
        assert seen == list(itertools.combinations(range(7), 5))


class TestFixtures:
    def test_royal_flush(self, cards):
        value = evaluate_best_hand(cards("HA HK HQ HJ HT S2 S3"))
        assert value.category == HandCategory.STRAIGHT_FLUSH
        assert value.kickers == ranks(14)

    def test_quads(self, cards):
        value = evaluate_best_hand(cards("H2 D2 C2 S2 H5 H6 H7"))
        assert value.category == HandCategory.FOUR_OF_A_KIND
        assert value.kickers == ranks(2, 7)

    def test_two_pair(self, cards):
        value = evaluate_best_hand(cards("H2 D2 C3 S3 H5 D6 C7"))
        assert value.category == HandCategory.TWO_PAIR
        assert value.kickers == ranks(3, 2, 7)

    def test_wheel(self, cards):
        value = evaluate_best_hand(cards("HA D2 C3 S4 H5 D9 CK"))
        assert value.category == HandCategory.STRAIGHT
        assert value.kickers == ranks(5)

    def test_full_house_from_two_trips(self, cards):
        value = evaluate_best_hand(cards("H9 D9 C9 S4 H4 D4 CA"))
        assert value.category == HandCategory.FULL_HOUSE
        assert value.kickers == ranks(9, 4)

    def test_flush_picks_top_five(self, cards):
        value = evaluate_best_hand(cards("S2 S9 SJ S4 S7 SK D3"))
        assert value.category == HandCategory.FLUSH
        assert value.kickers == ranks(13, 11, 9, 7, 4)

    def test_flush_beats_straight(self, cards):
        value = evaluate_best_hand(cards("H4 H5 H6 H7 D8 H2 C9"))
        assert value.category == HandCategory.FLUSH

    def test_steel_wheel(self, cards):
        value = evaluate_best_hand(cards("DA D2 D3 D4 D5 D6 C6"))
        assert value.category == HandCategory.STRAIGHT_FLUSH
        assert value.kickers == ranks(6)

    def test_trips(self, cards):
        value = evaluate_best_hand(cards("HQ DQ CQ S2 H7 D9 C4"))
        assert value.category == HandCategory.THREE_OF_A_KIND
        assert value.kickers == ranks(12, 9, 7)

    def test_three_pairs_uses_best_kicker(self, cards):
        value = evaluate_best_hand(cards("HK DK H8 D8 C4 S4 CA"))
        assert value.category == HandCategory.TWO_PAIR
        assert value.kickers == ranks(13, 8, 14)

    def test_one_pair(self, cards):
        value = evaluate_best_hand(cards("HJ DJ C2 S5 H9 DA C3"))
        assert value.category == HandCategory.ONE_PAIR
        assert value.kickers == ranks(11, 14, 9, 5)

    def test_high_card(self, cards):
        value = evaluate_best_hand(cards("H2 D4 C6 S8 HT DQ CK"))
        assert value.category == HandCategory.HIGH_CARD
        assert value.kickers == ranks(13, 12, 10, 8, 6)

    def test_six_card_straight_takes_top(self, cards):
        value = evaluate_best_hand(cards("H5 D6 C7 S8 H9 DT C2"))
        assert value.category == HandCategory.STRAIGHT
        assert value.kickers == ranks(10)


class TestEvaluateFive:
    def test_kicker_lengths(self, cards):
        hands = {
            "HA HK HQ HJ HT": 1,
            "H2 D2 C2 S2 H5": 2,
            "H2 D2 C2 S5 H5": 2,
            "H2 H9 HJ H4 H7": 5,
            "H2 D3 C4 S5 H6": 1,
            "H2 D2 C2 S5 H9": 3,
            "H2 D2 C5 S5 H9": 3,
            "H2 D2 C5 S7 H9": 4,
            "H2 D4 C5 S7 H9": 5,
        }
        for codes, length in hands.items():
            value = evaluate_five(cards(codes))
            assert len(value.kickers) == length
            assert value.category.kicker_count == length

    def test_does_not_reorder_input(self, cards):
        hand = cards("H2 DA C5 S7 H9")
        before = list(hand)
        evaluate_five(hand)
        assert hand == before


class TestDetectors:
    def test_flush(self, cards):
        assert detect_flush(cards("H2 H4 H6 H8 HT")) == Suit.HEARTS
        assert detect_flush(cards("H2 H4 H6 H8 DT")) is None

    def test_flush_among_seven(self, cards):
        assert detect_flush(cards("C2 C4 C6 C8 CT HA DA")) == Suit.CLUBS

    def test_straight(self, cards):
        assert detect_straight(cards("HT DJ CQ SK HA")) == Rank.ACE
        assert detect_straight(cards("HA D2 C3 S4 H5")) == Rank.FIVE
        assert detect_straight(cards("HA DK CQ SJ H9")) is None

    def test_no_wraparound(self, cards):
        assert detect_straight(cards("HQ DK CA S2 H3")) is None


class TestValidation:
    def test_wrong_size(self, cards):
        with pytest.raises(InvalidHandSize):
            evaluate_best_hand(cards("HA HK HQ HJ HT S2"))
        with pytest.raises(InvalidHandSize):
            evaluate_best_hand(cards("HA HK HQ HJ HT S2 S3 S4"))

    def test_duplicates(self, cards):
        with pytest.raises(DuplicateCardError):
            evaluate_best_hand(cards("HA HA HQ HJ HT S2 S3"))


class TestProperties:
    def test_permutation_invariance(self, rng, random_seven):
        for _ in range(40):
            hand = random_seven()
            expected = evaluate_best_hand(hand)
            for _ in range(5):
                shuffled = list(hand)
                rng.shuffle(shuffled)
                assert evaluate_best_hand(shuffled) == expected

    def test_agrees_with_treys(self, random_seven):
        # treys ranks lower-is-better; our comparison must agree in sign
        evaluator = Evaluator()
        for _ in range(150):
            a = random_seven()
            board = a[2:]
            used = set(a)
            rest = [c for c in random_seven() if c not in used]
            if len(rest) < 2:
                continue
            b = rest[:2] + board

            ours = compare_hand_values(evaluate_best_hand(a), evaluate_best_hand(b))
            ta = evaluator.evaluate([c.to_treys() for c in a[:2]], [c.to_treys() for c in board])
            tb = evaluator.evaluate([c.to_treys() for c in b[:2]], [c.to_treys() for c in board])
            theirs = (tb > ta) - (tb < ta)

            assert ours == theirs, f"{a} vs {b}"


class TestDetermineWinner:
    def test_player1(self, cards):
        board = cards("SK D7 C2 H9 S3")
        assert determine_winner(cards("HK CK"), cards("SA HA"), board) == Winner.PLAYER1

    def test_player2(self, cards):
        board = cards("SK D7 C2 H9 S3")
        assert determine_winner(cards("SA HA"), cards("HK CK"), board) == Winner.PLAYER2

    def test_tie_board_plays(self, cards):
        board = cards("HA HK HQ HJ HT")
        assert determine_winner(cards("C2 D3"), cards("S4 D5"), board) == Winner.TIE

    def test_tie_same_ranks(self, cards):
        board = cards("SK D7 C2 H9 S3")
        assert determine_winner(cards("CA HQ"), cards("DA CQ"), board) == Winner.TIE

    def test_requires_full_board(self, cards):
        with pytest.raises(InvalidCommunityCount):
            determine_winner(cards("CA HQ"), cards("DA CQ"), cards("SK D7 C2"))

    def test_requires_two_hole_cards(self, cards):
        with pytest.raises(InvalidHoleCount):
            determine_winner(cards("CA"), cards("DA CQ"), cards("SK D7 C2 H9 S3"))

    def test_overlapping_cards(self, cards):
        with pytest.raises(DuplicateCardError):
            determine_winner(cards("CA HQ"), cards("CA CQ"), cards("SK D7 C2 H9 S3"))
