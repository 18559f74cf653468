"""
tests/unit/test_reasoner.py
===========================
Tests for cluesat/symbolic/reasoner.py: domain assertions and queries.

Seats (turn order): sc mu wh gr pe pl, case file cf.
Suspects: mu pl gr pe sc wh | weapons: kn ca re ro pi wr | rooms: ha lo di ki ba co bi li st
"""
import pytest

from cluesat.core.config import GameConfig, ReasonerConfig
from cluesat.core.exceptions import (
    ConfigError,
    Contradiction,
    MalformedEvent,
    UnknownIdentifier,
)
from cluesat.core.types import (
    Accusation,
    Category,
    NoRefutation,
    RefutedUnknown,
    Shown,
    Suggestion,
    Verdict,
)
from cluesat.symbolic.reasoner import ClueReasoner

T, F, U = Verdict.TRUE, Verdict.FALSE, Verdict.UNKNOWN


# ═══════════════════════════════════════════════════════════════════
#  Construction
# ═══════════════════════════════════════════════════════════════════


class TestConstruction:
    def test_axioms_are_asserted(self, reasoner):
        assert reasoner.clause_count == 21 + 21 * 21 + 3 + 66

    def test_fresh_reasoner_knows_nothing(self, reasoner):
        assert reasoner.query("sc", "wh") is U
        assert reasoner.query("cf", "pi") is U

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigError) as exc:
            ClueReasoner(GameConfig(players=("a", "a", "b")))
        assert any("Duplicate" in e for e in exc.value.errors)

    def test_reasoners_are_independent(self):
        a = ClueReasoner()
        b = ClueReasoner()
        a.assert_hand("sc", ["wh"])
        assert a.query("sc", "wh") is T
        assert b.query("sc", "wh") is U

    def test_small_game(self, mini_reasoner):
        assert mini_reasoner.holders == ["p1", "p2", "p3", "cf"]
        assert mini_reasoner.query("p1", "r1") is U


# ═══════════════════════════════════════════════════════════════════
#  Hands
# ═══════════════════════════════════════════════════════════════════


class TestHand:
    def test_hand_cards_are_true(self, reasoner):
        reasoner.assert_hand("sc", ["wh", "li", "st"])
        assert [reasoner.query("sc", c) for c in ("wh", "li", "st")] == [T, T, T]

    def test_nobody_else_holds_hand_cards(self, reasoner):
        reasoner.assert_hand("sc", ["wh"])
        for holder in ("mu", "wh", "gr", "pe", "pl", "cf"):
            assert reasoner.query(holder, "wh") is F

    def test_unknown_player(self, reasoner):
        with pytest.raises(UnknownIdentifier):
            reasoner.assert_hand("zz", ["wh"])

    def test_case_file_cannot_hold_a_hand(self, reasoner):
        with pytest.raises(UnknownIdentifier):
            reasoner.assert_hand("cf", ["wh"])

    def test_invalid_card_adds_no_clause(self, reasoner):
        before = reasoner.clause_count
        with pytest.raises(UnknownIdentifier):
            reasoner.assert_hand("sc", ["wh", "zz"])
        assert reasoner.clause_count == before
        assert reasoner.query("sc", "wh") is U


# ═══════════════════════════════════════════════════════════════════
#  Suggestions
# ═══════════════════════════════════════════════════════════════════


class TestShownCard:
    def test_refuter_holds_shown_card(self, reasoner):
        reasoner.assert_suggestion("sc", "sc", "ro", "lo", Shown("mu", "sc"))
        assert reasoner.query("mu", "sc") is T
        assert reasoner.query("cf", "sc") is F

    def test_skipped_seats_hold_none(self, reasoner):
        reasoner.assert_suggestion("sc", "pl", "ro", "co", Shown("pe", "co"))
        for seat in ("mu", "wh", "gr"):
            for card in ("pl", "ro", "co"):
                assert reasoner.query(seat, card) is F
        assert reasoner.query("pl", "pl") is U

    def test_repeated_assertion_is_idempotent(self, mini_reasoner):
        event = Suggestion("p1", ("s1", "w1", "r1"), Shown("p3", "w1"))
        mini_reasoner.assert_suggestion_event(event)
        before = mini_reasoner.notepad().grid
        mini_reasoner.assert_suggestion_event(event)
        assert mini_reasoner.notepad().grid == before


class TestRefutedUnknown:
    def test_refuter_holds_remaining_card(self, reasoner):
        reasoner.assert_suggestion("sc", "pl", "kn", "ha", RefutedUnknown("mu"))
        assert reasoner.query("mu", "ha") is U
        reasoner.assert_hand("wh", ["pl", "kn"])
        assert reasoner.query("mu", "ha") is T

    def test_skipped_seats_hold_none(self, reasoner):
        reasoner.assert_suggestion("mu", "pe", "pi", "di", RefutedUnknown("pe"))
        for seat in ("wh", "gr"):
            for card in ("pe", "pi", "di"):
                assert reasoner.query(seat, card) is F


class TestNoRefutation:
    def test_others_hold_none(self, reasoner):
        reasoner.assert_suggestion("pl", "pe", "pi", "ba")
        for seat in ("sc", "mu", "wh", "gr", "pe"):
            assert reasoner.query(seat, "pi") is F
        assert reasoner.query("pl", "pi") is U
        assert reasoner.query("cf", "pi") is U

    def test_two_suggesters_pin_the_case_file(self, reasoner):
        reasoner.assert_suggestion("pl", "pe", "pi", "ba", NoRefutation())
        reasoner.assert_suggestion("pe", "pe", "pi", "ha", NoRefutation())
        assert reasoner.query("cf", "pe") is T
        assert reasoner.query("cf", "pi") is T

    def test_suggester_or_case_file(self, legacy_reasoner):
        legacy_reasoner.assert_suggestion("mu", "pe", "pi", "ba")
        assert legacy_reasoner.query("wh", "pi") is F
        assert legacy_reasoner.query("mu", "pi") is U
        # the case file's weapon is kn, so mu must hold pi
        legacy_reasoner.assert_accusation("sc", "pe", "kn", "ba", True)
        assert legacy_reasoner.query("mu", "pi") is T


class TestSeatOrder:
    def test_refuter_before_suggester_wraps(self, reasoner):
        # pe (4) suggests, mu (1) refutes: pl and sc passed
        reasoner.assert_suggestion("pe", "gr", "ca", "di", RefutedUnknown("mu"))
        for seat in ("pl", "sc"):
            for card in ("gr", "ca", "di"):
                assert reasoner.query(seat, card) is F
        assert reasoner.query("wh", "gr") is U

    def test_legacy_mode_does_not_wrap(self, legacy_reasoner):
        legacy_reasoner.assert_suggestion("pe", "gr", "ca", "di", RefutedUnknown("mu"))
        assert legacy_reasoner.query("pl", "gr") is U
        assert legacy_reasoner.query("sc", "ca") is U

    def test_no_refutation_same_in_both_modes(self, reasoner, legacy_reasoner):
        for cr in (reasoner, legacy_reasoner):
            cr.assert_suggestion("pl", "pe", "pi", "ba")
        assert reasoner.notepad().grid == legacy_reasoner.notepad().grid
        assert legacy_reasoner.query("sc", "pi") is F
        assert reasoner.clause_count == legacy_reasoner.clause_count


class TestMalformedSuggestion:
    def test_shown_without_refuter(self):
        with pytest.raises(MalformedEvent):
            Suggestion.from_optional("sc", "mu", "kn", "ha", None, "kn")

    def test_refuter_is_suggester(self, reasoner):
        with pytest.raises(MalformedEvent):
            reasoner.assert_suggestion("sc", "mu", "kn", "ha", RefutedUnknown("sc"))

    def test_case_file_refutes(self, reasoner):
        with pytest.raises(MalformedEvent):
            reasoner.assert_suggestion("sc", "mu", "kn", "ha", Shown("cf", "mu"))

    def test_case_file_suggests(self, reasoner):
        with pytest.raises(MalformedEvent):
            reasoner.assert_suggestion("cf", "mu", "kn", "ha")

    def test_shown_card_not_suggested(self, reasoner):
        with pytest.raises(MalformedEvent):
            reasoner.assert_suggestion("sc", "mu", "kn", "ha", Shown("wh", "lo"))

    def test_shown_card_unknown(self, reasoner):
        with pytest.raises(UnknownIdentifier):
            reasoner.assert_suggestion("sc", "mu", "kn", "ha", Shown("wh", "zz"))

    def test_wrong_category_order(self, reasoner):
        with pytest.raises(MalformedEvent, match="expected a weapon"):
            reasoner.assert_suggestion("sc", "mu", "ha", "kn")

    def test_unknown_refuter(self, reasoner):
        with pytest.raises(UnknownIdentifier):
            reasoner.assert_suggestion("sc", "mu", "kn", "ha", RefutedUnknown("zz"))

    def test_rejected_event_adds_no_clause(self, reasoner):
        before = reasoner.clause_count
        with pytest.raises(MalformedEvent):
            reasoner.assert_suggestion("sc", "mu", "kn", "ha", RefutedUnknown("sc"))
        assert reasoner.clause_count == before


# ═══════════════════════════════════════════════════════════════════
#  Accusations
# ═══════════════════════════════════════════════════════════════════


class TestAccusation:
    def test_correct_accusation_pins_case_file(self, reasoner):
        reasoner.assert_accusation("sc", "pe", "pi", "bi", True)
        assert reasoner.query("cf", "pe") is T
        assert reasoner.query("cf", "mu") is F
        assert reasoner.query("sc", "pi") is F

    def test_incorrect_accusation_with_two_known(self, reasoner):
        reasoner.assert_accusation_event(Accusation("mu", ("pe", "pi", "ba"), False))
        assert reasoner.query("cf", "ba") is U
        reasoner.assert_suggestion("pl", "pe", "pi", "ha")
        reasoner.assert_suggestion("pe", "pe", "pi", "ha")
        assert reasoner.query("cf", "ba") is F

    def test_contradicting_accusation_is_detected(self, reasoner):
        reasoner.assert_hand("sc", ["pe"])
        with pytest.raises(Contradiction):
            reasoner.assert_accusation("mu", "pe", "pi", "bi", True)
        assert not reasoner.is_consistent

    def test_session_is_dead_after_contradiction(self, reasoner):
        reasoner.assert_accusation("sc", "pe", "pi", "bi", True)
        with pytest.raises(Contradiction):
            reasoner.assert_accusation("mu", "pe", "pi", "bi", False)
        with pytest.raises(Contradiction):
            reasoner.query("sc", "wh")
        with pytest.raises(Contradiction):
            reasoner.assert_hand("sc", ["wh"])

    def test_contradiction_found_at_query_when_not_verifying(self):
        cr = ClueReasoner(settings=ReasonerConfig(verify_on_assert=False))
        cr.assert_hand("sc", ["pe"])
        cr.assert_hand("mu", ["pe"])
        with pytest.raises(Contradiction):
            cr.query("wh", "kn")
        assert not cr.is_consistent

    def test_malformed_accusation(self, reasoner):
        with pytest.raises(MalformedEvent):
            reasoner.assert_accusation("sc", "kn", "pe", "bi", True)
        with pytest.raises(MalformedEvent):
            reasoner.assert_accusation("cf", "pe", "pi", "bi", True)


# ═══════════════════════════════════════════════════════════════════
#  Derived views
# ═══════════════════════════════════════════════════════════════════


class TestDerivedViews:
    def test_holder_of(self, reasoner):
        assert reasoner.holder_of("kn") is None
        reasoner.assert_suggestion("sc", "mu", "kn", "ha", Shown("mu", "kn"))
        assert reasoner.holder_of("kn") == "mu"

    def test_solution_partial(self, reasoner):
        reasoner.assert_suggestion("pl", "pe", "pi", "ba")
        reasoner.assert_suggestion("pe", "pe", "pi", "ha")
        solution = reasoner.solution()
        assert solution[Category.SUSPECT] == "pe"
        assert solution[Category.WEAPON] == "pi"
        assert solution[Category.ROOM] is None
        assert not reasoner.is_solved()

    def test_solved_after_correct_accusation(self, reasoner):
        reasoner.assert_accusation("sc", "pe", "pi", "bi", True)
        assert reasoner.is_solved()

    def test_monotonic_knowledge(self, mini_reasoner):
        mini_reasoner.assert_hand("p1", ["s1", "r1"])
        mini_reasoner.assert_suggestion("p2", "s2", "w1", "r2", RefutedUnknown("p3"))
        before = mini_reasoner.notepad().grid
        mini_reasoner.assert_suggestion("p3", "s2", "w2", "r3", Shown("p1", "r3"))
        after = mini_reasoner.notepad().grid
        for card, row in before.items():
            for holder, verdict in row.items():
                if verdict.is_known:
                    assert after[card][holder] is verdict

    def test_query_does_not_change_knowledge(self, mini_reasoner):
        mini_reasoner.assert_hand("p1", ["s1"])
        clauses = mini_reasoner.clause_count
        first = mini_reasoner.query("p2", "w1")
        mini_reasoner.query("cf", "s2")
        assert mini_reasoner.query("p2", "w1") is first
        assert mini_reasoner.clause_count == clauses
