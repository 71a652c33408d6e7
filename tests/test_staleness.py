"""Tests for out-of-order reply rejection."""

from scout.suggest import PendingRequest, SuggestionSet, should_accept


class TestShouldAccept:
    def test_matching_term(self):
        assert should_accept(SuggestionSet("ab", ("abc",)), "ab")

    def test_other_term(self):
        assert not should_accept(SuggestionSet("a", ("abc",)), "ab")

    def test_nothing_pending(self):
        assert not should_accept(SuggestionSet("", ()), None)


class TestPendingRequest:
    def test_only_latest_term_accepted_in_either_order(self):
        for order in (["ab", "a"], ["a", "ab"]):
            pending = PendingRequest()
            pending.expect("a")
            pending.expect("ab")
            accepted = [t for t in order if pending.accepts(SuggestionSet(t))]
            assert accepted == ["ab"]

    def test_clear(self):
        pending = PendingRequest()
        pending.expect("x")
        pending.clear()
        assert pending.expected_term is None
        assert not pending.accepts(SuggestionSet("x"))

    def test_same_term_replies_are_both_accepted(self):
        pending = PendingRequest()
        pending.expect("cats")
        assert pending.accepts(SuggestionSet("cats", ("one",)))
        assert pending.accepts(SuggestionSet("cats", ("two",)))
