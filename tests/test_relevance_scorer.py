"""
Comprehensive tests for RelevanceScorer.

Tests cover:
- Empty-query pass-through
- TF-IDF contribution (including negative IDF)
- Question, exact phrase, category, tag and popularity boosts
- Relevance cut-off and sort order (stable on ties)
- Immutability of input FAQs
"""

import math

import pytest

from faq_service.domain.entities import FAQ
from faq_service.search.relevance_scorer import RelevanceScorer, ScoreBreakdown


def make_faq(faq_id: str, question: str, answer: str = "", **kwargs) -> FAQ:
    """Helper to create FAQ entities with zeroed counters."""
    return FAQ(id=faq_id, question=question, answer=answer, **kwargs)


@pytest.fixture
def scorer():
    return RelevanceScorer()


# ============================================================================
# Empty query
# ============================================================================


class TestEmptyQuery:
    """An empty query returns the input untouched."""

    @pytest.mark.parametrize("query", ["", "   ", "\t\n"])
    def test_identity(self, scorer, sample_faqs, query):
        results = scorer.rank_faqs(query, sample_faqs)

        assert results == sample_faqs
        assert [faq.id for faq in results] == ["1", "2", "3", "4"]
        assert all(faq.relevance_score is None for faq in results)

    def test_none_query(self, scorer, sample_faqs):
        assert scorer.rank_faqs(None, sample_faqs) == sample_faqs


# ============================================================================
# Ranking
# ============================================================================


class TestRanking:
    """Test scoring, filtering and ordering."""

    def test_sample_ranking_order(self, scorer, sample_faqs):
        results = scorer.rank_faqs("password", sample_faqs)

        # Popularity keeps every sample FAQ above the cut-off
        assert [faq.id for faq in results] == ["1", "3", "2", "4"]
        scores = [faq.relevance_score for faq in results]
        assert scores == sorted(scores, reverse=True)

    def test_zero_overlap_excluded(self, scorer):
        shipping = make_faq("a", "Shipping times", "Orders ship within two days.")
        refund = make_faq("b", "How do I request a refund?", "Refunds are processed within five days.")

        results = scorer.rank_faqs("refund", [shipping, refund])

        assert [faq.id for faq in results] == ["b"]
        # tf-idf is 0 (ln(2/2)), question boost 2, exact match 3
        assert results[0].relevance_score == pytest.approx(5.0)

    def test_popularity_alone_can_pass_cut_off(self, scorer):
        faq = make_faq("p", "Shipping times", "Orders ship fast.", helpful=5)

        results = scorer.rank_faqs("refund", [faq])

        assert len(results) == 1
        assert results[0].relevance_score == pytest.approx(1.0)

    def test_negative_votes_excluded(self, scorer):
        faq = make_faq("n", "Shipping times", "Orders ship fast.", views=100, not_helpful=3)

        assert scorer.rank_faqs("refund", [faq]) == []

    def test_ties_keep_input_order(self, scorer):
        first = make_faq("a", "Refund window", "Thirty days.")
        second = make_faq("b", "Refund window", "Thirty days.")

        assert [faq.id for faq in scorer.rank_faqs("refund", [first, second])] == ["a", "b"]
        assert [faq.id for faq in scorer.rank_faqs("refund", [second, first])] == ["b", "a"]

    def test_empty_corpus(self, scorer):
        assert scorer.rank_faqs("refund", []) == []

    def test_empty_fields_degenerate(self, scorer):
        empty = make_faq("e", "", "")
        refund = make_faq("r", "Refund policy", "Money back within thirty days.")

        results = scorer.rank_faqs("refund", [empty, refund])

        assert [faq.id for faq in results] == ["r"]

    def test_stop_word_only_query(self, scorer):
        """No terms left: only exact match and popularity contribute."""
        faq = make_faq("1", "How to reset", "Click reset.")

        results = scorer.rank_faqs("how to", [faq])

        assert len(results) == 1
        assert results[0].relevance_score == pytest.approx(3.0)

    def test_inputs_not_mutated(self, scorer, sample_faqs):
        results = scorer.rank_faqs("password", sample_faqs)

        assert all(faq.relevance_score is None for faq in sample_faqs)
        assert results[0] is not sample_faqs[0]
        assert results[0].question == sample_faqs[0].question

    def test_score_matches_breakdown(self, scorer, sample_faqs):
        by_id = {faq.id: faq for faq in sample_faqs}

        for ranked in scorer.rank_faqs("payment refund", sample_faqs):
            breakdown = scorer.explain("payment refund", by_id[ranked.id], sample_faqs)
            assert breakdown.total == pytest.approx(ranked.relevance_score)


# ============================================================================
# Boosts
# ============================================================================


class TestBoosts:
    """Test individual score components."""

    def test_exact_match_boost_dominance(self, scorer):
        """Same tokens, but only one contains the query verbatim."""
        verbatim = make_faq("x", "Where is my token?", "Use the reset token from the email.")
        shuffled = make_faq("y", "Where is my token?", "Use the token reset from the email.")

        results = scorer.rank_faqs("reset token", [shuffled, verbatim])

        assert [faq.id for faq in results] == ["x", "y"]
        assert results[0].relevance_score - results[1].relevance_score == pytest.approx(3.0)

    def test_exact_match_uses_raw_query(self, scorer, sample_faqs):
        faq = sample_faqs[0]

        assert scorer.explain("RESET my password?", faq, sample_faqs).exact_match_boost == 3.0
        assert scorer.explain("reset password", faq, sample_faqs).exact_match_boost == 0.0

    def test_question_boost_per_unique_term(self, scorer):
        faq = make_faq("q", "Reset password for email account", "See settings.")

        breakdown = scorer.explain("reset password email email", faq, [faq])

        assert breakdown.question_boost == 6.0

    def test_duplicate_query_terms_counted_once(self, scorer, sample_faqs):
        once = scorer.explain("password", sample_faqs[0], sample_faqs)
        twice = scorer.explain("password password", sample_faqs[0], sample_faqs)

        assert twice.tfidf == pytest.approx(once.tfidf)
        assert twice.question_boost == once.question_boost

    def test_category_is_tokenized_but_tags_are_not(self, scorer):
        faq = make_faq(
            "f",
            "Enable login codes",
            "Turn it on in settings.",
            category="Two-Factor",
            tags=("two-factor",),
        )

        breakdown = scorer.explain("two-factor", faq, [faq])

        assert breakdown.category_boost == 1.5
        assert breakdown.tag_boost == 0.0

    def test_tag_boost_case_insensitive(self, scorer):
        faq = make_faq("t", "Forgot it", "Use the link.", tags=("Password",))

        assert scorer.explain("password", faq, [faq]).tag_boost == 1.5

    def test_no_category(self, scorer):
        faq = make_faq("c", "Refund policy", "Money back.")

        assert scorer.explain("refund", faq, [faq]).category_boost == 0.0

    def test_popularity_boost(self, scorer):
        faq = make_faq("p", "Refund policy", "Money back.", views=99, helpful=3, not_helpful=1)

        expected = math.log(100) * 0.1 + 2 * 0.2
        assert scorer.explain("refund", faq, [faq]).popularity_boost == pytest.approx(expected)

    def test_accented_query_terms_fall_apart(self, scorer):
        faq = make_faq("n", "Naïve payment", "Pay by card.")

        breakdown = scorer.explain("naïve", faq, [faq])

        # "naïve" splits into "na" and "ve", both too short to be terms
        assert breakdown.question_boost == 0.0
        assert breakdown.tfidf == 0.0
        assert breakdown.exact_match_boost == 3.0

    def test_ubiquitous_term_has_negative_tfidf(self, scorer):
        faqs = [
            make_faq("1", "Account email", "Change it."),
            make_faq("2", "Account password", "Reset it."),
            make_faq("3", "Account deletion", "Contact us."),
        ]

        assert scorer.explain("account", faqs[0], faqs).tfidf < 0


class TestScoreBreakdown:
    def test_total(self):
        breakdown = ScoreBreakdown(
            tfidf=0.5,
            question_boost=2.0,
            exact_match_boost=3.0,
            category_boost=1.5,
            tag_boost=1.5,
            popularity_boost=-0.5,
        )

        assert breakdown.total == pytest.approx(8.0)
        assert breakdown.to_dict()["total"] == pytest.approx(8.0)

    def test_defaults_to_zero(self):
        assert ScoreBreakdown().total == 0.0


class TestScorerStats:
    def test_get_stats(self, scorer):
        stats = scorer.get_stats()

        assert stats["boosts"]["exact_match"] == 3.0
        assert stats["boosts"]["question_term"] == 2.0
        assert stats["min_relevance_score"] == 0.1
        assert stats["stop_words"] == 29
