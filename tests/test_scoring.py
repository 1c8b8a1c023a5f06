import pytest

from text_ranker.graphing import build_relevance_matrix
from text_ranker.preprocessing import preprocess_text
from text_ranker.scoring import DAMPING, score_sentences


def test_single_sentence_scores_baseline():
    M = build_relevance_matrix(preprocess_text("Only one sentence here."))
    scores = score_sentences(M)
    assert scores == [1 - DAMPING]  # 0.19999999999999996, not the literal 0.2
    assert scores[0] == pytest.approx(0.2)

def test_no_overlap_all_ties():
    M = build_relevance_matrix(preprocess_text("Apples are red. Bananas look yellow. Grapes grow fast."))
    assert score_sentences(M) == [1 - DAMPING] * 3

def test_empty_matrix():
    assert score_sentences([]) == []

def test_scores_sum_to_baseline_plus_damping():
    M = [[0.0, 2.0, 1.0], [2.0, 0.0, 0.0], [1.0, 0.0, 0.0]]
    scores = score_sentences(M)
    assert len(scores) == 3
    assert sum(scores) == pytest.approx(3 * (1 - DAMPING) + DAMPING)
    assert scores[0] == pytest.approx(0.2 + 0.8 * 3 / 6)
    assert scores[0] > scores[1] > scores[2]

def test_custom_damping_and_precomputed_total():
    M = [[0.0, 1.0], [1.0, 0.0]]
    assert score_sentences(M, total=2.0, damping=0.5) == [0.75, 0.75]
