import pytest

from text_ranker import InvalidSentenceCount, rank, select_top, summarize

SIMPLE = "This is a simple sentence. This is another simple sentence."
ARTICLE = (
    "The river flooded the valley after the storm. "
    "Farmers in the valley lost crops to the flood. "
    "A new bakery opened downtown on Monday. "
    "The storm and the flood damaged roads across the valley. "
    "Officials expect the river to recede by Friday."
)


def test_select_top_tie_goes_to_lowest_index():
    assert select_top([0.1, 0.5, 0.5, 0.3], 1) == [1]
    assert select_top([0.1, 0.5, 0.5, 0.3], 2) == [1, 2]
    assert select_top([0.1, 0.5, 0.5, 0.3], 3) == [1, 2, 3]

def test_select_top_more_than_available():
    assert select_top([0.3, 0.9, 0.1], 10) == [0, 1, 2]

def test_select_top_zero_and_empty():
    assert select_top([0.3, 0.9], 0) == []
    assert select_top([], 3) == []

@pytest.mark.parametrize("bad", [-1, 1.5, True])
def test_invalid_counts(bad):
    with pytest.raises(InvalidSentenceCount):
        select_top([0.1], bad)
    with pytest.raises(InvalidSentenceCount):
        summarize(SIMPLE, bad)

def test_simple_pair_picks_first_sentence():
    assert summarize(SIMPLE, 1) == "This is a simple sentence. "

def test_all_sentences_when_n_exceeds_count():
    assert summarize(SIMPLE, 5) == SIMPLE
    assert summarize(ARTICLE, 50) == ARTICLE

def test_empty_input_and_zero_n():
    assert summarize("", 5) == ""
    assert summarize(ARTICLE, 0) == ""

def test_single_token_sentences_tie():
    assert summarize("Yes. Yes.", 1) == "Yes. "

def test_article_keeps_document_order():
    result = rank(ARTICLE)
    assert len(result) == 5
    assert result.scores[2] == pytest.approx(0.2)  # bakery sentence shares nothing
    summary = summarize(ARTICLE, 2)
    assert "bakery" not in summary
    picked = [s.text for s in result.document.sentences if s.text in summary]
    assert "".join(picked) == summary

def test_pipeline_is_deterministic():
    assert summarize(ARTICLE, 3) == summarize(ARTICLE, 3)
    assert rank(ARTICLE).scores == rank(ARTICLE).scores

def test_chinese_text():
    text = "我喜欢苹果。我喜欢香蕉。今天天气很好。"
    result = rank(text)
    assert len(result.document.sentences) == 3
    assert result.matrix[0][1] > 0
    assert result.matrix[0][2] == 0.0
    assert summarize(text, 1) == "我喜欢苹果。"
