from .datatypes import Sentence, Document, Edge, Graph, RankResult
from .errors import SummarizerError, LanguageUndetected, InvalidSentenceCount
from .config import SummarizerConfig
from .preprocessing import split_sentences, tokenize, build_vocabulary, preprocess_text
from .graphing import compute_relevance, build_relevance_matrix, total_relevance, build_graph
from .scoring import DAMPING, score_sentences
from .language import detect_language
from .summarize import select_top, generate_summary, rank, summarize, summarize_text
