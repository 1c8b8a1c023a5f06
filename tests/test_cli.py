from typer.testing import CliRunner

from text_ranker import summarize
from text_ranker.cli import app

runner = CliRunner()
SIMPLE = "This is a simple sentence. This is another simple sentence."


def test_summarize_prints_summary():
    result = runner.invoke(app, [SIMPLE, "-n", "1"])
    assert result.exit_code == 0
    assert "This is a simple sentence." in result.output
    assert "another" not in result.output

def test_reads_stdin():
    result = runner.invoke(app, ["-", "-n", "5"], input=SIMPLE)
    assert result.exit_code == 0
    assert "another simple sentence." in result.output

def test_scores_table():
    result = runner.invoke(app, [SIMPLE, "-n", "1", "--scores"])
    assert result.exit_code == 0
    assert "Sentence Scores" in result.output
    assert "yes" in result.output

def test_undetected_language_exits_1():
    result = runner.invoke(app, [""])
    assert result.exit_code == 1
    assert "Cannot detect language" in result.output

def test_config_file(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text('{"sentence_count": 1}')
    result = runner.invoke(app, [SIMPLE, "--config", str(path)])
    assert result.exit_code == 0
    assert "another" not in result.output

def test_summary_printed_verbatim():
    text = ("The quick brown fox jumps over the lazy dog by the quiet river bank again and again today. "
            "The quick brown fox runs past the sleepy dog by the quiet river bank tonight :smile: again.")
    result = runner.invoke(app, [text, "-n", "5"])
    assert result.exit_code == 0
    assert result.stdout == summarize(text, 5) + "\n"
    assert ":smile:" in result.stdout
