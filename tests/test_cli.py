"""End-to-end tests for the disc-profile command-line tool."""
import json

import pytest

from disc_profile import cli
from disc_profile.config import get_settings
from disc_profile.schemas.questionnaire import GROUP_COUNT


@pytest.fixture(autouse=True)
def cli_environment(monkeypatch):
    """Leave the test structlog setup in place and start from default settings."""
    monkeypatch.setattr(cli, "configure_logging", lambda settings=None: None)
    monkeypatch.delenv("REQUIRE_COMPLETE_RESPONSES", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def answer_file(tmp_path, sample_answers):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps(sample_answers), encoding="utf-8")
    return path


class TestScore:
    def test_json_output(self, answer_file, capsys):
        assert cli.main(["score", str(answer_file), "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["tally"] == [27, 0, -26, -1]
        assert result["segment"] == [7, 3, 1, 4]
        assert result["profile"]["profile_id"] == "developer"
        assert result["answered"] == GROUP_COUNT

    def test_table_output(self, answer_file, capsys):
        assert cli.main(["score", str(answer_file)]) == 0
        out = capsys.readouterr().out
        assert "Developer Pattern" in out
        assert "Dominance" in out
        assert "Fears:" in out

    def test_wrapped_responses_key(self, tmp_path, sample_answers, capsys):
        path = tmp_path / "wrapped.json"
        path.write_text(json.dumps({"responses": sample_answers}), encoding="utf-8")
        assert cli.main(["score", str(path), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["profile"]["name"] == "Developer"

    def test_unanswered_sheet(self, tmp_path, capsys):
        path = tmp_path / "blank.json"
        path.write_text(json.dumps([{"most": None, "least": None}] * GROUP_COUNT))
        assert cli.main(["score", str(path), "--json"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["segment"] == [6, 3, 3, 5]
        assert result["profile"]["profile_id"] == "creative"
        assert result["unanswered_groups"] == list(range(GROUP_COUNT))

    def test_highlight(self, answer_file, capsys):
        assert cli.main(["score", str(answer_file), "--highlight", "d"]) == 0
        out = capsys.readouterr().out
        assert "DOMINANCE" in out
        assert "getting immediate results" in out


class TestScoreErrors:
    def test_wrong_length(self, tmp_path, sample_answers, capsys):
        path = tmp_path / "short.json"
        path.write_text(json.dumps(sample_answers[:-1]), encoding="utf-8")
        assert cli.main(["score", str(path)]) == 2
        assert "error:" in capsys.readouterr().err

    def test_unknown_word(self, tmp_path, sample_answers, capsys):
        answers = list(sample_answers)
        answers[0] = {"most": "cautious", "least": "daring"}
        path = tmp_path / "typo.json"
        path.write_text(json.dumps(answers), encoding="utf-8")
        assert cli.main(["score", str(path)]) == 2
        assert "cautious" in capsys.readouterr().err

    def test_answer_not_an_object(self, tmp_path, capsys):
        path = tmp_path / "strings.json"
        path.write_text(json.dumps(["daring"] * GROUP_COUNT), encoding="utf-8")
        assert cli.main(["score", str(path)]) == 2
        assert "error:" in capsys.readouterr().err

    def test_word_not_a_string(self, tmp_path, sample_answers, capsys):
        answers = list(sample_answers)
        answers[3] = {"most": 5, "least": "conventional"}
        path = tmp_path / "numeric.json"
        path.write_text(json.dumps(answers), encoding="utf-8")
        assert cli.main(["score", str(path)]) == 2
        assert "Answer 4" in capsys.readouterr().err

    def test_missing_file(self, tmp_path):
        assert cli.main(["score", str(tmp_path / "missing.json")]) == 2

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[{", encoding="utf-8")
        assert cli.main(["score", str(path)]) == 2

    def test_strict_mode(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("REQUIRE_COMPLETE_RESPONSES", "true")
        path = tmp_path / "blank.json"
        path.write_text(json.dumps([None] * GROUP_COUNT))
        assert cli.main(["score", str(path)]) == 2
        assert "unanswered" in capsys.readouterr().err


class TestReferenceCommands:
    def test_questions(self, capsys):
        assert cli.main(["questions"]) == 0
        out = capsys.readouterr().out
        assert "enthusiastic" in out
        assert "pioneering" in out

    def test_profiles(self, capsys):
        assert cli.main(["profiles"]) == 0
        out = capsys.readouterr().out
        assert "Achiever Pattern" in out
        assert "Invalid" not in out

    def test_no_command(self, capsys):
        assert cli.main([]) == 1
