"""Tests for the score_pair and rank_candidates command line tools."""

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pandas as pd
import pytest

SCRIPTS_DIR = Path(__file__).parent.parent / "scripts"


def _load_script(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def config_path(settings_file) -> str:
    return settings_file("similarity:\n  max_input_chars: 1000\nlogging:\n  level: WARNING\n")


class TestScorePairCli:
    """Test the pairwise trace tool."""

    def test_json_output(self, capsys, config_path):
        score_pair = _load_script("score_pair")
        exit_code = score_pair.main(["the cat sat", "the cat ran", "--json", "--config", config_path])

        assert exit_code == 0
        report = json.loads(capsys.readouterr().out)
        assert report["jaccardSimilarity"] == pytest.approx(0.5)
        assert len(report["wordMatches"]) == 3

    def test_trace_output(self, capsys, config_path):
        score_pair = _load_script("score_pair")
        score_pair.main(["Hello, World!", "hello world", "--config", config_path])

        out = capsys.readouterr().out
        assert "SIMILARITY SCORING TRACE" in out
        assert "FINAL RESULT: 100.00% similarity" in out

    def test_file_inputs(self, capsys, tmp_path, config_path):
        a = tmp_path / "a.txt"
        b = tmp_path / "b.txt"
        a.write_text("one line\nanother line\n", encoding="utf-8")
        b.write_text("one line\n", encoding="utf-8")

        score_pair = _load_script("score_pair")
        score_pair.main([str(a), str(b), "--file", "--json", "--config", config_path])

        report = json.loads(capsys.readouterr().out)
        assert [m["originalLine"] for m in report["lineMatches"]] == ["one line", "another line", ""]

    def test_invalid_settings_reported(self, capsys, settings_file):
        path = settings_file(
            "similarity:\n  edit_distance:\n    engine: rapidfuzz\n  weights:\n    jaccard: 0.9\n",
        )
        score_pair = _load_script("score_pair")
        score_pair.main(["abc", "abd", "--json", "--config", path])

        err = capsys.readouterr().err
        assert "similarity.weights.jaccard is fixed at 0.4" in err

    @pytest.mark.parametrize("extra", [[], ["--json"]])
    def test_unknown_engine_exits_with_error(self, capsys, settings_file, extra):
        path = settings_file("similarity:\n  edit_distance:\n    engine: hamming\n")
        score_pair = _load_script("score_pair")
        exit_code = score_pair.main(["abc", "abd", "--config", path, *extra])

        assert exit_code == 1
        err = capsys.readouterr().err
        assert "Warning: similarity.edit_distance.engine" in err
        assert "Error: Unknown edit distance engine 'hamming'" in err


class TestRankCandidatesCli:
    """Test the batch ranking tool."""

    @pytest.fixture
    def candidates_csv(self, tmp_path) -> str:
        path = tmp_path / "candidates.csv"
        pd.DataFrame(
            {
                "id": ["1", "2", "3", "4"],
                "name": ["far", "exact", "partial", "blank"],
                "content": ["xyz", "hello world", "hello", ""],
            },
        ).to_csv(path, index=False)
        return str(path)

    def test_ranked_table(self, capsys, candidates_csv, config_path):
        rank_candidates = _load_script("rank_candidates")
        exit_code = rank_candidates.main(["hello world", candidates_csv, "--config", config_path])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert out.index("exact") < out.index("partial") < out.index("far")
        assert "blank" not in out
        assert "100.00" in out

    def test_output_csv_and_top(self, capsys, tmp_path, candidates_csv, config_path):
        output = tmp_path / "ranked.csv"
        rank_candidates = _load_script("rank_candidates")
        rank_candidates.main(
            ["hello world", candidates_csv, "--top", "2", "--output", str(output), "--config", config_path],
        )

        ranked = pd.read_csv(output, dtype={"id": str, "similarity_percentage": str})
        assert ranked["name"].tolist() == ["exact", "partial"]
        assert ranked["similarity_percentage"].tolist() == ["100.00", "45.45"]

    def test_bad_candidate_file(self, capsys, tmp_path, config_path):
        rank_candidates = _load_script("rank_candidates")
        exit_code = rank_candidates.main(
            ["hello", str(tmp_path / "missing.csv"), "--config", config_path],
        )

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().err

    def test_no_candidates(self, capsys, tmp_path, config_path):
        path = tmp_path / "empty.csv"
        pd.DataFrame(columns=["id", "name", "content"]).to_csv(path, index=False)

        rank_candidates = _load_script("rank_candidates")
        assert rank_candidates.main(["hello", str(path), "--config", config_path]) == 0
        assert "No documents found for comparison" in capsys.readouterr().out

    def test_unknown_engine_exits_with_error(self, capsys, settings_file, candidates_csv):
        path = settings_file("similarity:\n  edit_distance:\n    engine: hamming\n")
        rank_candidates = _load_script("rank_candidates")
        exit_code = rank_candidates.main(["hello world", candidates_csv, "--config", path])

        assert exit_code == 1
        assert "Error: Unknown edit distance engine 'hamming'" in capsys.readouterr().err
