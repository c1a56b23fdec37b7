"""
Tests for the evaluation harness and command line tools.
"""

import json

import pytest

from boxgame.box_core.config_loader import load_config
from boxgame.box_core.game import play
from boxgame.evaluation.run_eval import (
    evaluate_seeds,
    evaluate_single_seed,
    load_seed_bank,
    main,
    save_results,
)
from tools import benchmark_speed, play_tokens


@pytest.fixture
def config():
    return load_config()


class TestEvaluation:
    """Test seed-bank evaluation."""

    def test_seed_bank_loads(self):
        seeds = load_seed_bank()
        assert len(seeds) > 0
        assert all(isinstance(s, int) for s in seeds)

    def test_single_seed_matches_play(self, config, capsys):
        result = evaluate_single_seed(42, length=10, config=config)

        assert len(result.tokens) == 10
        assert (result.score_a, result.score_b) == play(result.tokens, config)

    def test_single_seed_is_deterministic(self, config):
        r1 = evaluate_single_seed(7, length=12, config=config)
        r2 = evaluate_single_seed(7, length=12, config=config)

        assert r1.tokens == r2.tokens
        assert (r1.score_a, r1.score_b) == (r2.score_a, r2.score_b)

    def test_summary(self, config):
        summary = evaluate_seeds([1, 2, 3, 4], length=6, config=config, verbose=False)

        assert len(summary.results) == 4
        assert summary.wins_a + summary.wins_b + summary.ties == 4
        scores_a = [r.score_a for r in summary.results]
        assert summary.mean_score_a == pytest.approx(sum(scores_a) / 4)
        assert min(scores_a) <= summary.median_score_a <= max(scores_a)

    def test_no_seeds_rejected(self, config):
        with pytest.raises(ValueError):
            evaluate_seeds([], config=config, verbose=False)

    def test_save_results(self, config, tmp_path):
        summary = evaluate_seeds([5, 6], length=4, config=config, verbose=False)
        out = tmp_path / "results.json"

        save_results(summary, str(out))

        data = json.loads(out.read_text())
        assert len(data["results"]) == 2
        assert data["results"][0]["seed"] == 5

    def test_cli(self, tmp_path, capsys):
        out = tmp_path / "results.json"

        assert main(["--quiet", "--length", "4", "--output", str(out)]) == 0
        assert out.exists()

    def test_cli_bad_seed_bank(self, tmp_path, capsys):
        assert main(["--seeds", str(tmp_path / "missing.json")]) == 1


class TestPlayTokensTool:
    """Test the play_tokens command line tool."""

    def test_fibonacci(self, capsys):
        assert play_tokens.main(["--fibonacci", "4"]) == 0

        out = capsys.readouterr().out
        assert "Scores: player A 13, player B 25" in out
        assert "Winner: player B" in out

    def test_explicit_tokens(self, capsys):
        assert play_tokens.main(["1", "1"]) == 0

        out = capsys.readouterr().out
        assert "Result: tie" in out

    def test_negative_tokens_rejected(self, capsys):
        assert play_tokens.main(["--", "1", "-2"]) == 1


class TestBenchmarkTool:
    """Test the benchmark_speed command line tool."""

    def test_quick_run(self, capsys):
        assert benchmark_speed.main(["--quick", "--games", "1", "--length", "4"]) == 0

        out = capsys.readouterr().out
        assert "BOX GAME PERFORMANCE BENCHMARK" in out

    def test_benchmark_result_fields(self, config):
        result = benchmark_speed.benchmark_core_game(num_games=2, length=4, config=config)

        assert result["num_games"] == 2
        assert result["length"] == 4
        assert result["turns_per_second"] > 0

    def test_missing_config(self, tmp_path, capsys):
        code = benchmark_speed.main(["--config", str(tmp_path / "missing.yaml")])

        assert code == 1
        assert "Error loading config" in capsys.readouterr().out

    def test_invalid_config(self, tmp_path, capsys):
        path = tmp_path / "bad.yaml"
        path.write_text("tokens:\n  min_weight: 9\n  max_weight: 3\n")

        assert benchmark_speed.main(["--config", str(path)]) == 1
