from __future__ import annotations

import json

from typer.testing import CliRunner

from qagen.cli import app
from qagen.config import load_config

runner = CliRunner()


def test_init_writes_config(tmp_path):
    config_dir = tmp_path / "cfg"

    result = runner.invoke(app, ["init", "--config-dir", str(config_dir), "--model", "gpt-4o"])

    assert result.exit_code == 0
    assert load_config(config_dir / "config.yaml").llm.model == "gpt-4o"


def test_init_refuses_to_overwrite(tmp_path):
    config_dir = tmp_path / "cfg"
    runner.invoke(app, ["init", "--config-dir", str(config_dir)])

    result = runner.invoke(app, ["init", "--config-dir", str(config_dir)])

    assert result.exit_code == 1


def test_rank_prints_related_articles(database_csv, article_file, config_file):
    result = runner.invoke(
        app,
        ["rank", str(database_csv), "--article", str(article_file), "--config", str(config_file)],
    )

    assert result.exit_code == 0
    assert "Ranking Summary" in result.output
    assert "Candidates scored: 3" in result.output


def test_rank_reads_article_from_stdin(database_csv, config_file):
    result = runner.invoke(
        app,
        ["rank", str(database_csv), "--top-k", "1", "--config", str(config_file)],
        input="夏天防曬乳推薦",
    )

    assert result.exit_code == 0
    assert "102" in result.output


def test_rank_fails_on_empty_database(tmp_path, article_file, config_file):
    database = tmp_path / "empty.csv"
    database.write_text("id,title,content\n", encoding="utf-8")

    result = runner.invoke(
        app,
        ["rank", str(database), "--article", str(article_file), "--config", str(config_file)],
    )

    assert result.exit_code == 1
    assert "No related articles found" in result.output


def test_rank_fails_on_missing_database(tmp_path, article_file, config_file):
    result = runner.invoke(
        app,
        ["rank", str(tmp_path / "nope.csv"), "--article", str(article_file), "--config", str(config_file)],
    )

    assert result.exit_code == 1


def test_generate_writes_outputs(tmp_path, database_csv, article_file, config_file):
    out = tmp_path / "out"

    result = runner.invoke(
        app,
        [
            "generate", str(database_csv),
            "--article", str(article_file),
            "--output", str(out),
            "--mock",
            "--config", str(config_file),
        ],
    )

    assert result.exit_code == 0
    saved = json.loads((out / "qa.json").read_text(encoding="utf-8"))
    assert len(saved["qa_pairs"]) == 6
    assert saved["model"] == "mock"
    assert (out / "qa.md").exists()


def test_generate_fails_without_context(tmp_path, article_file, config_file):
    database = tmp_path / "empty.csv"
    database.write_text("id,title,content\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "generate", str(database),
            "--article", str(article_file),
            "--output", str(tmp_path / "out"),
            "--mock",
            "--config", str(config_file),
        ],
    )

    assert result.exit_code == 1
    assert not (tmp_path / "out" / "qa.json").exists()


def test_regenerate_replaces_pair(tmp_path, database_csv, article_file, config_file):
    out = tmp_path / "out"
    runner.invoke(
        app,
        [
            "generate", str(database_csv),
            "--article", str(article_file),
            "--output", str(out),
            "--mock",
            "--config", str(config_file),
        ],
    )
    before = json.loads((out / "qa.json").read_text(encoding="utf-8"))

    result = runner.invoke(
        app,
        ["regenerate", str(out / "qa.json"), "1", str(database_csv), "--mock", "--config", str(config_file)],
    )

    assert result.exit_code == 0
    after = json.loads((out / "qa.json").read_text(encoding="utf-8"))
    assert after["qa_pairs"][0] == before["qa_pairs"][0]
    assert after["qa_pairs"][1] != before["qa_pairs"][1]


def test_regenerate_rejects_bad_index(tmp_path, database_csv, article_file, config_file):
    out = tmp_path / "out"
    runner.invoke(
        app,
        [
            "generate", str(database_csv),
            "--article", str(article_file),
            "--output", str(out),
            "--mock",
            "--config", str(config_file),
        ],
    )

    result = runner.invoke(
        app,
        ["regenerate", str(out / "qa.json"), "9", str(database_csv), "--mock", "--config", str(config_file)],
    )

    assert result.exit_code == 1


def test_rank_rejects_top_k_above_limit(database_csv, article_file, config_file):
    result = runner.invoke(
        app,
        ["rank", str(database_csv), "--article", str(article_file), "--top-k", "51", "--config", str(config_file)],
    )

    assert result.exit_code == 2
