"""
Command-line entrypoint tests.
"""

import json

import pytest

from sitegen import cli
from conftest import FakeLLM, FakeScraper, component_source, not_found_scraper, tagged


@pytest.fixture
def brand_files(tmp_path, brand_content, brand_config):
    content_path = tmp_path / "content.json"
    brand_path = tmp_path / "brand.json"
    content_path.write_text(json.dumps(brand_content.model_dump()), encoding="utf-8")
    brand_path.write_text(json.dumps(brand_config.model_dump(by_alias=True)), encoding="utf-8")
    return ["--content", str(content_path), "--brand", str(brand_path), "--env-file", str(tmp_path / "none.env")]


def install_fakes(monkeypatch, llm, scraper=None):
    monkeypatch.setattr(cli, "LLMService", lambda settings: llm)
    monkeypatch.setattr(cli, "WebsiteScraper", lambda settings: scraper or FakeScraper())


def test_generates_files(monkeypatch, tmp_path, brand_files, analysis_json, capsys):
    llm = FakeLLM(analysis_response=analysis_json, generation_response=tagged("Hero", component_source("Hero")))
    install_fakes(monkeypatch, llm)
    output_dir = tmp_path / "out"

    exit_code = cli.main(["https://example.com", "-o", str(output_dir), *brand_files])

    assert exit_code == 0
    assert (output_dir / "Hero.tsx").read_text(encoding="utf-8") == component_source("Hero")
    assert "Generated 1 components" in capsys.readouterr().out


def test_stage_failure_exits_non_zero(monkeypatch, tmp_path, brand_files, analysis_json, capsys):
    install_fakes(monkeypatch, FakeLLM(analysis_response=analysis_json), scraper=not_found_scraper())

    exit_code = cli.main(["https://example.com", "-o", str(tmp_path / "out"), *brand_files])

    assert exit_code == 1
    assert "fetching failed: Failed to fetch URL: 404 Not Found" in capsys.readouterr().err


def test_missing_api_key_exits_non_zero(monkeypatch, tmp_path, brand_files, capsys):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)

    exit_code = cli.main(["https://example.com", *brand_files])

    assert exit_code == 1
    assert "ANTHROPIC_API_KEY" in capsys.readouterr().err


def test_missing_brand_file_exits_non_zero(monkeypatch, tmp_path, analysis_json, capsys):
    install_fakes(monkeypatch, FakeLLM(analysis_response=analysis_json))

    exit_code = cli.main([
        "https://example.com", "--content", str(tmp_path / "nope.json"), "--env-file", str(tmp_path / "none.env"),
    ])

    assert exit_code == 1
    assert "nope.json" in capsys.readouterr().err


def test_analyze_only_prints_json(monkeypatch, tmp_path, brand_files, analysis_json, capsys):
    llm = FakeLLM(analysis_response=analysis_json)
    install_fakes(monkeypatch, llm)
    saved = tmp_path / "analysis.json"

    exit_code = cli.main(["https://example.com", "--analyze-only", "--save-analysis", str(saved), *brand_files])

    assert exit_code == 0
    assert llm.generation_prompts == []
    assert json.loads(saved.read_text(encoding="utf-8"))["sections"][0]["name"] == "Hero"
    assert '"layoutPatterns"' in capsys.readouterr().out
