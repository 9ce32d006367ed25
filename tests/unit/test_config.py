"""core.config: YAML loading with defaults, inject() and path helpers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Annotated

import pytest

from core.config import (
    BatchSettings,
    SearchSettings,
    get_app_config,
    inject,
    load_app_config,
    normalize_input_path,
    reset_app_config,
)
from core.config.loader import load_app_config_yaml
from core.config.paths import ENV_DATA_DIR, get_data_dir


@pytest.fixture(autouse=True)
def _fresh_config():
    reset_app_config()
    yield
    reset_app_config()


def _write(d: str, text: str) -> Path:
    path = Path(d) / "app_config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadYaml:
    def test_partial_file_keeps_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            config = load_app_config_yaml(_write(d, "search:\n  max_results: 5\n"))
        assert config.search.max_results == 5
        assert config.search.min_score == 50
        assert config.batch.chunk_size == 25
        assert config.app.specs_filename == "axis_specs.json"

    @pytest.mark.parametrize(
        "text",
        [
            "search: [unclosed\n",
            "- just\n- a list\n",
            "search:\n  min_score: 500\n",
        ],
    )
    def test_invalid_file_falls_back_to_defaults(self, text: str) -> None:
        with tempfile.TemporaryDirectory() as d:
            config = load_app_config_yaml(_write(d, text))
        assert config.search.min_score == 50

    def test_missing_file(self) -> None:
        config = load_app_config_yaml(Path("/nonexistent/app_config.yaml"))
        assert config.batch.max_batch_size == 200


class TestInject:
    def test_resolves_loaded_sections(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            load_app_config(_write(d, "search:\n  max_suggestions: 1\nbatch:\n  show_progress: false\n"))
        assert inject(SearchSettings).max_suggestions == 1
        assert inject(BatchSettings).show_progress is False
        assert get_app_config().search.max_suggestions == 1

    def test_load_is_cached_until_reset(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            load_app_config(_write(d, "search:\n  min_score: 60\n"))
            load_app_config(_write(d, "search:\n  min_score: 70\n"))
            assert inject(SearchSettings).min_score == 60
            reset_app_config()
            load_app_config(Path(d) / "app_config.yaml")
            assert inject(SearchSettings).min_score == 70

    def test_rejects_plain_types(self) -> None:
        with pytest.raises(TypeError):
            inject(int)
        with pytest.raises(TypeError):
            inject(Annotated[int, "no marker"])


class TestPaths:
    @pytest.mark.skipif(os.name != "posix", reason="drive path mapping is posix-only")
    def test_windows_drive_path(self) -> None:
        assert normalize_input_path("'c:\\Users\\me\\models.xlsx'") == Path("/mnt/c/Users/me/models.xlsx")

    def test_strips_quotes(self) -> None:
        assert normalize_input_path('  "models.csv" ') == Path("models.csv")
        assert normalize_input_path("  ") == Path("")

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        with tempfile.TemporaryDirectory() as d:
            monkeypatch.setenv(ENV_DATA_DIR, d)
            assert get_data_dir() == Path(d).resolve()
