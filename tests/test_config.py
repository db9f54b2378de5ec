import pytest
from pydantic import ValidationError

from timing_modes.config import AppConfig, load_config
from timing_modes.types import PlotConfig


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("steps: 21\ncurves: [easeInQuad, easeOutBounce]\nprecision: 3\n", encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.steps == 21
    assert cfg.curves == ["easeInQuad", "easeOutBounce"]
    assert cfg.precision == 3
    assert cfg.output_dir is None


def test_load_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(str(path)) == AppConfig()


def test_plot_config_rejects_padding_without_area():
    with pytest.raises(ValidationError):
        PlotConfig(width=60, height=60, padding=30)


def test_plot_config_clamps_colors():
    cfg = PlotConfig(line_color=(300, -5, 10))
    assert cfg.line_color == (255, 0, 10)
