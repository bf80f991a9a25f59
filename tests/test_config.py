"""Tests for configuration management."""

import json
import pytest
from orbit_sandbox.utils.config import Config, load_config, save_config


def test_defaults():
    """Defaults reproduce the classic sandbox tuning."""
    config = Config()
    assert config.G == 100.0
    assert config.base_time_step == 0.02
    assert config.tail_length == 100
    assert config.anchor_mass == 1000.0
    assert (config.min_time_scale, config.max_time_scale) == (0.1, 5.0)
    assert config.mass_range == (1.0, 10.0)
    assert config.radius_range == (3.0, 8.0)
    assert config.max_bodies is None


@pytest.mark.parametrize("kwargs", [
    {"G": 0.0},
    {"anchor_radius": -1.0},
    {"tail_length": -5},
    {"width": 0},
    {"min_time_scale": 2.0, "max_time_scale": 1.0},
    {"mass_range": (5.0, 1.0)},
    {"max_bodies": 0},
    {"force_method": "tree"},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        Config(**kwargs)


def test_save_load_json(tmp_path):
    """JSON round trip keeps ranges as tuples."""
    path = tmp_path / "sandbox.json"
    save_config(Config(G=50.0, mass_range=(2.0, 4.0), seed=7), str(path))

    with open(path) as f:
        assert json.load(f)["mass_range"] == [2.0, 4.0]

    loaded = load_config(str(path))
    assert loaded.G == 50.0
    assert loaded.mass_range == (2.0, 4.0)
    assert loaded.seed == 7


def test_load_partial_yaml(tmp_path):
    """YAML files may set only a few keys."""
    path = tmp_path / "sandbox.yaml"
    path.write_text("tail_length: 30\nradius_range: [2, 6]\nmax_bodies: 50\n")

    loaded = load_config(str(path))
    assert loaded.tail_length == 30
    assert loaded.radius_range == (2.0, 6.0)
    assert loaded.max_bodies == 50
    assert loaded.G == 100.0


def test_unsupported_format(tmp_path):
    path = tmp_path / "sandbox.toml"
    path.write_text("G = 1\n")
    with pytest.raises(ValueError):
        load_config(str(path))
    with pytest.raises(ValueError):
        save_config(Config(), str(tmp_path / "out.ini"))
