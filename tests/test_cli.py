import pytest

from ruspahy.cli import main, run_simulation
from ruspahy.config import SimConfig
from ruspahy.material import Material, MaterialType

CONFIG_TOML = """
grid = [2, 1, 1]
spacing = 0.1
time_step = 0.001
num_steps = 2
output_interval = 1

[[materials]]
id = 0
name = "steel"
material_type = "elastic"
density = 1000.0
youngs_modulus = 1.0e9
"""


def _config(num_steps=3, output_interval=2, materials=True):
    mats = (
        [Material(id=0, name="steel", material_type=MaterialType.ELASTIC, density=1000.0, youngs_modulus=1e9)]
        if materials
        else []
    )
    return SimConfig(
        grid=(2, 1, 1),
        spacing=0.1,
        time_step=0.001,
        num_steps=num_steps,
        output_interval=output_interval,
        materials=mats,
    )


def test_run_simulation_writes_every_interval(tmp_path, capsys):
    written = run_simulation(_config(), tmp_path)
    assert [p.name for p in written] == ["step_0.vtk", "step_2.vtk"]
    for path in written:
        assert path.read_text(encoding="ascii").startswith("# vtk DataFile Version 3.0\n")
    out = capsys.readouterr().out.splitlines()
    assert out == [f"Output: {p}" for p in written]


def test_run_simulation_zero_interval_raises(tmp_path):
    with pytest.raises(ValueError):
        run_simulation(_config(output_interval=0), tmp_path)


def test_run_simulation_no_steps_writes_nothing(tmp_path):
    assert run_simulation(_config(num_steps=0, output_interval=0), tmp_path) == []
    assert list(tmp_path.iterdir()) == []


def test_run_simulation_without_material_raises(tmp_path):
    with pytest.raises(IndexError):
        run_simulation(_config(materials=False), tmp_path)


def test_main_runs_from_config_file(tmp_path, capsys):
    config_path = tmp_path / "config.toml"
    config_path.write_text(CONFIG_TOML, encoding="utf-8")
    out_dir = tmp_path / "out"
    assert main(["--config", str(config_path), "--output-dir", str(out_dir)]) == 0
    assert sorted(p.name for p in out_dir.iterdir()) == ["step_0.vtk", "step_1.vtk"]
    assert capsys.readouterr().out.splitlines()[-1] == "Simulation completed."


def test_main_missing_config_fails(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "absent.toml"), "--output-dir", str(tmp_path)]) == 1
    assert "error" in capsys.readouterr().err


def test_main_invalid_toml_fails(tmp_path):
    config_path = tmp_path / "config.toml"
    config_path.write_text("grid = [", encoding="utf-8")
    assert main(["--config", str(config_path), "--output-dir", str(tmp_path)]) == 1