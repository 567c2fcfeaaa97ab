# ruspahy

A small smoothed particle hydrodynamics (SPH) solver for solids, written in
pure Python with no dependencies outside the standard library. Particles are
laid out on a regular grid or as spheres. They interact through Poly6, Spiky
and viscosity kernels and carry a simple elastoplastic model with linear
hardening and damage. The particle state is written as legacy ASCII VTK files
that can be opened in ParaView or similar tools.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running a simulation

```
ruspahy
```

The command reads a TOML configuration, builds the particle system, and then
for every step rebuilds the neighbour lists, computes forces and stresses, and
advances the particles with an explicit Euler integrator. Every
`output_interval` steps (starting with step 0) it writes `step_<n>.vtk` and
prints `Output: <path>`. It ends with `Simulation completed.`.

Options:

- `--config PATH`: the TOML configuration (default `assets/config.toml`)
- `--output-dir DIR`: the directory that receives the snapshots (default
  `output`, created if missing)

If the configuration cannot be read or is invalid, or the run fails, the
command prints an error to standard error and exits with status 1.

## Configuration

```toml
grid = [10, 10, 10]       # particles along x, y, z when no spheres are given
spacing = 0.1             # particle spacing
time_step = 0.001
num_steps = 100
output_interval = 10      # must be positive when num_steps > 0

[[materials]]
id = 0
name = "steel"
material_type = "elastoplastic_damage"   # elastic, elastoplastic, elastoplastic_damage, brittle
density = 7800.0
youngs_modulus = 2.0e11
yield_strength = 2.5e8       # optional
hardening_modulus = 1.0e9    # optional
damage_threshold = 0.2       # optional

[[interfaces]]
mat_a = 0
mat_b = 1
interface_type = "weak"      # strong, weak, variable
bond_strength = 0.5          # optional, defaults to 1.0

[[spheres]]
center = [0.0, 0.0, 0.0]
radius = 0.5
velocity = [1.0, 0.0, 0.0]
material_id = 0              # optional, defaults to 0
```

When `spheres` are present, particles are placed inside each sphere instead of
on the grid. Grid particles use material 0. A particle's `material_id` is an
index into the `materials` list, so every material used by a particle must be
listed; otherwise stress computation and output fail with an `IndexError`.

Missing fields, values of the wrong type and unknown material or interface
types raise `ValueError` from `load_config`.

## Using the library

```python
from ruspahy.config import load_config
from ruspahy.particle import ParticleSystem
from ruspahy.integrator import integrate
from ruspahy.output import write_vtk

config = load_config("config.toml")
psys = ParticleSystem(config)
for step in range(config.num_steps):
    psys.build_neighbor_list()
    psys.compute_forces()
    integrate(psys, config.time_step)
    if step % config.output_interval == 0:
        write_vtk(psys, f"step_{step}.vtk")
```

The same loop is available as `run_simulation(config, output_dir)` in
`ruspahy.cli`, which returns the list of snapshot paths it wrote.

Other building blocks:

- `ruspahy.config`: `SimConfig`, `SphereConfig` (each with `from_dict`) and
  `load_config`
- `ruspahy.material`: `Material`, `Interface`, `MaterialType`, `InterfaceType`
- `ruspahy.sph_kernel`: `SPHKernel` with `w_poly6`, `grad_w_spiky` and
  `lap_w_viscosity`
- `ruspahy.neighbor`: `build_neighbor_list(particles, radius)`, a uniform-grid
  search returning symmetric neighbour index lists
- `ruspahy.particle`: `Particle` and `ParticleSystem`, with
  `build_neighbor_list`, `compute_forces`, `find_interface` and
  `smoothing_length`
- `ruspahy.force`: `compute_density_pressure`, `compute_forces` and
  `compute_stress`

The smoothing length is 1.5 times the smallest distance between any two
particles (0.1 when there are fewer than two particles).

## Output

The VTK file holds particle positions as POLYDATA points and the point scalars
`pressure`, `stress`, `plastic_strain`, `damage`, `material_id` and
`material_type` (0 elastic, 1 elastoplastic, 2 elastoplastic_damage,
3 brittle).

## Limitations

- The solver runs on a single thread, and the smoothing length is found by
  comparing every pair of particles, so large particle counts are slow.
- Output is ASCII VTK only; there is no restart file or other storage of the
  simulation state.
- There are no boundaries, gravity or other external forces.