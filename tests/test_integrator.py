import pytest

from ruspahy.config import SimConfig
from ruspahy.integrator import integrate
from ruspahy.particle import ParticleSystem


def _single():
    config = SimConfig(grid=(1, 1, 1), spacing=0.1, time_step=0.1, num_steps=1, output_interval=1)
    return ParticleSystem(config)


def test_worked_step():
    psys = _single()
    p = psys.particles[0]
    p.force = [2000.0, 0.0, 0.0]
    p.density = 1000.0
    integrate(psys, 0.5)
    assert p.velocity == pytest.approx([1.0, 0.0, 0.0])
    assert p.position == pytest.approx([0.5, 0.0, 0.0])


def test_zero_force_keeps_velocity():
    psys = _single()
    p = psys.particles[0]
    p.velocity = [1.0, 2.0, 3.0]
    integrate(psys, 0.1)
    assert p.velocity == [1.0, 2.0, 3.0]
    assert all(c > 0.0 for c in p.position)


def test_zero_step_changes_nothing():
    psys = _single()
    p = psys.particles[0]
    p.velocity = [1.0, -1.0, 0.5]
    p.force = [10.0, 20.0, 30.0]
    integrate(psys, 0.0)
    assert p.velocity == [1.0, -1.0, 0.5]
    assert p.position == [0.0, 0.0, 0.0]


def test_velocity_change_is_linear_in_force():
    one, two = _single(), _single()
    one.particles[0].force = [100.0, 50.0, -25.0]
    two.particles[0].force = [200.0, 100.0, -50.0]
    integrate(one, 0.2)
    integrate(two, 0.2)
    for a, b in zip(one.particles[0].velocity, two.particles[0].velocity):
        assert b == pytest.approx(2 * a)