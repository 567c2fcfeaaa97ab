import itertools
import random
from dataclasses import dataclass

from ruspahy.neighbor import build_neighbor_list


@dataclass
class Point:
    position: tuple


def _points(*coords):
    return [Point(tuple(c)) for c in coords]


def test_no_particles():
    assert build_neighbor_list([], 1.0) == []


def test_single_particle_has_no_neighbours():
    assert build_neighbor_list(_points((0.0, 0.0, 0.0)), 0.15) == [[]]


def test_two_close_particles_are_mutual():
    pts = _points((0.0, 0.0, 0.0), (0.1, 0.0, 0.0))
    assert build_neighbor_list(pts, 0.15) == [[1], [0]]


def test_tiny_spacing():
    pts = _points((0.0, 0.0, 0.0), (1e-7, 0.0, 0.0))
    assert build_neighbor_list(pts, 1.5e-7) == [[1], [0]]


def test_far_particles_excluded():
    pts = _points((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, 0.5))
    assert build_neighbor_list(pts, 0.4) == [[], [], []]


def test_distance_equal_to_radius_included():
    pts = _points((0.0, 0.0, 0.0), (0.0, 0.5, 0.0))
    assert build_neighbor_list(pts, 0.5) == [[1], [0]]


def test_negative_coordinates_cross_cell_boundary():
    pts = _points((-0.05, 0.0, 0.0), (0.05, 0.0, 0.0))
    assert build_neighbor_list(pts, 0.2) == [[1], [0]]


def test_matches_pairwise_search_and_is_symmetric():
    rng = random.Random(7)
    pts = _points(*[[rng.uniform(-1.0, 1.0) for _ in range(3)] for _ in range(60)])
    radius = 0.35
    result = build_neighbor_list(pts, radius)

    expected = {i: set() for i in range(len(pts))}
    for i, j in itertools.combinations(range(len(pts)), 2):
        d2 = sum((a - b) ** 2 for a, b in zip(pts[i].position, pts[j].position))
        if d2 <= radius * radius:
            expected[i].add(j)
            expected[j].add(i)

    assert len(result) == len(pts)
    for i, found in enumerate(result):
        assert len(found) == len(set(found))
        assert i not in found
        assert set(found) == expected[i]
        for j in found:
            assert i in result[j]


def test_coincident_particles_are_neighbours():
    pts = _points((0.2, 0.2, 0.2), (0.2, 0.2, 0.2), (0.2, 0.2, 0.2))
    result = build_neighbor_list(pts, 0.1)
    assert [sorted(n) for n in result] == [[1, 2], [0, 2], [0, 1]]