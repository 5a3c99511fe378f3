import math

import pygame
import pytest

from flocksim.core.agents.boid import Boid, ForceCategory
from flocksim.core.config import SimulationParameters
from flocksim.core.flock import BoidState, Flock, dominant_force, update_forces


ZERO = pygame.Vector2(0, 0)


def only_separation():
    return SimulationParameters(alignment_weight=0.0, cohesion_weight=0.0, avoidance_weight=0.0)


class TestResize:
    def test_grows_inside_domain_with_bounded_velocity(self, flock, bounds):
        flock.resize_to(50, 3.0)
        assert len(flock) == 50
        for boid in flock:
            assert bounds.left <= boid.position.x <= bounds.right
            assert bounds.top <= boid.position.y <= bounds.bottom
            assert -3.0 <= boid.velocity.x <= 3.0
            assert -3.0 <= boid.velocity.y <= 3.0
            assert boid.classification is ForceCategory.NONE

    def test_is_idempotent(self, flock):
        flock.resize_to(20, 5.0)
        before = list(flock.boids)
        flock.resize_to(20, 5.0)
        assert flock.boids == before
        assert all(a is b for a, b in zip(flock.boids, before))

    def test_shrink_removes_from_tail(self, flock):
        flock.resize_to(10, 5.0)
        before = list(flock.boids)
        flock.resize_to(7, 5.0)
        assert len(flock) == 7
        assert all(a is b for a, b in zip(flock.boids, before[:7]))

    def test_reaches_target_in_one_call(self, flock):
        flock.resize_to(250)
        assert len(flock) == 250
        flock.resize_to(0)
        assert len(flock) == 0

    def test_growth_keeps_existing_boids(self, flock):
        flock.resize_to(3, 5.0)
        before = list(flock.boids)
        flock.resize_to(6, 5.0)
        assert all(a is b for a, b in zip(flock.boids[:3], before))


class TestDominantForce:
    def test_strict_winner(self):
        assert dominant_force(pygame.Vector2(2, 0), ZERO, ZERO, ZERO) is ForceCategory.SEPARATION
        assert dominant_force(ZERO, pygame.Vector2(0, 2), ZERO, ZERO) is ForceCategory.ALIGNMENT
        assert dominant_force(ZERO, ZERO, pygame.Vector2(-1, 0), ZERO) is ForceCategory.COHESION
        assert dominant_force(ZERO, ZERO, ZERO, pygame.Vector2(0, 1)) is ForceCategory.AVOIDANCE

    def test_tie_has_no_winner(self):
        assert dominant_force(ZERO, ZERO, ZERO, ZERO) is None
        assert dominant_force(pygame.Vector2(1, 0), pygame.Vector2(0, 1), ZERO, ZERO) is None
        equal = pygame.Vector2(0.3, 0.4)
        assert dominant_force(equal, equal, equal, equal) is None


class TestUpdateForces:
    def test_uses_unmutated_snapshot(self, params):
        boids = [Boid((0, 0), (1, 0)), Boid((10, 0), (0, 1)), Boid((0, 20), (-1, -1))]
        expected = []
        for boid in boids:
            expected.append(
                boid.calculate_separation_force(boids, params.separation_weight, params.max_force,
                                                params.neighbor_radius)
                + boid.calculate_alignment_force(boids, params.alignment_weight, params.max_speed,
                                                 params.max_force, params.neighbor_radius)
                + boid.calculate_cohesion_force(boids, params.cohesion_weight, params.max_speed,
                                                params.max_force, params.neighbor_radius)
            )

        update_forces(boids, params)

        for boid, acc in zip(boids, expected):
            assert boid.acceleration.x == pytest.approx(acc.x)
            assert boid.acceleration.y == pytest.approx(acc.y)

    def test_tie_keeps_previous_classification(self, params):
        boid = Boid((0, 0), (1, 0))
        boid.classification = ForceCategory.ALIGNMENT
        update_forces([boid], params)
        assert boid.classification is ForceCategory.ALIGNMENT
        assert boid.acceleration == ZERO

    def test_two_close_boids_push_apart(self):
        a, b = Boid((0, 0), (0, 0)), Boid((3, 4), (0, 0))
        update_forces([a, b], only_separation())

        direction = pygame.Vector2(3, 4).normalize()
        assert a.acceleration.normalize().dot(direction) == pytest.approx(-1.0)
        assert b.acceleration.normalize().dot(direction) == pytest.approx(1.0)
        assert a.classification is ForceCategory.SEPARATION
        assert b.classification is ForceCategory.SEPARATION

    def test_predator_only_affects_boids_within_radius(self, params):
        near, far = Boid((10, 0), (0, 0)), Boid((400, 0), (0, 0))
        update_forces([near, far], params, pygame.Vector2(0, 0))

        assert near.acceleration.length() > 0
        assert near.acceleration.x > 0
        assert near.classification is ForceCategory.AVOIDANCE
        assert far.acceleration == ZERO
        assert far.classification is ForceCategory.NONE

    def test_no_predator_means_no_avoidance(self, params):
        boid = Boid((10, 0), (0, 0))
        update_forces([boid], params, None)
        assert boid.acceleration == ZERO


class TestUpdateBoids:
    def test_single_boid_moves_by_clamped_velocity(self, flock, params):
        params.target_population = 1
        boid = Boid((0, 0), (10, 0))
        flock.boids.append(boid)

        flock.update_boids(params)

        assert len(flock) == 1 and flock.boids[0] is boid
        assert boid.acceleration == ZERO
        assert boid.velocity.x == pytest.approx(params.max_speed)
        assert boid.position.x == pytest.approx(params.max_speed)
        assert boid.position.y == pytest.approx(0)

    def test_resizes_to_target(self, flock, params):
        params.target_population = 30
        flock.update_boids(params)
        assert len(flock) == 30
        params.target_population = 12
        flock.update(params)
        assert len(flock) == 12

    def test_invariants_hold_over_many_frames(self, flock, params, bounds):
        params.target_population = 40
        for frame in range(60):
            predator = pygame.Vector2(0, 0) if frame % 2 else None
            flock.update_boids(params, predator)
            for boid in flock:
                assert boid.velocity.length() <= params.max_speed + 1e-6
                assert boid.acceleration == ZERO
                assert bounds.left <= boid.position.x <= bounds.right
                assert bounds.top <= boid.position.y <= bounds.bottom

    def test_wraps_at_domain_edge(self, flock, params, bounds):
        params.target_population = 1
        flock.boids.append(Boid((bounds.right - 1, 0), (5, 0)))
        flock.update_boids(params)
        assert flock.boids[0].position.x == pytest.approx(bounds.left)

    def test_degenerate_parameters_stay_finite(self, flock):
        params = SimulationParameters(
            target_population=25, neighbor_radius=0.0, avoidance_radius=0.0,
            separation_weight=-2.0, alignment_weight=0.0, cohesion_weight=-1.0,
        )
        for _ in range(10):
            flock.update_boids(params, pygame.Vector2(0, 0))
        for boid in flock:
            assert all(math.isfinite(v) for v in (boid.position.x, boid.position.y,
                                                  boid.velocity.x, boid.velocity.y))


def test_snapshot_is_a_copy(flock, params):
    params.target_population = 5
    flock.update_boids(params)
    states = flock.snapshot()

    assert len(states) == 5
    assert all(isinstance(s, BoidState) for s in states)
    first = flock.boids[0]
    assert states[0].position == (first.position.x, first.position.y)
    assert states[0].classification is first.classification

    flock.update_boids(params)
    assert isinstance(states[0].position, tuple)


def test_default_bounds_match_window_area():
    flock = Flock()
    assert flock.bounds.width == 1700
    assert flock.bounds.height == 950
    assert flock.bounds.left == -850
