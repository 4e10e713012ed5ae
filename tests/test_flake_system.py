"""Tests for FlakeSystem tick sequencing."""

import threading

from input.pose import PoseSnapshot
from physics.collision import apply_catch
from physics.flake import ArmSide, FlakeView
from physics.flake_system import FlakeSystem, SimulationSnapshot

# Right arm zone across the middle of an 800x600 field: x 200..600, y 260..340
RIGHT_ARM_ACROSS = PoseSnapshot(right_shoulder=(0.25, 0.5), right_wrist=(0.75, 0.5))


class TestSpawning:
    """Tests for the spawn step of tick()."""

    def test_no_spawn_before_interval(self, system, clock, bounds):
        clock.advance(1.49)
        system.tick(0.0, bounds)
        assert system.flakes == []

    def test_spawn_at_interval(self, system, clock, bounds):
        clock.advance(1.5)
        system.tick(0.0, bounds)

        assert len(system.flakes) == 1
        flake = system.flakes[0]
        assert flake.position[0] == -flake.size
        assert 0.0 <= flake.position[1] <= bounds.height

    def test_spawn_clock_resets(self, system, clock, bounds):
        clock.advance(1.5)
        system.tick(0.0, bounds)
        clock.advance(1.0)
        system.tick(0.0, bounds)
        assert len(system.flakes) == 1

        clock.advance(0.5)
        system.tick(0.0, bounds)
        assert len(system.flakes) == 2

    def test_one_flake_per_tick_after_long_pause(self, system, clock, bounds):
        clock.advance(30.0)
        system.tick(0.0, bounds)
        assert len(system.flakes) == 1

    def test_new_flakes_appended_in_order(self, system, clock, bounds):
        ids = []
        for _ in range(3):
            clock.advance(1.5)
            system.tick(0.0, bounds)
            ids.append(system.flakes[-1].id)

        assert [flake.id for flake in system.flakes] == ids


class TestCatching:
    """Tests for the collide/integrate step of tick()."""

    def test_flake_in_zone_is_caught(self, system, bounds, make_flake):
        flake = make_flake(400.0, 300.0)
        system.flakes.append(flake)
        system.update_pose(RIGHT_ARM_ACROSS)

        system.tick(0.1, bounds)

        assert flake.is_caught
        assert flake.caught_by is ArmSide.RIGHT
        assert flake.catch_position == (400.0, 300.0)
        assert flake.velocity == (0.0, 0.0)

    def test_caught_flake_stays_put(self, system, bounds, make_flake):
        flake = make_flake(400.0, 300.0)
        system.flakes.append(flake)
        system.update_pose(RIGHT_ARM_ACROSS)
        system.tick(0.1, bounds)

        system.update_pose(PoseSnapshot(left_shoulder=(0.1, 0.1), left_wrist=(0.2, 0.9)))
        for _ in range(20):
            system.tick(0.1, bounds)
        system.update_pose(PoseSnapshot())
        for _ in range(20):
            system.tick(0.1, bounds)

        assert flake.is_caught
        assert flake.caught_by is ArmSide.RIGHT
        assert flake.position == (400.0, 300.0)

    def test_caught_flake_position_restored(self, system, bounds, make_flake):
        flake = make_flake(400.0, 300.0)
        system.flakes.append(flake)
        system.update_pose(RIGHT_ARM_ACROSS)
        system.tick(0.1, bounds)

        flake.position = (0.0, 0.0)
        system.tick(0.1, bounds)

        assert flake.position == (400.0, 300.0)

    def test_flake_outside_zone_drifts(self, system, bounds, make_flake):
        flake = make_flake(100.0, 100.0)
        system.flakes.append(flake)
        system.update_pose(RIGHT_ARM_ACROSS)

        system.tick(0.1, bounds)

        assert not flake.is_caught
        assert flake.position[0] > 100.0

    def test_caught_flake_skips_integration_on_catch_tick(self, system, bounds, make_flake):
        flake = make_flake(400.0, 300.0, velocity=(100.0, 0.0))
        system.flakes.append(flake)
        system.update_pose(RIGHT_ARM_ACROSS)

        system.tick(1.0, bounds)

        assert flake.position == (400.0, 300.0)

    def test_pose_published_from_another_thread(self, system, bounds, make_flake):
        flake = make_flake(400.0, 300.0)
        system.flakes.append(flake)

        producer = threading.Thread(target=system.update_pose, args=(RIGHT_ARM_ACROSS,))
        producer.start()
        producer.join()
        system.tick(0.0, bounds)

        assert flake.is_caught


class TestCulling:
    """Tests for the cull step of tick()."""

    def test_flake_past_margin_removed(self, system, bounds, make_flake):
        system.flakes.append(make_flake(bounds.width + 101, 300.0))
        system.tick(0.0, bounds)
        assert system.flakes == []

    def test_flake_within_margin_kept(self, system, bounds, make_flake):
        flake = make_flake(bounds.width + 99, 300.0)
        system.flakes.append(flake)
        system.tick(0.0, bounds)
        assert system.flakes == [flake]

    def test_caught_flake_never_culled(self, system, bounds, make_flake):
        flake = make_flake(bounds.width + 500, 300.0)
        apply_catch(flake, ArmSide.LEFT, flake.position)
        system.flakes.append(flake)

        system.tick(0.0, bounds)

        assert system.flakes == [flake]

    def test_culling_preserves_order(self, system, bounds, make_flake):
        first = make_flake(10.0, 100.0)
        gone = make_flake(bounds.width + 200, 100.0)
        last = make_flake(20.0, 200.0)
        system.flakes.extend([first, gone, last])

        system.tick(0.0, bounds)

        assert system.flakes == [first, last]


class TestSnapshot:
    """Tests for the snapshot published by tick()."""

    def test_empty_before_first_tick(self):
        assert FlakeSystem().snapshot == SimulationSnapshot()

    def test_tick_publishes_views(self, system, bounds, make_flake):
        flake = make_flake(400.0, 300.0)
        system.flakes.append(flake)
        system.update_pose(RIGHT_ARM_ACROSS)

        snapshot = system.tick(0.0, bounds)

        assert snapshot is system.snapshot
        assert snapshot.flakes == (FlakeView.from_flake(flake),)
        assert snapshot.flakes[0].is_caught
        assert snapshot.flakes[0].caught_by is ArmSide.RIGHT
        assert [zone.side for zone in snapshot.zones] == [ArmSide.RIGHT]

    def test_snapshot_not_affected_by_later_ticks(self, system, bounds, make_flake):
        flake = make_flake(100.0, 100.0)
        system.flakes.append(flake)
        before = system.tick(0.1, bounds)
        system.tick(0.1, bounds)

        assert before.flakes[0].position != flake.position


class TestReset:
    """Tests for reset()."""

    def test_reset_drops_all_flakes(self, system, bounds, make_flake):
        caught = make_flake(400.0, 300.0)
        apply_catch(caught, ArmSide.RIGHT, caught.position)
        system.flakes.extend([caught, make_flake(10.0, 10.0)])
        system.tick(0.0, bounds)

        system.reset()

        assert system.flakes == []
        assert system.snapshot == SimulationSnapshot()

    def test_reset_restarts_spawn_clock(self, system, clock, bounds):
        clock.advance(1.4)
        system.reset()
        clock.advance(1.4)
        system.tick(0.0, bounds)
        assert system.flakes == []
