"""Tests for the scene builders and the scene registry."""

import math

import pytest
from opsviz import ClockSource, FrameScheduler
from opsviz_scenes import SCENES, build_scene
from opsviz_scenes.common import AMBER, GREEN
from opsviz_scenes.machines import FACTORY_SPIN


def mounted(name: str, seed: int = 11, frames: int = 0):
    scene = build_scene(name, seed=seed)
    scene.mount()
    scene.scheduler.run(frames)
    return scene


def kinds(scene, kind):
    return [record for _, record in scene.arena.query(kind)]


class TestRegistry:

    def test_all_screens_registered(self):
        assert set(SCENES) == {
            "factory",
            "testing_chamber",
            "engine_bay",
            "robotic_arm",
            "network",
            "neural",
            "server_room",
            "warehouse",
            "aircraft",
        }

    def test_unknown_scene_raises(self):
        with pytest.raises(KeyError):
            build_scene("bridge")

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_builds_mounts_and_runs(self, name):
        scene = mounted(name, frames=90)
        assert scene.name == name
        assert len(scene.arena) > 0
        for _, record in scene.arena.query():
            for value in (record.angle, record.heading, record.x, record.y, record.z):
                assert math.isfinite(value)
        scene.unmount()
        assert len(scene.arena) == 0

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_same_seed_same_scene(self, name):
        a = mounted(name, seed=21, frames=45)
        b = mounted(name, seed=21, frames=45)
        assert a.arena.snapshot() == b.arena.snapshot()

    @pytest.mark.parametrize("name", sorted(SCENES))
    def test_parents_and_ends_reference_live_entities(self, name):
        scene = build_scene(name, seed=2)
        alive = scene.arena.entities()
        for _, record in scene.arena.query():
            if record.parent is not None:
                assert record.parent in alive
            if record.ends is not None:
                assert set(record.ends) <= alive

    def test_scenes_share_one_scheduler(self):
        scheduler = FrameScheduler(ClockSource(60))
        factory = build_scene("factory", seed=1, scheduler=scheduler)
        network = build_scene("network", seed=1, scheduler=scheduler)
        factory.mount()
        network.mount()
        scheduler.run(10)
        factory.unmount()
        scheduler.run(10)
        assert network.elapsed == pytest.approx(20 / 60)
        assert len(factory.arena) == 0


class TestMachines:

    def test_factory_turns_slowly(self):
        scene = mounted("factory", frames=60)
        root = scene.arena.get(0)
        assert root.heading == pytest.approx(FACTORY_SPIN)
        children = [r for _, r in scene.arena.query() if r.parent == 0]
        assert len(children) == len(scene.arena) - 1

    def test_engine_bay_has_eight_blades(self):
        scene = mounted("engine_bay")
        assert len(kinds(scene, "blade")) == 8

    def test_robotic_arm_joints_stay_in_range(self):
        scene = build_scene("robotic_arm", seed=0)
        joints = [eid for eid, _ in scene.arena.query("joint")]
        limits = [
            (-math.pi / 4, math.pi / 4),
            (-math.pi / 6, math.pi / 3),
            (-math.pi / 8, math.pi / 8),
        ]
        scene.mount()
        for _ in range(600):
            scene.scheduler.tick()
            for eid, (low, high) in zip(joints, limits):
                angle = scene.arena.get(eid).angle
                assert low - 1e-9 <= angle <= high + 1e-9

    def test_robotic_arm_joints_chain(self):
        scene = build_scene("robotic_arm", seed=0)
        base = scene.arena.get(0)
        shoulder, elbow, effector = [eid for eid, _ in scene.arena.query("joint")]
        assert base.parent is None
        assert scene.arena.get(shoulder).parent == 0
        assert scene.arena.get(elbow).parent == shoulder
        assert scene.arena.get(effector).parent == elbow

    def test_testing_chamber_indicators(self):
        scene = mounted("testing_chamber", frames=30)
        lights = kinds(scene, "indicator-light")
        assert [light.color for light in lights] == [AMBER, GREEN, AMBER]


class TestNetworks:

    def test_network_backbone_lines(self):
        scene = mounted("network", seed=5)
        nodes = [eid for eid, _ in scene.arena.query("orbiting-node")]
        assert len(nodes) == 12
        ends = {record.ends for record in kinds(scene, "connection-line")}
        assert {(nodes[0], nodes[4]), (nodes[0], nodes[8]), (nodes[4], nodes[8])} <= ends
        for a, b in ends:
            assert scene.arena.get(a).kind == "orbiting-node"
            assert scene.arena.get(b).kind == "orbiting-node"

    def test_network_lines_pulse_in_range(self):
        scene = mounted("network", seed=5)
        for _ in range(200):
            scene.scheduler.tick()
            for line in kinds(scene, "connection-line"):
                assert 0.2 - 1e-9 <= line.opacity <= 0.8 + 1e-9

    def test_network_nodes_bob_near_rest(self):
        scene = build_scene("network", seed=9)
        rest = {eid: rec.y for eid, rec in scene.arena.query("orbiting-node")}
        scene.mount()
        scene.scheduler.run(300)
        for eid, y in rest.items():
            assert abs(scene.arena.get(eid).y - y) <= 0.2 + 1e-9

    def test_neural_nodes_fire_at_two_levels(self):
        scene = mounted("neural", seed=3)
        nodes = [eid for eid, _ in scene.arena.query("node")]
        assert len(nodes) == 27
        seen: set[float] = set()
        for _ in range(400):
            scene.scheduler.tick()
            seen.update(scene.arena.get(eid).intensity for eid in nodes)
        assert seen == {0.5, 2.0}

    def test_neural_edges_into_output_are_green(self):
        scene = build_scene("neural", seed=3)
        outputs = {eid for eid, rec in scene.arena.query("node") if rec.color == GREEN}
        assert len(outputs) == 3
        for line in kinds(scene, "connection-line"):
            assert (line.color == GREEN) == (line.ends[1] in outputs)

    def test_server_room_layout(self):
        scene = mounted("server_room", seed=4)
        lights = kinds(scene, "indicator-light")
        assert len(lights) == 20
        assert {light.color for light in lights} <= {GREEN, AMBER}
        assert len(kinds(scene, "connection-line")) == 4

    def test_server_room_indicators_blink_in_range(self):
        scene = mounted("server_room", seed=4)
        for _ in range(200):
            scene.scheduler.tick()
            for light in kinds(scene, "indicator-light"):
                assert -1e-9 <= light.intensity <= 1.0 + 1e-9


class TestVehicles:

    def test_warehouse_robot_shuttles_along_aisle(self):
        scene = build_scene("warehouse", seed=6)
        assert len(kinds(scene, "body")) == 15
        robot_id, _ = next(scene.arena.query("shelf-robot"))
        scene.mount()
        for _ in range(600):
            scene.scheduler.tick()
            robot = scene.arena.get(robot_id)
            assert -4.0 - 1e-9 <= robot.x <= 4.0 + 1e-9
            assert abs(abs(robot.heading) - math.pi / 2) < 1e-9
            assert robot.y >= 0.2 - 1e-9

    def test_aircraft_exhaust_follows_jet(self):
        scene = mounted("aircraft", frames=30)
        jet_id = 0
        glows = kinds(scene, "exhaust-glow")
        assert len(glows) == 2
        assert all(glow.parent == jet_id for glow in glows)
        jet = scene.arena.get(jet_id)
        assert abs(jet.angle) <= 0.05
        assert abs(jet.y) <= 0.2
