"""
Tests for the camera / mesh / projection demo pipeline built on the
vector and matrix types, plus its configuration and logging setup.
"""

import logging
import math

import pytest
from vex_math import Matrix4, Vector3
from vex_math.camera import Camera
from vex_math.config import ViewConfig
from vex_math.logging_config import setup_logging
from vex_math.mesh import Mesh
from vex_math.demo import describe, project_mesh, render_ascii


@pytest.fixture
def reset_package_logger():
    yield
    logger = logging.getLogger("vex_math")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class TestViewConfig:

    def test_aspect_ratio(self):
        assert ViewConfig(width=80, height=40).aspect_ratio == 2.0

    def test_detect_terminal(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "100")
        monkeypatch.setenv("LINES", "30")
        config = ViewConfig.detect_terminal()
        assert (config.width, config.height) == (98, 56)

    def test_detect_terminal_fallback(self, monkeypatch):
        monkeypatch.setenv("COLUMNS", "wide")
        monkeypatch.delenv("LINES", raising=False)
        config = ViewConfig.detect_terminal()
        assert (config.width, config.height) == (78, 44)


class TestCamera:

    def test_default_position(self):
        camera = Camera(distance=6.0)
        assert tuple(camera.position()) == pytest.approx((0, 0, 6), abs=1e-12)

    def test_orbit_keeps_distance(self):
        camera = Camera(distance=4.0)
        camera.orbit(0.8, 0.3)
        assert camera.position().magnitude() == pytest.approx(4.0)

    def test_orbit_clamps_pitch(self):
        camera = Camera()
        camera.orbit(0.0, 10.0)
        assert camera.pitch < math.pi / 2
        camera.orbit(0.0, -20.0)
        assert camera.pitch > -math.pi / 2

    def test_zoom_and_fov_limits(self):
        camera = Camera(fov=60.0, distance=1.0)
        camera.zoom(-5.0)
        assert camera.distance == 0.5
        camera.adjust_fov(500)
        assert camera.fov == 170
        camera.adjust_fov(-500)
        assert camera.fov == 10

    def test_view_matrix_moves_camera_to_origin(self):
        camera = Camera(distance=5.0)
        camera.orbit(1.1, -0.4)
        view = camera.view_matrix()
        assert tuple(view @ camera.position()) == pytest.approx((0, 0, 0), abs=1e-9)
        # The orbit target ends up straight ahead, down -Z
        assert tuple(view @ Vector3.zero()) == pytest.approx((0, 0, -5), abs=1e-9)

    def test_projection_matrix(self):
        camera = Camera(fov=90.0, near=1.0, far=10.0)
        assert camera.projection_matrix(1.0).m == pytest.approx(Matrix4.perspective(90, 1, 1, 10).m)


class TestMesh:

    def test_cube(self):
        cube = Mesh.cube()
        assert len(cube.vertices) == 8
        assert len(cube.faces) == 6
        assert all(isinstance(v, Vector3) for v in cube.vertices)

    def test_cube_edges(self):
        edges = Mesh.cube().edges()
        assert len(edges) == 12
        assert (0, 1) in edges

    def test_vertices_copied(self):
        v = Vector3(1, 2, 3)
        mesh = Mesh([v], [])
        v.x = 10
        assert mesh.vertices[0] == Vector3(1, 2, 3)


class TestProjection:

    def test_origin_lands_in_center(self):
        config = ViewConfig(width=80, height=40)
        points = project_mesh(Mesh([(0, 0, 0)]), Camera(), config)
        assert tuple(points[0]) == pytest.approx((40, 20))

    def test_vertex_behind_camera_is_clipped(self, caplog):
        config = ViewConfig(width=80, height=40)
        with caplog.at_level(logging.DEBUG, logger="vex_math.demo"):
            points = project_mesh(Mesh([(0, 0, 10), (0, 0, 0)]), Camera(distance=6.0), config)
        assert points[0] is None
        assert points[1] is not None
        assert "behind the near plane" in caplog.text

    def test_cube_is_symmetric_on_screen(self):
        config = ViewConfig(width=80, height=40)
        points = project_mesh(Mesh.cube(), Camera(), config)
        # Corners (-1, -1, 1) and (1, 1, 1) mirror around the screen center
        assert points[4].x + points[6].x == pytest.approx(80)
        assert points[4].y + points[6].y == pytest.approx(40)

    def test_model_matrix_applied(self):
        config = ViewConfig(width=80, height=40)
        mesh = Mesh([(0, 0, 0)])
        moved = project_mesh(mesh, Camera(), config, Matrix4.translate(1, 0, 0))
        assert moved[0].x > 40

    def test_render_ascii(self):
        config = ViewConfig(width=60, height=40)
        cube = Mesh.cube()
        camera = Camera()
        camera.orbit(0.5, -0.3)
        art = render_ascii(cube, project_mesh(cube, camera, config), config)
        assert art.count('#') == 8
        assert '.' in art
        assert len(art.splitlines()) <= 20

    def test_describe(self):
        report = describe(Mesh.cube(), Camera(), ViewConfig(width=60, height=40))
        assert "view:" in report
        assert "projection:" in report
        assert "6: <1.0, 1.0, 1.0> -> <" in report


class TestLogging:

    def test_setup_logging_is_idempotent(self, reset_package_logger):
        setup_logging(logging.DEBUG)
        logger = setup_logging(logging.DEBUG)
        assert logger is logging.getLogger("vex_math")
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG

    def test_setup_logging_file(self, reset_package_logger, tmp_path):
        log_file = tmp_path / "vex.log"
        setup_logging(logging.DEBUG, str(log_file))
        assert Matrix4.zero().inverse() is False
        for handler in logging.getLogger("vex_math").handlers:
            handler.flush()
        assert "Matrix4 is singular" in log_file.read_text(encoding="utf-8")

    def test_setup_logging_does_not_propagate(self, reset_package_logger, caplog):
        setup_logging(logging.DEBUG)
        with caplog.at_level(logging.DEBUG):
            Matrix4.zero().inverse()
        assert "singular" not in caplog.text

    def test_demo_helpers_not_exported(self):
        import vex_math

        for name in ("Camera", "Mesh", "ViewConfig", "setup_logging"):
            assert not hasattr(vex_math, name)


class TestClientDemo:

    def test_main_prints_report(self, capsys, reset_package_logger):
        import client_demo

        assert client_demo.main(["--yaw", "20", "--pitch", "-10", "--spin", "15"]) == 0
        out = capsys.readouterr().out
        assert "screen points:" in out
        assert "#" in out
