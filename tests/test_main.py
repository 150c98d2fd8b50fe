"""Tests for the command line entry point and demo scenes."""

import pytest
import main
from geometry.plane import Plane
from geometry.sphere import Sphere


class TestScenes:
    def test_three_spheres(self):
        world = main.three_spheres_scene()
        kinds = [type(s) for s in world.shapes]
        assert kinds.count(Plane) == 3
        assert kinds.count(Sphere) == 3
        assert world.light is not None

    def test_hexagonal_room(self):
        world = main.hexagonal_room_scene()
        assert sum(isinstance(s, Plane) for s in world.shapes) == 7


class TestApplication:
    def test_unknown_scene(self):
        with pytest.raises(ValueError):
            main.Application("nope")

    def test_run_writes_ppm(self, tmp_path):
        out = tmp_path / "scene.ppm"
        app = main.Application("three-spheres", width=8, height=4, verbose=False)
        canvas = app.run(str(out))
        assert (canvas.width, canvas.height) == (8, 4)
        assert out.read_text(encoding="ascii").startswith("P3\n8 4\n255\n")

    def test_scene_is_lit(self):
        app = main.Application("three-spheres", width=8, height=4, verbose=False)
        canvas = app.run(None)
        assert canvas.pixels.max() > 0.0


class TestMain:
    def test_parse_defaults(self):
        args = main.parse_args([])
        assert args.scene == "three-spheres"
        assert args.width == main.DEFAULT_WIDTH
        assert args.height == main.DEFAULT_HEIGHT
        assert args.output == main.DEFAULT_OUTPUT
        assert not args.preview

    def test_main_success(self, tmp_path, capsys):
        out = tmp_path / "room.png"
        code = main.main(["--scene", "hexagonal-room", "--width", "6", "--height", "6",
                          "--output", str(out)])
        assert code == 0
        assert out.exists()
        assert "Saved image to" in capsys.readouterr().out

    def test_main_failure_returns_one(self, tmp_path, capsys):
        code = main.main(["--width", "0", "--output", str(tmp_path / "x.ppm"), "--quiet"])
        assert code == 1
        assert "Error during execution" in capsys.readouterr().out
