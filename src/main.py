# main.py
import argparse
import math
import sys
import traceback
from typing import Optional, Sequence
from camera.camera import Camera
from core.color import Color, WHITE
from core.transformations import chain, rotation_x, rotation_y, scaling, translation, view_transform
from core.vector import Point, Vector
from geometry.plane import Plane
from geometry.sphere import Sphere
from geometry.world import World
from materials.light import Light
from materials.patterns import GradientPattern, RingPattern
from materials.presets import MaterialPresets
from renderer.raytracer import Renderer

DEFAULT_WIDTH = 400
DEFAULT_HEIGHT = 200
DEFAULT_FOV_DEGREES = 60.0
DEFAULT_OUTPUT = "render.ppm"


def three_spheres_scene() -> World:
    """
    A floor, two walls meeting behind the scene and three spheres.
    """
    world = World(Light(Point(-10, 10, -10), WHITE))

    world.add_shape(Plane(material=MaterialPresets.checkered_floor()))
    wall = MaterialPresets.wall()
    world.add_shape(Plane(chain(rotation_x(math.pi / 2), rotation_y(math.pi / 4),
                                translation(0, 0, 6)), wall))
    world.add_shape(Plane(chain(rotation_x(math.pi / 2), rotation_y(-math.pi / 4),
                                translation(0, 0, 6)), wall))

    middle = MaterialPresets.plastic(Color(0.1, 1.0, 0.5))
    middle.pattern = RingPattern(Color(0.1, 1.0, 0.5), Color(0.05, 0.6, 0.3),
                                 scaling(0.2, 0.2, 0.2))
    world.add_shape(Sphere(translation(-0.5, 1, 0.5), middle))
    world.add_shape(Sphere(chain(scaling(0.5, 0.5, 0.5), translation(1.5, 0.5, -0.5)),
                           MaterialPresets.striped(Color(0.5, 1.0, 0.1), Color(0.2, 0.5, 0.05))))
    left = MaterialPresets.glossy(Color(1.0, 0.8, 0.1))
    left.pattern = GradientPattern(Color(1.0, 0.8, 0.1), Color(0.9, 0.2, 0.1),
                                   chain(translation(1, 0, 0), scaling(2, 1, 1)))
    world.add_shape(Sphere(chain(scaling(0.33, 0.33, 0.33), translation(-1.5, 0.33, -0.75)), left))
    return world


def three_spheres_view() -> tuple:
    return Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0)


def hexagonal_room_scene() -> World:
    """
    A floor ringed by six walls, seen from high above.
    """
    world = World(Light(Point(-10, 10, -10), WHITE))
    wall = MaterialPresets.wall()
    world.add_shape(Plane(material=MaterialPresets.checkered_floor()))
    for i in range(6):
        world.add_shape(Plane(chain(rotation_x(math.pi / 2), translation(0, 0, 6),
                                    rotation_y(i * math.pi / 3)), wall))
    world.add_shape(Sphere(translation(0, 1, 0), MaterialPresets.glossy(Color(0.2, 0.4, 1.0))))
    return world


def hexagonal_room_view() -> tuple:
    return Point(0, 30, 0), Point(2, 1, 0), Vector(0, 1, 0)


SCENES = {
    "three-spheres": (three_spheres_scene, three_spheres_view),
    "hexagonal-room": (hexagonal_room_scene, hexagonal_room_view),
}


class Application:
    def __init__(self, scene: str = "three-spheres", width: int = DEFAULT_WIDTH,
                 height: int = DEFAULT_HEIGHT, fov_degrees: float = DEFAULT_FOV_DEGREES,
                 verbose: bool = True):
        if scene not in SCENES:
            raise ValueError(f"Unknown scene {scene!r}, expected one of {sorted(SCENES)}")
        self.scene = scene
        self.verbose = verbose
        build_world, build_view = SCENES[scene]

        self.world = self.create_world(build_world)
        self.camera = Camera(width, height, math.radians(fov_degrees), view_transform(*build_view()))
        self.renderer = Renderer(self.camera, self.world, verbose=verbose)

    def create_world(self, build_world) -> World:
        if self.verbose:
            print("\n=== Creating World ===")
        world = build_world()
        if self.verbose:
            print(f"Scene: {self.scene}")
            for shape in world.shapes:
                c = shape.material.color
                print(f"  {type(shape).__name__} {shape.id[:8]}: color ({c.red}, {c.green}, {c.blue})")
        return world

    def run(self, output: Optional[str] = DEFAULT_OUTPUT, preview: bool = False):
        canvas = self.renderer.render()
        if output:
            canvas.save(output)
            if self.verbose:
                print(f"Saved image to {output}")
        if preview:
            # pygame is only needed for the window.
            from renderer.preview import show
            show(canvas, caption=f"Ray Tracer - {self.scene}")
        return canvas


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a demo scene with the Phong ray tracer.")
    parser.add_argument("--scene", choices=sorted(SCENES), default="three-spheres")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--fov", type=float, default=DEFAULT_FOV_DEGREES,
                        help="field of view in degrees")
    parser.add_argument("--output", default=DEFAULT_OUTPUT,
                        help="output path, .ppm is written as P3 text, other formats via Pillow")
    parser.add_argument("--preview", action="store_true", help="show the result in a window")
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        app = Application(args.scene, args.width, args.height, args.fov, verbose=not args.quiet)
        app.run(args.output, preview=args.preview)
    except Exception as e:
        print(f"Error during execution: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
