from geometry.shape import Shape
from geometry.sphere import Sphere
from geometry.plane import Plane
from geometry.intersection import Intersection, hit, intersects, sort_intersections
from geometry.computation import Computation, prepare_computations
from geometry.world import World, default_world
