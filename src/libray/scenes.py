# scenes.py
"""
The example scenes: a ballistic trajectory, a clock face and a sphere
rendered flat and shaded.
"""
from libray import config
from libray.camera.camera import Camera
from libray.core.vector import Vector3
from libray.geometry.clock import clock_points
from libray.geometry.sphere import Sphere
from libray.geometry.world import HittableList
from libray.lights.light import PointLight
from libray.materials.presets import MAGENTA, RED, WHITE, MaterialPresets
from libray.physics.ballistics import Environment, Trajectory
from libray.renderer.canvas import Canvas
from libray.renderer.raster import plot_points
from libray.renderer.raytracer import Renderer

def ballistics(settings=None) -> Canvas:
    width, height = config.BALLISTICS_CANVAS
    canvas = Canvas(width, height, config.BACKGROUND)
    environment = Environment(config.BALLISTICS_GRAVITY, config.BALLISTICS_WIND)
    trajectory = Trajectory.until_landing(
        config.BALLISTICS_START, config.BALLISTICS_VELOCITY, environment, config.BALLISTICS_DT)
    plot_points(canvas, trajectory.positions(), RED)
    return canvas

def clock(settings=None) -> Canvas:
    size = config.CLOCK_CANVAS_SIZE
    canvas = Canvas(size, size, config.BACKGROUND)
    center = Vector3(0.0, 0.0, 0.0)
    points = clock_points(center, config.CLOCK_RADIUS, config.CLOCK_HOURS)
    plot_points(canvas, points, WHITE, origin=(size / 2, size / 2))
    return canvas

def _sphere_scene(material, settings) -> Canvas:
    size = config.SPHERE_CANVAS_SIZE
    world = HittableList([Sphere(Vector3(0.0, 0.0, 0.0), 1.0, material)])
    light = PointLight(config.LIGHT_POSITION, WHITE)
    camera = Camera(config.EYE_POSITION, config.WALL_Z, config.WALL_SIZE, size, size)
    return Renderer(size, size, settings).render(world, light, camera)

def sphere(settings=None) -> Canvas:
    return _sphere_scene(MaterialPresets.flat(RED), settings)

def shaded_sphere(settings=None) -> Canvas:
    return _sphere_scene(MaterialPresets.glossy(MAGENTA), settings)

SCENES = {
    "ballistics": ballistics,
    "clock": clock,
    "sphere": sphere,
    "shaded_sphere": shaded_sphere,
}

def build(name: str, settings=None) -> Canvas:
    try:
        builder = SCENES[name]
    except KeyError:
        raise ValueError(f"Unknown scene {name!r}, expected one of {', '.join(SCENES)}") from None
    return builder(settings)
