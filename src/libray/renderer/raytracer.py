# renderer/raytracer.py
import logging
import time
import numpy as np
from libray.camera.camera import Camera
from libray.config import RenderSettings
from libray.geometry.sphere import Sphere
from libray.geometry.world import HittableList
from libray.lights.light import DirectionalLight, Light, PointLight
from libray.materials.lambertian import Lambertian
from libray.materials.phong import Phong
from libray.materials.presets import MaterialPresets
from libray.renderer.canvas import Canvas
from libray.renderer.kernels import INFINITY, render_spheres_kernel

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL = MaterialPresets.flat()

class SceneArrays:
    """
    Immutable snapshot of a sphere scene packed into arrays for the kernel.
    """
    def __init__(self, world: HittableList, light: Light):
        spheres = list(world.objects)
        count = len(spheres)
        self.centers = np.zeros((count, 3), dtype=np.float64)
        self.radii = np.zeros(count, dtype=np.float64)
        self.colors = np.zeros((count, 3), dtype=np.float64)
        # ambient, diffuse, specular, shininess
        self.coefficients = np.zeros((count, 4), dtype=np.float64)

        for i, obj in enumerate(spheres):
            if not isinstance(obj, Sphere):
                raise ValueError(f"Kernel path only supports spheres, got {type(obj).__name__}")
            if obj.transform is not None:
                raise ValueError("Kernel path does not support transformed spheres")
            material = obj.material if obj.material is not None else DEFAULT_MATERIAL
            if not isinstance(material, Lambertian):
                raise ValueError(f"Kernel path cannot shade {type(material).__name__}")

            self.centers[i] = obj.center.to_array()
            self.radii[i] = obj.radius
            self.colors[i] = material.color.to_array()
            if isinstance(material, Phong):
                self.coefficients[i] = (material.ambient, material.diffuse,
                                        material.specular, material.shininess)
            else:
                self.coefficients[i] = (material.ambient, material.diffuse, 0.0, 1.0)

        if isinstance(light, PointLight):
            self.light_vector = light.position.to_array()
            self.light_is_point = True
        elif isinstance(light, DirectionalLight):
            self.light_vector = light.direction.to_array()
            self.light_is_point = False
        else:
            raise ValueError(f"Kernel path cannot use {type(light).__name__}")
        self.light_intensity = light.intensity.to_array()

class Renderer:
    """
    Renders a sphere world lit by a single light into a Canvas.

    Two interchangeable paths:
      * the object path walks every pixel in Python using Sphere.hit and
        Material.shade;
      * the kernel path packs the scene into arrays and fans out over rows
        with numba, each worker writing only its own rows.
    """
    def __init__(self, width: int, height: int, settings: RenderSettings = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Render size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.settings = settings if settings is not None else RenderSettings()

    def render(self, world: HittableList, light: Light, camera: Camera) -> Canvas:
        if (camera.width, camera.height) != (self.width, self.height):
            raise ValueError(
                f"Camera resolution {camera.width}x{camera.height} does not match "
                f"renderer {self.width}x{self.height}")

        logger.info("Rendering %d objects at %dx%d (%s path)", len(world), self.width,
                    self.height, "kernel" if self.settings.use_kernel else "object")
        start = time.perf_counter()
        if self.settings.use_kernel:
            canvas = self.render_kernel(world, light, camera)
        else:
            canvas = self.render_objects(world, light, camera)
        logger.info("Render finished in %.3fs", time.perf_counter() - start)
        return canvas

    def shade_pixel(self, world: HittableList, light: Light, camera: Camera, x: int, y: int):
        ray = camera.ray_for_pixel(x, y)
        rec = world.hit(ray, self.settings.t_min, INFINITY)
        if rec is None:
            return self.settings.background
        material = rec.material if rec.material is not None else DEFAULT_MATERIAL
        return material.shade(rec, light, -ray.direction)

    def render_objects(self, world: HittableList, light: Light, camera: Camera) -> Canvas:
        canvas = Canvas(self.width, self.height, self.settings.background)
        for y in range(self.height):
            for x in range(self.width):
                canvas.write_pixel(x, y, self.shade_pixel(world, light, camera, x, y))
        return canvas

    def render_kernel(self, world: HittableList, light: Light, camera: Camera) -> Canvas:
        scene = SceneArrays(world, light)
        logger.debug("Packed %d spheres for the kernel", len(scene.radii))

        out = np.empty((self.height, self.width, 3), dtype=np.float64)
        render_spheres_kernel(
            camera.origin.to_array(), camera.ray_directions(),
            scene.centers, scene.radii, scene.colors, scene.coefficients,
            scene.light_vector, scene.light_intensity, scene.light_is_point,
            self.settings.background.to_array(), float(self.settings.t_min), out)
        return Canvas.from_array(out)
