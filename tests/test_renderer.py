"""Tests for Camera and Renderer (object path and numba kernel path)."""

import numpy as np
import pytest
from libray.camera.camera import Camera
from libray.config import RenderSettings
from libray.core.matrix import scaling, translation
from libray.core.vector import Vector3
from libray.geometry.hittable import Hittable
from libray.geometry.sphere import Sphere
from libray.geometry.world import HittableList
from libray.lights.light import DirectionalLight, Light, PointLight
from libray.materials.lambertian import Lambertian
from libray.materials.material import Material
from libray.materials.phong import Phong
from libray.materials.presets import MAGENTA, RED, MaterialPresets
from libray.renderer.raytracer import Renderer, SceneArrays

EYE = Vector3(0, 0, -5)
BLUE = Vector3(0.1, 0.2, 0.9)


def unit_sphere_world(material):
    return HittableList([Sphere(Vector3(0, 0, 0), 1.0, material)])


def render(world, light, size=20, use_kernel=True, background=Vector3(0, 0, 0)):
    camera = Camera(EYE, 10.0, 7.0, size, size)
    settings = RenderSettings(use_kernel=use_kernel, background=background)
    return Renderer(size, size, settings).render(world, light, camera)


class TestCamera:

    def test_center_pixel_looks_down_z(self):
        camera = Camera(EYE, 10.0, 7.0, 100, 100)
        ray = camera.ray_for_pixel(50, 50)
        assert ray.direction.isclose(Vector3(0, 0, 1))
        assert ray.origin == EYE

    def test_top_left_corner(self):
        camera = Camera(EYE, 10.0, 7.0, 100, 100)
        assert camera.wall_point(0, 0) == Vector3(-3.5, 3.5, 10.0)

    def test_directions_match_rays(self):
        camera = Camera(EYE, 10.0, 7.0, 8, 6)
        directions = camera.ray_directions()
        assert directions.shape == (6, 8, 3)
        for y, x in [(0, 0), (5, 7), (3, 2)]:
            np.testing.assert_allclose(
                directions[y, x], camera.ray_for_pixel(x, y).direction.to_array(), atol=1e-12)

    @pytest.mark.parametrize("width,height", [(8, 6), (6, 8), (300, 100)])
    def test_non_square_wall_is_centred(self, width, height):
        camera = Camera(EYE, 10.0, 7.0, width, height)
        top_left = camera.wall_point(0, 0)
        bottom_right = camera.wall_point(width, height)
        assert top_left.x == pytest.approx(-bottom_right.x)
        assert top_left.y == pytest.approx(-bottom_right.y)
        # the longer side spans the whole wall
        assert max(bottom_right.x - top_left.x, top_left.y - bottom_right.y) == pytest.approx(7.0)

    def test_invalid_camera(self):
        with pytest.raises(ValueError):
            Camera(EYE, 10.0, 7.0, 0, 10)
        with pytest.raises(ValueError):
            Camera(EYE, -5.0, 7.0, 10, 10)


class TestRenderer:

    @pytest.mark.parametrize("use_kernel", [False, True])
    def test_flat_sphere_silhouette(self, use_kernel):
        canvas = render(unit_sphere_world(MaterialPresets.flat(RED)),
                        PointLight(Vector3(-10, 10, -10)), size=21, use_kernel=use_kernel)
        assert canvas.pixel_at(10, 10) == RED
        assert canvas.pixel_at(0, 0) == Vector3(0, 0, 0)
        colors = {tuple(p) for p in canvas.pixels.reshape(-1, 3)}
        assert colors == {(1.0, 0.0, 0.0), (0.0, 0.0, 0.0)}

    @pytest.mark.parametrize("use_kernel", [False, True])
    def test_background_color(self, use_kernel):
        canvas = render(HittableList(), DirectionalLight(Vector3(0, 0, -1)),
                        size=4, use_kernel=use_kernel, background=BLUE)
        np.testing.assert_array_equal(canvas.pixels, np.broadcast_to(BLUE.to_array(), (4, 4, 3)))

    @pytest.mark.parametrize("use_kernel", [False, True])
    def test_shaded_sphere_is_brighter_toward_light(self, use_kernel):
        canvas = render(unit_sphere_world(MaterialPresets.matte(MAGENTA)),
                        PointLight(Vector3(-10, 10, -10)), size=21, use_kernel=use_kernel)
        upper_left = canvas.pixel_at(8, 8)
        lower_right = canvas.pixel_at(12, 12)
        assert upper_left.x > lower_right.x
        assert canvas.pixel_at(0, 0) == Vector3(0, 0, 0)

    def test_kernel_matches_object_path_point_light(self):
        world = unit_sphere_world(Phong(MAGENTA, ambient=0.1, diffuse=0.9, specular=0.9, shininess=200))
        light = PointLight(Vector3(-10, 10, -10))
        np.testing.assert_allclose(
            render(world, light, use_kernel=True).pixels,
            render(world, light, use_kernel=False).pixels, atol=1e-9)

    def test_kernel_matches_object_path_two_spheres(self):
        world = HittableList([
            Sphere(Vector3(0.5, 0, 0), 1.0, Lambertian(RED, ambient=0.2, diffuse=0.7)),
            Sphere(Vector3(-1, 0.5, -1), 0.6, Phong(BLUE, specular=0.5, shininess=30)),
            Sphere(Vector3(0, -1, 2), 1.5),
        ])
        light = DirectionalLight(Vector3(1, 1, -1), Vector3(1.0, 0.9, 0.8))
        np.testing.assert_allclose(
            render(world, light, size=24, use_kernel=True).pixels,
            render(world, light, size=24, use_kernel=False).pixels, atol=1e-9)

    def test_repeated_render_is_identical(self):
        world = unit_sphere_world(MaterialPresets.glossy(MAGENTA))
        light = PointLight(Vector3(-10, 10, -10))
        first = render(world, light, size=12)
        second = render(world, light, size=12)
        np.testing.assert_array_equal(first.pixels, second.pixels)

    def test_transformed_sphere_on_object_path(self):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, MaterialPresets.flat(RED),
                                     transform=translation(0, 0, 1) @ scaling(2, 2, 2))])
        canvas = render(world, PointLight(Vector3(-10, 10, -10)), size=21, use_kernel=False)
        lit = int(canvas.pixels[:, :, 0].sum())
        plain = render(unit_sphere_world(MaterialPresets.flat(RED)),
                       PointLight(Vector3(-10, 10, -10)), size=21, use_kernel=False)
        assert canvas.pixel_at(10, 10) == RED
        assert lit > int(plain.pixels[:, :, 0].sum())

    def test_resolution_mismatch(self):
        camera = Camera(EYE, 10.0, 7.0, 10, 10)
        with pytest.raises(ValueError):
            Renderer(20, 20).render(HittableList(), PointLight(EYE), camera)


class TestSceneArrays:

    def test_packs_coefficients(self):
        world = HittableList([
            Sphere(Vector3(1, 2, 3), 0.5, Lambertian(RED, ambient=0.3, diffuse=0.6)),
            Sphere(Vector3(0, 0, 0), 2.0, Phong(BLUE, ambient=0.1, diffuse=0.8, specular=0.4, shininess=10)),
        ])
        scene = SceneArrays(world, PointLight(Vector3(-1, 1, -1)))
        np.testing.assert_array_equal(scene.centers, [[1, 2, 3], [0, 0, 0]])
        np.testing.assert_array_equal(scene.radii, [0.5, 2.0])
        np.testing.assert_array_equal(scene.coefficients, [[0.3, 0.6, 0.0, 1.0], [0.1, 0.8, 0.4, 10.0]])
        assert scene.light_is_point

    def test_rejects_unsupported_material(self):
        class Mirror(Material):
            def shade(self, rec, light, eye=None):
                return self.color

        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, Mirror(RED))])
        with pytest.raises(ValueError):
            SceneArrays(world, PointLight(EYE))

    def test_rejects_transformed_sphere(self):
        world = HittableList([Sphere(Vector3(0, 0, 0), 1.0, transform=scaling(2, 2, 2))])
        with pytest.raises(ValueError):
            SceneArrays(world, PointLight(EYE))

    def test_rejects_unsupported_objects_and_lights(self):
        with pytest.raises(ValueError):
            SceneArrays(HittableList([Hittable()]), PointLight(EYE))
        with pytest.raises(ValueError):
            SceneArrays(HittableList(), Light())
