# renderer/kernels.py

from numba import njit, prange
import math

INFINITY = 1e20

@njit
def ray_sphere_intersect(ox, oy, oz, dx, dy, dz, cx, cy, cz, radius, t_min, t_max):
    """Nearest root in (t_min, t_max], or -1.0 on a miss."""
    ocx = ox - cx
    ocy = oy - cy
    ocz = oz - cz

    a = dx * dx + dy * dy + dz * dz
    b = 2.0 * (dx * ocx + dy * ocy + dz * ocz)
    c = ocx * ocx + ocy * ocy + ocz * ocz - radius * radius
    discriminant = b * b - 4.0 * a * c

    if discriminant < 0:
        return -1.0

    sqrtd = math.sqrt(discriminant)
    root = (-b - sqrtd) / (2.0 * a)

    if root <= t_min or root > t_max:
        root = (-b + sqrtd) / (2.0 * a)
        if root <= t_min or root > t_max:
            return -1.0

    return root

@njit
def shade_intensity(nx, ny, nz, lx, ly, lz, ex, ey, ez,
                    ambient, diffuse, specular, shininess):
    """
    Scalar ambient + diffuse (+ specular) intensity clamped to [0, 1].
    The light vector (lx, ly, lz) points from the surface toward the light.
    """
    n_dot_l = nx * lx + ny * ly + nz * lz
    value = ambient
    if n_dot_l > 0:
        value += diffuse * n_dot_l

    spec = 0.0
    if specular > 0 and n_dot_l >= 0:
        # reflect(-l, n) = -l + 2 (n . l) n
        rx = -lx + 2.0 * n_dot_l * nx
        ry = -ly + 2.0 * n_dot_l * ny
        rz = -lz + 2.0 * n_dot_l * nz
        r_dot_e = rx * ex + ry * ey + rz * ez
        if r_dot_e > 0:
            spec = specular * r_dot_e ** shininess
    value = value + spec

    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value

@njit
def clamp_channel(value):
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value

@njit(parallel=True)
def render_spheres_kernel(origin, directions, centers, radii, colors, coefficients,
                          light_vector, light_intensity, light_is_point,
                          background, t_min, out):
    """
    Trace one ray per pixel against every sphere and shade the nearest hit.

    Parameters:
        origin (float64[3]): Eye position shared by all rays
        directions (float64[height, width, 3]): Unit ray direction per pixel
        centers (float64[n, 3]), radii (float64[n]): Sphere geometry
        colors (float64[n, 3]): Base color per sphere
        coefficients (float64[n, 4]): ambient, diffuse, specular, shininess
        light_vector (float64[3]): Light position, or unit direction toward the light
        light_intensity (float64[3]): Light color
        light_is_point (bool): Whether light_vector is a position
        background (float64[3]): Color for rays that hit nothing
        t_min (float): Self-intersection threshold
        out (float64[height, width, 3]): Output buffer, each row written by one worker
    """
    height = directions.shape[0]
    width = directions.shape[1]
    n = radii.shape[0]

    for y in prange(height):
        for x in range(width):
            dx = directions[y, x, 0]
            dy = directions[y, x, 1]
            dz = directions[y, x, 2]

            closest = INFINITY
            hit_index = -1
            for k in range(n):
                t = ray_sphere_intersect(origin[0], origin[1], origin[2], dx, dy, dz,
                                         centers[k, 0], centers[k, 1], centers[k, 2],
                                         radii[k], t_min, closest)
                if t > 0.0:
                    closest = t
                    hit_index = k

            if hit_index < 0:
                for i in range(3):
                    out[y, x, i] = background[i]
                continue

            px = origin[0] + dx * closest
            py = origin[1] + dy * closest
            pz = origin[2] + dz * closest

            nx = px - centers[hit_index, 0]
            ny = py - centers[hit_index, 1]
            nz = pz - centers[hit_index, 2]
            n_len = math.sqrt(nx * nx + ny * ny + nz * nz)
            nx = nx / n_len
            ny = ny / n_len
            nz = nz / n_len

            if light_is_point:
                lx = light_vector[0] - px
                ly = light_vector[1] - py
                lz = light_vector[2] - pz
                l_len = math.sqrt(lx * lx + ly * ly + lz * lz)
                lx = lx / l_len
                ly = ly / l_len
                lz = lz / l_len
            else:
                lx = light_vector[0]
                ly = light_vector[1]
                lz = light_vector[2]

            intensity = shade_intensity(nx, ny, nz, lx, ly, lz, -dx, -dy, -dz,
                                        coefficients[hit_index, 0], coefficients[hit_index, 1],
                                        coefficients[hit_index, 2], coefficients[hit_index, 3])

            for i in range(3):
                out[y, x, i] = clamp_channel(colors[hit_index, i] * light_intensity[i] * intensity)
