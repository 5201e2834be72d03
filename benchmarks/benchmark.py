import math
import random

from pyinstrument import Profiler

from gamevecs import Vec2, Vec3


def random_vec2(rng):
    return Vec2(rng.uniform(-100.0, 100.0), rng.uniform(-100.0, 100.0))


def random_vec3(rng):
    return Vec3(rng.uniform(-100.0, 100.0), rng.uniform(-100.0, 100.0), rng.uniform(-100.0, 100.0))


def step_particles(positions, velocities, dt):
    for pos, vel in zip(positions, velocities):
        pos += vel * dt


def benchmark_vectors(n=20_000, iterations=10):
    rng = random.Random(42)
    points2 = [random_vec2(rng) for _ in range(n)]
    points3 = [random_vec3(rng) for _ in range(n)]
    print(f"Generated {n} Vec2 and {n} Vec3 samples")

    profiler = Profiler()
    profiler.start()

    print(f"Starting computation ({iterations} iterations)...")
    dt2 = Vec2(0.016, 0.016)
    dt3 = Vec3(0.016, 0.016, 0.016)
    for _ in range(iterations):
        for a, b in zip(points2, points2[1:]):
            a.normalized()
            a.angle_between(b)
            a.project(b)
            a.rotate(math.pi / 3).lerp(b, 0.25)
        for a, b in zip(points3, points3[1:]):
            a.cross(b).normalized()
            a.angle_between(b)
            a.project(b)
        step_particles(points2, [p.normalized() for p in points2], dt2)
        step_particles(points3, [p.normalized() for p in points3], dt3)
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("gamevecs_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_vectors()
