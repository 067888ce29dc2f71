# main.py
import argparse
import logging
import sys
from typing import List, Optional
import numpy as np
from core.vector import Vector3
from camera.camera import Camera
from geometry.world import HittableList
from geometry.sphere import Sphere
from geometry.rectangle import Rectangle
from geometry.mesh import load_obj
from materials.lambertian import Lambertian
from materials.presets import MetalPresets, DielectricPresets, LightPresets, ColorPresets
from renderer.config import QUALITY_LEVELS, settings_for
from renderer.raytracer import Renderer

logger = logging.getLogger("raytracer")

def create_spheres_world() -> HittableList:
    """Checkered ground, a hollow glass ball, a steel ball and a blue ball."""
    world = HittableList()

    glass = DielectricPresets.glass()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ColorPresets.checkerboard()))
    world.add(Sphere(Vector3(0.0, 0.5, -2.5), 0.5, glass))
    # Negative radius gives the inner wall of the glass shell.
    world.add(Sphere(Vector3(0.0, 0.5, -2.5), -0.45, glass))
    world.add(Sphere(Vector3(1.0, 0.0, -3.5), 0.5, MetalPresets.steel()))
    world.add(Sphere(Vector3(-1.0, 0.0, -3.5), 0.5, ColorPresets.matte(ColorPresets.BLUE)))
    return world

def create_mesh_world(obj_path: Optional[str]) -> HittableList:
    """Mesh on a checkered floor under an area light, or a stand-in sphere without a mesh."""
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, ColorPresets.checkerboard()))
    world.add(Rectangle.xz(-1.0, 1.0, -6.0, -4.0, 3.0, LightPresets.white_light(4.0)))

    if obj_path is not None:
        triangles = load_obj(obj_path, Lambertian(ColorPresets.GOLD),
                             offset=Vector3(0.0, 0.0, -5.0))
        world.extend(triangles)
        logger.info("Added %d triangles from %s", len(triangles), obj_path)
    else:
        world.add(Sphere(Vector3(0.0, 0.5, -5.0), 1.0, Lambertian(ColorPresets.GOLD)))
    return world

def create_camera(scene: str, aspect_ratio: float) -> Camera:
    if scene == "mesh":
        return Camera(Vector3(0.0, 1.0, 0.0), Vector3(0.0, 0.0, -10.0), aspect_ratio)
    return Camera(Vector3(0.0, 1.0, 2.0), Vector3(0.0, 0.5, -2.0), aspect_ratio)

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a demo scene with the BVH path tracer")
    parser.add_argument("--scene", choices=["spheres", "mesh"], default="spheres")
    parser.add_argument("--obj", default=None, help="OBJ file to place in the mesh scene")
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default=None)
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument("--samples", type=int, default=None, help="samples per pixel axis (n*n per pixel)")
    parser.add_argument("--depth", type=int, default=None, help="maximum bounces per ray")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--npy", default=None, metavar="PATH",
                        help="save the 8-bit RGB frame as a .npy array")
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)

def render_scene(args: argparse.Namespace) -> np.ndarray:
    settings = settings_for(args.quality, width=args.width, height=args.height,
                            samples_per_axis=args.samples, max_depth=args.depth, seed=args.seed)

    world = create_mesh_world(args.obj) if args.scene == "mesh" else create_spheres_world()
    world.build_bvh()  # Precompute BVH for scene

    renderer = Renderer(**settings)
    camera = create_camera(args.scene, renderer.aspect_ratio)
    return renderer.render(world, camera)

def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    image = render_scene(args)
    pixels = Renderer.to_display(image)
    logger.info("Mean pixel value %s", pixels.reshape(-1, 3).mean(axis=0).round(1).tolist())
    if args.npy is not None:
        np.save(args.npy, pixels)
        logger.info("Saved %dx%d frame to %s", pixels.shape[1], pixels.shape[0], args.npy)
    return 0

if __name__ == "__main__":
    sys.exit(main())
