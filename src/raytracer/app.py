# app.py
import argparse
import logging
from typing import Optional
import pygame
from raytracer.camera.camera import Camera
from raytracer.config import QUALITY_LEVELS, RenderSettings
from raytracer.renderer.raytracer import Renderer
from raytracer.renderer.surface import Surface
from raytracer.scenes import SCENES
from raytracer.utils.logger import init_logger, logger

MOVE_STEP = 0.25
TURN_DEGREES = 5.0

def apply_key(camera: Camera, key: int, move_step: float = MOVE_STEP,
              turn_degrees: float = TURN_DEGREES) -> Optional[Camera]:
    """
    Translates one pressed key into a camera move or rotate.
    Returns the moved camera, or None if the key is not bound.
    """
    forward = camera.target.normalize()
    if key == pygame.K_w:
        return camera.move(forward * move_step)
    if key == pygame.K_s:
        return camera.move(forward * -move_step)
    if key == pygame.K_d:
        return camera.move(camera.right * move_step)
    if key == pygame.K_a:
        return camera.move(camera.right * -move_step)
    if key == pygame.K_SPACE:
        return camera.move(camera.up.normalize() * move_step)
    if key in (pygame.K_LSHIFT, pygame.K_RSHIFT):
        return camera.move(camera.up.normalize() * -move_step)
    if key == pygame.K_RIGHT:
        return camera.rotate(camera.up, turn_degrees)
    if key == pygame.K_LEFT:
        return camera.rotate(camera.up, -turn_degrees)
    if key == pygame.K_UP:
        return camera.rotate(camera.right, -turn_degrees)
    if key == pygame.K_DOWN:
        return camera.rotate(camera.right, turn_degrees)
    return None

class Application:
    """
    Interactive viewer: renders a frame, shows it, and re-renders whenever a
    key moves the camera. Keys 1-3 switch quality levels.
    """
    def __init__(self, scene_name: str = "mirror_spheres", width: int = 320, height: int = 240,
                 quality: str = "balanced", workers: int = None, seed: int = None):
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Ray Tracer")

        self.scene = SCENES[scene_name]()
        self.camera = Camera.from_fov((width, height), fov=90.0)
        self.surface = Surface(width, height)
        self.workers = workers
        self.seed = seed
        self.quality_keys = {
            pygame.K_1: "interactive",
            pygame.K_2: "balanced",
            pygame.K_3: "high_quality",
        }
        self.apply_quality(quality)

    def apply_quality(self, quality: str):
        self.current_quality = quality
        settings = RenderSettings.from_quality(quality, workers=self.workers, seed=self.seed)
        self.renderer = Renderer(self.scene, settings)
        logger.info("Quality changed to: %s", quality)

    def draw(self):
        self.renderer.render(self.camera, self.surface)
        # surfarray expects (width, height, 3)
        frame = pygame.surfarray.make_surface(self.surface.to_rgb().swapaxes(0, 1))
        self.screen.blit(frame, (0, 0))
        pygame.display.flip()

    def run(self):
        try:
            self.draw()
            running = True
            while running:
                event = pygame.event.wait()
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in self.quality_keys:
                        self.apply_quality(self.quality_keys[event.key])
                        self.draw()
                    else:
                        camera = apply_key(self.camera, event.key)
                        if camera is not None:
                            self.camera = camera
                            logger.debug("Camera at %r looking along %r", camera.position, camera.target)
                            self.draw()
        finally:
            logger.info("Cleaning up...")
            pygame.quit()

def render_still(scene_name: str, width: int, height: int, quality: str, output: str,
                 workers: int = None, seed: int = None) -> Surface:
    """Renders one frame without opening a window and writes it to `output`."""
    settings = RenderSettings.from_quality(quality, workers=workers, seed=seed)
    camera = Camera.from_fov((width, height), fov=90.0)
    surface = Renderer(SCENES[scene_name](), settings).render(camera)
    surface.save(output)
    logger.info("Wrote %s", output)
    return surface

def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Recursive ray tracer viewer")
    parser.add_argument("--scene", choices=sorted(SCENES), default="mirror_spheres")
    parser.add_argument("--width", type=int, default=320)
    parser.add_argument("--height", type=int, default=240)
    parser.add_argument("--quality", choices=sorted(QUALITY_LEVELS), default="balanced")
    parser.add_argument("--workers", type=int, default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--output", help="render a single frame to this image file instead of opening a window")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    init_logger(logging.DEBUG if args.verbose else logging.INFO)
    if args.output:
        render_still(args.scene, args.width, args.height, args.quality, args.output,
                     workers=args.workers, seed=args.seed)
    else:
        Application(args.scene, args.width, args.height, args.quality,
                    workers=args.workers, seed=args.seed).run()

if __name__ == "__main__":
    main()
