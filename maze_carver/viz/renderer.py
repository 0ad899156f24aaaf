import logging
import pygame
from maze_carver.config import MazeConfig
from maze_carver.core.grid import Grid

logger = logging.getLogger(__name__)

class Renderer:
    """
    Draws the generator's grid every frame and advances it once every
    `step_delay` frames. Reads the model only; all mutation goes through
    generator.step().
    """

    def __init__(self, generator, config: MazeConfig = None):
        self.generator = generator
        self.grid = generator.grid
        self.config = config or MazeConfig(width=self.grid.width, height=self.grid.height)

        self.cell_size = self.config.cell_size
        self.frame = 0
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator.is_complete

    def window_size(self):
        return (self.grid.width * self.cell_size, self.grid.height * self.cell_size)

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(self.config.title)
        self.surface = pygame.display.set_mode(self.window_size())
        self.clock = pygame.time.Clock()
        logger.debug(f"Window opened at {self.window_size()}")

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def update(self):
        """Advance the generator on every step_delay-th frame."""
        self.frame += 1
        if self.frame >= self.config.step_delay:
            self.frame = 0
            self.generator.step()
            if not self.gen_finished and self.generator.is_complete:
                self.gen_finished = True
                logger.info(f"Generation finished after {self.generator.step_count} steps")

    def draw(self, surface: pygame.Surface):
        size = self.cell_size
        wall_color = self.config.color_wall

        for y in range(self.grid.height):
            for x in range(self.grid.width):
                px, py = x * size, y * size

                bg_color = self.config.color_visited if self.grid.is_visited(x, y) else self.config.color_unvisited
                pygame.draw.rect(surface, bg_color, (px, py, size, size))

                north, east, south, west = self.grid.walls(x, y)
                if north:
                    pygame.draw.line(surface, wall_color, (px, py), (px + size, py), 1)
                if east:
                    pygame.draw.line(surface, wall_color, (px + size, py), (px + size, py + size), 1)
                if south:
                    pygame.draw.line(surface, wall_color, (px, py + size), (px + size, py + size), 1)
                if west:
                    pygame.draw.line(surface, wall_color, (px, py), (px, py + size), 1)

        # Highlight the active cell while carving
        if not self.generator.is_complete:
            cx, cy = self.generator.current
            pygame.draw.rect(surface, self.config.color_current, (cx * size, cy * size, size, size))

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.update()

            self.draw(self.surface)
            pygame.display.flip()

            self.clock.tick(self.config.fps)

        pygame.quit()
