import logging
import pygame
from wall_maze.core.grid import WallGrid

logger = logging.getLogger(__name__)


class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_HUD = (255, 255, 255)

    MIN_CELL_SIZE = 1.0
    MAX_CELL_SIZE = 100.0
    MIN_WALL_CELL_SIZE = 4.0

    def __init__(self, grid: WallGrid, generator=None, width=1280, height=720, steps_per_frame=1):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height
        self.steps_per_frame = steps_per_frame

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_finished = generator is None
        self._gen_iter = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        self.cell_size = min(available_w / self.grid.width, available_h / self.grid.height)

        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size
        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def world_to_screen(self, wx, wy):
        """Top-left pixel of cell (wx, wy). Screen y runs opposite to grid y."""
        sx = wx * self.cell_size + self.offset_x
        sy = (self.grid.height - 1 - wy) * self.cell_size + self.offset_y
        return sx, sy

    def screen_to_world(self, sx, sy):
        wx = (sx - self.offset_x) / self.cell_size
        wy = self.grid.height - 1 - (sy - self.offset_y) / self.cell_size
        return int(wx), int(wy)

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Wall Maze - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h
                logger.debug(f"Window resized to {event.w}x{event.h}")

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                self.zoom(event.y > 0, mx, my)

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]:
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def zoom(self, zoom_in, mx, my):
        """Zooms one step in or out, keeping the point under (mx, my) fixed."""
        # Screen-space coord before zoom
        wx = (mx - self.offset_x) / self.cell_size
        wy = (my - self.offset_y) / self.cell_size
        if zoom_in:
            self.cell_size *= self.zoom_speed
        else:
            self.cell_size /= self.zoom_speed

        # Clamp zoom, a cell never shrinks below one pixel
        self.cell_size = max(self.MIN_CELL_SIZE, min(self.MAX_CELL_SIZE, self.cell_size))

        self.offset_x = mx - wx * self.cell_size
        self.offset_y = my - wy * self.cell_size

    def visible_range(self):
        """(start_x, end_x, start_y, end_y) of the cells on screen, end exclusive."""
        start_x = int((-self.offset_x) / self.cell_size)
        end_x = int((self.screen_width - self.offset_x) / self.cell_size) + 1
        # Screen rows, counted from the top row of the grid
        start_row = int((-self.offset_y) / self.cell_size)
        end_row = int((self.screen_height - self.offset_y) / self.cell_size) + 1

        # Clamp to grid bounds
        start_x = max(0, start_x)
        end_x = min(self.grid.width, end_x)
        start_row = max(0, start_row)
        end_row = min(self.grid.height, end_row)

        # Row r holds grid y = height - 1 - r
        start_y = max(0, self.grid.height - end_row)
        end_y = max(start_y, self.grid.height - start_row)
        return start_x, max(start_x, end_x), start_y, end_y

    def draw_grid(self, surface=None):
        """Draws the walls onto `surface` (defaults to the window). Works off-screen too."""
        surface = surface if surface is not None else self.surface
        surface.fill(self.COLOR_BG)
        grid = self.grid
        size = int(self.cell_size)

        # Outer border
        left, top = self.world_to_screen(0, grid.height - 1)
        pygame.draw.rect(surface, self.COLOR_WALL,
                         (int(left), int(top), size * grid.width + 1, size * grid.height + 1), 1)

        # Too small to tell walls apart
        if self.cell_size <= self.MIN_WALL_CELL_SIZE:
            return

        start_x, end_x, start_y, end_y = self.visible_range()
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                sx, sy = self.world_to_screen(x, y)
                px, py = int(sx), int(sy)

                east = grid.east_wall_index(x, y)
                if east is not None and not grid.is_open(east):
                    pygame.draw.line(surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)

                north = grid.north_wall_index(x, y)
                if north is not None and not grid.is_open(north):
                    pygame.draw.line(surface, self.COLOR_WALL, (px, py), (px + size, py), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height}",
            f"Open walls: {self.grid.open_count()}",
            f"Status: {status}",
        ]
        for i, text in enumerate(info):
            lbl = self.font.render(text, True, self.COLOR_HUD)
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step(self):
        """Advances the generator by steps_per_frame cells."""
        if self.gen_finished:
            return
        if self._gen_iter is None:
            self._gen_iter = self.generator.run()
        try:
            for _ in range(self.steps_per_frame):
                next(self._gen_iter)
        except StopIteration:
            self.gen_finished = True
            logger.info("Generation finished")

    def run_loop(self):
        while self.running:
            self.handle_input()
            self.step()
            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
