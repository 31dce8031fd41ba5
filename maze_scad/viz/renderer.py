import pygame
from maze_scad.core.grid import SquareGrid

class Renderer:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_FLOOR = (60, 100, 160)# Blue tint

    def __init__(self, grid: SquareGrid, generator=None, width=1280, height=720):
        self.grid = grid
        self.generator = generator
        self.screen_width = width
        self.screen_height = height

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
        self.gen_iter = None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / max(self.grid.width, 1)
        zoom_y = available_h / max(self.grid.height, 1)

        # Taking minimum zoom to fit both dimensions
        self.cell_size = max(1.0, min(zoom_x, zoom_y))

        # Center
        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze SCAD - {self.grid.width}x{self.grid.height}")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def screen_to_world(self, sx, sy):
        wx = (sx - self.offset_x) / self.cell_size
        wy = (sy - self.offset_y) / self.cell_size
        return int(wx), int(wy)

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()

                # World coord before zoom
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed

                # Clamp zoom
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                # Adjust offset to keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def visible_range(self):
        # Culling: calculate visible cell range, clamped to grid bounds
        start_x = max(0, int((-self.offset_x) / self.cell_size))
        start_y = max(0, int((-self.offset_y) / self.cell_size))
        end_x = min(self.grid.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.grid.height, int((self.screen_height - self.offset_y) / self.cell_size) + 1)
        return start_x, start_y, end_x, end_y

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)
        start_x, start_y, end_x, end_y = self.visible_range()
        size = int(self.cell_size) + 1

        # 1. Floor for cells that already have a passage
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                walls = self.grid.cell(y * self.grid.width + x).walls
                if not all(walls):
                    px, py = self.world_to_screen(x, y)
                    pygame.draw.rect(self.surface, self.COLOR_FLOOR, (int(px), int(py), size, size))

        # 2. Walls. Each cell draws its right and down walls, the outer edge
        # adds the up and left ones.
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                walls = self.grid.cell(y * self.grid.width + x).walls
                px, py = self.world_to_screen(x, y)
                px, py = int(px), int(py)

                if walls[SquareGrid.DOWN]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py + size), (px + size, py + size), 1)
                if walls[SquareGrid.RIGHT]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px + size, py), (px + size, py + size), 1)
                if y == 0 and walls[SquareGrid.UP]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px + size, py), 1)
                if x == 0 and walls[SquareGrid.LEFT]:
                    pygame.draw.line(self.surface, self.COLOR_WALL, (px, py), (px, py + size), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        cells = self.grid.cell_count()
        status = "Done" if self.gen_finished else "Running"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height} ({cells:,})",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def finish(self):
        """Drains whatever generation is left, e.g. after the window was closed early."""
        if self.gen_iter and not self.gen_finished:
            for _ in self.gen_iter:
                pass
        self.gen_finished = True

    def run_loop(self):
        if self.generator:
            self.gen_iter = self.generator.run()

        while self.running:
            self.handle_input()

            # Step Generator
            if self.gen_iter and not self.gen_finished:
                try:
                    for _ in range(10):
                        next(self.gen_iter)
                except StopIteration:
                    self.gen_finished = True

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
