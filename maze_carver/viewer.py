# -*- coding: utf-8 -*-
"""
Project: Maze Carver
Start Date: 10/17/2026

Brief Description:
    - Language: Python
    - Stack: pygame, PyOpenGL
    - top-down animated view of a builder, then of the BFS solver
    - drives builder.step() / solver.step() a few times per frame
"""

# pygame.locals and OpenGL.GL are star-imported for the K_* / GL_* names;
# both are C extensions that pylint cannot introspect.
# pylint: disable=wildcard-import, unused-wildcard-import, no-member, undefined-variable

import time

import pygame
from pygame.locals import *

from OpenGL.GL import *

from maze_carver.builders import Algorithm, create_builder
from maze_carver.errors import MazeError
from maze_carver.renderer import CanvasRenderer
from maze_carver.solver import BreadthFirstSolver, path_length


# -----------------------------
# Configuration
# -----------------------------
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 860
HUD_HEIGHT = 60

MAZE_SIZE = 49
STEPS_PER_FRAME = 4

TARGET_FPS = 60

HUD_TEXT_COLOR = (236, 236, 230)
TEXT_CACHE_LIMIT = 64

# Paint name -> RGB
COLORS = {
    "wall": (0.16, 0.18, 0.22),
    "passage": (0.88, 0.88, 0.85),
    "start": (0.10, 0.74, 0.61),
    "end": (0.91, 0.30, 0.24),
    "current": (0.91, 0.30, 0.24),
    "explored": (0.20, 0.60, 0.86),
    "path": (0.95, 0.77, 0.06),
}

# Number keys -> algorithm
ALGORITHM_KEYS = {
    K_1: Algorithm.PRIM_SIMPLE,
    K_2: Algorithm.PRIM_WEIGHTED,
    K_3: Algorithm.PRIM_SINGLE_OPEN,
    K_4: Algorithm.ITERATIVE_DFS,
}


# -----------------------------
# Viewer (main loop + glue)
# -----------------------------
class Viewer:
    """
    Viewer ties together:
        - Window + OpenGL setup
        - the active builder, then the solver, stepped from the frame loop
        - a CanvasRenderer holding what each cell should look like
    """

    def __init__(self, algorithm=Algorithm.PRIM_WEIGHTED, size=MAZE_SIZE, seed=None,
                 steps_per_frame=STEPS_PER_FRAME, width=WINDOW_WIDTH, height=WINDOW_HEIGHT):
        pygame.init()
        pygame.display.set_caption("Maze Carver")

        self.font = pygame.font.SysFont("consolas", 18)
        self.text_cache = {}

        flags = DOUBLEBUF | OPENGL  # pylint: disable=unsupported-binary-operation
        pygame.display.set_mode((width, height), flags)
        self.width = width
        self.height = height
        self.running = True
        self.paused = False
        self.failed = False

        self.init_opengl()

        self.algorithm = Algorithm(algorithm)
        self.size = size
        self.seed = seed
        self.steps_per_frame = steps_per_frame

        self.canvas = CanvasRenderer(size)
        self.builder = None
        self.solver = None
        self.status = ""
        self.regenerate_maze(seed=seed)

        # Timing
        self.clock = pygame.time.Clock()
        self.start_time = time.time()
        self.elapsed_time = 0.0

    def init_opengl(self):
        """
        Configure a 2D orthographic projection, (0, 0) top-left
        """
        glViewport(0, 0, self.width, self.height)
        glDisable(GL_DEPTH_TEST)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    # ---------- Events ----------

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False

            elif event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    self.running = False

                elif event.key in ALGORITHM_KEYS:
                    self.algorithm = ALGORITHM_KEYS[event.key]
                    self.regenerate_maze()
                    print(f"Algorithm: {self.algorithm.value}")

                # Regenerate maze
                elif event.key == K_n:
                    self.regenerate_maze()
                    print("Regenerated maze")

                # Solve the finished maze
                elif event.key == K_s:
                    self.start_solver()

                elif event.key == K_SPACE:
                    self.paused = not self.paused
                    print("Paused" if self.paused else "Resumed")

                elif event.key in (K_PLUS, K_EQUALS):
                    self.steps_per_frame = min(self.steps_per_frame * 2, 1024)
                elif event.key == K_MINUS:
                    self.steps_per_frame = max(self.steps_per_frame // 2, 1)

    def regenerate_maze(self, seed=None):
        """
        Fresh grid and builder; the old grid is dropped, never reused
        """
        self.canvas.reset()
        self.failed = False
        self.solver = None
        self.builder = create_builder(self.algorithm, self.size, seed=seed, renderer=self.canvas)
        self.status = f"Building ({self.algorithm.value})"
        self.start_time = time.time()
        self.elapsed_time = 0.0

    def start_solver(self):
        if self.builder is None or not self.builder.done:
            print("Maze is not finished yet")
            return
        self.canvas.completed(self.builder.grid)
        self.solver = BreadthFirstSolver(self.builder.grid, renderer=self.canvas)
        self.status = "Solving"
        print("Solving maze")

    # ---------- Update ----------

    def update(self):
        """
        Advance the active algorithm by steps_per_frame steps
        """
        if self.paused or self.failed:
            return

        try:
            for _ in range(self.steps_per_frame):
                if self.solver is not None:
                    if self.solver.done:
                        break
                    self.solver.step()
                    if self.solver.done:
                        self.status = f"Path length: {path_length(self.solver.path)}"
                        print(self.status)
                elif not self.builder.done:
                    self.builder.step()
                    if self.builder.done:
                        self.status = f"Done in {self.builder.steps} steps, press S to solve"
                        print(self.status)
                else:
                    break
        except MazeError as e:
            # Stop driving the run; the error stays visible in the HUD
            self.status = f"Error: {e}"
            print(self.status)
            self.failed = True

        if self.solver is None or not self.solver.done:
            self.elapsed_time = time.time() - self.start_time

    # ---------- Drawing ----------

    def draw_scene(self):
        glClearColor(0.08, 0.08, 0.12, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

        cell = min(self.width, self.height - HUD_HEIGHT) / float(self.size)
        x_offset = (self.width - cell * self.size) / 2.0

        glBegin(GL_QUADS)
        for r, row in enumerate(self.canvas.paint):
            for c, name in enumerate(row):
                glColor3f(*COLORS[name])
                x0 = x_offset + c * cell
                y0 = HUD_HEIGHT + r * cell
                glVertex2f(x0, y0)
                glVertex2f(x0 + cell, y0)
                glVertex2f(x0 + cell, y0 + cell)
                glVertex2f(x0, y0 + cell)
        glEnd()

        self.draw_hud()

    # ---------- HUD text ----------

    def _text_texture(self, text, color):
        """
        (tex_id, width, height) for a rendered HUD string
        - textures are cached per (text, color); the cache is flushed once
          it holds more than TEXT_CACHE_LIMIT strings
        """
        key = (text, color)
        cached = self.text_cache.get(key)
        if cached is not None:
            return cached

        if len(self.text_cache) >= TEXT_CACHE_LIMIT:
            self._release_text_cache()

        surface = self.font.render(text, True, color)
        width, height = surface.get_size()
        pixels = pygame.image.tostring(surface, "RGBA", False)

        tex_id = glGenTextures(1)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
        glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
        glTexImage2D(GL_TEXTURE_2D, 0, GL_RGBA, width, height, 0,
                     GL_RGBA, GL_UNSIGNED_BYTE, pixels)
        glBindTexture(GL_TEXTURE_2D, 0)

        self.text_cache[key] = (tex_id, width, height)
        return self.text_cache[key]

    def _release_text_cache(self):
        if self.text_cache:
            glDeleteTextures([entry[0] for entry in self.text_cache.values()])
        self.text_cache = {}

    def draw_text(self, x, y, text, color=HUD_TEXT_COLOR):
        """
        Blit a HUD string with its top-left corner at window pixel (x, y)
        """
        if not text:
            return
        tex_id, width, height = self._text_texture(text, color)

        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        glColor4f(1.0, 1.0, 1.0, 1.0)

        # Surface rows run top-down, matching the top-left origin of glOrtho
        corners = ((0, 0), (1, 0), (1, 1), (0, 1))
        glBegin(GL_QUADS)
        for u, v in corners:
            glTexCoord2f(u, v)
            glVertex2f(x + u * width, y + v * height)
        glEnd()

        glBindTexture(GL_TEXTURE_2D, 0)
        glDisable(GL_TEXTURE_2D)
        glDisable(GL_BLEND)

    def draw_hud(self):
        """
        Algorithm, status line, speed and elapsed time
        """
        total_seconds = int(self.elapsed_time)
        time_text = f"Time: {total_seconds // 60:02d}:{total_seconds % 60:02d}"
        speed_text = f"Steps/frame: {self.steps_per_frame}"

        self.draw_text(10, 8, f"{self.algorithm.value}  |  {time_text}  |  {speed_text}")
        self.draw_text(10, 32, self.status)

    def run(self):
        """
        Main loop
        """
        while self.running:
            self.clock.tick(TARGET_FPS)

            self.handle_events()
            self.update()
            self.draw_scene()

            pygame.display.flip()

        self._release_text_cache()
        pygame.quit()
