"""Live orbit renderer using matplotlib."""

import time
from typing import List, Optional, Sequence, Tuple

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from solar_sim.render.base import Renderer

SUN_COLOR = (1.0, 1.0, 0.0)
EARTH_COLOR = (0.0, 0.0, 1.0)
SUN_SIZE = 20.0
EARTH_SIZE = 12.0


def default_styles(n_bodies: int, seed: Optional[int] = None) -> Tuple[np.ndarray, np.ndarray]:
    """Colors and marker sizes per body index.

    Body 0 is drawn as the Sun (yellow, size 20), body 1 as the Earth (blue,
    size 12); any further bodies get random colors and sizes in [5, 15).
    """
    rng = np.random.default_rng(seed)
    n_extra = max(0, n_bodies - 2)
    colors = np.vstack([np.array([SUN_COLOR, EARTH_COLOR]), rng.random((n_extra, 3))])[:n_bodies]
    sizes = np.concatenate([[SUN_SIZE, EARTH_SIZE], rng.random(n_extra) * 10 + 5])[:n_bodies]
    return colors, sizes


class OrbitRenderer(Renderer):
    """Real-time view of body markers and their sampled trajectories."""

    def __init__(
        self,
        figsize: Tuple[int, int] = (10, 10),
        dpi: int = 100,
        colors: Optional[Sequence] = None,
        sizes: Optional[Sequence[float]] = None,
        axis_limit: float = 2.5e11,
        elevation: float = 15.0,
        azimuth: float = 50.0,
        target_fps: Optional[float] = 30.0,
        interactive: bool = True,
        seed: Optional[int] = None,
    ):
        """Initialize renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            colors: Optional RGB color per body; defaults from default_styles()
            sizes: Optional marker size per body; defaults from default_styles()
            axis_limit: Half-width of every axis in metres
            elevation: Camera elevation angle (3D only)
            azimuth: Camera azimuth angle (3D only)
            target_fps: Maximum redraw rate; None redraws every step
            interactive: Show a window and pump its event loop
            seed: Seed for the random colors/sizes of bodies beyond the second
        """
        self.figsize = figsize
        self.dpi = dpi
        self.colors = None if colors is None else np.asarray(colors, dtype=float)
        self.sizes = None if sizes is None else np.asarray(sizes, dtype=float)
        self.axis_limit = axis_limit
        self.elevation = elevation
        self.azimuth = azimuth
        self.interactive = interactive
        self.seed = seed

        self.fig: Optional[Figure] = None
        self.ax = None
        self.markers: List = []
        self.trail_lines: List = []
        self.trails: List[List[np.ndarray]] = []
        self.is_3d = False
        self.initialized = False
        self.frames_drawn = 0

        # Frame rate limiting
        self.frame_time = 0.0 if not target_fps else 1.0 / target_fps
        self.last_render_time = 0.0

    def _initialize(self, positions: np.ndarray):
        """Create the figure on the first observed step."""
        n_bodies, dim = positions.shape
        self.is_3d = dim == 3
        default_colors, default_sizes = default_styles(n_bodies, self.seed)
        if self.colors is None:
            self.colors = default_colors
        if self.sizes is None:
            self.sizes = default_sizes

        self.fig = plt.figure(figsize=self.figsize, dpi=self.dpi)
        if self.is_3d:
            self.ax = self.fig.add_subplot(111, projection='3d')
        else:
            self.ax = self.fig.add_subplot(111)

        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_xlabel('x-position (m)', color='white')
        self.ax.set_ylabel('y-position (m)', color='white')
        if self.is_3d:
            self.ax.set_zlabel('z-position (m)', color='white')
        self.ax.set_title('Simulation of Celestial Bodies in the Solar System', color='white')
        self.ax.grid(True, color='white', alpha=0.3)
        self.ax.tick_params(colors='white')

        lim = self.axis_limit
        self.ax.set_xlim(-lim, lim)
        self.ax.set_ylim(-lim, lim)
        if self.is_3d:
            self.ax.set_zlim(-lim, lim)
            self.ax.view_init(elev=self.elevation, azim=self.azimuth)

        self.markers = []
        self.trail_lines = []
        self.trails = [[] for _ in range(n_bodies)]
        for i in range(n_bodies):
            coords = [[c] for c in positions[i]]
            marker, = self.ax.plot(
                *coords, 'o',
                markersize=self.sizes[i],
                markerfacecolor=self.colors[i],
                markeredgecolor='none',
            )
            line, = self.ax.plot(*coords, '-', color=self.colors[i], linewidth=1.0)
            self.markers.append(marker)
            self.trail_lines.append(line)

        if self.interactive:
            plt.show(block=False)
            plt.pause(0.1)

        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        return plt.fignum_exists(self.fig.number)

    @staticmethod
    def _set_line(line, points: np.ndarray):
        if points.shape[1] == 3:
            line.set_data_3d(points[:, 0], points[:, 1], points[:, 2])
        else:
            line.set_data(points[:, 0], points[:, 1])

    def observe(self, step: int, positions: np.ndarray, sampled_points: Optional[np.ndarray] = None):
        """Move markers to ``positions`` and extend trails on sample steps."""
        if not self.initialized:
            self._initialize(positions)
        elif not self._is_figure_open():
            # Window closed by the user: keep consuming steps without drawing
            return

        if sampled_points is not None:
            for i, point in enumerate(sampled_points):
                self.trails[i].append(point)

        # Frame rate limiting: skip redraws that come too fast, but never
        # drop a sample step's trail update
        current_time = time.time()
        if sampled_points is None and (current_time - self.last_render_time) < self.frame_time:
            return
        self.last_render_time = current_time

        for i, marker in enumerate(self.markers):
            self._set_line(marker, positions[i:i + 1])
        if sampled_points is not None:
            for i, line in enumerate(self.trail_lines):
                self._set_line(line, np.asarray(self.trails[i]))

        self.fig.canvas.draw_idle()
        if self.interactive:
            plt.pause(0.001)
        self.frames_drawn += 1

    def wait(self):
        """Keep the window up until the user closes it."""
        if self.interactive and self._is_figure_open():
            plt.show(block=True)

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
