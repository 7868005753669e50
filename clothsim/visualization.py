"""
Matplotlib-based interactive host for the cloth simulation.
"""

from typing import List, Optional, Tuple
import logging
import numpy as np
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from matplotlib.backend_bases import MouseButton
from matplotlib.collections import LineCollection
from .engine import ClothEngine
from .forces import PointerState
from .vector import Vector2

logger = logging.getLogger(__name__)

SELECTED_COLOR = (1.0, 0.0, 0.0, 1.0)
STICK_COLOR = (1.0, 1.0, 1.0, 1.0)


class Visualizer:
    """
    Real-time view of a ClothEngine.

    Left-drag pulls the cloth, right-drag tears it. Axes use screen
    coordinates, so y grows downwards.
    """

    def __init__(self, engine: ClothEngine, canvas_size: Tuple[int, int] = (800, 600),
                 figsize: Tuple[float, float] = (10, 7.5)):
        """
        Initialize visualizer.

        Args:
            engine: Cloth engine to drive and draw
            canvas_size: Scene extent (width, height) in simulation units
            figsize: Figure size (width, height)
        """
        self.engine = engine
        self.fig, self.ax = plt.subplots(figsize=figsize)
        self.fig.patch.set_facecolor('black')
        self.ax.set_facecolor('black')
        self.ax.set_xlim(0, canvas_size[0])
        self.ax.set_ylim(canvas_size[1], 0)
        self.ax.set_aspect('equal')
        self.ax.set_axis_off()

        self.lines = LineCollection([], linewidths=1.0)
        self.ax.add_collection(self.lines)

        self.pointer_position = Vector2.ZERO
        self.left_down = False
        self.right_down = False

        self.animation = None
        self.frame_rate = 60
        self.show_stats = True

        self.stats_text = self.ax.text(0.02, 0.98, "", transform=self.ax.transAxes,
                                       verticalalignment='top', fontfamily='monospace',
                                       color='gray')

        self.fig.canvas.mpl_connect('motion_notify_event', self.on_motion)
        self.fig.canvas.mpl_connect('button_press_event', self.on_press)
        self.fig.canvas.mpl_connect('button_release_event', self.on_release)

        logger.info("Visualizer initialized")

    def on_motion(self, event) -> None:
        # Outside the axes xdata is None; keep the last known position
        if event.xdata is not None and event.ydata is not None:
            self.pointer_position = Vector2(event.xdata, event.ydata)

    def on_press(self, event) -> None:
        self.on_motion(event)
        if event.button == MouseButton.LEFT:
            self.left_down = True
        elif event.button == MouseButton.RIGHT:
            self.right_down = True

    def on_release(self, event) -> None:
        if event.button == MouseButton.LEFT:
            self.left_down = False
        elif event.button == MouseButton.RIGHT:
            self.right_down = False

    def pointer_state(self) -> PointerState:
        """Current pointer sample."""
        return PointerState(self.pointer_position, self.left_down, self.right_down)

    def update_frame(self, frame_num: int = 0) -> List:
        """Step the engine once and redraw."""
        self.engine.step(self.pointer_state())
        self.draw()
        return [self.lines, self.stats_text]

    def draw(self) -> None:
        """Redraw the sticks of every cloth without stepping."""
        segments = [cloth.segments() for cloth in self.engine.cloths]
        masks = [cloth.highlight_mask() for cloth in self.engine.cloths]
        if segments:
            all_segments = np.concatenate(segments)
            mask = np.concatenate(masks)
        else:
            all_segments = np.zeros((0, 2, 2))
            mask = np.zeros(0, dtype=bool)

        colors = np.where(mask[:, None], SELECTED_COLOR, STICK_COLOR)
        self.lines.set_segments(all_segments)
        self.lines.set_colors(colors)

        if self.show_stats:
            self._update_stats()

    def _update_stats(self) -> None:
        """Update statistics display."""
        info = self.engine.get_debug_info()
        stats_text = (f"Time: {info['time']:.2f}s\n"
                      f"Cloths: {info['cloth_count']}\n"
                      f"Sticks: {info['stick_count']}\n"
                      f"Torn: {info['removed_count']}")
        if info['paused']:
            stats_text += "\nPAUSED"
        self.stats_text.set_text(stats_text)

    def animate(self, interval: Optional[float] = None, save_path: Optional[str] = None,
                frames: Optional[int] = None) -> None:
        """Start real-time animation."""
        if interval is None:
            interval = 1000 / self.frame_rate

        self.animation = animation.FuncAnimation(
            self.fig, self.update_frame, interval=interval, frames=frames,
            blit=False, repeat=False, cache_frame_data=False
        )

        if save_path:
            logger.info(f"Saving animation to {save_path}")
            writer = animation.PillowWriter(fps=self.frame_rate)
            self.animation.save(save_path, writer=writer)
        else:
            plt.show()

    def render_frame(self, save_path: Optional[str] = None) -> None:
        """Draw the current state without stepping; save it or show it."""
        self.draw()
        if save_path:
            self.fig.savefig(save_path, dpi=100, facecolor=self.fig.get_facecolor())
            logger.info(f"Saved frame to {save_path}")
        else:
            plt.show()

    def close(self) -> None:
        """Close visualization."""
        if self.animation:
            self.animation.event_source.stop()
        plt.close(self.fig)
