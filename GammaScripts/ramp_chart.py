"""
Chart of the gamma ramps currently loaded on a display
"""
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from .config import (
    CHART_SIZE, CHART_DPI, LINE_COLORS, LINE_STYLES,
    THEME_CHART_BG, THEME_GRID, THEME_TEXT,
)
from .ramp import RAMP_MAX

CHANNEL_NAMES = ("R", "G", "B")


class RampChart:
    """Plots one line per channel and controller"""

    def __init__(self, title="Gamma ramps"):
        self.lines = []
        self.fig = Figure(figsize=CHART_SIZE, dpi=CHART_DPI, facecolor=THEME_CHART_BG, layout="constrained")
        self.canvas = FigureCanvasAgg(self.fig)
        self.ax = self.fig.add_subplot(111)
        self.ax.set_facecolor(THEME_CHART_BG)
        self.ax.grid(color=THEME_GRID, alpha=0.5)
        self.ax.set_xlim(0, 1)
        self.ax.set_ylim(0, RAMP_MAX)
        self.ax.set_title(title, color=THEME_TEXT)
        self.ax.set_xlabel("Input level", color=THEME_TEXT)
        self.ax.set_ylabel("Output", color=THEME_TEXT)
        self.ax.tick_params(colors=THEME_TEXT)

    def add_ramp(self, label, ramp):
        """Add the three channel curves of one controller"""
        ramp = np.asarray(ramp)
        size = ramp.shape[-1] if ramp.ndim == 2 else 0
        if size == 0:
            return False

        style = LINE_STYLES[len(self.lines) // 3 % len(LINE_STYLES)]
        x = np.arange(size) / size
        for channel, color, name in zip(ramp, LINE_COLORS, CHANNEL_NAMES):
            (line,) = self.ax.plot(x, channel, color=color, linewidth=1.6, linestyle=style,
                                   label=f"{label} {name}")
            self.lines.append(line)
        return True

    def add_display(self, display, screens):
        """Add every controller with a gamma ramp on the given screens"""
        for screen in screens:
            for controller in display.enumerate_controllers(screen):
                if display.get_ramp_size(controller) <= 0:
                    continue
                self.add_ramp(f"S{screen} C{controller.index}", display.get_ramp(controller))

    def save(self, path):
        """Write the chart to an image file; format follows the extension"""
        if self.lines:
            legend = self.ax.legend(facecolor=THEME_CHART_BG, edgecolor="#444444", labelcolor=THEME_TEXT,
                                    fontsize="small")
            for text in legend.get_texts():
                text.set_color(THEME_TEXT)
        self.fig.savefig(path, facecolor=self.fig.get_facecolor())
