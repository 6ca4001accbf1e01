"""Step sinks: live rendering and in-memory recording."""

from solar_sim.render.base import Renderer
from solar_sim.render.recorder import FrameRecorder
from solar_sim.render.orbit_renderer import OrbitRenderer, default_styles

__all__ = ["Renderer", "FrameRecorder", "OrbitRenderer", "default_styles"]
