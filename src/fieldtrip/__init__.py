"""fieldtrip package."""

from .config import SimulationConfig, load_config
from .controls import Controller
from .core import Attractor, Body, DragZone, Mode, boost_factor
from .errors import DegenerateVectorError, DivideByZeroError, InvalidMassError, SimulationError
from .random_source import RandomSource
from .rendering import FrameRenderer, export_gif, fade_alpha, theme_for
from .vector import Vector2
from .world import SimulationWorld

__all__ = [
    "Vector2",
    "Body",
    "Attractor",
    "DragZone",
    "Mode",
    "boost_factor",
    "SimulationWorld",
    "SimulationConfig",
    "load_config",
    "RandomSource",
    "Controller",
    "FrameRenderer",
    "export_gif",
    "fade_alpha",
    "theme_for",
    "SimulationError",
    "InvalidMassError",
    "DegenerateVectorError",
    "DivideByZeroError",
]
__version__ = "0.1.0"
