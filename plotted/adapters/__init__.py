from plotted.adapters.magnitude import extract_magnitude, register_magnitude, unregister_magnitude
from plotted.adapters.normalize import build_series
from plotted.adapters.points import extract_point, register_point, unregister_point

__all__ = [
    "build_series",
    "extract_magnitude",
    "extract_point",
    "register_magnitude",
    "register_point",
    "unregister_magnitude",
    "unregister_point",
]
