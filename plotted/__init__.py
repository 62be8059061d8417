from plotted.adapters import build_series, extract_magnitude, extract_point, register_magnitude, register_point
from plotted.attributes import LayoutHints, PlottedAttributes, RenderMode
from plotted.errors import PlotDataError, UnsupportedElementError
from plotted.plan import FilledRect, LinePrimitive, RenderPlan, ScatterPrimitive, plan_for, render_plan
from plotted.reducers import Bin, GaussianKernel, KdeSample, gaussian_kernel, histogram, kde
from plotted.series import Point, Series
from plotted.widget import Plotted

__all__ = [
    "Bin",
    "FilledRect",
    "GaussianKernel",
    "KdeSample",
    "LayoutHints",
    "LinePrimitive",
    "PlotDataError",
    "Plotted",
    "PlottedAttributes",
    "Point",
    "RenderMode",
    "RenderPlan",
    "ScatterPrimitive",
    "Series",
    "UnsupportedElementError",
    "build_series",
    "extract_magnitude",
    "extract_point",
    "gaussian_kernel",
    "histogram",
    "kde",
    "plan_for",
    "register_magnitude",
    "register_point",
    "render_plan",
]
