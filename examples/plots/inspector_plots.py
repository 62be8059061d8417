from __future__ import annotations

import argparse
from dataclasses import dataclass, field, fields
import datetime
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from plotted import Plotted, PlottedAttributes, RenderMode
from plotted.raster import render_rgba


LOGGER = logging.getLogger("plotted.examples.inspector_plots")


@dataclass
class SomeData:
    a: float = 1.0
    float_vec: Plotted[list[float]] = field(default_factory=lambda: Plotted([5.0, 2.0, 3.0, 4.0, 1.0]))
    float_arr: Plotted[np.ndarray] = field(
        default_factory=lambda: Plotted(
            np.asarray([5.0, 2.0, 3.0, 4.0, 1.0], dtype=np.float64),
            PlottedAttributes(mode=RenderMode.SCATTER),
        )
    )
    int_arr: Plotted[list[int]] = field(
        default_factory=lambda: Plotted([np.int8(9), np.int8(50), np.int8(-71)], PlottedAttributes(min_y=-100.0, max_y=100.0))
    )
    xy_pairs: Plotted[list[tuple[float, float]]] = field(
        default_factory=lambda: Plotted([(-1.0, 0.3), (0.0, 0.2), (1.0, 0.1)])
    )
    xy_map: Plotted[dict[int, float]] = field(
        default_factory=lambda: Plotted({1000: 0.3, 1015: 0.2, 1040: 0.1}, PlottedAttributes(mode=RenderMode.SCATTER))
    )
    frame_times: Plotted[list[datetime.timedelta]] = field(
        default_factory=lambda: Plotted(
            [datetime.timedelta(milliseconds=ms) for ms in (16.4, 16.9, 15.8, 33.1, 16.6, 16.7, 17.0, 16.2)]
        )
    )
    noise_hist: Plotted[np.ndarray] = field(
        default_factory=lambda: Plotted(
            np.random.default_rng(7).normal(size=500),
            PlottedAttributes(mode=RenderMode.HISTOGRAM),
        )
    )
    noise_kde: Plotted[np.ndarray] = field(
        default_factory=lambda: Plotted(
            np.random.default_rng(7).normal(size=500),
            PlottedAttributes(mode=RenderMode.KDE),
        )
    )


def plotted_fields(data: object) -> dict[str, Plotted]:
    return {f.name: getattr(data, f.name) for f in fields(data) if isinstance(getattr(data, f.name), Plotted)}


def build_frames(data: SomeData, *, width: int = 500, height: int = 100) -> dict[str, np.ndarray]:
    frames: dict[str, np.ndarray] = {}
    for name, plotted in plotted_fields(data).items():

        def draw(plan) -> None:
            frames[name] = render_rgba(plan, width, height)

        plotted.ui(draw)
    return frames


def main() -> None:
    parser = argparse.ArgumentParser(description="Render every plotted field of a demo struct to PNG.")
    parser.add_argument("--out-dir", type=Path, default=Path("plots_out"))
    parser.add_argument("--width", type=int, default=500)
    parser.add_argument("--height", type=int, default=100)
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args.out_dir.mkdir(parents=True, exist_ok=True)
    for name, frame in build_frames(SomeData(), width=args.width, height=args.height).items():
        path = args.out_dir / f"{name}.png"
        Image.fromarray(frame).save(path)
        LOGGER.info("wrote %s", path)


if __name__ == "__main__":
    main()
