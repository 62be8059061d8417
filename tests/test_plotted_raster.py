from __future__ import annotations

import unittest

import numpy as np

from plotted import PlottedAttributes, RenderMode, RenderPlan, plan_for
from plotted.raster import RasterStyle, draw_polyline, fill_rect, new_canvas, plan_limits, render_rgba
from plotted.scales import ViewBox, view_box


class ScalesTests(unittest.TestCase):
    def test_view_box_pads_y_and_includes_hints(self) -> None:
        box = view_box([np.asarray([[0.0, 0.0], [10.0, 10.0]])], include_x=(-5.0,), include_y=(20.0,))
        self.assertEqual(box.xmin, -5.0)
        self.assertEqual(box.xmax, 10.0)
        self.assertAlmostEqual(box.ymin, -1.0)
        self.assertAlmostEqual(box.ymax, 21.0)

    def test_degenerate_ranges_are_widened(self) -> None:
        box = view_box([np.asarray([[3.0, 7.0]])])
        self.assertEqual((box.xmin, box.xmax), (2.0, 4.0))
        self.assertEqual((box.ymin, box.ymax), (6.0, 8.0))

    def test_non_finite_coordinates_are_ignored(self) -> None:
        box = view_box([np.asarray([[0.0, np.nan], [np.inf, 1.0], [2.0, 3.0]])])
        self.assertEqual((box.xmin, box.xmax), (0.0, 2.0))

    def test_empty_input_shows_unit_square(self) -> None:
        box = view_box([])
        self.assertEqual((box.xmin, box.xmax), (0.0, 1.0))
        self.assertLess(box.ymin, 0.0)
        self.assertGreater(box.ymax, 1.0)

    def test_range_near_float64_limit_stays_finite(self) -> None:
        box = view_box([np.asarray([[0.0, -1.79e308], [1.0, 1.79e308]])])
        self.assertTrue(np.isfinite([box.ymin, box.ymax]).all())
        px, py = box.to_pixels(np.asarray([[0.0, -1.79e308], [1.0, 1.79e308]]), 11, 11)
        self.assertEqual(px.tolist(), [0, 10])
        self.assertGreater(int(py[0]), int(py[1]))

    def test_to_pixels_maps_corners_with_y_down(self) -> None:
        box = ViewBox(xmin=0.0, xmax=10.0, ymin=0.0, ymax=10.0)
        px, py = box.to_pixels(np.asarray([[0.0, 0.0], [10.0, 10.0]]), 11, 11)
        self.assertEqual(px.tolist(), [0, 10])
        self.assertEqual(py.tolist(), [10, 0])
        with self.assertRaises(ValueError):
            box.to_pixels(np.asarray([[0.0, 0.0]]), 1, 10)


class RasterTests(unittest.TestCase):
    def test_canvas_helpers(self) -> None:
        canvas = new_canvas(8, 6, color=(1, 2, 3, 255))
        self.assertEqual(canvas.shape, (6, 8, 4))
        self.assertEqual(canvas[0, 0].tolist(), [1, 2, 3, 255])
        fill_rect(canvas, 2, 1, 4, 3, (255, 0, 0, 255))
        self.assertEqual(canvas[2, 3].tolist(), [255, 0, 0, 255])
        self.assertEqual(canvas[0, 0].tolist(), [1, 2, 3, 255])
        draw_polyline(canvas, np.asarray([0, 7]), np.asarray([5, 5]), (0, 255, 0, 255))
        self.assertTrue(np.all(canvas[5, :, 1] == 255))

    def test_every_mode_renders_non_uniform_frame(self) -> None:
        data = np.random.default_rng(5).normal(size=200)
        for mode in RenderMode:
            frame = render_rgba(plan_for(data, PlottedAttributes(mode=mode)), 160, 96)
            self.assertEqual(frame.shape, (96, 160, 4))
            self.assertEqual(frame.dtype, np.uint8)
            self.assertGreater(float(frame[:, :, :3].std()), 0.0)

    def test_empty_plan_renders_background_only(self) -> None:
        style = RasterStyle(background=(9, 9, 9, 255))
        frame = render_rgba(RenderPlan(mode=RenderMode.LINE), 20, 10, style=style)
        self.assertTrue(np.all(frame[:, :, :3] == 9))

    def test_rendering_is_deterministic(self) -> None:
        plan = plan_for([(0.0, 1.0), (1.0, float("nan")), (2.0, 0.0), (3.0, 2.0)])
        self.assertTrue(np.array_equal(render_rgba(plan, 64, 32), render_rgba(plan, 64, 32)))

    def test_bound_hints_widen_the_view(self) -> None:
        plain = plan_limits(plan_for([1.0, 2.0, 3.0]))
        hinted = plan_limits(plan_for([1.0, 2.0, 3.0], PlottedAttributes(min_y=-50.0, max_x=10.0)))
        self.assertLess(hinted.ymin, plain.ymin)
        self.assertEqual(hinted.xmax, 10.0)

    def test_range_wider_than_float64_renders(self) -> None:
        for mode in (RenderMode.LINE, RenderMode.HISTOGRAM, RenderMode.KDE):
            frame = render_rgba(plan_for([-1e308, 0.0, 1e308], PlottedAttributes(mode=mode)), 64, 32)
            self.assertGreater(float(frame[:, :, :3].std()), 0.0)

    def test_polyline_segments_are_connected(self) -> None:
        canvas = new_canvas(10, 10, color=(0, 0, 0, 255))
        draw_polyline(canvas, np.asarray([0, 9, 9]), np.asarray([0, 0, 9]), (255, 255, 255, 255))
        self.assertTrue(np.all(canvas[0, :, 0] == 255))
        self.assertTrue(np.all(canvas[:, 9, 0] == 255))
        self.assertEqual(int(canvas[5, 5, 0]), 0)

    def test_rejects_tiny_viewport(self) -> None:
        with self.assertRaises(ValueError):
            render_rgba(plan_for([1.0, 2.0]), 1, 1)


if __name__ == "__main__":
    unittest.main()
