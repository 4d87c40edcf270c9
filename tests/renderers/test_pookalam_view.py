import pytest
from hypothesis import given
from hypothesis import strategies as st

from pookalam.renderers.pookalam.view import Viewport, ViewTransform, reset_view

VIEWPORT = Viewport(width=800, height=600, scale=45)

surface_points = st.tuples(
    st.floats(min_value=0, max_value=800, allow_nan=False),
    st.floats(min_value=0, max_value=600, allow_nan=False),
)
transforms = st.builds(
    ViewTransform,
    offset_x=st.floats(min_value=-50, max_value=50, allow_nan=False),
    offset_y=st.floats(min_value=-50, max_value=50, allow_nan=False),
    zoom=st.floats(min_value=0.1, max_value=10, allow_nan=False),
)


class TestViewTransform:
    """Cover the world/surface mapping behind pan and zoom."""

    def test_origin_maps_to_surface_center(self) -> None:
        assert ViewTransform().to_surface(VIEWPORT, 0, 0) == (400, 300)

    def test_world_y_points_up(self) -> None:
        _, sy = ViewTransform().to_surface(VIEWPORT, 0, 1)

        assert sy == 300 - 45

    @given(transforms, surface_points)
    def test_to_world_inverts_to_surface(self, view: ViewTransform, point: tuple[float, float]) -> None:
        world = view.to_world(VIEWPORT, *point)

        assert view.to_surface(VIEWPORT, *world) == pytest.approx(point, abs=1e-6)

    def test_visible_bounds_at_default_view(self) -> None:
        bounds = ViewTransform().visible_bounds(VIEWPORT)

        assert bounds.x_min == pytest.approx(-400 / 45)
        assert bounds.x_max == pytest.approx(400 / 45)
        assert bounds.y_min == pytest.approx(-300 / 45)
        assert bounds.y_max == pytest.approx(300 / 45)

    def test_drag_moves_content_with_the_cursor(self) -> None:
        """Verify the world point under the cursor follows a drag."""

        view = ViewTransform()
        before = view.to_world(VIEWPORT, 100, 100)

        dragged = view.dragged(VIEWPORT, 30, -20)

        assert dragged.to_world(VIEWPORT, 130, 80) == pytest.approx(before)

    @given(transforms, surface_points, st.sampled_from([-1, 1]))
    def test_wheel_zoom_keeps_pivot_fixed(
        self, view: ViewTransform, pivot: tuple[float, float], direction: int
    ) -> None:
        before = view.to_world(VIEWPORT, *pivot)

        zoomed = view.wheel_zoom(VIEWPORT, pivot, direction)

        assert zoomed.to_world(VIEWPORT, *pivot) == pytest.approx(before, rel=1e-6, abs=1e-6)

    def test_wheel_zoom_steps_multiplicatively(self) -> None:
        zoomed = ViewTransform(zoom=2.0).wheel_zoom(VIEWPORT, (400, 300), 1)

        assert zoomed.zoom == pytest.approx(2.2)

    def test_wheel_zoom_clamps_to_limits(self) -> None:
        top = ViewTransform(zoom=10.0)
        bottom = ViewTransform(zoom=0.1)

        assert top.wheel_zoom(VIEWPORT, (0, 0), 1) is top
        assert bottom.wheel_zoom(VIEWPORT, (0, 0), -1) is bottom
        assert ViewTransform(zoom=9.5).wheel_zoom(VIEWPORT, (0, 0), 1).zoom == 10.0

    def test_zero_direction_is_a_no_op(self) -> None:
        view = ViewTransform(offset_x=1.0)

        assert view.wheel_zoom(VIEWPORT, (10, 10), 0) is view

    def test_reset_view_restores_identity(self) -> None:
        assert reset_view() == ViewTransform(offset_x=0.0, offset_y=0.0, zoom=1.0)
