"""Unit tests for the Point/vector utilities.

Tests cover:
- Unit length of vectors built from angles
- Degree to radian conversion
- Points along a ray
"""

import math

import pytest


class TestAngleToVector:
    """Tests for angle_to_vector."""

    @pytest.mark.parametrize("theta", [0.0, 0.3, math.pi / 4, 2.0, -1.7, 12.5])
    def test_unit_length(self, theta):
        """Test that vectors built from angles have unit length."""
        from raycaster.core.ray import angle_to_vector, length

        assert abs(length(angle_to_vector(theta)) - 1.0) < 1e-12

    def test_axis_directions(self):
        """Test the cardinal directions."""
        from raycaster.core.ray import angle_to_vector

        east = angle_to_vector(0.0)
        north = angle_to_vector(math.pi / 2)

        assert east.x == 1.0
        assert east.y == 0.0
        assert abs(north.x) < 1e-12
        assert abs(north.y - 1.0) < 1e-12

    def test_unbounded_angles_wrap(self):
        """Test that angles beyond 2*pi describe the same direction."""
        from raycaster.core.ray import angle_to_vector

        a = angle_to_vector(0.5)
        b = angle_to_vector(0.5 + 4 * math.pi)

        assert abs(a.x - b.x) < 1e-12
        assert abs(a.y - b.y) < 1e-12


class TestHelpers:
    """Tests for rad, length and ray_at."""

    def test_rad(self):
        """Test degree to radian conversion."""
        from raycaster.core.ray import rad

        assert rad(180.0) == math.pi
        assert abs(rad(1.0) - 0.017453292519943) < 1e-12

    def test_length(self):
        """Test Euclidean length."""
        from raycaster.core.ray import Point, length

        assert length(Point(3.0, 4.0)) == 5.0

    def test_ray_at(self):
        """Test point along a ray."""
        from raycaster.core.ray import Point, ray_at

        p = ray_at(Point(1.0, 2.0), Point(0.0, -1.0), 3.0)

        assert p == Point(1.0, -1.0)

    def test_point_is_immutable(self):
        """Test that points cannot be modified in place."""
        import dataclasses

        from raycaster.core.ray import Point

        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5.0
