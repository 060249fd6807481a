"""
Tests for RayData and its reference point handling.
"""

import unittest

from draftkit.core.document import Document
from draftkit.core.shapes import Line, Ray
from draftkit.core.vector import Vector
from draftkit.entity import RayData, ProjectionRenderingHint


class TestRayDataConstruction(unittest.TestCase):
    """Test creating rays."""

    def test_geometry_only(self):
        ray = RayData(Vector(1, 2), Vector(3, 4))
        self.assertIsInstance(ray.shape, Ray)
        self.assertIsNone(ray.document)
        self.assertIsNone(ray.layer_id)
        self.assertIsNone(ray.linetype_id)
        self.assertEqual(ray.base_point, Vector(1, 2))
        self.assertEqual(ray.direction, Vector(3, 4))

    def test_from_line(self):
        ray = RayData.from_line(Line(Vector(1, 1), Vector(2, 3)))
        self.assertEqual(ray.base_point, Vector(1, 1))
        self.assertEqual(ray.direction, Vector(1, 2))

    def test_attached_construction_resolves(self):
        doc = Document(name="Test")
        ray = RayData(Vector(), Vector(1, 0), document=doc)
        self.assertIs(ray.document, doc)
        self.assertEqual(ray.linetype_id, doc.get_linetype_by_layer_id())
        self.assertEqual(ray.layer_id, doc.get_current_layer_id())


class TestRayReferencePoints(unittest.TestCase):
    """Test get_reference_points."""

    def test_base_then_second_point(self):
        ray = RayData(Vector(0, 0), Vector(1, 0))
        self.assertEqual(ray.get_reference_points(), [Vector(0, 0), Vector(1, 0)])

    def test_second_point_is_base_plus_direction(self):
        ray = RayData(Vector(2.5, -1), Vector(-3, 7))
        points = ray.get_reference_points()
        self.assertEqual(len(points), 2)
        self.assertEqual(points[1], ray.base_point + ray.direction)
        self.assertFalse(points[0].equals_fuzzy(points[1]))

    def test_hint_is_ignored(self):
        ray = RayData(Vector(1, 1), Vector(0, 2))
        expected = ray.get_reference_points()
        for hint in ProjectionRenderingHint:
            self.assertEqual(ray.get_reference_points(hint), expected)

    def test_repeated_queries_identical(self):
        ray = RayData(Vector(1, 1), Vector(0, 2))
        self.assertEqual(ray.get_reference_points(), ray.get_reference_points())

    def test_degenerate_direction(self):
        ray = RayData(Vector(3, 3), Vector())
        points = ray.get_reference_points()
        self.assertEqual(len(points), 2)
        self.assertEqual(points[0], points[1])


class TestRayMoveReferencePoint(unittest.TestCase):
    """Test move_reference_point."""

    def test_move_second_point(self):
        ray = RayData(Vector(0, 0), Vector(1, 0))
        self.assertTrue(ray.move_reference_point(Vector(1, 0), Vector(5, 5)))
        self.assertEqual(ray.base_point, Vector(0, 0))
        self.assertEqual(ray.direction, Vector(5, 5))
        self.assertEqual(ray.get_reference_points(), [Vector(0, 0), Vector(5, 5)])

    def test_move_base_point_keeps_direction(self):
        ray = RayData(Vector(1, 1), Vector(2, 0))
        self.assertTrue(ray.move_reference_point(Vector(1, 1), Vector(-4, 6)))
        self.assertTrue(ray.get_reference_points()[0].equals_fuzzy(Vector(-4, 6)))
        self.assertEqual(ray.direction, Vector(2, 0))

    def test_match_within_tolerance(self):
        ray = RayData(Vector(1, 1), Vector(2, 0))
        self.assertTrue(ray.move_reference_point(Vector(1 + 1e-12, 1), Vector(0, 0)))
        self.assertEqual(ray.base_point, Vector(0, 0))

    def test_no_match_leaves_ray_unchanged(self):
        ray = RayData(Vector(1, 1), Vector(2, 0))
        self.assertFalse(ray.move_reference_point(Vector(1 + 1e-6, 1), Vector(9, 9)))
        self.assertFalse(ray.move_reference_point(Vector(3, 1 + 1e-6), Vector(9, 9)))
        self.assertEqual(ray.base_point, Vector(1, 1))
        self.assertEqual(ray.direction, Vector(2, 0))

    def test_degenerate_shared_point_moves_base(self):
        ray = RayData(Vector(2, 2), Vector())
        self.assertTrue(ray.move_reference_point(Vector(2, 2), Vector(5, 5)))
        self.assertEqual(ray.base_point, Vector(5, 5))
        self.assertEqual(ray.get_reference_points(), [Vector(5, 5), Vector(5, 5)])

    def test_base_point_drag_onto_old_second_point(self):
        # The second point is compared before the base point moved
        ray = RayData(Vector(0, 0), Vector(1, 0))
        self.assertTrue(ray.move_reference_point(Vector(0, 0), Vector(-1, 0)))
        self.assertEqual(ray.base_point, Vector(-1, 0))
        self.assertEqual(ray.direction, Vector(1, 0))

    def test_base_point_drag_is_single_mutation(self):
        ray = RayData(Vector(0, 0), Vector(1, 0))
        self.assertTrue(ray.move_reference_point(Vector(0, 0), Vector(1, 0)))
        self.assertEqual(ray.get_reference_points(), [Vector(1, 0), Vector(2, 0)])

    def test_degenerate_ray_can_be_given_a_direction(self):
        ray = RayData(Vector(2, 2), Vector())
        ray.second_point = Vector(4, 2)
        self.assertTrue(ray.is_valid())
        self.assertTrue(ray.move_reference_point(Vector(4, 2), Vector(2, 5)))
        self.assertEqual(ray.direction, Vector(0, 3))

    def test_closest_reference_point(self):
        ray = RayData(Vector(0, 0), Vector(10, 0))
        self.assertEqual(ray.get_closest_reference_point(Vector(9, 1)), Vector(10, 0))
        self.assertIsNone(ray.get_closest_reference_point(Vector(5, 5), max_distance=1.0))
        self.assertEqual(ray.get_closest_reference_point(Vector(0.5, 0), max_distance=1.0),
                         Vector(0, 0))

    def test_attached_ray_keeps_properties(self):
        doc = Document(name="Test")
        ray = RayData(Vector(0, 0), Vector(1, 0), document=doc)
        linetype_id = ray.linetype_id
        ray.move_reference_point(Vector(1, 0), Vector(0, 1))
        self.assertIs(ray.document, doc)
        self.assertEqual(ray.linetype_id, linetype_id)


class TestRayDataTransforms(unittest.TestCase):
    """Test transform pass-throughs."""

    def test_move(self):
        ray = RayData(Vector(0, 0), Vector(1, 0))
        self.assertTrue(ray.move(Vector(1, 2)))
        points = ray.get_reference_points()
        self.assertTrue(points[0].equals_fuzzy(Vector(1, 2)))
        self.assertTrue(points[1].equals_fuzzy(Vector(2, 2)))

    def test_move_carries_z(self):
        ray = RayData(Vector(0, 0, 1), Vector(1, 0))
        self.assertTrue(ray.move(Vector(1, 2, 3)))
        self.assertTrue(ray.base_point.equals_fuzzy(Vector(1, 2, 4)))
        self.assertTrue(ray.direction.equals_fuzzy(Vector(1, 0, 0)))

    def test_distance(self):
        ray = RayData(Vector(0, 0), Vector(1, 0))
        self.assertAlmostEqual(ray.get_distance_to(Vector(-3, 4)), 5.0)
        self.assertIsNone(ray.get_bounding_box())


if __name__ == '__main__':
    unittest.main()
