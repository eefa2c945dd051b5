import math
import unittest

from geo import Candidate, Coordinate, distance, nearest


def _cafe(cafe_id: str, lat: float, lon: float) -> Candidate:
    return Candidate(id=cafe_id, coordinate=Coordinate(lat=lat, lon=lon), name=cafe_id)


class DistanceTests(unittest.TestCase):
    def test_same_point_is_zero(self):
        for point in [Coordinate(0.0, 0.0), Coordinate(55.676, 12.568), Coordinate(-89.9, 179.9)]:
            self.assertEqual(distance(point, point), 0.0)

    def test_symmetric(self):
        pairs = [
            (Coordinate(55.676, 12.568), Coordinate(48.8566, 2.3522)),
            (Coordinate(-33.8688, 151.2093), Coordinate(40.7128, -74.006)),
            (Coordinate(0.0, 179.5), Coordinate(0.0, -179.5)),
        ]
        for a, b in pairs:
            self.assertTrue(math.isclose(distance(a, b), distance(b, a), rel_tol=1e-9))

    def test_one_degree_of_longitude_on_equator(self):
        self.assertAlmostEqual(distance(Coordinate(0.0, 0.0), Coordinate(0.0, 1.0)), 111.19, delta=0.5)

    def test_crosses_antimeridian_the_short_way(self):
        km = distance(Coordinate(0.0, 179.5), Coordinate(0.0, -179.5))
        self.assertAlmostEqual(km, 111.19, delta=0.5)

    def test_nan_propagates(self):
        self.assertTrue(math.isnan(distance(Coordinate(float("nan"), 0.0), Coordinate(0.0, 0.0))))

    def test_infinity_gives_nan(self):
        self.assertTrue(math.isnan(distance(Coordinate(float("inf"), 0.0), Coordinate(0.0, 0.0))))
        self.assertTrue(math.isnan(distance(Coordinate(0.0, 0.0), Coordinate(0.0, float("-inf")))))

    def test_out_of_range_input_does_not_raise(self):
        km = distance(Coordinate(170.0, 0.0), Coordinate(-170.0, 400.0))
        self.assertGreaterEqual(km, 0.0)

    def test_antipodes(self):
        km = distance(Coordinate(0.0, 0.0), Coordinate(0.0, 180.0))
        self.assertAlmostEqual(km, math.pi * 6371.0, places=6)


class NearestTests(unittest.TestCase):
    def setUp(self):
        self.origin = Coordinate(55.676, 12.568)
        self.cafes = [
            _cafe("far", 55.700, 12.600),
            _cafe("near", 55.677, 12.568),
            _cafe("mid", 55.680, 12.570),
            _cafe("farthest", 55.800, 12.700),
        ]

    def test_sorted_ascending_and_truncated(self):
        ranked = nearest(self.origin, self.cafes, 3)
        self.assertEqual([r.candidate.id for r in ranked], ["near", "mid", "far"])
        for first, second in zip(ranked, ranked[1:]):
            self.assertLessEqual(first.distance_km, second.distance_km)

    def test_returns_all_when_fewer_than_k(self):
        self.assertEqual(len(nearest(self.origin, self.cafes, 10)), len(self.cafes))

    def test_empty_inputs(self):
        self.assertEqual(nearest(self.origin, [], 5), [])
        self.assertEqual(nearest(self.origin, self.cafes, 0), [])
        self.assertEqual(nearest(self.origin, self.cafes, -2), [])

    def test_ties_keep_input_order(self):
        # Same latitude offset north and south of the equator origin.
        origin = Coordinate(0.0, 0.0)
        cafes = [_cafe("b", 0.01, 0.0), _cafe("x", 1.0, 0.0), _cafe("a", -0.01, 0.0), _cafe("c", 0.01, 0.0)]
        ranked = nearest(origin, cafes, 4)
        self.assertEqual([r.candidate.id for r in ranked], ["b", "a", "c", "x"])

    def test_distance_m_matches_km(self):
        ranked = nearest(self.origin, self.cafes, 1)
        self.assertAlmostEqual(ranked[0].distance_m, ranked[0].distance_km * 1000.0)

    def test_accepts_any_iterable(self):
        ranked = nearest(self.origin, (c for c in self.cafes), 2)
        self.assertEqual([r.candidate.id for r in ranked], ["near", "mid"])


if __name__ == "__main__":
    unittest.main()
