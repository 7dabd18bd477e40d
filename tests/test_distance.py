import pytest

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from school_finder.services.distance import planar_distance, rank_by_distance
from school_finder.services.domain import Coordinate, School


"""Unit tests for planar distance and proximity ranking (school_finder.services.distance)."""


def _school(id_: int, lat: float, lon: float) -> School:
    return School(id=id_, name=f"S{id_}", address="somewhere", latitude=lat, longitude=lon)


def test_three_four_five_triangle():
    """Planar distance on raw degrees gives exactly 5 for (0,0)-(3,4). - test_three_four_five_triangle"""
    assert round(planar_distance(0, 0, 3, 4), 2) == 5.00
    assert planar_distance(0, 0, 3, 4) == 5.0


def test_distance_is_symmetric():
    """Swapping the two points does not change the distance. - test_distance_is_symmetric"""
    assert planar_distance(12.5, -3.25, -7.0, 44.0) == planar_distance(-7.0, 44.0, 12.5, -3.25)


def test_distance_is_not_geodesic():
    """One degree of longitude near a pole still counts as 1. - test_distance_is_not_geodesic"""
    assert planar_distance(89.0, 0.0, 89.0, 1.0) == pytest.approx(1.0)


def test_rank_orders_ascending_and_rounds():
    """Ranking sorts by distance and rounds to two decimals. - test_rank_orders_ascending_and_rounds"""
    schools = [_school(1, 10, 10), _school(2, 0, 0), _school(3, 1, 1)]
    ranked = rank_by_distance(schools, Coordinate(0, 0))

    assert [r.school.id for r in ranked] == [2, 3, 1]
    assert [r.distance for r in ranked] == [0.0, 1.41, 14.14]


def test_rank_keeps_store_order_for_ties():
    """Equal distances keep their input order. - test_rank_keeps_store_order_for_ties"""
    schools = [_school(1, 0, 5), _school(2, 5, 0), _school(3, 0, -5), _school(4, 0, 1)]
    ranked = rank_by_distance(schools, Coordinate(0, 0))

    assert [r.school.id for r in ranked] == [4, 1, 2, 3]


def test_rank_empty():
    """Nothing to rank gives an empty list. - test_rank_empty"""
    assert rank_by_distance([], Coordinate(1, 1)) == []
