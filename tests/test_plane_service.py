"""Tests for app.services.plane_service against an in-memory database."""

import unittest

from support import make_session_factory

from app.core.exceptions import PlaneExistsError, PlaneHasPartsError, PlaneNotFoundError
from app.repositories.plane_part_repository import PlanePartRepository
from app.repositories.plane_repository import PlaneRepository
from app.services.plane_part_service import PlanePartService
from app.services.plane_service import PlaneService


class PlaneServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.service = PlaneService(PlaneRepository(self.db))

    def tearDown(self) -> None:
        self.db.close()


class TestCreateAndRead(PlaneServiceTestCase):
    def test_create_then_get_by_tail(self) -> None:
        plane = self.service.create_plane("N12345", "737")
        found = self.service.get_plane_by_tail("N12345")
        self.assertEqual(found.id, plane.id)
        self.assertEqual(found.model, "737")
        self.assertIsNotNone(found.created_at)

    def test_duplicate_tail_number(self) -> None:
        self.service.create_plane("N12345", "737")
        with self.assertRaises(PlaneExistsError):
            self.service.create_plane("N12345", "A320")

    def test_unique_index_backs_precheck(self) -> None:
        self.service.create_plane("N12345", "737")
        self.service.planes.get_by_tail_number = lambda tail_number: None
        with self.assertRaises(PlaneExistsError):
            self.service.create_plane("N12345", "A320")

    def test_get_missing(self) -> None:
        with self.assertRaises(PlaneNotFoundError):
            self.service.get_plane(42)
        with self.assertRaises(PlaneNotFoundError):
            self.service.get_plane_by_tail("N00000")

    def test_get_all_empty_list(self) -> None:
        self.assertEqual(self.service.get_all_planes(), [])

    def test_get_all_ordered_by_id(self) -> None:
        a = self.service.create_plane("N1", "737")
        b = self.service.create_plane("N2", "A320")
        self.assertEqual([p.id for p in self.service.get_all_planes()], [a.id, b.id])


class TestUpdate(PlaneServiceTestCase):
    def test_update_model_keeps_tail(self) -> None:
        plane = self.service.create_plane("N12345", "737")
        self.service.update_plane(plane.id, model="A320")
        reloaded = self.service.get_plane(plane.id)
        self.assertEqual(reloaded.model, "A320")
        self.assertEqual(reloaded.tail_number, "N12345")

    def test_update_same_tail_is_not_a_collision(self) -> None:
        plane = self.service.create_plane("N12345", "737")
        updated = self.service.update_plane(plane.id, tail_number="N12345", model="737-800")
        self.assertEqual(updated.model, "737-800")

    def test_update_tail_to_taken(self) -> None:
        self.service.create_plane("N1", "737")
        other = self.service.create_plane("N2", "A320")
        with self.assertRaises(PlaneExistsError):
            self.service.update_plane(other.id, tail_number="N1")
        self.assertEqual(self.service.get_plane(other.id).tail_number, "N2")

    def test_update_missing(self) -> None:
        with self.assertRaises(PlaneNotFoundError):
            self.service.update_plane(99, model="A320")


class TestDeleteAndParts(PlaneServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.parts = PlanePartService(PlaneRepository(self.db), PlanePartRepository(self.db))

    def test_delete(self) -> None:
        plane = self.service.create_plane("N12345", "737")
        self.service.delete_plane(plane.id)
        with self.assertRaises(PlaneNotFoundError):
            self.service.get_plane(plane.id)

    def test_delete_missing(self) -> None:
        with self.assertRaises(PlaneNotFoundError):
            self.service.delete_plane(99)

    def test_delete_refused_while_parts_exist(self) -> None:
        plane = self.service.create_plane("N12345", "737")
        part = self.parts.add_part(
            plane_id=plane.id,
            part_name="Left engine",
            serial_number="ENG-001",
            category="engine",
            usage_limit_hours=1000.0,
        )
        with self.assertRaises(PlaneHasPartsError):
            self.service.delete_plane(plane.id)

        self.parts.delete_part(part.id)
        self.service.delete_plane(plane.id)

    def test_plane_with_parts(self) -> None:
        plane = self.service.create_plane("N12345", "737")
        for serial in ("SN-2", "SN-1"):
            self.parts.add_part(
                plane_id=plane.id,
                part_name="Brake",
                serial_number=serial,
                category="landing gear",
                usage_hours=50.0,
                usage_limit_hours=200.0,
            )
        loaded, parts = self.service.get_plane_with_parts(plane.id)
        self.assertEqual(loaded.id, plane.id)
        self.assertEqual([p.serial_number for p in parts], ["SN-2", "SN-1"])
        self.assertEqual([p.usage_percent for p in parts], [25.0, 25.0])

    def test_plane_with_parts_missing(self) -> None:
        with self.assertRaises(PlaneNotFoundError):
            self.service.get_plane_with_parts(99)


if __name__ == "__main__":
    unittest.main()
