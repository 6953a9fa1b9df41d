"""Tests for app.services.hotels against an in-memory SQLite database."""

import unittest

from app.core.errors import NotFound, ValidationFailure
from app.models import Booking, BookingStatus, Hotel, Location
from app.schemas.hotel import HotelRequest
from app.services.hotels import (
    available_with_at_least,
    create_hotel,
    delete_hotel,
    get_hotel,
    list_hotels,
    update_hotel,
)
from tests.support import add_hotel, add_user, make_session_factory


class HotelServiceTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.db = make_session_factory()()
        self.addCleanup(self.db.close)


class TestCreateHotel(HotelServiceTestCase):
    def test_creates_hotel_with_location(self) -> None:
        request = HotelRequest(
            name="Grand Hotel",
            description="A luxurious hotel with stunning views.",
            no_of_rooms=150,
            address="1234 Luxury Lane",
            latitude=37.7749,
            longitude=-122.4194,
        )
        hotel = create_hotel(self.db, request)
        self.assertIsNotNone(hotel.id)
        self.assertEqual(hotel.no_of_rooms, 150)
        self.assertEqual(hotel.location.address, "1234 Luxury Lane")
        self.assertEqual(self.db.query(Location).count(), 1)

    def test_room_count_defaults_to_zero(self) -> None:
        request = HotelRequest(name="Inn", description="Small", address="2 Side St")
        hotel = create_hotel(self.db, request)
        self.assertEqual(hotel.no_of_rooms, 0)
        self.assertIsNone(hotel.location.latitude)

    def test_legacy_camel_case_room_field(self) -> None:
        request = HotelRequest.model_validate(
            {"name": "Inn", "description": "Small", "address": "2 Side St", "noOfRooms": 3}
        )
        self.assertEqual(request.no_of_rooms, 3)


class TestUpdateHotel(HotelServiceTestCase):
    def test_only_present_fields_change(self) -> None:
        hotel = add_hotel(self.db, no_of_rooms=5, name="Old Name")
        updated = update_hotel(self.db, hotel.id, {"name": "New Name", "latitude": 1.5})
        self.assertEqual(updated.name, "New Name")
        self.assertEqual(updated.description, "A hotel for tests")
        self.assertEqual(updated.no_of_rooms, 5)
        self.assertEqual(updated.location.address, "1 Test Street")
        self.assertEqual(updated.location.latitude, 1.5)

    def test_none_values_are_ignored(self) -> None:
        hotel = add_hotel(self.db, no_of_rooms=5)
        updated = update_hotel(self.db, hotel.id, {"no_of_rooms": None, "address": None})
        self.assertEqual(updated.no_of_rooms, 5)
        self.assertEqual(updated.location.address, "1 Test Street")

    def test_creates_missing_location(self) -> None:
        hotel = Hotel(name="Bare", description="No location", no_of_rooms=1)
        self.db.add(hotel)
        self.db.commit()
        updated = update_hotel(self.db, hotel.id, {"address": "3 New Road", "longitude": 2.0})
        self.assertIsNotNone(updated.location)
        self.assertEqual(updated.location.address, "3 New Road")
        self.assertEqual(updated.location.longitude, 2.0)

    def test_missing_location_without_address_is_rejected(self) -> None:
        hotel = Hotel(name="Bare", description="No location", no_of_rooms=1)
        self.db.add(hotel)
        self.db.commit()
        with self.assertRaises(ValidationFailure):
            update_hotel(self.db, hotel.id, {"latitude": 1.0})

    def test_unknown_hotel(self) -> None:
        with self.assertRaises(NotFound) as ctx:
            update_hotel(self.db, 999, {"name": "x"})
        self.assertEqual(ctx.exception.message, "Hotel not found")
        self.assertEqual(ctx.exception.status_code, 404)


class TestGetAndDeleteHotel(HotelServiceTestCase):
    def test_get_and_list(self) -> None:
        first = add_hotel(self.db, name="A")
        add_hotel(self.db, name="B")
        self.assertEqual(get_hotel(self.db, first.id).name, "A")
        self.assertEqual([h.name for h in list_hotels(self.db)], ["A", "B"])

    def test_get_unknown_hotel(self) -> None:
        with self.assertRaises(NotFound):
            get_hotel(self.db, 999)

    def test_delete_removes_location_and_bookings(self) -> None:
        hotel = add_hotel(self.db)
        user = add_user(self.db)
        self.db.add(Booking(user_id=user.id, hotel_id=hotel.id, status=BookingStatus.BOOKED))
        self.db.commit()
        hotel_id = hotel.id

        self.assertTrue(delete_hotel(self.db, hotel_id))
        self.assertIsNone(self.db.get(Hotel, hotel_id))
        self.assertEqual(self.db.query(Location).count(), 0)
        self.assertEqual(self.db.query(Booking).count(), 0)

    def test_delete_unknown_hotel(self) -> None:
        with self.assertRaises(NotFound):
            delete_hotel(self.db, 999)


class TestAvailability(HotelServiceTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.empty = add_hotel(self.db, no_of_rooms=0, name="Empty")
        self.one = add_hotel(self.db, no_of_rooms=1, name="One")
        self.five = add_hotel(self.db, no_of_rooms=5, name="Five")

    def test_default_minimum_is_one(self) -> None:
        names = [h.name for h in available_with_at_least(self.db)]
        self.assertEqual(names, ["One", "Five"])

    def test_explicit_zero_returns_every_hotel(self) -> None:
        names = [h.name for h in available_with_at_least(self.db, 0)]
        self.assertEqual(names, ["Empty", "One", "Five"])

    def test_threshold_is_inclusive(self) -> None:
        names = [h.name for h in available_with_at_least(self.db, 5)]
        self.assertEqual(names, ["Five"])
        self.assertEqual(available_with_at_least(self.db, 6), [])


if __name__ == "__main__":
    unittest.main()
