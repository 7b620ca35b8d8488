from datetime import date

import pytest
from psycopg2 import errors

from db.executor import QueryResult
from models.hotel import Room
from security import auth
from services.booking_service import BookingService
from services.export_service import ExportService
from services.hotel_service import HotelService
from services.maintenance_service import MaintenanceService
from services.manager_service import ManagerService
from services.room_service import RoomService
from utils.errors import ConflictError, InvalidInputError, NotFoundError, PermissionDeniedError

STAY = date(2024, 8, 15)


class StubRoomRepo:
    def __init__(self, rooms):
        self.rooms = rooms  # (hotel_id, room_number) -> price
        self.updates = []

    def exists(self, hotel_id, room_number):
        return (hotel_id, room_number) in self.rooms

    def get(self, hotel_id, room_number):
        if (hotel_id, room_number) not in self.rooms:
            return None
        return Room(hotel_id, room_number, self.rooms[(hotel_id, room_number)])

    def get_price(self, hotel_id, room_number):
        return self.rooms.get((hotel_id, room_number))

    def list_with_availability(self, hotel_id, on_date):
        return QueryResult(["roomNumber", "price", "availability"], [(101, 80, "available")])

    def update_price(self, hotel_id, room_number, price, manager_id):
        self.updates.append(("price", hotel_id, room_number, price, manager_id))
        return True

    def update_image_url(self, hotel_id, room_number, url, manager_id):
        self.updates.append(("image_url", hotel_id, room_number, url, manager_id))
        return True


class StubBookingRepo:
    def __init__(self, booked=(), race=False, rooms=None):
        self.booked = set(booked)
        self.rooms = rooms
        self.race = race
        self.added = []
        self.history_calls = []

    def is_booked(self, hotel_id, room_number, on_date):
        return (hotel_id, room_number, on_date) in self.booked

    def add(self, booking):
        if self.race:
            raise errors.UniqueViolation("duplicate key value")
        if self.rooms is not None and (booking.hotel_id, booking.room_number) not in self.rooms:
            raise errors.ForeignKeyViolation("violates foreign key constraint")
        booking.id = 1 + len(self.added)
        self.added.append(booking)
        return booking

    def recent_for_customer(self, customer_id, limit):
        return QueryResult(["hotelID"], [(1,)] * min(limit, 7))

    def history_for_hotel(self, hotel_id, start, end):
        self.history_calls.append((hotel_id, start, end))
        return QueryResult(
            ["bookingID", "customerName", "hotelID", "roomNumber", "bookingDate"],
            [(3, "Alice", hotel_id, 101, STAY)],
        )

    def top_customers(self, hotel_id, limit):
        return QueryResult(["userID", "name", "numberOfBookings"], [(5, "Alice", 4)])


class StubHotelRepo:
    def __init__(self, hotels):
        self.hotels = hotels  # hotel_id -> manager_id

    def get_by_id(self, hotel_id):
        return object() if hotel_id in self.hotels else None

    def is_managed_by(self, hotel_id, manager_id):
        return self.hotels.get(hotel_id) == manager_id

    def find_within(self, latitude, longitude, radius):
        return QueryResult(["hotelID", "hotelName", "unitsAway"], [(1, "Ritz", 2.0)])


@pytest.fixture()
def hotels(monkeypatch):
    repo = StubHotelRepo({1: 9, 2: 10})
    monkeypatch.setattr(auth, "hotel_repo", repo)
    return repo


def make_booking_service(rooms=None, **booking_kwargs):
    service = BookingService()
    service.room_repo = StubRoomRepo(rooms if rooms is not None else {(1, 101): 80})
    service.repo = StubBookingRepo(rooms=service.room_repo.rooms, **booking_kwargs)
    return service


# ── Booking ───────────────────────────────────────────────

def test_book_returns_booking_with_price():
    service = make_booking_service()
    booking = service.book(5, 1, 101, STAY)
    assert booking.id == 1
    assert booking.price == 80
    assert service.repo.added[0].customer_id == 5


def test_book_unknown_room():
    service = make_booking_service()
    with pytest.raises(NotFoundError):
        service.book(5, 1, 999, STAY)
    assert service.repo.added == []


def test_book_does_not_recheck_room_before_insert():
    service = make_booking_service()
    existence_checks = []
    service.room_repo.exists = lambda h, r: existence_checks.append((h, r)) or True
    service.book(5, 1, 101, STAY)
    assert existence_checks == []


def test_book_already_booked_room():
    service = make_booking_service(booked=[(1, 101, STAY)])
    with pytest.raises(ConflictError, match="not available"):
        service.book(5, 1, 101, STAY)


def test_book_lost_race_becomes_conflict():
    service = make_booking_service(race=True)
    with pytest.raises(ConflictError):
        service.book(5, 1, 101, STAY)


def test_recent_bookings_uses_limit():
    service = make_booking_service()
    assert len(service.recent_bookings(5)) == 5


# ── Hotels and rooms ──────────────────────────────────────

def test_hotels_near_accepts_any_plane_point():
    searches = []

    class RecordingHotelRepo(StubHotelRepo):
        def find_within(self, latitude, longitude, radius):
            searches.append((latitude, longitude, radius))
            return super().find_within(latitude, longitude, radius)

    service = HotelService(radius=30)
    service.repo = RecordingHotelRepo({})
    assert service.hotels_near(10, 20).rows == [(1, "Ritz", 2.0)]
    service.hotels_near(95, 50)
    service.hotels_near(-120, 400)
    assert searches == [(10, 20, 30), (95, 50, 30), (-120, 400, 30)]


def test_rooms_for_unknown_hotel(hotels):
    service = RoomService()
    service.hotel_repo = hotels
    service.repo = StubRoomRepo({})
    with pytest.raises(NotFoundError):
        service.rooms_for(3, STAY)
    assert service.rooms_for(1, STAY).rows == [(101, 80, "available")]


def test_update_price_requires_own_hotel(hotels):
    service = RoomService()
    service.repo = StubRoomRepo({(1, 101): 80, (2, 201): 90})
    service.update_price(9, 1, 101, 120)
    assert service.repo.updates == [("price", 1, 101, 120, 9)]
    with pytest.raises(PermissionDeniedError):
        service.update_price(9, 2, 201, 120)
    with pytest.raises(NotFoundError):
        service.update_price(9, 1, 555, 120)
    with pytest.raises(InvalidInputError):
        service.update_price(9, 1, 101, -5)


def test_update_image_url_rejects_blank(hotels):
    service = RoomService()
    service.repo = StubRoomRepo({(1, 101): 80})
    with pytest.raises(InvalidInputError):
        service.update_image_url(9, 1, 101, "   ")
    service.update_image_url(9, 1, 101, " http://img/1.png ")
    assert service.repo.updates == [("image_url", 1, 101, "http://img/1.png", 9)]


# ── Manager reports ───────────────────────────────────────

def test_booking_history_checks_range_and_ownership(hotels):
    service = ManagerService()
    service.booking_repo = StubBookingRepo()
    with pytest.raises(InvalidInputError):
        service.booking_history(9, 1, date(2024, 2, 1), date(2024, 1, 1))
    with pytest.raises(PermissionDeniedError):
        service.booking_history(9, 2)
    result = service.booking_history(9, 1, date(2024, 1, 1), None)
    assert result.columns[1] == "customerName"
    assert service.booking_repo.history_calls == [(1, date(2024, 1, 1), None)]


def test_regular_customers_requires_own_hotel(hotels):
    service = ManagerService()
    service.booking_repo = StubBookingRepo()
    assert service.regular_customers(9, 1).rows == [(5, "Alice", 4)]
    with pytest.raises(PermissionDeniedError):
        service.regular_customers(10, 1)


def test_recent_updates_all_hotels_or_one(hotels):
    calls = []

    class StubLogRepo:
        def recent_for_manager(self, manager_id, limit):
            calls.append(("manager", manager_id, limit))
            return QueryResult(["updateNumber"], [])

        def recent_for_hotel(self, hotel_id, limit):
            calls.append(("hotel", hotel_id, limit))
            return QueryResult(["updateNumber"], [])

    service = ManagerService()
    service.log_repo = StubLogRepo()
    service.recent_updates(9)
    service.recent_updates(9, 1)
    with pytest.raises(PermissionDeniedError):
        service.recent_updates(9, 2)
    assert calls == [("manager", 9, 5), ("hotel", 1, 5)]


# ── Maintenance ───────────────────────────────────────────

class StubMaintenanceRepo:
    def __init__(self, companies):
        self.companies = companies
        self.placed = []

    def company_exists(self, company_id):
        return company_id in self.companies

    def place_request(self, request):
        request.repair_id, request.request_number = 40, 41
        self.placed.append(request)
        return request

    def history_for_manager(self, manager_id):
        return QueryResult(["requestNumber"], [(41,)])


def test_place_request(hotels):
    service = MaintenanceService()
    service.repo = StubMaintenanceRepo({2})
    service.room_repo = StubRoomRepo({(1, 101): 80})
    request = service.place_request(9, 1, 101, 2)
    assert request.request_number == 41
    assert request.repair_date == date.today()
    with pytest.raises(NotFoundError, match="Maintenance Company"):
        service.place_request(9, 1, 101, 3)
    with pytest.raises(NotFoundError, match="room"):
        service.place_request(9, 1, 102, 2)
    with pytest.raises(PermissionDeniedError):
        service.place_request(9, 2, 101, 2)
    assert len(service.repo.placed) == 1


# ── Export ────────────────────────────────────────────────

def test_export_booking_history_csv(hotels, tmp_path):
    service = ExportService(export_dir=str(tmp_path / "out"))
    service.manager_service.booking_repo = StubBookingRepo()
    path, count = service.export_booking_history_csv(9, 1, date(2024, 1, 1), None)
    assert count == 1
    assert path.name == "bookings_hotel_1_from_2024-01-01.csv"
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "bookingID,customerName,hotelID,roomNumber,bookingDate"
    assert lines[1] == "3,Alice,1,101,2024-08-15"


def test_export_names_tell_start_and_end_apart(hotels, tmp_path):
    service = ExportService(export_dir=str(tmp_path))
    service.manager_service.booking_repo = StubBookingRepo()
    since, _ = service.export_booking_history_csv(9, 1, date(2024, 1, 1), None)
    until, _ = service.export_booking_history_csv(9, 1, None, date(2024, 1, 1))
    both, _ = service.export_booking_history_csv(9, 1, date(2024, 1, 1), date(2024, 1, 31))
    everything, _ = service.export_booking_history_csv(9, 1)
    assert until.name == "bookings_hotel_1_to_2024-01-01.csv"
    assert both.name == "bookings_hotel_1_from_2024-01-01_to_2024-01-31.csv"
    assert everything.name == "bookings_hotel_1.csv"
    assert len({since, until, both, everything}) == 4
