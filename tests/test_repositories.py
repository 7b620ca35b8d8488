from datetime import date

import pytest

from models.booking import Booking
from models.maintenance import RepairRequest
from repositories.booking_repo import BookingRepository
from repositories.hotel_repo import HotelRepository
from repositories.maintenance_repo import MaintenanceRepository
from repositories.room_repo import RoomRepository
from repositories.update_log_repo import UpdateLogRepository
from repositories.user_repo import UserRepository


def test_create_user_returns_generated_id(fake_db):
    fake_db.queue(columns=["userid"], rows=[(501,)])
    user = UserRepository().create("Alice", "secret")
    assert user.id == 501
    assert user.user_type == "customer"
    sql, params = fake_db.executed[0]
    assert sql.startswith("INSERT INTO Users")
    assert params == ("Alice", "secret", "customer")
    assert fake_db.commits == 1


def test_check_credentials_strips_char_padding(fake_db):
    fake_db.queue(columns=["userid", "name", "usertype"], rows=[(3, "Carol     ", "manager ")])
    user = UserRepository().check_credentials(3, "pw")
    assert user.name == "Carol"
    assert user.is_manager()
    assert fake_db.executed[0][1] == (3, "pw")


def test_check_credentials_unknown_user(fake_db):
    fake_db.queue(columns=["userid", "name", "usertype"], rows=[])
    assert UserRepository().check_credentials(3, "wrong") is None


def test_user_values_are_never_formatted_into_sql(fake_db):
    fake_db.queue(columns=["userid", "name", "usertype"], rows=[])
    UserRepository().check_credentials(1, "' OR '1'='1")
    sql, params = fake_db.executed[0]
    assert "OR '1'='1" not in sql
    assert params == (1, "' OR '1'='1")


def test_find_within_passes_radius(fake_db):
    fake_db.queue(columns=["hotelID", "hotelName", "unitsAway"], rows=[(1, "Ritz", 3.2)])
    result = HotelRepository().find_within(10.0, 20.0, 30)
    assert result.rows == [(1, "Ritz", 3.2)]
    sql, params = fake_db.executed[0]
    assert "calculate_distance" in sql
    assert params == (10.0, 20.0, 10.0, 20.0, 30)


def test_hotel_row_mapping(fake_db):
    fake_db.queue(rows=[(4, "Ritz  ", "12.5", "-7.25", 9, date(1999, 1, 1))],
                  columns=["hotelid", "hotelname", "latitude", "longitude", "manageruserid", "dateestablished"])
    hotel = HotelRepository().get_by_id(4)
    assert hotel.name == "Ritz"
    assert hotel.latitude == 12.5
    assert hotel.longitude == -7.25
    assert hotel.manager_id == 9


def test_booking_add_sets_id(fake_db):
    fake_db.queue(columns=["bookingid"], rows=[(91,)])
    booking = Booking(customer_id=5, hotel_id=1, room_number=2, booking_date=date(2024, 6, 1))
    saved = BookingRepository().add(booking)
    assert saved.id == 91
    assert fake_db.executed[0][1] == (5, 1, 2, date(2024, 6, 1))


@pytest.mark.parametrize(
    "start,end,expected_params,expected_fragments",
    [
        (None, None, (7,), []),
        (date(2024, 1, 1), None, (7, date(2024, 1, 1)), ["b.bookingDate >= %s"]),
        (None, date(2024, 2, 1), (7, date(2024, 2, 1)), ["b.bookingDate <= %s"]),
        (date(2024, 1, 1), date(2024, 2, 1), (7, date(2024, 1, 1), date(2024, 2, 1)),
         ["b.bookingDate >= %s", "b.bookingDate <= %s"]),
    ],
)
def test_history_for_hotel_date_bounds(fake_db, start, end, expected_params, expected_fragments):
    BookingRepository().history_for_hotel(7, start, end)
    sql, params = fake_db.executed[0]
    assert params == expected_params
    for fragment in expected_fragments:
        assert fragment in sql


def test_top_customers_filters_on_hotel(fake_db):
    BookingRepository().top_customers(12, 5)
    sql, params = fake_db.executed[0]
    assert "WHERE b.hotelID = %s" in sql
    assert params == (12, 5)


def test_room_update_writes_log_in_same_transaction(fake_db):
    fake_db.queue(rowcount=1).queue(rowcount=1)
    assert RoomRepository().update_price(1, 101, 150, manager_id=9)
    (update_sql, update_params), (log_sql, log_params) = fake_db.executed
    assert update_sql.startswith("UPDATE Rooms SET price = %s")
    assert update_params == (150, 1, 101)
    assert log_sql.startswith("INSERT INTO RoomUpdatesLog")
    assert log_params == (9, 1, 101)
    assert fake_db.commits == 1


def test_room_update_missing_room_writes_no_log(fake_db):
    fake_db.queue(rowcount=0)
    assert not RoomRepository().update_image_url(1, 999, "http://img", manager_id=9)
    assert len(fake_db.executed) == 1


def test_room_update_failure_rolls_back(fake_db):
    fake_db.fail_next(RuntimeError("db down"))
    with pytest.raises(RuntimeError):
        RoomRepository().update_price(1, 101, 10, manager_id=9)
    assert fake_db.rollbacks == 1


def test_availability_query_params(fake_db):
    RoomRepository().list_with_availability(3, date(2024, 7, 4))
    assert fake_db.executed[0][1] == (date(2024, 7, 4), 3)


def test_recent_updates_for_manager_joins_hotel(fake_db):
    UpdateLogRepository().recent_for_manager(9, 5)
    sql, params = fake_db.executed[0]
    assert "JOIN Hotel h" in sql
    assert "LIMIT %s" in sql
    assert params == (9, 5)


def test_place_request_inserts_repair_and_request(fake_db):
    fake_db.queue(columns=["repairid"], rows=[(40,)]).queue(columns=["requestnumber"], rows=[(41,)])
    request = RepairRequest(manager_id=9, company_id=2, hotel_id=1, room_number=101,
                            repair_date=date(2024, 3, 3))
    saved = MaintenanceRepository().place_request(request)
    assert (saved.repair_id, saved.request_number) == (40, 41)
    assert fake_db.executed[0][1] == (2, 1, 101, date(2024, 3, 3))
    assert fake_db.executed[1][1] == (9, 40)
    assert fake_db.commits == 1


def test_company_exists(fake_db):
    fake_db.queue(columns=["companyid", "name", "address", "iscertified"], rows=[(2, "FixIt", "Main St", True)])
    assert MaintenanceRepository().company_exists(2)
    fake_db.queue(columns=["companyid", "name", "address", "iscertified"], rows=[])
    assert not MaintenanceRepository().company_exists(3)


def test_room_get(fake_db):
    fake_db.queue(columns=["hotelid", "roomnumber", "price", "imageurl"], rows=[(1, 101, 80, None)])
    room = RoomRepository().get(1, 101)
    assert (room.hotel_id, room.room_number, room.price, room.image_url) == (1, 101, 80, None)
    fake_db.queue(columns=["hotelid", "roomnumber", "price", "imageurl"], rows=[])
    assert RoomRepository().get(1, 999) is None
