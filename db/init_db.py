"""
db/init_db.py
-------------
Creates the database schema (tables and the distance function) if they
do not already exist. Run this module directly to initialize a fresh database:
    python -m db.init_db <dbname> <port> <user>
"""

import sys

from db.connection import get_connection
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Users: customers, hotel managers and administrators
CREATE TABLE IF NOT EXISTS Users (
    userID          SERIAL PRIMARY KEY,
    name            VARCHAR(50) NOT NULL,
    password        VARCHAR(30) NOT NULL,
    userType        VARCHAR(10) NOT NULL DEFAULT 'customer'
                    CHECK (userType IN ('customer', 'manager', 'admin'))
);

-- Hotel: each hotel is run by exactly one manager
CREATE TABLE IF NOT EXISTS Hotel (
    hotelID         SERIAL PRIMARY KEY,
    hotelName       VARCHAR(50) NOT NULL,
    latitude        DECIMAL(8,6) NOT NULL,
    longitude       DECIMAL(9,6) NOT NULL,
    dateEstablished DATE,
    managerUserID   INTEGER NOT NULL REFERENCES Users(userID)
);

-- Rooms: identified by room number within a hotel
CREATE TABLE IF NOT EXISTS Rooms (
    hotelID         INTEGER NOT NULL REFERENCES Hotel(hotelID) ON DELETE CASCADE,
    roomNumber      INTEGER NOT NULL,
    price           INTEGER NOT NULL CHECK (price >= 0),
    imageURL        TEXT,
    PRIMARY KEY (hotelID, roomNumber)
);

-- Maintenance companies that can take repair requests
CREATE TABLE IF NOT EXISTS MaintenanceCompany (
    companyID       SERIAL PRIMARY KEY,
    name            VARCHAR(50) NOT NULL,
    address         TEXT,
    isCertified     BOOLEAN NOT NULL DEFAULT FALSE
);

-- Room bookings: a room can be booked once per date
CREATE TABLE IF NOT EXISTS RoomBookings (
    bookingID       SERIAL PRIMARY KEY,
    customerID      INTEGER NOT NULL REFERENCES Users(userID),
    hotelID         INTEGER NOT NULL,
    roomNumber      INTEGER NOT NULL,
    bookingDate     DATE NOT NULL,
    UNIQUE (hotelID, roomNumber, bookingDate),
    FOREIGN KEY (hotelID, roomNumber) REFERENCES Rooms(hotelID, roomNumber)
);

-- Room repairs carried out by a maintenance company
CREATE TABLE IF NOT EXISTS RoomRepairs (
    repairID        SERIAL PRIMARY KEY,
    companyID       INTEGER NOT NULL REFERENCES MaintenanceCompany(companyID),
    hotelID         INTEGER NOT NULL,
    roomNumber      INTEGER NOT NULL,
    repairDate      DATE NOT NULL DEFAULT CURRENT_DATE,
    FOREIGN KEY (hotelID, roomNumber) REFERENCES Rooms(hotelID, roomNumber)
);

-- Repair requests placed by managers
CREATE TABLE IF NOT EXISTS RoomRepairRequests (
    requestNumber   SERIAL PRIMARY KEY,
    managerID       INTEGER NOT NULL REFERENCES Users(userID),
    repairID        INTEGER NOT NULL REFERENCES RoomRepairs(repairID)
);

-- Log of room information changes made by managers
CREATE TABLE IF NOT EXISTS RoomUpdatesLog (
    updateNumber    SERIAL PRIMARY KEY,
    managerID       INTEGER NOT NULL REFERENCES Users(userID),
    hotelID         INTEGER NOT NULL,
    roomNumber      INTEGER NOT NULL,
    updatedOn       TIMESTAMP NOT NULL DEFAULT NOW(),
    FOREIGN KEY (hotelID, roomNumber) REFERENCES Rooms(hotelID, roomNumber)
);

-- Euclidean distance between two latitude/longitude pairs
CREATE OR REPLACE FUNCTION calculate_distance(
    lat1 DECIMAL, long1 DECIMAL, lat2 DECIMAL, long2 DECIMAL
) RETURNS DECIMAL AS $$
BEGIN
    RETURN sqrt((lat1 - lat2) * (lat1 - lat2) + (long1 - long2) * (long1 - long2));
END;
$$ LANGUAGE plpgsql IMMUTABLE;

-- Indexes for faster queries
CREATE INDEX IF NOT EXISTS idx_bookings_customer ON RoomBookings(customerID, bookingDate);
CREATE INDEX IF NOT EXISTS idx_bookings_hotel_date ON RoomBookings(hotelID, bookingDate);
CREATE INDEX IF NOT EXISTS idx_updates_hotel ON RoomUpdatesLog(hotelID, updatedOn);
CREATE INDEX IF NOT EXISTS idx_hotel_manager ON Hotel(managerUserID);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS / CREATE OR REPLACE).
    """
    conn = get_connection()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise


if __name__ == "__main__":
    from db.connection import init_connection, close_connection

    if len(sys.argv) != 4:
        print("Usage: python -m db.init_db <dbname> <port> <user>", file=sys.stderr)
        sys.exit(2)
    init_connection(sys.argv[1], sys.argv[2], sys.argv[3])
    try:
        create_tables()
        print("Database schema created successfully.")
    finally:
        close_connection()
