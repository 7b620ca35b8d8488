"""
services/ - Business Logic Layer
================================
Services apply the booking and management rules on top of the repositories.
They raise HotelAppError subclasses and never print.
"""
