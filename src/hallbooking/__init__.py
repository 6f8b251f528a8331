"""
Hall Booking API - event hall bookings with signup/login
"""
__version__ = "1.0.0"
