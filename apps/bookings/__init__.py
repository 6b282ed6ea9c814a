"""Bookings app package.

This app encapsulates the booking domain: a user asks to borrow an item
for a period, the item's owner approves or rejects the request, and both
parties can list their bookings filtered by state (current, past, future,
waiting, rejected). Only the status of a booking ever changes after it is
created, and an approved booking is final.
"""
