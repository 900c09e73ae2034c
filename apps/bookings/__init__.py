"""Bookings app package.

This app holds the booking core: the booking store, the availability
index derived from active bookings and the phone-verified cancellation
protocol. One active booking per venue per date is enforced both by a
per-venue row lock around check-and-insert and by a partial unique
constraint in the database.
"""
