"""Verification app package.

Short-lived, single-use numeric codes bound to a subject (a booking id, or
a phone number for flows that happen before a booking exists) and a
purpose tag. At most one live code exists per subject and purpose.
"""
