"""Venues app package.

Read-only venue directory consulted by the booking core: venue existence
and capacity. Venue management itself happens through the Django admin.
"""
