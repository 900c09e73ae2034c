"""Notifications app package.

Notification gateway used by the booking core to deliver one-time codes by
SMS. The transport is a pluggable backend selected by ``SMS_BACKEND``, in the
same spirit as Django's ``EMAIL_BACKEND``.
"""
