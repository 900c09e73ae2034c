from datetime import datetime, timezone as dt_timezone

import pytest

from apps.notifications.backends import locmem
from shared.clock import FrozenClock


@pytest.fixture(autouse=True)
def sms_outbox():
    locmem.reset()
    yield locmem.outbox
    locmem.reset()


@pytest.fixture
def frozen_clock():
    # 14:00 in Tashkent, so "today" is 2025-11-30.
    return FrozenClock(datetime(2025, 11, 30, 9, 0, tzinfo=dt_timezone.utc))
