import datetime

import pytest
from loguru import logger


class FakeClock:
    """Settable stand-in for `datetime.datetime.now`."""

    def __init__(self, now: datetime.datetime):
        self.now = now

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += datetime.timedelta(**kwargs)


@pytest.fixture
def clock():
    return FakeClock(datetime.datetime(2024, 1, 15, 12, 0, 0))


@pytest.fixture
def diagnostics():
    # collect loguru records emitted through daybook's diagnostics channel
    records = []
    handler_id = logger.add(
        lambda message: records.append(message.record),
        level="DEBUG",
        filter=lambda record: record["extra"].get("daybook", False),
    )
    yield records
    logger.remove(handler_id)
