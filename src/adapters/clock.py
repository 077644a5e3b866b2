from datetime import UTC, date, datetime


class SystemClock:
    def now_utc(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        # Stamps are UTC calendar dates
        return self.now_utc().date()


class FixedClock:
    """Clock pinned to a single day."""

    def __init__(self, day: date) -> None:
        self.day = day

    def today(self) -> date:
        return self.day
