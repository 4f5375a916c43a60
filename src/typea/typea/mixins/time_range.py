# ABOUTME: Mixin contributing creation-time range filters
# ABOUTME: Bounds are inclusive; naive datetimes follow the configured timezone

from datetime import datetime

from typea.exceptions import ValidationException
from typea.interfaces.mixin import BaseMixin
from typea.models.entry import CreatedAfterFilter, CreatedBeforeFilter


class TimeRangeMixin(BaseMixin):
    """Restrict results by creation time."""

    def created_after(self, timestamp: datetime) -> "TimeRangeMixin":
        self._push(self._build(CreatedAfterFilter, timestamp=timestamp))
        return self

    def created_before(self, timestamp: datetime) -> "TimeRangeMixin":
        self._push(self._build(CreatedBeforeFilter, timestamp=timestamp))
        return self

    def created_between(self, start: datetime, end: datetime) -> "TimeRangeMixin":
        """
        Push both bounds of a creation-time window.

        Raises:
            ValidationException: If ``start`` is after ``end``. Nothing is pushed.
        """
        lower = self._build(CreatedAfterFilter, timestamp=start)
        upper = self._build(CreatedBeforeFilter, timestamp=end)
        if lower.timestamp > upper.timestamp:
            raise ValidationException(
                "start must not be after end",
                "INVALID_TIME_RANGE",
                {"start": lower.timestamp.isoformat(), "end": upper.timestamp.isoformat()},
            )
        self._push(lower)
        self._push(upper)
        return self
