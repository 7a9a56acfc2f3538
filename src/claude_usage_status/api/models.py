"""Usage payload types.

The OAuth usage endpoint reports utilization as a percentage (0-100) per
rolling window. Values are kept exactly as received; only the progress bar
clamps them.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from claude_usage_status.errors import DecodeError


@dataclass(frozen=True)
class UsageBucket:
    """Consumption of one rolling window."""

    utilization: float
    resets_at: str

    @classmethod
    def from_dict(cls, data: dict | None, name: str = "bucket") -> UsageBucket:
        """Decode a bucket; a missing or null bucket counts as unused.

        Raises:
            DecodeError: If the bucket or its fields have the wrong type.
        """
        if data is None:
            return cls(0.0, "")
        if not isinstance(data, dict):
            raise DecodeError(f"failed to parse usage response: '{name}' is not an object")

        utilization = data.get("utilization")
        if utilization is None:
            utilization = 0.0
        # bool is an int subclass but never a valid utilization
        if isinstance(utilization, bool) or not isinstance(utilization, (int, float)):
            raise DecodeError(
                f"failed to parse usage response: '{name}.utilization' is not a number"
            )
        try:
            value = float(utilization)
        except OverflowError:
            value = math.inf
        if not math.isfinite(value):
            raise DecodeError(
                f"failed to parse usage response: '{name}.utilization' is not finite"
            )

        resets_at = data.get("resets_at") or ""
        if not isinstance(resets_at, str):
            raise DecodeError(
                f"failed to parse usage response: '{name}.resets_at' is not a string"
            )

        return cls(value, resets_at)

    def to_dict(self) -> dict:
        return {"utilization": self.utilization, "resets_at": self.resets_at}


@dataclass(frozen=True)
class UsageSnapshot:
    """The decoded /api/oauth/usage response for one invocation."""

    five_hour: UsageBucket
    seven_day: UsageBucket

    @classmethod
    def from_dict(cls, data: object) -> UsageSnapshot:
        """Decode the API payload, ignoring windows this tool does not show.

        Raises:
            DecodeError: If the payload is not an object or a bucket is malformed.
        """
        if not isinstance(data, dict):
            raise DecodeError("failed to parse usage response: expected a JSON object")
        return cls(
            five_hour=UsageBucket.from_dict(data.get("five_hour"), "five_hour"),
            seven_day=UsageBucket.from_dict(data.get("seven_day"), "seven_day"),
        )

    def to_dict(self) -> dict:
        return {
            "five_hour": self.five_hour.to_dict(),
            "seven_day": self.seven_day.to_dict(),
        }


__all__ = ["UsageBucket", "UsageSnapshot"]
