"""
LookupResult: the decoded reply of a siteverify endpoint.

Every field is optional on the wire: checkbox-style challenges carry no
score or action, and failed lookups often carry nothing but
``success: false`` and ``error-codes``. Absent fields fall back to
zero values so the decision logic never has to special-case them.
"""

from __future__ import annotations

from collections.abc import Collection
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class LookupResult(BaseModel):
    # strict: "true", 1 or "0.9" on the wire are shape errors, not values.
    model_config = ConfigDict(
        populate_by_name=True, frozen=True, extra="ignore", strict=True
    )

    success: bool = False
    # A missing score compares as 0, so it only passes a threshold of 0 or below.
    score: float = 0.0
    action: str = ""
    hostname: str = ""
    challenge_ts: Optional[datetime] = None
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")

    @field_validator(
        "success", "score", "action", "hostname", "error_codes", mode="before"
    )
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        # JSON null reads the same as an absent key.
        if value is None:
            return cls.model_fields[info.field_name].get_default(
                call_default_factory=True
            )
        return value

    def rejection_reason(
        self,
        allowed_hosts: Collection[str],
        allowed_actions: Collection[str],
        threshold: float,
    ) -> Optional[str]:
        """Return the first policy check this lookup fails, or None.

        Checks run in order: service success, hostname, action, score.
        An empty allow-list disables its check entirely.
        """
        if not self.success:
            return "unsuccessful"
        if allowed_hosts and self.hostname not in allowed_hosts:
            return "hostname"
        if allowed_actions and self.action not in allowed_actions:
            return "action"
        if self.score < threshold:
            return "score"
        return None

    def is_valid(
        self,
        allowed_hosts: Collection[str],
        allowed_actions: Collection[str],
        threshold: float,
    ) -> bool:
        """True when the lookup satisfies every policy check.

        Pure evaluation over already-decoded data; policy failures return
        False and never raise.
        """
        return self.rejection_reason(allowed_hosts, allowed_actions, threshold) is None
