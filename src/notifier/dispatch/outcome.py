"""Per-channel dispatch outcomes."""

from dataclasses import dataclass
from enum import Enum


class DispatchStatus(Enum):
    SENT = "Sent"
    FAILED = "Failed"
    SKIPPED_UNAVAILABLE = "SkippedUnavailable"


TIMEOUT_DETAIL = "timeout"


@dataclass(frozen=True)
class DispatchOutcome:
    channel_name: str
    status: DispatchStatus
    detail: str | None = None

    @classmethod
    def sent(cls, channel_name: str, message_id: str | None = None) -> "DispatchOutcome":
        return cls(channel_name, DispatchStatus.SENT, message_id)

    @classmethod
    def failed(cls, channel_name: str, detail: str) -> "DispatchOutcome":
        return cls(channel_name, DispatchStatus.FAILED, detail)

    @classmethod
    def skipped(cls, channel_name: str) -> "DispatchOutcome":
        return cls(channel_name, DispatchStatus.SKIPPED_UNAVAILABLE)

    @property
    def succeeded(self) -> bool:
        return self.status is DispatchStatus.SENT

    def to_dict(self) -> dict:
        data = {"channel": self.channel_name, "status": self.status.value}
        if self.detail is not None:
            data["detail"] = self.detail
        return data
