import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

SETTLEMENT_KEY_PREFIX = "settlement_"


class Disposition(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class Subscriber:
    id: str
    email: str
    tags: list[str] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SettlementRecord:
    name: str
    deadline: str | None
    subscribed_at: datetime

    @staticmethod
    def metadata_key(tag: str) -> str:
        return f"{SETTLEMENT_KEY_PREFIX}{tag}"

    def to_json(self) -> str:
        return json.dumps(
            {
                "name": self.name,
                "deadline": self.deadline,
                "subscribedAt": self.subscribed_at.isoformat(),
            }
        )
