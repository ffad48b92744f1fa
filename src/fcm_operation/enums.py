from enum import StrEnum


class RecipientType(StrEnum):
    TOKEN = "token"
    TOKENS = "tokens"
    TOPIC = "topic"


class MessagePriority(StrEnum):
    NORMAL = "normal"
    HIGH = "high"


ALL_RECIPIENT_TYPES: set[str] = {r.value for r in RecipientType}
