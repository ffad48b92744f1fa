"""Operation declaration: identity, option fields and the overview summary."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

from fcm_operation.enums import MessagePriority, RecipientType

OPERATION_ID = "firebase-messaging"
OPERATION_NAME = "Firebase Cloud Messaging"
OPERATION_ICON = "send"
OPERATION_DESCRIPTION = "Send push notifications via Firebase Cloud Messaging"

DEFAULT_TIME_TO_LIVE_SECONDS = 2419200  # 28 days, the FCM maximum


@dataclass(frozen=True, slots=True)
class Choice:
    text: str
    value: str


@dataclass(frozen=True, slots=True)
class OptionField:
    """One option as shown in the host's operation form.

    ``shown_for`` limits the field to a recipient type; ``None`` means
    the field is always visible.
    """

    field: str
    name: str
    type: str
    default: Any = None
    choices: tuple[Choice, ...] = ()
    shown_for: RecipientType | None = None
    placeholder: str | None = None
    note: str | None = None


OPTION_FIELDS: tuple[OptionField, ...] = (
    OptionField(
        field="recipientType",
        name="Recipient Type",
        type="string",
        default=RecipientType.TOKEN.value,
        choices=(
            Choice("Single Device Token", RecipientType.TOKEN.value),
            Choice("Multiple Device Tokens", RecipientType.TOKENS.value),
            Choice("Topic", RecipientType.TOPIC.value),
        ),
    ),
    OptionField(
        field="dryRun",
        name="Dry Run Mode",
        type="boolean",
        default=False,
        note="Enable validation-only mode (no actual delivery)",
    ),
    OptionField(
        field="deviceToken",
        name="Device Token",
        type="string",
        shown_for=RecipientType.TOKEN,
        placeholder="Enter device registration token",
    ),
    OptionField(
        field="deviceTokens",
        name="Device Tokens",
        type="json",
        shown_for=RecipientType.TOKENS,
        placeholder='["token1", "token2", "token3"]',
    ),
    OptionField(
        field="topic",
        name="Topic Name",
        type="string",
        shown_for=RecipientType.TOPIC,
        placeholder="Enter topic name (e.g., news, updates)",
    ),
    OptionField(
        field="notificationTitle",
        name="Notification Title",
        type="string",
        placeholder="Enter notification title",
    ),
    OptionField(
        field="notificationBody",
        name="Notification Body",
        type="text",
        placeholder="Enter notification body text",
    ),
    OptionField(
        field="dataPayload",
        name="Data Payload",
        type="json",
        placeholder='{"key1": "value1", "key2": "value2"}',
        note="Custom data payload as key-value pairs (all values must be strings)",
    ),
    OptionField(
        field="priority",
        name="Priority",
        type="string",
        default=MessagePriority.NORMAL.value,
        choices=(
            Choice("Normal", MessagePriority.NORMAL.value),
            Choice("High", MessagePriority.HIGH.value),
        ),
    ),
    OptionField(
        field="timeToLive",
        name="Time to Live (seconds)",
        type="integer",
        default=DEFAULT_TIME_TO_LIVE_SECONDS,
        placeholder=str(DEFAULT_TIME_TO_LIVE_SECONDS),
        note="How long the message should be kept if the device is offline (default: 28 days)",
    ),
    OptionField(
        field="credentialEnvVar",
        name="Credential Environment Variable",
        type="string",
        placeholder="GOOGLE_APPLICATION_CREDENTIALS",
        note="Env var holding the service account file path; leave empty for default credentials",
    ),
)


def describe() -> dict[str, Any]:
    """Return the operation declaration as a JSON-ready dict."""
    return {
        "id": OPERATION_ID,
        "name": OPERATION_NAME,
        "icon": OPERATION_ICON,
        "description": OPERATION_DESCRIPTION,
        "options": [asdict(option) for option in OPTION_FIELDS],
    }


def overview(options: Mapping[str, Any]) -> list[dict[str, str]]:
    """Summarize configured options as label/text rows for the host UI."""
    recipient_type = options.get("recipientType")
    title = options.get("notificationTitle")
    body = options.get("notificationBody")

    if title:
        message = f"{title}: {body}" if body else title
    else:
        message = "Data only"

    return [
        {"label": "Recipient Type", "text": recipient_type or "Not configured"},
        {"label": "Target", "text": _target(recipient_type, options)},
        {"label": "Message", "text": message},
        {
            "label": "Mode",
            "text": "Dry Run (Validation Only)" if options.get("dryRun") else "Production",
        },
    ]


def _target(recipient_type: str | None, options: Mapping[str, Any]) -> str:
    if recipient_type == RecipientType.TOKEN:
        return options.get("deviceToken") or "Not set"
    if recipient_type == RecipientType.TOKENS:
        tokens = options.get("deviceTokens")
        return f"{len(tokens) if isinstance(tokens, list) else 0} tokens"
    return options.get("topic") or "Not set"
