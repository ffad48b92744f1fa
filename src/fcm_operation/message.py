"""Options to FCM message payload mapping."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from types import MappingProxyType
from typing import Any

from firebase_admin import messaging

from fcm_operation.enums import MessagePriority
from fcm_operation.options import OperationOptions

_APNS_URGENT_HEADERS: Mapping[str, str] = MappingProxyType({"apns-priority": "10"})


@dataclass(frozen=True, slots=True)
class NotificationBlock:
    title: str | None = None
    body: str | None = None

    def as_dict(self) -> dict[str, str]:
        return _compact({"title": self.title, "body": self.body})


@dataclass(frozen=True, slots=True)
class AndroidDelivery:
    priority: MessagePriority
    ttl_ms: int | None = None

    def as_dict(self) -> dict[str, Any]:
        return _compact({"priority": str(self.priority), "ttl": self.ttl_ms})


@dataclass(frozen=True, slots=True)
class ApnsDelivery:
    """Urgent APNs delivery: immediate priority plus a background wake-up."""

    headers: Mapping[str, str] = field(default_factory=lambda: _APNS_URGENT_HEADERS)
    content_available: bool = True

    def as_dict(self) -> dict[str, Any]:
        return {
            "headers": dict(self.headers),
            "payload": {"aps": {"contentAvailable": self.content_available}},
        }


@dataclass(frozen=True, slots=True)
class ProviderMessage:
    """FCM message payload.  At most one of ``token`` / ``topic`` is set."""

    token: str | None = None
    topic: str | None = None
    notification: NotificationBlock | None = None
    data: Mapping[str, str] | None = None
    android: AndroidDelivery | None = None
    apns: ApnsDelivery | None = None

    def as_dict(self) -> dict[str, Any]:
        """Render the payload with absent parts omitted."""
        return _compact({
            "token": self.token,
            "topic": self.topic,
            "notification": self.notification.as_dict() if self.notification else None,
            "data": dict(self.data) if self.data else None,
            "android": self.android.as_dict() if self.android else None,
            "apns": self.apns.as_dict() if self.apns else None,
        })

    def to_message(self) -> messaging.Message:
        return messaging.Message(
            token=self.token,
            topic=self.topic,
            **self._sdk_parts(),
        )

    def to_multicast(self, tokens: list[str]) -> messaging.MulticastMessage:
        """Build a multicast message; the recipient field is not carried over."""
        return messaging.MulticastMessage(tokens=list(tokens), **self._sdk_parts())

    def _sdk_parts(self) -> dict[str, Any]:
        parts: dict[str, Any] = {}
        if self.notification:
            parts["notification"] = messaging.Notification(
                title=self.notification.title, body=self.notification.body
            )
        if self.data:
            parts["data"] = dict(self.data)
        if self.android:
            ttl = self.android.ttl_ms
            parts["android"] = messaging.AndroidConfig(
                priority=str(self.android.priority),
                ttl=timedelta(milliseconds=ttl) if ttl is not None else None,
            )
        if self.apns:
            parts["apns"] = messaging.APNSConfig(
                headers=dict(self.apns.headers),
                payload=messaging.APNSPayload(
                    aps=messaging.Aps(content_available=self.apns.content_available)
                ),
            )
        return parts


def build_message(options: OperationOptions, token: str | None = None) -> ProviderMessage:
    """Map operation options onto an FCM message.

    An explicit *token* wins over ``options.topic``.  Platform delivery
    blocks are only attached when priority or time-to-live is set.
    """
    if token:
        recipient = {"token": token}
    elif options.topic:
        recipient = {"topic": options.topic}
    else:
        recipient = {}

    return ProviderMessage(
        **recipient,
        notification=_notification(options),
        data=MappingProxyType(dict(options.data_payload)) if options.data_payload else None,
        android=_android(options),
        apns=ApnsDelivery() if _is_high(options) else None,
    )


def _notification(options: OperationOptions) -> NotificationBlock | None:
    if not (options.notification_title or options.notification_body):
        return None
    return NotificationBlock(
        title=options.notification_title or None,
        body=options.notification_body or None,
    )


def _android(options: OperationOptions) -> AndroidDelivery | None:
    if not (options.priority or options.time_to_live):
        return None
    priority = MessagePriority.HIGH if _is_high(options) else MessagePriority.NORMAL
    # TTL of 0 is treated as unset.
    ttl_ms = options.time_to_live * 1000 if options.time_to_live else None
    return AndroidDelivery(priority=priority, ttl_ms=ttl_ms)


def _is_high(options: OperationOptions) -> bool:
    return options.priority == MessagePriority.HIGH


def _compact(fields: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}
