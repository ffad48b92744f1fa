"""Tests for options → FCM message mapping."""

from datetime import timedelta

from firebase_admin import messaging

from fcm_operation.enums import MessagePriority
from fcm_operation.message import build_message
from fcm_operation.options import OperationOptions


def _options(**fields: object) -> OperationOptions:
    return OperationOptions(**fields)


class TestRecipient:
    def test_token_set_and_topic_absent(self) -> None:
        message = build_message(_options(recipient_type="token"), token="tok-1")

        assert message.token == "tok-1"
        assert message.topic is None
        assert "topic" not in message.as_dict()

    def test_explicit_token_wins_over_topic(self) -> None:
        message = build_message(_options(topic="news"), token="tok-1")

        assert message.token == "tok-1"
        assert message.topic is None

    def test_topic_used_without_token(self) -> None:
        message = build_message(_options(topic="news"))

        assert message.topic == "news"
        assert message.token is None

    def test_no_recipient(self) -> None:
        message = build_message(_options())

        assert message.token is None
        assert message.topic is None


class TestNotificationAndData:
    def test_topic_with_title_payload(self) -> None:
        message = build_message(
            _options(recipient_type="topic", topic="news", notification_title="Hi")
        )

        assert message.as_dict() == {"topic": "news", "notification": {"title": "Hi"}}

    def test_notification_with_body_only(self) -> None:
        message = build_message(_options(notification_body="Hello"))

        assert message.as_dict()["notification"] == {"body": "Hello"}

    def test_no_notification_when_title_and_body_empty(self) -> None:
        message = build_message(_options(notification_title="", notification_body=""))

        assert message.notification is None

    def test_data_present_when_non_empty(self) -> None:
        message = build_message(_options(data_payload={"order_id": "42"}))

        assert message.data == {"order_id": "42"}

    def test_data_absent_when_empty(self) -> None:
        message = build_message(_options(data_payload={}))

        assert message.data is None
        assert "data" not in message.as_dict()


class TestPlatformDelivery:
    def test_high_priority_adds_urgent_apns_hint(self) -> None:
        message = build_message(_options(priority="high"))

        assert message.android is not None
        assert message.android.priority == MessagePriority.HIGH
        assert message.as_dict()["apns"] == {
            "headers": {"apns-priority": "10"},
            "payload": {"aps": {"contentAvailable": True}},
        }

    def test_normal_priority_has_no_apns(self) -> None:
        message = build_message(_options(priority="normal"))

        assert message.android is not None
        assert message.android.priority == MessagePriority.NORMAL
        assert message.apns is None

    def test_unknown_priority_maps_to_normal(self) -> None:
        message = build_message(_options(priority="urgent"))

        assert message.android is not None
        assert message.android.priority == MessagePriority.NORMAL
        assert message.apns is None

    def test_ttl_converted_to_milliseconds(self) -> None:
        message = build_message(_options(time_to_live=3600))

        assert message.android is not None
        assert message.android.ttl_ms == 3_600_000
        assert message.android.priority == MessagePriority.NORMAL

    def test_priority_without_ttl_omits_ttl(self) -> None:
        message = build_message(_options(priority="high"))

        assert message.as_dict()["android"] == {"priority": "high"}

    def test_no_android_block_without_priority_or_ttl(self) -> None:
        message = build_message(_options(notification_title="Hi"))

        assert message.android is None
        assert message.apns is None

    def test_zero_ttl_treated_as_unset(self) -> None:
        message = build_message(_options(time_to_live=0))

        assert message.android is None


class TestSdkConversion:
    def test_to_message(self) -> None:
        message = build_message(
            _options(
                notification_title="Hi",
                notification_body="There",
                data_payload={"k": "v"},
                priority="high",
                time_to_live=60,
            ),
            token="tok-1",
        ).to_message()

        assert isinstance(message, messaging.Message)
        assert message.token == "tok-1"
        assert message.topic is None
        assert message.notification.title == "Hi"
        assert message.notification.body == "There"
        assert message.data == {"k": "v"}
        assert message.android.priority == "high"
        assert message.android.ttl == timedelta(seconds=60)
        assert message.apns.headers == {"apns-priority": "10"}
        assert message.apns.payload.aps.content_available is True

    def test_to_message_minimal(self) -> None:
        message = build_message(_options(topic="news")).to_message()

        assert message.topic == "news"
        assert message.notification is None
        assert message.data is None
        assert message.android is None
        assert message.apns is None

    def test_to_multicast_carries_tokens_only(self) -> None:
        multicast = build_message(_options(notification_title="Hi")).to_multicast(
            ["a", "b"]
        )

        assert isinstance(multicast, messaging.MulticastMessage)
        assert multicast.tokens == ["a", "b"]
        assert multicast.notification.title == "Hi"
