"""Declarative operation options as supplied by the host platform."""

from collections.abc import Mapping
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    field_validator,
)
from pydantic.alias_generators import to_camel

from fcm_operation.errors import InvalidOptionsError


class OperationOptions(BaseModel):
    """Options for one invocation, keyed by the host's camelCase field names.

    ``recipient_type`` and ``priority`` stay plain strings: an unknown
    recipient type is reported by the dispatcher, and any priority other
    than ``"high"`` means normal delivery.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    recipient_type: str | None = None
    device_token: str | None = None
    device_tokens: list[str] | None = None
    topic: str | None = None
    notification_title: str | None = None
    notification_body: str | None = None
    data_payload: dict[str, StrictStr] | None = None
    priority: str | None = None
    time_to_live: int | None = Field(default=None, ge=0)
    dry_run: bool = False
    credential_env_var: str | None = None

    @field_validator("dry_run", mode="before")
    @classmethod
    def _null_dry_run_is_false(cls, value: Any) -> Any:
        return False if value is None else value


def parse_options(raw: Mapping[str, Any]) -> OperationOptions:
    """Validate raw host options.

    Raises InvalidOptionsError when a field has the wrong type, e.g. a
    non-string value in ``dataPayload``.
    """
    try:
        return OperationOptions.model_validate(dict(raw))
    except ValidationError as exc:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
        raise InvalidOptionsError(
            f"Invalid operation options: {', '.join(fields)}"
        ) from exc
