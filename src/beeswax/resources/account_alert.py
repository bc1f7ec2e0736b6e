"""Account alerts route Buzz system alerts to emails or Slack channels.

The API offers no read filter for account alerts.
"""

from typing import ClassVar

from pydantic import Field

from beeswax.resources.base import CreatePayload, DeletePayload, Resource


class AccountAlert(Resource):
    NAME: ClassVar[str] = "account_alert"
    ID_FIELD: ClassVar[str] = "account_alert_id"

    account_alert_id: int
    system_alert_key: str | None = None
    email: str | None = None
    slack_api: str | None = None
    slack_channel: str | None = None
    slack_emoji: str | None = None
    active: bool | None = None


class CreateAccountAlert(CreatePayload):
    resource_type: ClassVar[type[Resource]] = AccountAlert

    system_alert_key: str = Field(..., description="Type of alert, e.g. bad_ad")
    email: str | None = Field(default=None, description="One or more emails, separated by commas")
    slack_api: str | None = None
    slack_channel: str | None = Field(default=None, description="e.g. #buzz-alerts")
    slack_emoji: str | None = None
    active: bool | None = None


class DeleteAccountAlert(DeletePayload):
    resource_type: ClassVar[type[Resource]] = AccountAlert

    account_alert_id: int
