"""Creative Line Items associate a Creative with a Line Item.

A Line Item cannot be active until at least one active Creative is attached.
"""

from typing import ClassVar

from beeswax.resources.base import CreatePayload, DeletePayload, ReadPayload, Resource


class CreativeLineItem(Resource):
    NAME: ClassVar[str] = "creative_line_item"
    ID_FIELD: ClassVar[str] = "cli_id"

    cli_id: int
    creative_id: int
    line_item_id: int
    weighting: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    active: bool = False

    # Server-managed
    account_id: int = 0
    create_date: str | None = None
    update_date: str | None = None
    push_status: int = 0
    push_update: bool = False
    buzz_key: str = ""


class ReadCreativeLineItem(ReadPayload):
    resource_type: ClassVar[type[Resource]] = CreativeLineItem

    cli_id: int | None = None
    creative_id: int | None = None
    line_item_id: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    active: bool | None = None


class CreateCreativeLineItem(CreatePayload):
    resource_type: ClassVar[type[Resource]] = CreativeLineItem

    creative_id: int
    line_item_id: int
    weighting: int | None = None
    start_date: str | None = None
    end_date: str | None = None
    active: bool = False


class DeleteCreativeLineItem(DeletePayload):
    resource_type: ClassVar[type[Resource]] = CreativeLineItem

    cli_id: int
