"""Views and view lists.

Views are read-only lookup tables defined by the Buzz administrator, for
example the acceptable continents, currencies or creative sizes. A view list
describes how the fields of a view should be displayed in a UI. Rows have no
fixed schema and only GET is supported.
"""

from typing import ClassVar

from beeswax.errors import UnsupportedOperationError
from beeswax.resources.base import FreeformResource, ReadPayload, Resource
from beeswax.resources.common import ViewName


class View(FreeformResource):
    NAME: ClassVar[str] = "view"


class ViewList(FreeformResource):
    NAME: ClassVar[str] = "view_list"


class _ReadViewBase(ReadPayload):
    view_name: ViewName | str

    def matches(self, resource: Resource) -> bool:
        raise UnsupportedOperationError(f"{type(self).__name__} cannot be compared to rows of unknown shape")


class ReadView(_ReadViewBase):
    resource_type: ClassVar[type[Resource]] = View


class ReadViewList(_ReadViewBase):
    resource_type: ClassVar[type[Resource]] = ViewList
