"""Common input handlers."""

from typing import Any

from data_plumber_http import Property, Object, String
from data_plumber_http.settings import Responses


Responses().new(
    "EMPTY_VALUE",
    "Value of '{loc}' must not be empty.",
    400,
)


class NonEmptyString(String):
    """
    Generalized from `data-plumber-http`'s `String`.

    Rejects the empty string with `Responses().EMPTY_VALUE` (400); all
    other validation is delegated to the superclass.
    """

    def make(self, json, loc: str) -> tuple[Any, str, int]:
        if json == "":
            return (
                None,
                Responses().EMPTY_VALUE.msg.format(loc=loc),
                Responses().EMPTY_VALUE.status,
            )
        return super().make(json, loc)


no_args_handler = Object(accept_only=[]).assemble()


store_handler = Object(
    properties={
        Property("key", required=True): NonEmptyString(),
        Property("value", required=True): NonEmptyString(),
    },
).assemble()


retrieve_handler = Object(
    properties={Property("key", required=True): NonEmptyString()},
).assemble()
