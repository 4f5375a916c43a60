from enum import Enum


class EntryKind(str, Enum):
    """
    Enumeration of the built-in entry kinds.

    Each member is the discriminant tag carried by one concrete entry model.
    Downstream code may define entries with other tags; runners decide how to
    treat kinds they do not know.

    Attributes:
        TYPE (str): Restrict records to a set of type names.
        CREATED_AFTER (str): Keep records created at or after a timestamp.
        CREATED_BEFORE (str): Keep records created at or before a timestamp.
        FIELD_EQUALS (str): Keep records whose field equals a value.
        ORDER_BY (str): Order records by a field.
        LIMIT (str): Cap the number of records.
        OFFSET (str): Skip a number of records.
    """

    TYPE = "type"
    CREATED_AFTER = "created_after"
    CREATED_BEFORE = "created_before"
    FIELD_EQUALS = "field_equals"
    ORDER_BY = "order_by"
    LIMIT = "limit"
    OFFSET = "offset"

    def __str__(self) -> str:
        return self.value
