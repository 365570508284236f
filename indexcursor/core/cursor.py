from __future__ import annotations

import re
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from indexcursor.utils.exceptions import MalformedCursor

_DECIMAL = re.compile(r"[0-9]+")


class IndexCursor(int):
    """Zero-based position in a gapless sequence, encoded as a decimal string.

    Build instances with ``IndexCursor.parse``; the string form is the wire
    encoding used by connection cursors.
    """

    def __new__(cls, value: int) -> IndexCursor:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise MalformedCursor(value)
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, value: Any) -> IndexCursor:
        """Parse a cursor string.

        Raises:
            MalformedCursor: If the value is not a base-10 non-negative integer
        """
        if isinstance(value, IndexCursor):
            return value
        if not isinstance(value, str) or not _DECIMAL.fullmatch(value):
            raise MalformedCursor(value)
        return cls(int(value))

    def __str__(self) -> str:
        return int.__repr__(self)

    def __repr__(self) -> str:
        return f"IndexCursor({int.__repr__(self)})"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda v: str(v),
                info_arg=False,
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> IndexCursor:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        return cls.parse(value)
