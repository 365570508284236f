from indexcursor.integrations.fastapi import (
    PageNumberParams,
    PagerResponse,
    register_exception_handlers,
)

__all__ = [
    "PageNumberParams",
    "PagerResponse",
    "register_exception_handlers",
]
