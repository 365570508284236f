from indexcursor.lifecycle.refetch import PageChangeHandler, build_variables

__all__ = [
    "PageChangeHandler",
    "build_variables",
]
