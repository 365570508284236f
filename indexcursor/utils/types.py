from typing import Any

# Variables sent with a refetch query
Variables = dict[str, Any]


def merge_variables(
    base: Variables | None = None,
    override: Variables | None = None,
    **kwargs: Any
) -> Variables:
    """Merge multiple variable dictionaries with proper precedence.

    Args:
        base: Base variables dict
        override: Override variables dict (takes precedence over base)
        **kwargs: Additional variables (highest precedence)

    Returns:
        Merged variables dictionary
    """
    return {**(base or {}), **(override or {}), **kwargs}
