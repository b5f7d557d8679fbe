from __future__ import annotations

from guardclause import checks


class ParameterAssertions:
    """Checks on method parameters, exposed as methods of a stateless object."""

    __slots__ = ()

    is_ = staticmethod(checks.is_)
    is_not_null = staticmethod(checks.is_not_null)
    is_not_null_or_empty = staticmethod(checks.is_not_null_or_empty)
    is_not_negative = staticmethod(checks.is_not_negative)
    is_greater_than = staticmethod(checks.is_greater_than)
    is_greater_than_or_equal_to = staticmethod(checks.is_greater_than_or_equal_to)
    is_less_than = staticmethod(checks.is_less_than)
    is_less_than_or_equal_to = staticmethod(checks.is_less_than_or_equal_to)
    is_within_range = staticmethod(checks.is_within_range)
    is_index_in_range = staticmethod(checks.is_index_in_range)


class Assert:
    """Namespace for assertion groups."""

    parameter = ParameterAssertions()
