"""
Enumeration utilities.
"""
from enum import Enum

from inscripta.biorecord.exc import ConfigurationError


class HasMemberMixin(Enum):
    """Adds `has_value()`, `has_name()` and a validating `from_value()` to enumerations."""

    @classmethod
    def has_value(cls, value):
        return value in cls._value2member_map_

    @classmethod
    def has_name(cls, name):
        return name in cls.__members__

    @classmethod
    def from_value(cls, value):
        """Look up a member by value (or return the member itself). Raises ConfigurationError for unknown values."""
        if isinstance(value, cls):
            return value
        if not cls.has_value(value):
            raise ConfigurationError(
                "{} is not a valid {}; expected one of {}".format(
                    repr(value), cls.__name__, ", ".join(sorted(str(x) for x in cls._value2member_map_))
                )
            )
        return cls(value)
