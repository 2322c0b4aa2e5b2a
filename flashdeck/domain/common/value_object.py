"""Immutable values compared field by field."""


class ValueObject:
    """
    Base for frozen dataclasses without identity.

    Equality and hashing come from the dataclass fields. Subclasses that
    normalize input do it in __post_init__ via object.__setattr__.
    """

    __slots__ = ()
