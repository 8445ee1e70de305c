"""
Conversion between Python enumerations and native integers

Two shapes of native constant exist in GTK: sequential enums, where each
value names exactly one state, and bit-flag families, where a native
integer carries any combination of members.
"""

from enum import Enum, IntEnum, IntFlag
from typing import FrozenSet

from .exceptions import EnumValueError


class NativeEnum(IntEnum):
    """Base for sequential enums mirroring a native C enum"""

    @classmethod
    def from_native(cls, value: int) -> 'NativeEnum':
        """
        Look up the member for a native integer

        Raises:
            EnumValueError: value is not a member of this family
        """
        try:
            return cls(value)
        except ValueError:
            raise EnumValueError(cls, value) from None

    @classmethod
    def to_native(cls, member) -> int:
        """
        Native integer for a member, its name, or its integer value

        Raises:
            EnumValueError: member does not belong to this family
        """
        if isinstance(member, cls):
            return int(member)
        if isinstance(member, Enum):
            raise EnumValueError(cls, member)
        if isinstance(member, str):
            try:
                return int(cls[member.upper()])
            except KeyError:
                raise EnumValueError(cls, member) from None
        return int(cls.from_native(member))


class NativeFlags(IntFlag):
    """Base for bit-flag families mirroring a native C flags type"""

    @classmethod
    def encode(cls, *flags) -> int:
        """Bitwise OR of every flag; plain integers are OR-ed as is"""
        value = 0
        for flag in flags:
            value |= int(flag)
        return value

    @classmethod
    def decode(cls, value: int) -> FrozenSet['NativeFlags']:
        """
        Every member whose bits are all present in value

        Combined members (several bits) are included when all of their
        bits are set. Bits with no member are dropped. Zero decodes to
        none_members().
        """
        value = int(value)
        if value == 0:
            return cls.none_members()
        # __members__ also carries aliases and multi-bit members
        return frozenset(
            member for member in cls.__members__.values()
            if member.value != 0 and (value | member.value) == value
        )

    @classmethod
    def none_members(cls) -> FrozenSet['NativeFlags']:
        """Members returned when decoding zero"""
        return frozenset(m for m in cls.__members__.values() if m.value == 0)

    @classmethod
    def single_bits(cls) -> FrozenSet['NativeFlags']:
        """Members that occupy exactly one bit"""
        return frozenset(
            m for m in cls.__members__.values()
            if m.value > 0 and (m.value & (m.value - 1)) == 0
        )
