from numfield.core.base_object import BaseObject
from numfield.utilities.exceptions import CoercionException


class Ring(BaseObject):
    """
    Parent structure. Subclasses implement `coerce`, `zero` and `one`; elements
    implement `__elemadd__`, `__elemmul__` and `__neg__`.
    """

    def __call__(self, other: object) -> 'RingElement':
        return self.coerce(other)


    def coerce(self, other: object) -> 'RingElement':
        raise NotImplementedError


    def shorthand(self) -> str:
        return self.__class__.__name__


    def is_field(self) -> bool:
        return False


    def __contains__(self, other: object) -> bool:
        try:
            self.coerce(other)
            return True
        except CoercionException:
            return False



class RingElement(BaseObject):
    def __init__(self, ring: Ring):
        self.ring = ring


    def __reprdir__(self):
        return ['__raw__', 'ring']


    @property
    def __raw__(self):
        return self.shorthand()


    def shorthand(self) -> str:
        return str(self.val)


    def __str__(self) -> str:
        return self.shorthand()


    def _coerce_other(self, other: object) -> 'RingElement':
        if isinstance(other, RingElement) and other.ring is self.ring:
            return other

        return self.ring.coerce(other)


    def __elemadd__(self, other: 'RingElement') -> 'RingElement':
        raise NotImplementedError


    def __elemmul__(self, other: 'RingElement') -> 'RingElement':
        raise NotImplementedError


    def __add__(self, other: object) -> 'RingElement':
        return self.__elemadd__(self._coerce_other(other))


    def __radd__(self, other: object) -> 'RingElement':
        return self._coerce_other(other).__elemadd__(self)


    def __sub__(self, other: object) -> 'RingElement':
        return self.__elemadd__(-self._coerce_other(other))


    def __rsub__(self, other: object) -> 'RingElement':
        return self._coerce_other(other).__elemadd__(-self)


    def __mul__(self, other: object) -> 'RingElement':
        return self.__elemmul__(self._coerce_other(other))


    def __rmul__(self, other: object) -> 'RingElement':
        return self._coerce_other(other).__elemmul__(self)


    def __pow__(self, exponent: int) -> 'RingElement':
        if exponent < 0:
            return (~self)**(-exponent)

        result = self.ring.coerce(1)
        base   = self

        while exponent:
            if exponent & 1:
                result *= base

            base     *= base
            exponent >>= 1

        return result


    def __eq__(self, other: object) -> bool:
        try:
            other = self._coerce_other(other)
        except CoercionException:
            return False

        return self.val == other.val


    def __hash__(self) -> int:
        return hash((self.__class__, self.ring, self.val))


    def __bool__(self) -> bool:
        return not self.is_zero()


    def is_zero(self) -> bool:
        return self == self.ring.zero
