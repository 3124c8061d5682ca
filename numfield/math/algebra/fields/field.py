from numfield.math.algebra.rings.ring import Ring, RingElement


class Field(Ring):
    def is_field(self) -> bool:
        return True



class FieldElement(RingElement):
    def __init__(self, field: Field):
        super().__init__(field)
        self.field = field


    def __reprdir__(self):
        return ['__raw__', 'field']


    def __invert__(self) -> 'FieldElement':
        raise NotImplementedError


    def __truediv__(self, other: object) -> 'FieldElement':
        return self * ~self._coerce_other(other)


    def __rtruediv__(self, other: object) -> 'FieldElement':
        return self._coerce_other(other) * ~self


    def __floordiv__(self, other: object) -> 'FieldElement':
        return self / other
