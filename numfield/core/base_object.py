class BaseObject(object):
    """
    Gives subclasses a `repr` of the form `<ClassName: attr=value, ...>`.
    Subclasses pick the attributes shown by overriding `__reprdir__`.
    An attribute named `__raw__` is printed without its key.
    """

    def __reprdir__(self):
        return list(self.__dict__)


    def _repr_attr(self, attr: str) -> str:
        val = getattr(self, attr)

        if attr == '__raw__':
            return str(val)

        if hasattr(val, 'shorthand'):
            val = val.shorthand()

        return f'{attr}={val}'


    def __repr__(self) -> str:
        attrs = ', '.join(self._repr_attr(attr) for attr in self.__reprdir__())
        return f'<{self.__class__.__name__}: {attrs}>'


    def __str__(self) -> str:
        return self.__repr__()
