from typing import Callable, Generic, TypeVar


T = TypeVar('T')


class Stringable(Generic[T]):
    """
    Wraps a value along with a function that computes its string representation.

    This is useful when a value must be displayed in some context that calls ``str()`` on it (e.g. a list widget),
    but its own ``str()`` is unsuitable. Example::

        item = Stringable(customer, lambda c: c.name)

        str(item)  # The customer's name
        item.get_value()  # The customer object

    The conversion function is called every time ``str()`` is invoked, so it always reflects the current state of the
    value. The wrapper itself is immutable.
    """
    __slots__ = ('_value', '_convert_fn')

    def __init__(self, value: T, convert_fn: Callable[[T], str]):
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_convert_fn', convert_fn)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def value(self) -> T:
        return self._value

    def get_value(self) -> T:
        return self._value

    def __str__(self) -> str:
        return self._convert_fn(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"
