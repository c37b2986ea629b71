from abc import ABC, abstractmethod
from numbers import Real
from typing import Any, Callable, Generic, TypeVar

from fintree.domain import Node
from fintree.recursion import find

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


class Maybe(Generic[T], ABC):

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def is_some(self) -> bool:
        pass

    def is_none(self) -> bool:
        return not self.is_some()


class Some(Maybe[T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Some(f(self._value))

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Some) and self._value == other._value


class Nothing(Maybe[T]):

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Nothing()

    def get_or_else(self, default: T) -> T:
        return default

    def is_some(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing()"

    def __eq__(self, other) -> bool:
        return isinstance(other, Nothing)


class Either(Generic[E, T], ABC):

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        pass

    @abstractmethod
    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        pass

    @abstractmethod
    def get_or_else(self, default: T) -> T:
        pass

    @abstractmethod
    def is_right(self) -> bool:
        pass

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def get_error(self) -> E:
        pass


class Right(Either[E, T]):

    def __init__(self, value: T):
        self._value = value

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Right(f(self._value))

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return f(self._value)

    def get_or_else(self, default: T) -> T:
        return self._value

    def is_right(self) -> bool:
        return True

    def get_error(self) -> E:
        raise ValueError("Cannot get error from Right")

    def __repr__(self) -> str:
        return f"Right({self._value!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Right) and self._value == other._value


class Left(Either[E, T]):

    def __init__(self, error: E):
        self._error = error

    def map(self, f: Callable[[T], U]) -> 'Either[E, U]':
        return Left(self._error)

    def bind(self, f: Callable[[T], 'Either[E, U]']) -> 'Either[E, U]':
        return Left(self._error)

    def get_or_else(self, default: T) -> T:
        return default

    def is_right(self) -> bool:
        return False

    def get_error(self) -> E:
        return self._error

    def __repr__(self) -> str:
        return f"Left({self._error!r})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Left) and self._error == other._error


def safe_find(root: Node, name: str) -> Maybe[Node]:
    found = find(root, name)
    if found is None:
        return Nothing()
    return Some(found)


def _invalid(error: str, message: str, path: str) -> Left:
    return Left({"error": error, "message": message, "path": path})


def _check_object(data: Any, path: str) -> Either[dict, dict]:
    if not isinstance(data, dict):
        return _invalid("not_an_object", f"Node at {path} must be an object", path)
    return Right(data)


def _check_name(data: dict, path: str) -> Either[dict, dict]:
    if "name" not in data:
        return _invalid("missing_name", f"Node at {path} has no name", path)
    if not isinstance(data["name"], str):
        return _invalid("invalid_name", f"Name of node at {path} must be a string", path)
    return Right(data)


def _check_amount(data: dict, path: str) -> Either[dict, dict]:
    amount = data.get("amount", 0.0)
    label = f"Amount of node {data['name']!r} at {path}"
    if isinstance(amount, bool) or not isinstance(amount, Real):
        return _invalid("invalid_amount", f"{label} must be a number", path)
    try:
        float(amount)
    except OverflowError:
        # JSON integers are unbounded, floats are not
        return _invalid("invalid_amount", f"{label} is out of float range", path)
    return Right(data)


def _check_children(data: dict, path: str) -> Either[dict, dict]:
    children = data.get("children", [])
    if not isinstance(children, list):
        return _invalid(
            "invalid_children",
            f"Children of node {data['name']!r} at {path} must be a list",
            path,
        )

    def _check_child(idx: int, child: Any) -> Callable[[dict], Either[dict, dict]]:
        return lambda _: validate_node_data(child, f"{path}.children[{idx}]").map(lambda _: data)

    result: Either[dict, dict] = Right(data)
    for idx, child in enumerate(children):
        result = result.bind(_check_child(idx, child))
    return result


def validate_node_data(data: Any, path: str = "$") -> Either[dict, dict]:
    """Check a seed dict (and its children) before building a tree.

    Nodes are checked in pre-order; the first problem found is reported
    with a JSON-style path such as ``$.children[1].children[0]``.
    """
    return (
        _check_object(data, path)
        .bind(lambda d: _check_name(d, path))
        .bind(lambda d: _check_amount(d, path))
        .bind(lambda d: _check_children(d, path))
    )
