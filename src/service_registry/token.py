"""Typed tokens for naming services.

Any hashable value can identify a service, but plain strings collide easily
and carry no type information. A ``Token`` is unique per instance and carries
the service type as a type parameter, so ``registry.resolve(token)`` is typed:

```python
DATABASE: Token[Database] = create_token("database")
registry.bind(DATABASE, lambda: Database(settings.database_url))
db = registry.resolve(DATABASE)  # inferred as Database
```
"""

from typing import Generic, TypeVar

T = TypeVar("T")


class Token(Generic[T]):
    """A unique service identifier with a readable name.

    Tokens compare and hash by identity: two tokens created with the same
    name are different identifiers.
    """

    __slots__ = ("_name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name:
            raise ValueError(f"Token name must be a non-empty string, got: {name!r}")
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def __str__(self) -> str:
        return f"Token({self._name})"

    def __repr__(self) -> str:
        return f"<Token {self._name!r} at {id(self):#x}>"


def create_token(name: str) -> Token[T]:
    """Create a new unique token.

    Args:
        name: Human-readable name used in messages and logs

    Returns:
        A token distinct from every other token, including ones with the same name
    """
    return Token(name)
