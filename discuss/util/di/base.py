"""Provider base shared by the production and test containers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components that tests may swap for an in-memory version
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for all providers.

    A mockable component declares its name in ``__mock_component__`` on an
    abstract base, then has one production and one mock subclass that
    differ only in ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_mockable(cls) -> bool:
        return cls.__mock_component__ is not None and bool(cls.__subclasses__())
