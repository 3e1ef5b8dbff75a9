# src/optional_value/primitives/optional.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

from optional_value.modeling.exceptions import no_such_element_err, null_reference_err

__all__ = ["Optional", "EMPTY"]

TValue = TypeVar("TValue")
TNewValue = TypeVar("TNewValue")


class Optional(Generic[TValue], ABC):
    """`None`이 아닌 값 하나 또는 값의 부재를 표현하는 불변 컨테이너.

    부재 표식으로 `None`을 쓰며, 값이 있는 컨테이너는 절대 `None`을 담지 않습니다.

    제공 기능:
    - 생성: empty(), of(), of_nullable()
    - 상태 질의: is_present(), is_empty(), get()
    - 조건부 실행: if_present()
    - 변환: filter(), map(), flat_map()
    - 대체값: or_else(), or_else_get(), or_else_throw(), to_nullable()
    - 동등성/표현: ==, equals(), str(), repr()

    Type Parameters:
        TValue: 담긴 값의 타입.
    """

    # ── 생성 ────────────────────────────────────────────────────
    @staticmethod
    def empty() -> "Optional[Any]":
        """공유되는 빈 컨테이너를 반환합니다.

        매 호출마다 동일 객체(`is`)를 반환합니다.

        Returns:
            Optional[Any]: 모듈 싱글턴 `EMPTY`.
        """
        return EMPTY

    @staticmethod
    def of(value: TValue) -> "Optional[TValue]":
        """`None`이 아닌 값을 담은 컨테이너를 생성합니다.

        Args:
            value: 담을 값. `None`이면 안 됩니다.

        Returns:
            Optional[TValue]: 값이 있는 새 컨테이너.

        Raises:
            NullReferenceError: value가 None인 경우.
        """
        if value is None:
            raise null_reference_err()
        return _Present(_value=value)

    @staticmethod
    def of_nullable(value: TValue | None) -> "Optional[TValue]":
        """옵셔널 값을 컨테이너로 승격합니다.

        Args:
            value: `None`일 수 있는 값.

        Returns:
            Optional[TValue]: 값이 있으면 of(value), 없으면 empty().
        """
        return EMPTY if value is None else Optional.of(value)

    # ── 상태 질의 ────────────────────────────────────────────────
    @abstractmethod
    def is_present(self) -> bool:
        """값이 존재하는지 여부.

        Returns:
            bool: 값이 있으면 True, 비어 있으면 False.
        """
        ...

    def is_empty(self) -> bool:
        """값이 부재인지 여부."""
        return not self.is_present()

    @abstractmethod
    def get(self) -> TValue:
        """담긴 값을 반환합니다.

        Raises:
            NoSuchElementError: 컨테이너가 비어 있는 경우.
        """
        ...

    # ── 조건부 실행 ──────────────────────────────────────────────
    @abstractmethod
    def if_present(self, consumer: Callable[[TValue], Any]) -> None:
        """값이 있을 때만 consumer를 정확히 한 번 호출합니다.

        Args:
            consumer: 담긴 값(동일 객체)을 받는 콜백. 반환값은 무시됩니다.
        """
        ...

    # ── 변환 ────────────────────────────────────────────────────
    @abstractmethod
    def filter(self, predicate: Callable[[TValue], bool]) -> "Optional[TValue]":
        """값이 있고 조건을 만족하면 자기 자신을, 아니면 empty()를 반환합니다.

        Args:
            predicate: 값에 적용할 조건. 비어 있으면 호출되지 않습니다.

        Returns:
            Optional[TValue]: self 또는 empty().
        """
        ...

    @abstractmethod
    def map(self, mapper: Callable[[TValue], TNewValue | None]) -> "Optional[TNewValue]":
        """값이 있을 때만 변환하고 결과를 of_nullable()로 감쌉니다.

        Args:
            mapper: TValue → TNewValue | None 함수.

        Returns:
            Optional[TNewValue]: 변환 결과. 값이 없거나 결과가 None이면 empty().
        """
        ...

    @abstractmethod
    def flat_map(self, mapper: Callable[[TValue], "Optional[TNewValue]"]) -> "Optional[TNewValue]":
        """값이 있을 때만 컨테이너를 반환하는 계산을 연결합니다.

        map()과 달리 매퍼의 반환값을 다시 감싸지 않고 그대로 돌려줍니다.

        Args:
            mapper: TValue → Optional[TNewValue] 함수.

        Returns:
            Optional[TNewValue]: 매퍼가 반환한 컨테이너(동일 객체) 또는 empty().

        Raises:
            NullReferenceError: 매퍼가 None을 반환한 경우.
        """
        ...

    # ── 대체값 ──────────────────────────────────────────────────
    @abstractmethod
    def or_else(self, other: TValue) -> TValue:
        """값을 꺼내거나, 비어 있으면 other를 그대로 반환합니다."""
        ...

    @abstractmethod
    def or_else_get(self, supplier: Callable[[], TValue]) -> TValue:
        """값을 꺼내거나, 비어 있으면 supplier()를 한 번 호출해 그 결과를 반환합니다.

        대체값 계산이 비쌀 때 or_else() 대신 사용합니다. 값이 있으면 supplier는
        호출되지 않습니다.
        """
        ...

    @abstractmethod
    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> TValue:
        """값을 꺼내거나, 비어 있으면 error_supplier()가 만든 예외를 그대로 던집니다.

        Args:
            error_supplier: 던질 예외를 생성하는 함수. 값이 있으면 호출되지 않습니다.

        Returns:
            TValue: 담긴 값.

        Raises:
            BaseException: 비어 있을 때 error_supplier()가 반환한 예외.
        """
        ...

    def to_nullable(self) -> TValue | None:
        """`None` 기반 API로 되돌립니다. 값 → 값, 비어 있음 → None."""
        return self.or_else(None)  # type: ignore[arg-type]

    # ── 동등성 ──────────────────────────────────────────────────
    def equals(self, other: object) -> bool:
        """`==`와 동일한 동등성 비교."""
        return self == other


@dataclass(frozen=True, slots=True, kw_only=True)
class _Present(Optional[TValue]):
    """값이 존재함을 나타내는 `Optional`의 변형.

    불변(`frozen=True`)이며, 생성 경로와 무관하게 `_value`가 None이 아님을 보장합니다.
    다른 `_Present`와만 같을 수 있고, 감싼 값 자체와는 같지 않습니다.
    해시는 dataclass가 `_value` 기준으로 생성합니다.

    Attributes:
        _value: 담긴 실제 값.

    Examples:
        >>> Optional.of(21).map(lambda x: x * 2)
        Optional[42]
        >>> Optional.of("hi").filter(lambda s: s.startswith("x"))
        Optional.empty
        >>> Optional.of(1) == Optional.of(1), Optional.of(1) == 1
        (True, False)

    Notes:
        - 직접 생성하지 말고 `Optional.of()`/`Optional.of_nullable()`을 사용하세요.
    """

    _value: TValue

    def __post_init__(self) -> None:
        if self._value is None:
            raise null_reference_err()

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Optional):
            return NotImplemented
        if not isinstance(other, _Present):
            return False
        return self._value == other._value

    def __str__(self) -> str:
        return f"Optional[{self._value}]"

    __repr__ = __str__

    def is_present(self) -> bool:
        return True

    def get(self) -> TValue:
        return self._value

    def if_present(self, consumer: Callable[[TValue], Any]) -> None:
        consumer(self._value)

    def filter(self, predicate: Callable[[TValue], bool]) -> "Optional[TValue]":
        return self if predicate(self._value) else EMPTY

    def map(self, mapper: Callable[[TValue], TNewValue | None]) -> "Optional[TNewValue]":
        return Optional.of_nullable(mapper(self._value))

    def flat_map(self, mapper: Callable[[TValue], "Optional[TNewValue]"]) -> "Optional[TNewValue]":
        result = mapper(self._value)
        if result is None:
            raise null_reference_err("flat_map mapper returned None instead of an Optional")
        return result

    def or_else(self, other: TValue) -> TValue:
        return self._value

    def or_else_get(self, supplier: Callable[[], TValue]) -> TValue:
        return self._value

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> TValue:
        return self._value


class _Empty(Optional[Any]):
    """값의 부재를 나타내는 `Optional`의 내부 싱글턴 변형.

    이 클래스의 인스턴스는 모듈 하단에 `EMPTY` 상수로 **하나만** 존재하며,
    모듈 import 시점에 생성되므로 동시 첫 접근에서도 모든 호출자가 같은 객체를 봅니다.
    콜백(predicate/mapper/consumer/supplier)은 `or_else_get`/`or_else_throw`를
    제외하면 호출되지 않습니다.

    Examples:
        >>> Optional.empty() is Optional.of_nullable(None)
        True
        >>> Optional.empty().or_else_get(lambda: 123)
        123
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Optional):
            return NotImplemented
        return isinstance(other, _Empty)

    def __hash__(self) -> int:
        return hash("Optional.empty")

    def __str__(self) -> str:
        return "Optional.empty"

    __repr__ = __str__

    # copy/pickle 모두 모듈 싱글턴으로 복원
    def __reduce__(self) -> str:
        return "EMPTY"

    def is_present(self) -> bool:
        return False

    def get(self) -> NoReturn:
        raise no_such_element_err()

    def if_present(self, consumer):
        return None

    def filter(self, predicate):
        return self

    def map(self, mapper):
        return self

    def flat_map(self, mapper):
        return self

    def or_else(self, other):
        return other

    def or_else_get(self, supplier):
        return supplier()

    def or_else_throw(self, error_supplier):
        raise error_supplier()


EMPTY: Optional[Any] = _Empty()
