"""Optional 컨테이너가 던지는 전제 조건 위반 오류.

개요:
    이 모듈은 `Optional` 컨테이너가 **직접** 발생시키는 두 가지 오류 종류와
    생성자 함수를 제공합니다. 둘 다 "전제 조건 위반" 성격이며, 컨테이너 내부에서
    복구하지 않고 호출자에게 즉시 전파됩니다.

특징:
    * 안정적인 코드 체계: `code` 문자열(snake_case)을 일관되게 노출합니다.
    * 표준 예외 계층과 호환: `NullReferenceError`는 `TypeError`,
      `NoSuchElementError`는 `LookupError`로도 잡을 수 있습니다.
    * 매 발생마다 새 인스턴스: 트레이스백이 인스턴스에 기록되므로 싱글턴을 재사용하지 않습니다.

예시:
    >>> err = no_such_element_err()
    >>> err.code, err.message
    ('no_such_element', 'No value present')
"""

from __future__ import annotations

from typing import ClassVar

__all__ = [
    # 타입
    "OptionalError",
    "NullReferenceError",
    "NoSuchElementError",
    # 생성자
    "null_reference_err",
    "no_such_element_err",
]


# ──────────────────────────────────────────────────────────────
# 기본 타입
# ──────────────────────────────────────────────────────────────
class OptionalError(Exception):
    """Optional 컨테이너 오류의 공통 베이스.

    Attributes:
        code: 오류 코드(영문 소문자/밑줄). 서브클래스가 고정합니다.
        message: 사용자 또는 로그 출력용 메시지.
    """

    code: ClassVar[str] = "optional_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NullReferenceError(OptionalError, TypeError):
    """값이 필요한 자리에 `None`이 전달되었을 때 발생합니다.

    - `Optional.of(None)`
    - `flat_map()`의 매퍼가 컨테이너 대신 `None`을 반환한 경우
    """

    code: ClassVar[str] = "null_reference"


class NoSuchElementError(OptionalError, LookupError):
    """비어 있는 컨테이너에서 값을 요청했을 때 발생합니다."""

    code: ClassVar[str] = "no_such_element"


# ──────────────────────────────────────────────────────────────
# 생성자 함수
# ──────────────────────────────────────────────────────────────
_NULL_REFERENCE_MSG = "value must not be None"
_NO_SUCH_ELEMENT_MSG = "No value present"


def null_reference_err(message: str | None = None) -> NullReferenceError:
    """`None` 전달 위반 오류를 생성합니다.

    Args:
        message: 커스텀 메시지. 미지정 시 기본 메시지 사용.

    Returns:
        NullReferenceError: 코드 ``"null_reference"`` 의 새 인스턴스.

    Examples:
        >>> null_reference_err().message
        'value must not be None'
        >>> null_reference_err() is null_reference_err()
        False
    """
    return NullReferenceError(_NULL_REFERENCE_MSG if message is None else message)


def no_such_element_err() -> NoSuchElementError:
    """빈 컨테이너 접근 오류를 생성합니다.

    Returns:
        NoSuchElementError: 코드 ``"no_such_element"`` 의 새 인스턴스.
    """
    return NoSuchElementError(_NO_SUCH_ELEMENT_MSG)
