# tests/unit/optional_value/modeling/test_exceptions.py
import pytest

from optional_value.modeling.exceptions import (
    NoSuchElementError,
    NullReferenceError,
    OptionalError,
    no_such_element_err,
    null_reference_err,
)
from optional_value.primitives.optional import Optional

# 모듈 전체 태그
pytestmark = [pytest.mark.unit, pytest.mark.monad]


# ─────────────────────────────────────────────────────────────────────────────
# 생성자 함수(code / message)
# ─────────────────────────────────────────────────────────────────────────────
class TestErrorFactories:
    def test_null_reference_default(self):
        """GIVEN null_reference_err()
           WHEN code/message를 조회하면
           THEN 'null_reference'와 기본 메시지를 반환한다
        """
        err = null_reference_err()
        assert isinstance(err, NullReferenceError)
        assert (err.code, err.message) == ("null_reference", "value must not be None")
        assert str(err) == "value must not be None"

    def test_null_reference_custom_message(self):
        """GIVEN 커스텀 메시지
           WHEN null_reference_err(message)를 호출하면
           THEN 메시지가 반영된다
        """
        assert null_reference_err("nope").message == "nope"

    def test_no_such_element(self):
        """GIVEN no_such_element_err()
           WHEN code/message를 조회하면
           THEN 'no_such_element'와 'No value present'를 반환한다
        """
        err = no_such_element_err()
        assert isinstance(err, NoSuchElementError)
        assert (err.code, err.message) == ("no_such_element", "No value present")

    def test_factories_return_fresh_instances(self):
        """GIVEN 생성자 함수
           WHEN 두 번 호출하면
           THEN 서로 다른 인스턴스를 반환한다(트레이스백 공유 방지)
        """
        assert null_reference_err() is not null_reference_err()
        assert no_such_element_err() is not no_such_element_err()


# ─────────────────────────────────────────────────────────────────────────────
# 타입 계층(OptionalError / TypeError / LookupError)
# ─────────────────────────────────────────────────────────────────────────────
class TestErrorHierarchy:
    def test_common_base(self):
        """GIVEN 두 오류 종류
           WHEN 타입 계층을 확인하면
           THEN 둘 다 OptionalError다
        """
        assert issubclass(NullReferenceError, OptionalError)
        assert issubclass(NoSuchElementError, OptionalError)

    def test_null_reference_is_type_error(self):
        """GIVEN of(None)
           WHEN TypeError로 잡으면
           THEN 잡힌다
        """
        with pytest.raises(TypeError) as excinfo:
            Optional.of(None)
        assert excinfo.value.code == "null_reference"

    def test_no_such_element_is_lookup_error(self):
        """GIVEN empty().get()
           WHEN LookupError로 잡으면
           THEN 잡힌다
        """
        with pytest.raises(LookupError) as excinfo:
            Optional.empty().get()
        assert excinfo.value.code == "no_such_element"

    def test_flat_map_null_reference_message(self):
        """GIVEN None을 반환하는 flat_map 매퍼
           WHEN flat_map을 호출하면
           THEN 매퍼 위반을 설명하는 NullReferenceError가 발생한다
        """
        with pytest.raises(NullReferenceError, match="flat_map"):
            Optional.of(1).flat_map(lambda _: None)
