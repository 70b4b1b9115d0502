"""
Тесты для модулей primitives и primitify

Проверяет:
1. Классификацию значений (kind_of) и сентинел UNDEFINED
2. Failure boundary вокруг accessor (AccessorResult)
3. Разворачивание AccessorFn (ровно один вызов)
4. Приоритет to_primitive(hint) над value_of()/__str__
5. Разрешение value_of()/__str__ по preferred_kind
"""

import logging
import math
from decimal import Decimal

import pytest

from src.conversely.primitify import (
    call_accessor,
    primitify,
    read_string_accessor,
    read_value_accessor,
    resolve_accessor_results,
    unwrap,
)
from src.conversely.primitives import (
    UNDEFINED,
    AccessorResult,
    HasPrimitiveHint,
    HasValueAccessor,
    PreferredKind,
    ValueKind,
    has_string_accessor,
    is_bns,
    kind_of,
)
from tests.helpers import Exploding, Hinted, OneOhOne, WhatYouSaid, raising


# =============================================================================
# ТЕСТЫ PRIMITIVES
# =============================================================================


class TestKindOf:
    """Тесты для kind_of"""

    def test_bool_before_int(self) -> None:
        """bool классифицируется как BOOLEAN, а не NUMBER"""
        assert kind_of(True) is ValueKind.BOOLEAN
        assert kind_of(False) is ValueKind.BOOLEAN

    def test_numbers(self) -> None:
        assert kind_of(0) is ValueKind.NUMBER
        assert kind_of(-2.5) is ValueKind.NUMBER
        assert kind_of(math.nan) is ValueKind.NUMBER
        assert kind_of(math.inf) is ValueKind.NUMBER

    def test_null_and_undefined(self) -> None:
        assert kind_of(None) is ValueKind.NULL
        assert kind_of(UNDEFINED) is ValueKind.UNDEFINED

    def test_string_callable_object(self) -> None:
        assert kind_of("") is ValueKind.STRING
        assert kind_of(lambda: 1) is ValueKind.CALLABLE
        assert kind_of(object()) is ValueKind.OBJECT
        assert kind_of({}) is ValueKind.OBJECT
        assert kind_of(Decimal("1")) is ValueKind.OBJECT

    def test_is_bns(self) -> None:
        assert is_bns(True)
        assert is_bns(1)
        assert is_bns("x")
        assert not is_bns(None)
        assert not is_bns(UNDEFINED)
        assert not is_bns([])


class TestUndefined:
    """Тесты для сентинела UNDEFINED"""

    def test_distinct_from_none(self) -> None:
        assert UNDEFINED is not None
        assert UNDEFINED != None  # noqa: E711

    def test_falsy_and_repr(self) -> None:
        assert not UNDEFINED
        assert repr(UNDEFINED) == "UNDEFINED"

    def test_singleton(self) -> None:
        assert type(UNDEFINED)() is UNDEFINED


class TestPreferredKind:
    """Тесты для PreferredKind.hint"""

    def test_boolean_maps_to_default(self) -> None:
        assert PreferredKind.BOOLEAN.hint == "default"

    def test_number_and_string_unchanged(self) -> None:
        assert PreferredKind.NUMBER.hint == "number"
        assert PreferredKind.STRING.hint == "string"


class TestCapabilities:
    """Тесты capability-протоколов"""

    def test_value_accessor_protocol(self) -> None:
        assert isinstance(WhatYouSaid(1), HasValueAccessor)
        assert not isinstance(object(), HasValueAccessor)

    def test_primitive_hint_protocol(self) -> None:
        assert isinstance(Hinted(1), HasPrimitiveHint)
        assert not isinstance(WhatYouSaid(1), HasPrimitiveHint)

    def test_default_str_is_trivial(self) -> None:
        """Унаследованный object.__str__ не считается string-accessor"""
        assert not has_string_accessor(object())
        assert not has_string_accessor({})
        assert not has_string_accessor(WhatYouSaid(1))
        assert has_string_accessor(OneOhOne())
        assert has_string_accessor(Decimal("1.5"))


# =============================================================================
# ТЕСТЫ FAILURE BOUNDARY
# =============================================================================


class TestCallAccessor:
    """Тесты для call_accessor"""

    def test_success(self) -> None:
        result = call_accessor(lambda: 5)
        assert result == AccessorResult.success(5)
        assert result.produced
        assert result.is_bns

    def test_success_with_none(self) -> None:
        """None — это полученное значение, а не сбой"""
        result = call_accessor(lambda: None)
        assert result.produced
        assert result.is_null
        assert not result.is_bns

    def test_exception_captured(self) -> None:
        result = call_accessor(raising)
        assert not result.produced
        assert isinstance(result.error, ValueError)
        assert result.value is UNDEFINED

    def test_arguments_forwarded(self) -> None:
        result = call_accessor(lambda a, b: a + b, 2, 3)
        assert result.value == 5

    def test_failure_logged_at_debug(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.conversely.primitify"):
            call_accessor(raising)
        assert "accessor failed" in caplog.text

    def test_keyboard_interrupt_propagates(self) -> None:
        """Перехватываются только Exception"""

        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            call_accessor(interrupt)


class TestReadAccessors:
    """Тесты чтения value_of()/__str__"""

    def test_missing_value_accessor(self) -> None:
        result = read_value_accessor(object())
        assert not result.produced
        assert result.error is None

    def test_value_accessor_not_callable(self) -> None:
        class Broken:
            value_of = 5

        assert not read_value_accessor(Broken()).produced

    def test_str_may_return_non_string(self) -> None:
        """__str__ вызывается через тип: результат не обязан быть str"""

        class Numeric:
            def __str__(self):
                return 42

        assert read_string_accessor(Numeric()).value == 42

    def test_raising_property(self) -> None:
        """Сбой при поиске атрибута тоже перехватывается"""

        class Tricky:
            @property
            def value_of(self):
                raise RuntimeError("boom")

        assert not read_value_accessor(Tricky()).produced


# =============================================================================
# ТЕСТЫ UNWRAP
# =============================================================================


class TestUnwrap:
    """Тесты для unwrap"""

    def test_non_callable_unchanged(self) -> None:
        wrapper = WhatYouSaid(1)
        assert unwrap(wrapper) is wrapper
        assert unwrap(3) == 3

    def test_callable_invoked(self) -> None:
        assert unwrap(lambda: "x") == "x"

    def test_callable_invoked_once(self) -> None:
        calls = []

        def accessor():
            calls.append(1)
            return 7

        assert primitify(accessor) == 7
        assert len(calls) == 1

    def test_callable_returning_callable(self) -> None:
        """Функция, вернувшая функцию, не вызывается повторно"""
        inner_calls = []

        def inner():
            inner_calls.append(1)
            return 5

        assert unwrap(lambda: inner) is UNDEFINED
        assert inner_calls == []

    def test_raising_callable(self) -> None:
        assert unwrap(raising) is UNDEFINED


# =============================================================================
# ТЕСТЫ PRIMITIFY
# =============================================================================


class TestPrimitifyTerminalCases:
    """Тесты для примитивов и None"""

    def test_null(self) -> None:
        assert primitify(None) is None
        assert primitify(lambda: None) is None

    def test_primitives_unchanged(self) -> None:
        assert primitify(True) is True
        assert primitify(2.5) == 2.5
        assert primitify("Huh?") == "Huh?"
        assert primitify(UNDEFINED) is UNDEFINED

    def test_nan_unchanged(self) -> None:
        assert math.isnan(primitify(math.nan))

    def test_empty_object(self) -> None:
        assert primitify(object()) is UNDEFINED
        assert primitify({}) is UNDEFINED
        assert primitify([], PreferredKind.NUMBER) is UNDEFINED

    def test_accepts_plain_string_kind(self) -> None:
        assert primitify(OneOhOne(), "number") == 101


class TestPrimitifyPreferredKind:
    """Тесты разрешения value_of()/__str__"""

    def test_string_prefers_str(self) -> None:
        assert primitify(OneOhOne(), PreferredKind.STRING) == "one oh one"

    def test_number_prefers_value_of(self) -> None:
        assert primitify(OneOhOne(), PreferredKind.NUMBER) == 101

    def test_boolean_prefers_value_of(self) -> None:
        assert primitify(OneOhOne(), PreferredKind.BOOLEAN) == 101

    def test_fallback_to_other_accessor(self) -> None:
        assert primitify(WhatYouSaid(3), PreferredKind.STRING) == 3
        assert primitify(Decimal("1.25"), PreferredKind.NUMBER) == "1.25"

    def test_value_of_returning_none(self) -> None:
        assert primitify(WhatYouSaid(None), PreferredKind.NUMBER) is None

    def test_value_of_returning_object(self) -> None:
        """Вложенные обёртки не разворачиваются"""
        assert primitify(WhatYouSaid(WhatYouSaid(1)), PreferredKind.NUMBER) is UNDEFINED

    def test_failing_accessors(self) -> None:
        assert primitify(Exploding(), PreferredKind.NUMBER) is UNDEFINED
        assert primitify(Exploding(), PreferredKind.STRING) is UNDEFINED

    def test_one_accessor_failing(self) -> None:
        class HalfBroken:
            def value_of(self):
                raise RuntimeError("boom")

            def __str__(self):
                return "7"

        assert primitify(HalfBroken(), PreferredKind.NUMBER) == "7"

    def test_function_then_object(self) -> None:
        assert primitify(lambda: WhatYouSaid(5), PreferredKind.NUMBER) == 5


class TestPrimitifyHint:
    """Тесты to_primitive(hint)"""

    def test_hint_takes_precedence(self) -> None:
        wrapper = Hinted(42)
        assert primitify(wrapper, PreferredKind.NUMBER) == 42
        assert primitify(wrapper, PreferredKind.STRING) == 42

    def test_hint_values(self) -> None:
        wrapper = Hinted("x")
        primitify(wrapper, PreferredKind.NUMBER)
        primitify(wrapper, PreferredKind.STRING)
        primitify(wrapper, PreferredKind.BOOLEAN)
        assert wrapper.hints == ["number", "string", "default"]

    def test_hint_returning_none(self) -> None:
        assert primitify(Hinted(None), PreferredKind.NUMBER) is None

    def test_hint_returning_object_falls_through(self) -> None:
        assert primitify(Hinted(object()), PreferredKind.NUMBER) == "value_of"

    def test_hint_disabled(self) -> None:
        wrapper = Hinted(42)
        assert primitify(wrapper, PreferredKind.STRING, primitive_hint=False) == "__str__"
        assert wrapper.hints == []


class TestResolveAccessorResults:
    """Тесты для resolve_accessor_results"""

    def test_nothing_produced(self) -> None:
        missing = AccessorResult.failure()
        assert resolve_accessor_results(missing, missing) is UNDEFINED

    def test_null_from_string_side(self) -> None:
        result = resolve_accessor_results(
            AccessorResult.failure(), AccessorResult.success(None), PreferredKind.NUMBER
        )
        assert result is None

    def test_bns_beats_null(self) -> None:
        result = resolve_accessor_results(
            AccessorResult.success(None), AccessorResult.success("x"), PreferredKind.NUMBER
        )
        assert result == "x"
