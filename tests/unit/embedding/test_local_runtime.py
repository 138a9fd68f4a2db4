"""Unit tests for LocalHostRuntime."""

from __future__ import annotations

import dataclasses
import threading
from enum import Enum

import pytest

from szuru_client.config.settings import SearchSettings
from szuru_client.config.validation import InvalidSettingValueError
from szuru_client.embedding import HostRuntimeError, HostRuntimeUnavailableError, LocalHostRuntime


class Color(str, Enum):
    RED = "red"


@dataclasses.dataclass
class Point:
    x: int
    y: int


class WithHook:
    def to_host(self) -> str:
        return "hooked"


class TestGuard:
    def test_held_inside_guard(self) -> None:
        runtime = LocalHostRuntime()
        assert not runtime.held
        with runtime.guard():
            assert runtime.held
        assert not runtime.held

    def test_released_on_error(self) -> None:
        runtime = LocalHostRuntime(guard_timeout=0.1)
        with pytest.raises(ValueError):
            with runtime.guard():
                raise ValueError("boom")
        with runtime.guard():
            assert runtime.held

    def test_nested_guard_reentrant(self) -> None:
        runtime = LocalHostRuntime(guard_timeout=0.1)
        with runtime.guard():
            with runtime.guard():
                assert runtime.held
                assert runtime.new_list([1]) == [1]
            assert runtime.held
        assert not runtime.held

    def test_closed_runtime_refuses(self) -> None:
        runtime = LocalHostRuntime(name="embedded")
        runtime.close()
        assert runtime.closed
        with pytest.raises(HostRuntimeUnavailableError) as exc_info:
            with runtime.guard():
                pass
        assert exc_info.value.runtime == "embedded"

    def test_timeout_when_held_elsewhere(self) -> None:
        runtime = LocalHostRuntime(guard_timeout=0.05)
        acquired = threading.Event()
        release = threading.Event()

        def hold() -> None:
            with runtime.guard():
                acquired.set()
                release.wait(timeout=5)

        worker = threading.Thread(target=hold)
        worker.start()
        try:
            assert acquired.wait(timeout=5)
            assert not runtime.held
            with pytest.raises(HostRuntimeUnavailableError):
                with runtime.guard():
                    pass
        finally:
            release.set()
            worker.join(timeout=5)

    def test_from_settings(self) -> None:
        runtime = LocalHostRuntime.from_settings(SearchSettings(guard_timeout=1.5), name="py")
        assert runtime.name == "py"
        with runtime.guard():
            assert runtime.held


class TestConstruction:
    @pytest.mark.parametrize("timeout", [0, -2, -0.5])
    def test_bad_timeout_rejected(self, timeout: float) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            LocalHostRuntime(guard_timeout=timeout)
        assert exc_info.value.setting_name == "guard_timeout"

    def test_wait_forever_accepted(self) -> None:
        runtime = LocalHostRuntime(guard_timeout=-1)
        with runtime.guard():
            assert runtime.held


class TestAllocation:
    def test_new_list_requires_guard(self) -> None:
        runtime = LocalHostRuntime()
        with pytest.raises(HostRuntimeError):
            runtime.new_list([1, 2])

    def test_new_list_preserves_order(self) -> None:
        runtime = LocalHostRuntime()
        with runtime.guard():
            assert runtime.new_list(iter([3, 1, 2])) == [3, 1, 2]


class TestToHost:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (WithHook(), "hooked"),
            (Color.RED, "red"),
            (Point(1, 2), {"x": 1, "y": 2}),
            (42, 42),
            ("text", "text"),
        ],
    )
    def test_mapping(self, value: object, expected: object) -> None:
        assert LocalHostRuntime().to_host(value) == expected

    def test_dataclass_type_passes_through(self) -> None:
        assert LocalHostRuntime().to_host(Point) is Point
