"""Tests for logging context propagation."""

from mentormatch.logging.context import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
)


def test_empty_by_default():
    assert get_log_context() == {}


def test_push_and_pop():
    token = push_log_context(request_id="r-1")
    assert get_log_context() == {"request_id": "r-1"}

    pop_log_context(token)
    assert get_log_context() == {}


def test_nested_push_merges():
    outer = push_log_context(request_id="r-1")
    inner = push_log_context(screen="home")
    assert get_log_context() == {"request_id": "r-1", "screen": "home"}

    pop_log_context(inner)
    assert get_log_context() == {"request_id": "r-1"}
    pop_log_context(outer)


def test_get_returns_copy():
    push_log_context(request_id="r-1")
    get_log_context()["request_id"] = "changed"
    assert get_log_context()["request_id"] == "r-1"


def test_context_manager_restores_on_exit():
    with log_context(request_id="r-1"):
        with log_context(request_id="r-2"):
            assert get_log_context()["request_id"] == "r-2"
        assert get_log_context()["request_id"] == "r-1"
    assert get_log_context() == {}


def test_context_manager_restores_on_exception():
    try:
        with log_context(request_id="r-1"):
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    assert get_log_context() == {}


def test_clear():
    push_log_context(a=1, b=2)
    clear_log_context()
    assert get_log_context() == {}

