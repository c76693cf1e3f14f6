import pytest

from hooks import CallHooks, JoinPoint, NoopHooks


class Target:
    def add(self, a, b=0):
        return a + b

    def fail(self):
        raise ValueError("nope")


def test_hooks_run_in_order_around_call():
    seen = []
    hooks = CallHooks()
    hooks.add_before(lambda jp: seen.append(("before-1", jp.method_name, jp.args)))
    hooks.add_before(lambda jp: seen.append(("before-2", jp.return_value)))
    hooks.add_after(lambda jp: seen.append(("after", jp.return_value)))

    assert hooks.call(Target(), "add", 2, b=3) == 5
    assert seen == [("before-1", "add", (2,)), ("before-2", None), ("after", 5)]


def test_add_hook_works_as_decorator():
    hooks = CallHooks()

    @hooks.add_before
    def record(jp):
        record.calls.append(jp.kwargs)

    record.calls = []
    hooks.call(Target(), "add", 1, b=1)
    assert record.calls == [{"b": 1}]


def test_after_hooks_run_when_call_raises():
    captured = []
    hooks = CallHooks()
    hooks.add_after(captured.append)

    with pytest.raises(ValueError):
        hooks.call(Target(), "fail")

    assert len(captured) == 1
    jp = captured[0]
    assert isinstance(jp, JoinPoint)
    assert isinstance(jp.exception, ValueError)
    assert jp.return_value is None


def test_noop_hooks_ignore_registration():
    hooks = NoopHooks()
    hooks.add_before(lambda jp: pytest.fail("should not run"))
    hooks.add_after(lambda jp: pytest.fail("should not run"))
    assert hooks.call(Target(), "add", 4) == 4


def test_noop_hooks_ignore_lists_passed_in():
    hooks = NoopHooks(
        before=[lambda jp: pytest.fail("should not run")],
        after=[lambda jp: pytest.fail("should not run")],
    )
    assert hooks.call(Target(), "add", 1, b=2) == 3
    with pytest.raises(ValueError):
        hooks.call(Target(), "fail")
