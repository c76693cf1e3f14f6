from typing import Optional

from utils import *
from hooks import CallHooks, JoinPoint, NoopHooks

class Demo:
    def go(self, hooks: CallHooks):
        d = Demo()
        hooks.call(d, "foo", 1, d)
        pprint(hooks.call(d, "bar", 3))

    def foo(self, i, o):
        pprint(f"Demo.foo({i}, {o})\n")

    def bar(self, j):
        pprint(f"Demo.bar({j})\n")
        return f"Demo.bar({j})"

    def __str__(self):
        return f"Demo@{id(self):x}"

class DemoService:
    def say_hello(self):
        pprint("DemoService say hello")

def describe_join_point(jp: JoinPoint):
    """Before hook: report which call is about to run."""
    pprint(cyan(f"Intercepted message: {jp.method_name}"))
    pprint(cyan(f"in class: {type(jp.target).__name__}"))
    for i, arg in enumerate(jp.args):
        pprint(cyan(f"  arg {i}: {type(arg).__name__} = {arg}"))

def before_say(jp: JoinPoint):
    if jp.method_name == "say_hello":
        pprint("before say")

def after_say(jp: JoinPoint):
    if jp.method_name == "say_hello":
        pprint("after say")

def run_join_point_demo(hooks: Optional[CallHooks] = None, quiet=False):
    if quiet:
        hooks = NoopHooks()
    elif hooks is None:
        hooks = CallHooks()
        hooks.add_before(describe_join_point)
        hooks.add_before(before_say)
        hooks.add_after(after_say)

    Demo().go(hooks)
    hooks.call(DemoService(), "say_hello")
    return hooks
