from dataclasses import dataclass, field
from typing import Any, Callable, Optional

@dataclass
class JoinPoint:
    """A single intercepted call, handed to every hook."""
    target: Any
    method_name: str
    args: tuple
    kwargs: dict = field(default_factory=dict)
    return_value: Any = None
    exception: Optional[BaseException] = None

@dataclass
class CallHooks:
    """
    Explicit before/after hooks run around a method call at the call site.
    Nothing is patched: only calls made through call() see the hooks.
    """
    before: list = field(default_factory=list)
    after: list = field(default_factory=list)

    def add_before(self, fn: Callable[[JoinPoint], None]):
        self.before.append(fn)
        return fn

    def add_after(self, fn: Callable[[JoinPoint], None]):
        self.after.append(fn)
        return fn

    def call(self, target, method_name, *args, **kwargs):
        jp = JoinPoint(target=target, method_name=method_name, args=args, kwargs=kwargs)
        for hook in self.before:
            hook(jp)
        try:
            jp.return_value = getattr(target, method_name)(*args, **kwargs)
        except Exception as e:
            jp.exception = e
            raise
        finally:
            # after hooks run whether or not the call raised
            for hook in self.after:
                hook(jp)
        return jp.return_value

class NoopHooks(CallHooks):
    """Runs the call directly; hook lists, even ones passed in, are ignored."""
    def add_before(self, fn):
        return fn

    def add_after(self, fn):
        return fn

    def call(self, target, method_name, *args, **kwargs):
        return getattr(target, method_name)(*args, **kwargs)
