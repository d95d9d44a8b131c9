"""
State-based method dispatch (a.k.a. "control-path" templating) via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on the runtime value of a
named attribute of the receiver.

Core idea
---------
- You define a *base* method on a class (its signature becomes the canonical
  one).
- You then register multiple "control paths" for that method, each keyed by:
    (ClassName, MethodName, StateVal)
- At runtime, the wrapper reads the state attribute of `self` and dispatches
  to the registered implementation that matches the current state.

In keytensor the state attribute is the tensor's element-type kind, so that
one arithmetic implementation serves every width of a kind, and kinds with no
registered implementation fail fast with a typed error.

Important notes
---------------
- This design mutates the class: the first time you decorate a control path,
  the original method name is replaced with a wrapper that performs dispatch.
- Registered implementations are stored in a closure-local mapping owned by
  `create_path_builder()`. Different builders do not share mappings.
- The selected implementation is called like a bound method:
  ``sub_method(self, *args, **kwargs)``.
- The decorator returns the implementation unchanged, so the same function
  can be registered for several states by stacking decorators.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

TrapException = Union[Type[BaseException], Callable[[Any, Callable, Any], None]]


def create_path_builder(state_attr: str = "_state") -> Callable[
    [Type, Callable[P, R], Hashable, Optional[TrapException]],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create and return a "path builder" function used to register stateful
    control paths for methods.

    The returned function (`templator`) is used like this:

        decorator = create_path_builder("mode")

        class MyClass:
            def foo(self, x: int) -> int: ...

        @decorator(MyClass, MyClass.foo, "A")
        def foo_A(self, x: int) -> int:
            ...

        @decorator(MyClass, MyClass.foo, "B")
        def foo_B(self, x: int) -> int:
            ...

    When `MyClass().foo(...)` is called, it dispatches to `foo_A` or `foo_B`
    depending on `self.mode`.

    Parameters
    ----------
    state_attr : str, optional
        Name of the attribute (or property) read from the receiver to select
        a control path. Defaults to ``"_state"``.

    Returns
    -------
    Callable
        A function with signature:

            (cls, method, state, trap_exception=None) -> decorator

        where `decorator(sub_method)` registers `sub_method` for that control
        path and replaces `cls.method` with a dispatcher wrapper.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )
    """
    Tuple-like key used to uniquely identify a control path.

    Fields
    ------
    ClassName : str
        The owning class name.
    MethodName : str
        The base method name being templated.
    StateVal : Hashable
        The state value that selects this implementation.
    """

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[TrapException] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            The class whose method should be wrapped for state-based dispatch.
            The wrapper is installed on this class under `method.__name__`.
        method : Callable[P, R]
            The base method being templated. Its signature and metadata (name,
            docstring, annotations) are used for the installed wrapper via
            `functools.wraps(method)`.
        state : Hashable
            The state value that selects the decorated implementation.
            Must be hashable so it can be used as part of the dispatch key.
        trap_exception : Optional[TrapException]
            Controls what happens when a dispatch target is missing:

            - If `None`, the wrapper raises `NotImplementedError`.
            - If an exception class, the wrapper raises ``trap_exception()``.
            - If any other callable, it is invoked as
              ``trap_exception(self, method, state)`` and is expected to raise;
              if it returns, `NotImplementedError` is raised.

        Returns
        -------
        Callable[[Callable[P, R]], Callable[P, R]]
            A decorator that, when applied to `sub_method`, registers
            `sub_method` for `(cls, method, state)` and installs/updates the
            dispatcher wrapper on `cls.method.__name__`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(f"The argument for 'state' must be hashable. Got {state!r}")

        # A previously installed wrapper keeps a reference to the base method.
        base_method = getattr(method, "__control_path_base__", method)

        smk: MethodKey = MethodKey(cls.__name__, base_method.__name__, state)
        """Static method key for the control path being registered by this call."""

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            """
            Register `sub_method` as the implementation for the configured state.

            Parameters
            ----------
            sub_method : Callable[P, R]
                The implementation to run when the receiver's state equals
                `state`.

            Returns
            -------
            Callable[P, R]
                The original `sub_method` (returned unchanged), enabling normal
                decorator stacking and introspection.
            """
            methods_map[smk] = sub_method

            @wraps(base_method)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                """
                Dispatch to a registered implementation based on the state
                attribute of `self`.
                """
                if not hasattr(self, state_attr):
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(
                            type(self), repr(state_attr)
                        )
                    )
                cur_state = getattr(self, state_attr)
                key = MethodKey(cls.__name__, base_method.__name__, cur_state)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                if trap_exception is None:
                    raise NotImplementedError(
                        "Missing control path (state={}) for {}".format(
                            repr(cur_state), repr(base_method)
                        )
                    )
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception()
                trap_exception(self, base_method, cur_state)
                raise NotImplementedError(
                    "Missing control path (state={}) for {}".format(
                        repr(cur_state), repr(base_method)
                    )
                )

            wrapper.__control_path_base__ = base_method
            setattr(cls, base_method.__name__, wrapper)
            return sub_method

        return decorator

    return templator
