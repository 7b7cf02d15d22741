"""Call-stack introspection used to derive log tags.

Depths are counted from the function calling :func:`caller_qualified_name`:
depth ``0`` is that function itself, ``1`` its caller, and so on.
"""

from __future__ import annotations

import inspect
import re

# Synthetic nested-scope markers: ``$1`` style anonymous class suffixes and
# Python ``.func.<locals>`` scopes.
ANONYMOUS_SCOPE_PATTERN = re.compile(r"(?:\$\d+|\.[^.]+\.<locals>)+$")


class StackIntrospectionError(RuntimeError):
    """The call stack is shallower than the caller expects."""


def caller_qualified_name(depth: int) -> str:
    """Return the qualified name of the frame ``depth`` levels above the caller.

    The name is ``<module>.<enclosing class qualname>``. Frames executing a
    module-level function or module code yield the module name alone; frames
    executing a class body yield that class.

    :param depth: Logical depth counted from the calling function (``0``).
    :returns: Qualified name of the selected frame.
    :raises StackIntrospectionError: If fewer frames than ``depth`` are available.
    """
    frame = inspect.currentframe()
    # Skip this function's own frame.
    for _ in range(depth + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        raise StackIntrospectionError(
            f"Call stack did not have {depth + 1} frames: is frame introspection available?"
        )

    try:
        module = frame.f_globals.get("__name__", "__main__")
        code = frame.f_code
        qualname = code.co_qualname
        # Class body code runs in a frame whose qualname is the class itself.
        in_class_body = frame.f_locals.get("__qualname__") == qualname
    finally:
        del frame

    scope = qualname if in_class_body else qualname.rpartition(".")[0]
    return f"{module}.{scope}" if scope else module


def tag_from_qualified_name(name: str) -> str:
    """Strip synthetic scope suffixes and package qualifiers from ``name``.

    >>> tag_from_qualified_name("com.example.Foo$1$2")
    'Foo'
    >>> tag_from_qualified_name("game.screens.Menu.show.<locals>")
    'Menu'
    """
    name = ANONYMOUS_SCOPE_PATTERN.sub("", name)
    return name[name.rfind(".") + 1:]
