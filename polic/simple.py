"""Minimal sandbox gate: block a function when sandboxed, run it otherwise."""

from __future__ import annotations

import argparse
import functools
from typing import Any, Callable, Optional

NET_DATA_MESSAGE = "Sending data over the network..."


def sandbox_decorator(func: Callable[..., Any], is_sandboxed: bool = True) -> Callable[..., Any]:
    """Return a wrapper that blocks ``func`` while sandboxed."""
    name = getattr(func, "__name__", repr(func))

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if is_sandboxed:
            print(f"[POLIC] Sandbox policy active: blocking {name}()")
            return None
        print(f"[POLIC] Policy passed: executing {name}()")
        return func(*args, **kwargs)

    return wrapper


def send_net_data() -> str:
    """Stand-in for a network operation; prints and returns its message."""
    message = NET_DATA_MESSAGE
    print(message)
    return message


def main(argv: Optional[list[str]] = None) -> int:
    """Run the sandbox gate demonstration."""
    argparse.ArgumentParser(description="Sandbox gate demonstration").parse_args(argv)
    secured_send = sandbox_decorator(send_net_data, True)
    secured_send()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())