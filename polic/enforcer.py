"""Policy enforcement around guarded functions, with VM hooks and canary checks."""

from __future__ import annotations

import argparse
import contextlib
import functools
import os
import platform
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar

from polic.core import Logger, PolicyAction, default_logger

STACK_CANARY = 0xDEADBEEFCAFEBABE

_X86_64 = frozenset({"x86_64", "amd64", "AMD64"})

F = TypeVar("F", bound=Callable[..., Any])


class StackCorruptionError(RuntimeError):
    """Raised when the protection canary was altered."""


@dataclass
class EnforcerConfig:
    """Enforcer settings and protection state."""

    is_sandboxed: bool = True
    enable_vm_hooks: bool = True
    stack_protection: bool = True
    stack_protection_active: bool = False
    stack_canary: Optional[int] = None
    default_action: PolicyAction = PolicyAction.BLOCK
    logger: Optional[Logger] = None


class Enforcer:
    """Applies the configured policy to function calls."""

    def __init__(
        self,
        config: Optional[EnforcerConfig] = None,
        *,
        environ: Optional[Mapping[str, str]] = None,
        machine: Optional[str] = None,
    ) -> None:
        self.config = config if config is not None else EnforcerConfig()
        self._environ = environ if environ is not None else os.environ
        self._machine = machine if machine is not None else platform.machine()

    def init(self, sandbox_mode: bool, action: PolicyAction) -> None:
        """Reset state, install the default logger and log the configuration."""
        cfg = self.config
        cfg.is_sandboxed = bool(sandbox_mode)
        cfg.default_action = PolicyAction(action)
        cfg.stack_protection_active = False
        cfg.stack_canary = None
        self.setup_logger(None)
        self.log("PoliC security framework initialized")
        on_off = {True: "ON", False: "OFF"}
        self.log(
            f"Configuration: Sandbox={on_off[cfg.is_sandboxed]}, "
            f"VM-Hooks={on_off[bool(cfg.enable_vm_hooks)]}, "
            f"Stack-Protection={on_off[bool(cfg.stack_protection)]}, "
            f"Action={int(cfg.default_action)}"
        )

    def setup_logger(self, logger_func: Optional[Logger]) -> None:
        """Install a logger; ``None`` selects the default one."""
        self.config.logger = logger_func if logger_func is not None else default_logger

    def log(self, message: str) -> None:
        """Pass a message to the installed logger, if any."""
        if self.config.logger is not None:
            self.config.logger(message)

    def vm_hook_check(self) -> None:
        """Log the VM hook decision for the current platform and environment."""
        if not self.config.enable_vm_hooks:
            return
        self.log("VM Hook activated - checking execution context")
        if self._machine in _X86_64:
            if "POLIC_ALLOW_VMCALLS" in self._environ:
                self.log("VM call instruction executed")
            else:
                self.log("VM calls disabled (safety check)")
        else:
            self.log("VM calls unavailable on this architecture")

    def _protect_begin(self) -> None:
        self.config.stack_canary = STACK_CANARY
        self.log("Stack protection enabled for this function")
        self.config.stack_protection_active = True

    def _protect_end(self) -> None:
        cfg = self.config
        if not (cfg.stack_protection_active and cfg.stack_canary is not None):
            return
        corrupted = cfg.stack_canary != STACK_CANARY
        cfg.stack_protection_active = False
        cfg.stack_canary = None
        if corrupted:
            self.log("CRITICAL: Stack corruption detected!")
            raise StackCorruptionError("Stack corruption detected")

    @contextlib.contextmanager
    def protect(self) -> Iterator[None]:
        """Arm the canary on entry and verify it on exit."""
        self._protect_begin()
        try:
            yield
        finally:
            self._protect_end()

    def secure(self, func: F) -> F:
        """Wrap ``func`` so that every call goes through the policy."""
        name = getattr(func, "__name__", repr(func))

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            guard = self.protect() if self.config.stack_protection else contextlib.nullcontext()
            with guard:
                if self.config.enable_vm_hooks:
                    self.vm_hook_check()
                if not self.config.is_sandboxed:
                    self.log(f"Policy passed: executing {name}()")
                    return func(*args, **kwargs)
                self.log(f"Sandbox policy active for {name}()")
                action = self.config.default_action
                if action == PolicyAction.ALLOW:
                    self.log("Policy allows execution despite sandbox")
                    return func(*args, **kwargs)
                if action == PolicyAction.LOG_ONLY:
                    self.log("Policy logs but allows execution")
                    return func(*args, **kwargs)
                self.log("Policy blocks execution in sandbox")
                return None

        return wrapper  # type: ignore[return-value]

    def inline_check(self) -> bool:
        """Run the in-function policy check; return whether execution may go on.

        When sandboxed and protection is on, the canary is armed here and is
        expected to be checked by the caller once its work is done.
        """
        cfg = self.config
        if not cfg.is_sandboxed:
            return True
        self.log("Inline policy check activated in function")
        if cfg.stack_protection:
            self._protect_begin()
        if cfg.enable_vm_hooks:
            self.vm_hook_check()
        if cfg.default_action == PolicyAction.BLOCK:
            self.log("Inline policy blocks execution")
            return False
        return True

    def execute_command(self, cmd: str) -> None:
        """Announce a command, subject to the inline policy check."""
        if not self.inline_check():
            return
        print(f"Executing command: {cmd}")
        if self.config.stack_protection:
            self._protect_end()


def send_net_data() -> None:
    """Stand-in for a network operation."""
    print("Sending data over the network...")


def access_filesystem() -> None:
    """Stand-in for a filesystem operation."""
    print("Accessing sensitive filesystem resources...")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the enforcement demonstration."""
    argparse.ArgumentParser(description="Policy enforcement demonstration").parse_args(argv)

    enforcer = Enforcer()
    enforcer.init(True, PolicyAction.BLOCK)

    secured_net_send = enforcer.secure(send_net_data)
    secured_fs_access = enforcer.secure(access_filesystem)

    print("\n--- Testing secured network function ---")
    secured_net_send()

    print("\n--- Testing secured filesystem function ---")
    secured_fs_access()

    print("\n--- Testing inline policy function ---")
    enforcer.execute_command("rm -rf /")

    print("\n--- Changing policy to ALLOW ---")
    enforcer.config.default_action = PolicyAction.ALLOW
    secured_net_send()

    print("\n--- Disabling sandbox ---")
    enforcer.config.is_sandboxed = False
    secured_fs_access()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())