"""Core policy framework state: policy actions, configuration and logging."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Optional

Logger = Callable[[str], None]


class PolicyAction(enum.IntEnum):
    """What a policy does with a guarded call."""

    ALLOW = 0
    BLOCK = 1
    LOG_ONLY = 2


def default_logger(message: str) -> None:
    """Write a tagged log line to standard output."""
    print(f"[POLIC] {message}")


@dataclass
class PolicyConfig:
    """Framework settings."""

    is_sandboxed: bool = False
    enable_vm_hooks: bool = False
    stack_protection: bool = False
    default_action: PolicyAction = PolicyAction.BLOCK
    logger: Optional[Logger] = None


class Polic:
    """Holds a policy configuration and routes log messages."""

    def __init__(self, config: Optional[PolicyConfig] = None) -> None:
        self.config = config if config is not None else PolicyConfig()

    def init(self, sandbox_mode: bool, action: PolicyAction) -> None:
        """Set sandbox mode and default action, and install the default logger.

        Raises ValueError if ``action`` is not a known policy action.
        """
        self.config.is_sandboxed = bool(sandbox_mode)
        self.config.default_action = PolicyAction(action)
        self.config.logger = default_logger
        self.log("PoliC security framework initialized")

    def set_logger(self, logger_func: Optional[Logger]) -> None:
        """Install a logger; ``None`` restores the default one."""
        self.config.logger = logger_func if logger_func is not None else default_logger

    def configure_vm_hooks(self, enable: bool) -> None:
        """Turn VM hooks on or off."""
        self.config.enable_vm_hooks = bool(enable)

    def configure_stack_protection(self, enable: bool) -> None:
        """Turn stack protection on or off."""
        self.config.stack_protection = bool(enable)

    def log(self, message: str) -> None:
        """Pass a message to the installed logger, if any."""
        if self.config.logger is not None:
            self.config.logger(message)