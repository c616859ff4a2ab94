# polic

Function-level security policies for Python code. Wrap a function, and every
call to it goes through a policy that decides whether it runs, is logged, or
is blocked.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Policy actions

`polic.core.PolicyAction` is an integer enum with three members:

- `ALLOW` (0) – the call runs.
- `BLOCK` (1) – the call is blocked while the sandbox is active.
- `LOG_ONLY` (2) – the call is logged and then runs.

Outside sandbox mode every wrapped call runs.

## Core API

`polic.core` holds the framework settings (`PolicyConfig`) and the `Polic`
object that manages them.

```python
from polic.core import Polic, PolicyAction

polic = Polic()
polic.init(True, PolicyAction.BLOCK)   # prints "[POLIC] PoliC security framework initialized"
polic.set_logger(print)                # any callable taking one string; None restores the default
polic.configure_vm_hooks(True)         # sets polic.config.enable_vm_hooks
polic.configure_stack_protection(True) # sets polic.config.stack_protection
polic.log("custom message")            # passed to the installed logger, if any
```

`init` raises `ValueError` for a value that is not a `PolicyAction`.
`default_logger` prints messages prefixed with `[POLIC] `.

## Enforcer

`polic.enforcer.Enforcer` runs the policy pipeline around a call: an
optional canary guard, a VM-hook check and the sandbox decision. Its settings
live in an `EnforcerConfig` (sandboxed, VM hooks and protection all on, action
`BLOCK` by default).

```python
from polic.core import PolicyAction
from polic.enforcer import Enforcer, send_net_data

enforcer = Enforcer()
enforcer.init(True, PolicyAction.BLOCK)   # logs the initialization and the configuration

secured_send = enforcer.secure(send_net_data)
secured_send()            # blocked: policy logs and returns None

enforcer.config.default_action = PolicyAction.ALLOW
secured_send()            # allowed despite the sandbox

enforcer.execute_command("ls")   # function with an inline policy check
```

Other pieces:

- `Enforcer.protect()` is a context manager that arms the canary on entry and
  checks it on exit; a changed canary logs a critical message and raises
  `StackCorruptionError`.
- `Enforcer.inline_check()` runs the in-function check and returns whether
  the caller may go on.
- `Enforcer.vm_hook_check()` reports `VM call instruction executed` only on an
  x86-64 machine with the `POLIC_ALLOW_VMCALLS` environment variable set; it
  reports the check as disabled otherwise, or as unavailable on other
  architectures. The environment and machine name can be passed to
  `Enforcer(environ=..., machine=...)`.

## Simple decorator

```python
from polic.simple import sandbox_decorator, send_net_data

secured = sandbox_decorator(send_net_data, is_sandboxed=True)
secured()   # prints "[POLIC] Sandbox policy active: blocking send_net_data()"
```

With `is_sandboxed=False` the wrapper announces the call and runs it.

## Commands

```
polic-demo          # walks through blocked, allowed and unsandboxed calls
polic-simple-demo   # the minimal sandbox decorator
```

## What it does not do

The policies decide only whether a Python callable is invoked. Nothing is
isolated at the operating-system level, no VM instruction is ever issued (the
VM hook only logs its decision), and the "stack" canary is a value held in the
enforcer's configuration rather than a check on real memory.