import pytest

from polic.core import Polic, PolicyAction, PolicyConfig, default_logger


def test_init_sandbox_block(capsys):
    polic = Polic()
    polic.init(True, PolicyAction.BLOCK)
    assert polic.config.is_sandboxed is True
    assert polic.config.default_action == PolicyAction.BLOCK
    assert polic.config.logger is default_logger
    assert capsys.readouterr().out == "[POLIC] PoliC security framework initialized\n"


def test_init_accepts_integer_action():
    polic = Polic()
    polic.set_logger(lambda m: None)
    polic.init(False, 0)
    assert polic.config.default_action is PolicyAction.ALLOW
    assert polic.config.is_sandboxed is False


def test_init_rejects_unknown_action():
    with pytest.raises(ValueError):
        Polic().init(True, 7)


def test_defaults():
    config = PolicyConfig()
    assert config.is_sandboxed is False
    assert config.enable_vm_hooks is False
    assert config.stack_protection is False
    assert config.default_action == PolicyAction.BLOCK
    assert config.logger is None


def test_log_without_logger_is_silent(capsys):
    Polic().log("hello")
    assert capsys.readouterr().out == ""


def test_custom_logger_receives_messages():
    seen = []
    polic = Polic()
    polic.set_logger(seen.append)
    polic.log("first")
    polic.log("second")
    assert seen == ["first", "second"]


def test_set_logger_none_restores_default(capsys):
    polic = Polic()
    polic.set_logger(lambda m: None)
    polic.set_logger(None)
    assert polic.config.logger is default_logger
    polic.log("msg")
    assert capsys.readouterr().out == "[POLIC] msg\n"


def test_configure_flags():
    polic = Polic()
    polic.configure_vm_hooks(True)
    polic.configure_stack_protection(True)
    assert (polic.config.enable_vm_hooks, polic.config.stack_protection) == (True, True)
    polic.configure_vm_hooks(False)
    polic.configure_stack_protection(False)
    assert (polic.config.enable_vm_hooks, polic.config.stack_protection) == (False, False)


@pytest.mark.parametrize(
    "value, expected",
    [(0, PolicyAction.ALLOW), (1, PolicyAction.BLOCK), (2, PolicyAction.LOG_ONLY)],
)
def test_init_maps_integer_actions(value, expected):
    polic = Polic()
    polic.set_logger(lambda m: None)
    polic.init(True, value)
    assert polic.config.default_action is expected