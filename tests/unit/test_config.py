"""Configuration defaults, environment overrides and debug logging toggles."""

import logging

import pytest

from helpers import parse_program

from monkey.config import Config, config
from monkey.environment import Environment
from monkey.evaluator import Evaluator, evaluate
from monkey.object import NULL, Builtin


def test_defaults():
    cfg = Config()
    assert cfg.enable_debug_logs is False
    assert cfg.log_level == "WARNING"
    assert cfg.recursion_limit == 10000
    assert cfg.prompt == ">> "


def test_from_env_overrides_and_coerces():
    cfg = Config.from_env({
        "MONKEY_DEBUG": "yes",
        "MONKEY_LOG_LEVEL": "info",
        "MONKEY_RECURSION_LIMIT": " 20000 ",
        "MONKEY_PROMPT": "monkey> ",
        "UNRELATED": "1",
    })
    assert cfg.enable_debug_logs is True
    assert cfg.log_level == "info"
    assert cfg.recursion_limit == 20000
    assert cfg.prompt == "monkey> "


def test_from_env_rejects_bad_boolean():
    with pytest.raises(ValueError, match="invalid boolean value"):
        Config.from_env({"MONKEY_DEBUG": "maybe"})


def test_from_env_rejects_bad_integer():
    with pytest.raises(ValueError):
        Config.from_env({"MONKEY_RECURSION_LIMIT": "lots"})


def test_update_and_as_dict():
    cfg = Config()
    cfg.update(prompt="$ ", recursion_limit=50)
    assert cfg.as_dict() == {
        "enable_debug_logs": False,
        "log_level": "WARNING",
        "recursion_limit": 50,
        "prompt": "$ ",
    }
    with pytest.raises(AttributeError, match="unknown config option"):
        cfg.update(colour=True)


def test_string_options_keep_surrounding_whitespace():
    cfg = Config.from_env({"MONKEY_PROMPT": "  > ", "MONKEY_DEBUG": " on "})
    assert cfg.prompt == "  > "
    assert cfg.enable_debug_logs is True


def test_evaluate_debug_mode_logs_without_touching_config(caplog):
    seen = []

    def record_flag():
        seen.append(config.enable_debug_logs)
        return NULL

    config.enable_debug_logs = False
    shared = Evaluator(builtins={"flag": Builtin(record_flag, "flag")})
    program = parse_program("flag(); 1 + 2")

    with caplog.at_level(logging.DEBUG, logger="monkey.evaluator"):
        result = evaluate(program, debug_mode=True, evaluator=shared)

    assert result.value == 3
    assert seen == [False]
    assert shared.debug_mode is False
    assert any("eval_infix_expression: 1 + 2" in r.getMessage() for r in caplog.records)


def test_debug_mode_is_per_evaluator(caplog):
    config.enable_debug_logs = False
    program = parse_program("1 + 2")
    with caplog.at_level(logging.DEBUG, logger="monkey.evaluator"):
        Evaluator().eval_node(program, Environment())
        assert not [r for r in caplog.records if r.name == "monkey.evaluator"]
        Evaluator(debug_mode=True).eval_node(program, Environment())
    assert caplog.records


def test_debug_logging_is_silent_when_disabled(caplog):
    config.enable_debug_logs = False
    program = parse_program("1 + 2")

    with caplog.at_level(logging.DEBUG, logger="monkey.evaluator"):
        evaluate(program)

    assert not [r for r in caplog.records if r.name == "monkey.evaluator"]
