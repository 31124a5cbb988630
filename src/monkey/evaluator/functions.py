# src/monkey/evaluator/functions.py
from ..environment import new_enclosed_environment
from ..object import Function, Builtin, ReturnValue
from .builtins import default_builtins
from .utils import is_error, new_error, wrong_arg_count, logger


class FunctionEvaluatorMixin:
    """Handles function application and owns the builtin registry."""

    def __init__(self, builtins=None, output=None):
        # Per-evaluator copy so callers can't mutate a shared table
        self.builtins = dict(builtins) if builtins is not None else default_builtins(output)

    def eval_call_expression(self, node, env):
        self.debug_log("CallExpression node", "Calling %s", node.function)

        fn = self.eval_node(node.function, env)
        if is_error(fn):
            return fn

        args = self.eval_expressions(node.arguments, env)
        if is_error(args):
            return args

        self.debug_log("  Arguments evaluated", f"count: {len(args)}")
        return self.apply_function(fn, args)

    def apply_function(self, fn, args):
        if isinstance(fn, Function):
            self.debug_log("  Calling user-defined function")
            if len(args) != len(fn.parameters):
                return wrong_arg_count(len(args), len(fn.parameters))

            extended_env = self.extend_function_env(fn, args)
            result = self.eval_node(fn.body, extended_env)
            return self.unwrap_return_value(result)

        elif isinstance(fn, Builtin):
            self.debug_log("  Calling builtin function", fn.name)
            try:
                return fn.fn(*args)
            except RecursionError:
                # Reported by eval_node like any other stack exhaustion
                raise
            except Exception as e:
                logger.warning("builtin %s raised %r", fn.name, e)
                return new_error(f"builtin error: {fn.name}: {e}")

        return new_error(f"not a function: {fn.type()}")

    def extend_function_env(self, fn, args):
        env = new_enclosed_environment(fn.env)
        for param, arg in zip(fn.parameters, args):
            env.set(param.value, arg)
        return env

    def unwrap_return_value(self, obj):
        if isinstance(obj, ReturnValue):
            return obj.value
        return obj
