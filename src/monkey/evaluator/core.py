# src/monkey/evaluator/core.py
from .. import monkey_ast
from ..environment import Environment
from ..object import Integer, String
from .utils import debug_log as _debug_log, new_error, NULL, TRUE, FALSE
from .expressions import ExpressionEvaluatorMixin
from .statements import StatementEvaluatorMixin
from .functions import FunctionEvaluatorMixin


class Evaluator(ExpressionEvaluatorMixin, StatementEvaluatorMixin, FunctionEvaluatorMixin):
    """Tree-walking evaluator.

    Holds no per-program state besides its builtin table and debug flag, so
    one instance can evaluate any number of programs. Concurrent callers must
    each pass their own root ``Environment``.
    """

    def __init__(self, builtins=None, output=None, debug_mode=False):
        FunctionEvaluatorMixin.__init__(self, builtins=builtins, output=output)
        self.debug_mode = debug_mode

    def debug_log(self, label, message="", *args):
        _debug_log(label, message, *args, enabled=self.debug_mode)

    def eval_node(self, node, env):
        if node is None:
            self.debug_log("eval_node", "Node is None, returning NULL")
            return NULL

        node_type = type(node)

        try:
            # === STATEMENTS ===
            if node_type == monkey_ast.Program:
                return self.eval_program(node.statements, env)

            elif node_type == monkey_ast.ExpressionStatement:
                return self.eval_expression_statement(node, env)

            elif node_type == monkey_ast.BlockStatement:
                return self.eval_block_statement(node, env)

            elif node_type == monkey_ast.ReturnStatement:
                return self.eval_return_statement(node, env)

            elif node_type == monkey_ast.LetStatement:
                return self.eval_let_statement(node, env)

            # === EXPRESSIONS ===
            elif node_type == monkey_ast.Identifier:
                return self.eval_identifier(node, env)

            elif node_type == monkey_ast.IntegerLiteral:
                return Integer(node.value)

            elif node_type == monkey_ast.StringLiteral:
                return String(node.value)

            elif node_type == monkey_ast.Boolean:
                return TRUE if node.value else FALSE

            elif node_type == monkey_ast.PrefixExpression:
                return self.eval_prefix_expression(node, env)

            elif node_type == monkey_ast.InfixExpression:
                return self.eval_infix_expression(node, env)

            elif node_type == monkey_ast.IfExpression:
                return self.eval_if_expression(node, env)

            elif node_type == monkey_ast.FunctionLiteral:
                return self.eval_function_literal(node, env)

            elif node_type == monkey_ast.CallExpression:
                return self.eval_call_expression(node, env)

            elif node_type == monkey_ast.ArrayLiteral:
                return self.eval_array_literal(node, env)

            elif node_type == monkey_ast.HashLiteral:
                return self.eval_hash_literal(node, env)

            elif node_type == monkey_ast.IndexExpression:
                return self.eval_index_expression(node, env)

            self.debug_log("  Unknown node type", node_type.__name__)
            return new_error(f"unknown node: {node_type.__name__}")

        except RecursionError:
            # Raised near the stack limit; outer frames receive a plain Error value
            return new_error("maximum recursion depth exceeded")


# Global Entry Point
def evaluate(program, env=None, debug_mode=False, evaluator=None):
    if env is None:
        env = Environment()

    if evaluator is None:
        evaluator = Evaluator(debug_mode=debug_mode)
    elif debug_mode and not evaluator.debug_mode:
        # Same builtins, own flag; the caller's instance is left untouched
        evaluator = Evaluator(builtins=evaluator.builtins, debug_mode=True)

    return evaluator.eval_node(program, env)
