# src/monkey/evaluator/statements.py
from ..object import ReturnValue, EvaluationError
from .utils import is_error, NULL


class StatementEvaluatorMixin:
    """Handles evaluation of statements and flow control."""

    def eval_program(self, statements, env):
        self.debug_log("eval_program", f"Processing {len(statements)} statements")

        result = NULL
        for i, stmt in enumerate(statements):
            self.debug_log("  Statement", "%d %s", i + 1, type(stmt).__name__)
            res = self.eval_node(stmt, env)

            if isinstance(res, ReturnValue):
                self.debug_log("  ReturnValue encountered", res.value)
                return res.value
            if is_error(res):
                self.debug_log("  Error encountered", res)
                return res
            result = res

        self.debug_log("eval_program completed", result)
        return result

    def eval_block_statement(self, block, env):
        self.debug_log("eval_block_statement", f"len={len(block.statements)}")

        result = NULL
        for stmt in block.statements:
            res = self.eval_node(stmt, env)

            # Left wrapped so enclosing blocks stop too; unwrapped at the call boundary
            if isinstance(res, (ReturnValue, EvaluationError)):
                self.debug_log("  Block interrupted", res)
                return res
            result = res

        self.debug_log("  Block completed", result)
        return result

    def eval_expression_statement(self, node, env):
        return self.eval_node(node.expression, env)

    # === VARIABLE & CONTROL FLOW ===

    def eval_let_statement(self, node, env):
        self.debug_log("eval_let_statement", f"let {node.name.value}")

        value = self.eval_node(node.value, env)
        if is_error(value):
            return value

        env.set(node.name.value, value)
        return NULL

    def eval_return_statement(self, node, env):
        if node.return_value is None:
            return ReturnValue(NULL)

        val = self.eval_node(node.return_value, env)
        if is_error(val):
            return val
        return ReturnValue(val)
