# src/monkey/evaluator/expressions.py
from ..object import (
    Integer, String, Array, Hash, HashPair, Function,
    INTEGER_OBJ, STRING_OBJ, ARRAY_OBJ, HASH_OBJ,
    is_hashable, native_bool_to_boolean,
)
from .utils import is_error, new_error, NULL, TRUE, FALSE, is_truthy

_INT64_BIAS = 1 << 63
_INT64_SPAN = 1 << 64


def _wrap_int64(value):
    """Two's-complement wraparound into the signed 64-bit range."""
    return ((value + _INT64_BIAS) % _INT64_SPAN) - _INT64_BIAS


def _truncating_div(left, right):
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class ExpressionEvaluatorMixin:
    """Handles evaluation of expressions: Literals, Math, Logic, Identifiers."""

    def eval_identifier(self, node, env):
        self.debug_log("eval_identifier", "Looking up: %s", node.value)

        val, found = env.lookup(node.value)
        if found:
            return val

        builtin = self.builtins.get(node.value)
        if builtin is not None:
            self.debug_log("  Found builtin", node.value)
            return builtin

        return new_error(f"identifier not found: `{node.value}`")

    def eval_expressions(self, expressions, env):
        """Evaluate left to right; the first Error stops evaluation and is returned."""
        results = []
        for expression in expressions:
            evaluated = self.eval_node(expression, env)
            if is_error(evaluated):
                return evaluated
            results.append(evaluated)
        return results

    # === PREFIX ===

    def eval_prefix_expression(self, node, env):
        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        operator = node.operator
        if operator == "!":
            return self.eval_bang_operator(right)
        elif operator == "-":
            return self.eval_minus_prefix_operator(right)
        return new_error(f"unknown operation: {operator}{right.type()}")

    def eval_bang_operator(self, right):
        return FALSE if is_truthy(right) else TRUE

    def eval_minus_prefix_operator(self, right):
        if right.type() != INTEGER_OBJ:
            return new_error(f"unknown operation: -{right.type()}")
        return Integer(_wrap_int64(-right.value))

    # === INFIX ===

    def eval_infix_expression(self, node, env):
        self.debug_log("eval_infix_expression", "%s %s %s", node.left, node.operator, node.right)

        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        right = self.eval_node(node.right, env)
        if is_error(right):
            return right

        return self.eval_infix(node.operator, left, right)

    def eval_infix(self, operator, left, right):
        if left.type() == INTEGER_OBJ and right.type() == INTEGER_OBJ:
            return self.eval_integer_infix(operator, left, right)
        elif left.type() != right.type():
            return new_error(f"type missmatch: {left.type()} {operator} {right.type()}")
        elif left.type() == STRING_OBJ:
            return self.eval_string_infix(operator, left, right)
        # Same-type operands compare by identity: TRUE/FALSE/NULL are singletons
        elif operator == "==":
            return native_bool_to_boolean(left is right)
        elif operator == "!=":
            return native_bool_to_boolean(left is not right)
        return new_error(f"unknown operation: {left.type()} {operator} {right.type()}")

    def eval_integer_infix(self, operator, left, right):
        left_val = left.value
        right_val = right.value

        if operator == "+":
            return Integer(_wrap_int64(left_val + right_val))
        elif operator == "-":
            return Integer(_wrap_int64(left_val - right_val))
        elif operator == "*":
            return Integer(_wrap_int64(left_val * right_val))
        elif operator == "/":
            if right_val == 0:
                return new_error("division by zero")
            return Integer(_wrap_int64(_truncating_div(left_val, right_val)))
        elif operator == "<":
            return native_bool_to_boolean(left_val < right_val)
        elif operator == ">":
            return native_bool_to_boolean(left_val > right_val)
        elif operator == "==":
            return native_bool_to_boolean(left_val == right_val)
        elif operator == "!=":
            return native_bool_to_boolean(left_val != right_val)

        return new_error(f"unknown operation: {left.type()} {operator} {right.type()}")

    def eval_string_infix(self, operator, left, right):
        if operator == "+":
            return String(left.value + right.value)
        return new_error(f"unknown operation: {left.type()} {operator} {right.type()}")

    # === CONDITIONALS ===

    def eval_if_expression(self, node, env):
        condition = self.eval_node(node.condition, env)
        if is_error(condition):
            return condition

        if is_truthy(condition):
            return self.eval_node(node.consequence, env)
        elif node.alternative is not None:
            return self.eval_node(node.alternative, env)
        return NULL

    # === LITERALS ===

    def eval_function_literal(self, node, env):
        # Captures env by reference so later `let`s in the defining scope stay visible
        return Function(node.parameters, node.body, env)

    def eval_array_literal(self, node, env):
        elements = self.eval_expressions(node.elements, env)
        if is_error(elements):
            return elements
        return Array(elements)

    def eval_hash_literal(self, node, env):
        self.debug_log("eval_hash_literal", f"{len(node.pairs)} pairs")
        pairs = {}
        for key_node, value_node in node.pairs:
            key = self.eval_node(key_node, env)
            if is_error(key):
                return key

            if not is_hashable(key):
                return new_error(f"unusable as hash key: {key.type()}")

            value = self.eval_node(value_node, env)
            if is_error(value):
                return value

            pairs[key.hash_key()] = HashPair(key, value)
        return Hash(pairs)

    # === INDEXING ===

    def eval_index_expression(self, node, env):
        left = self.eval_node(node.left, env)
        if is_error(left):
            return left

        index = self.eval_node(node.index, env)
        if is_error(index):
            return index

        if left.type() == ARRAY_OBJ and index.type() == INTEGER_OBJ:
            return self.eval_array_index(left, index)
        elif left.type() == HASH_OBJ:
            return self.eval_hash_index(left, index)
        return new_error(f"index operator not supported: {left.type()}")

    def eval_array_index(self, array, index):
        idx = index.value
        if idx < 0 or idx >= len(array.elements):
            return NULL
        return array.elements[idx]

    def eval_hash_index(self, hash_obj, index):
        if not is_hashable(index):
            return new_error(f"unusable as hash key: {index.type()}")

        pair = hash_obj.pairs.get(index.hash_key())
        if pair is None:
            return NULL
        return pair.value
