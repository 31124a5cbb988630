# src/monkey/object.py
from dataclasses import dataclass

INTEGER_OBJ = "INTEGER"
BOOLEAN_OBJ = "BOOLEAN"
STRING_OBJ = "STRING"
NULL_OBJ = "NULL"
ARRAY_OBJ = "ARRAY"
HASH_OBJ = "HASH"
FUNCTION_OBJ = "FUNCTION"
BUILTIN_OBJ = "BUILTIN"
ERROR_OBJ = "ERROR"
RETURN_VALUE_OBJ = "RETURN_VALUE"


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")

    def type(self):
        raise NotImplementedError("Subclasses must implement this method")

    def __repr__(self):
        return f"<{self.type()} {self.inspect()}>"


@dataclass(frozen=True)
class HashKey:
    """Canonical key for Hash lookups; equal for language-equal values."""
    type: str
    value: object


class Hashable:
    """Marker for values usable as Hash keys (Integer, Boolean, String)."""

    def hash_key(self):
        return HashKey(self.type(), self.value)


class Integer(Hashable, Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return INTEGER_OBJ

class Boolean(Hashable, Object):
    def __init__(self, value): self.value = value
    def inspect(self): return "true" if self.value else "false"
    def type(self): return BOOLEAN_OBJ
    def hash_key(self): return HashKey(BOOLEAN_OBJ, 1 if self.value else 0)

class Null(Object):
    def inspect(self): return "null"
    def type(self): return NULL_OBJ

class String(Hashable, Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return STRING_OBJ
    def __str__(self): return self.value

class Array(Object):
    def __init__(self, elements): self.elements = elements
    def inspect(self):
        elements_str = ", ".join([el.inspect() for el in self.elements])
        return f"[{elements_str}]"
    def type(self): return ARRAY_OBJ


class HashPair:
    __slots__ = ("key", "value")

    def __init__(self, key, value):
        self.key = key      # original key object, kept for inspect()
        self.value = value


class Hash(Object):
    def __init__(self, pairs=None):
        self.pairs = pairs if pairs is not None else {}  # dict of HashKey -> HashPair

    def type(self): return HASH_OBJ

    def inspect(self):
        pairs = [f"{pair.key.inspect()}: {pair.value.inspect()}" for pair in self.pairs.values()]
        return "{" + ", ".join(pairs) + "}"


class ReturnValue(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value.inspect()
    def type(self): return RETURN_VALUE_OBJ


class EvaluationError(Object):
    def __init__(self, message): self.message = message
    def inspect(self): return f"ERROR: {self.message}"
    def type(self): return ERROR_OBJ
    def __str__(self): return self.message


class Function(Object):
    def __init__(self, parameters, body, env):
        self.parameters, self.body, self.env = parameters, body, env
    def inspect(self):
        params = ", ".join([p.value for p in self.parameters])
        return f"fn({params}) {{\n{self.body}\n}}"
    def type(self): return FUNCTION_OBJ


class Builtin(Object):
    def __init__(self, fn, name=""):
        self.fn = fn  # Stores the native Python function
        self.name = name

    def inspect(self):
        return f"builtin function: {self.name}"

    def type(self):
        return BUILTIN_OBJ


# Shared singletons; results must reuse these, never allocate new ones.
NULL = Null()
TRUE = Boolean(True)
FALSE = Boolean(False)


def native_bool_to_boolean(value):
    return TRUE if value else FALSE


def is_hashable(obj):
    return isinstance(obj, Hashable)


def is_error(obj):
    return isinstance(obj, EvaluationError)
