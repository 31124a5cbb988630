# src/monkey/environment.py


class Environment:
    """A lexical scope: local bindings plus an optional enclosing scope.

    The outer environment is shared, never copied. A function captures the
    environment it was defined in and every call gets a fresh child of it.
    """

    def __init__(self, outer=None):
        self.store = {}
        self.outer = outer

    def lookup(self, name):
        """Return ``(value, found)``, walking outward through enclosing scopes."""
        env = self
        while env is not None:
            if name in env.store:
                return env.store[name], True
            env = env.outer
        return None, False

    def get(self, name, default=None):
        """Get a value from the environment chain, or ``default`` if unbound"""
        value, found = self.lookup(name)
        return value if found else default

    def set(self, name, value):
        """Bind ``name`` in this scope only; outer scopes are never written."""
        self.store[name] = value
        return value

    def depth(self):
        depth, env = 0, self.outer
        while env is not None:
            depth += 1
            env = env.outer
        return depth

    def __repr__(self):
        return f"Environment(names={sorted(self.store)}, depth={self.depth()})"


def new_enclosed_environment(outer):
    """Create a call-frame scope whose lookups fall back to ``outer``."""
    return Environment(outer=outer)
