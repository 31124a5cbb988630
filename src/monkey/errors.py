# src/monkey/errors.py
"""Host-level exceptions.

Language-level failures are never raised: they are ``EvaluationError``
values (see ``monkey.object``). The classes here cover problems found before
evaluation starts, such as malformed source text.
"""


class MonkeyError(Exception):
    """Base class for every exception raised by the interpreter."""


class MonkeySyntaxError(MonkeyError):
    def __init__(self, message, line=None, column=None, filename="<stdin>", suggestion=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion

    def format(self):
        location = self.filename
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        text = f"{location}: SyntaxError: {self.message}"
        if self.suggestion:
            text += f"\n  hint: {self.suggestion}"
        return text

    def __str__(self):
        return self.format()
