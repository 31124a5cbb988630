# src/monkey/lexer.py
from .monkey_token import *
from .errors import MonkeySyntaxError

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    '\\': '\\',
    '"': '"',
}

_SINGLE_CHAR_TOKENS = {
    '+': PLUS,
    '-': MINUS,
    '*': ASTERISK,
    '/': SLASH,
    '<': LT,
    '>': GT,
    ',': COMMA,
    ';': SEMICOLON,
    ':': COLON,
    '(': LPAREN,
    ')': RPAREN,
    '{': LBRACE,
    '}': RBRACE,
    '[': LBRACKET,
    ']': RBRACKET,
}


class Lexer:
    def __init__(self, source_code, filename="<stdin>"):
        self.input = source_code
        self.filename = filename
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.read_char()

    def read_char(self):
        if self.ch == '\n':
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def next_token(self):
        self.skip_whitespace()

        while self.ch == '/' and self.peek_char() == '/':
            self.skip_comment()
            self.skip_whitespace()

        line, column = self.line, self.column

        if self.ch == '=':
            if self.peek_char() == '=':
                self.read_char()
                tok = Token(EQ, "==", line, column)
            else:
                tok = Token(ASSIGN, self.ch, line, column)
        elif self.ch == '!':
            if self.peek_char() == '=':
                self.read_char()
                tok = Token(NOT_EQ, "!=", line, column)
            else:
                tok = Token(BANG, self.ch, line, column)
        elif self.ch == '"':
            tok = Token(STRING, self.read_string(), line, column)
        elif self.ch in _SINGLE_CHAR_TOKENS:
            tok = Token(_SINGLE_CHAR_TOKENS[self.ch], self.ch, line, column)
        elif self.ch == "":
            return Token(EOF, "", line, column)
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            return Token(lookup_ident(literal), literal, line, column)
        elif self.is_digit(self.ch):
            return Token(INT, self.read_number(), line, column)
        else:
            tok = Token(ILLEGAL, self.ch, line, column)

        self.read_char()
        return tok

    def tokenize(self):
        """Return every token up to and including EOF."""
        tokens = []
        while True:
            tok = self.next_token()
            tokens.append(tok)
            if tok.type == EOF:
                return tokens

    def skip_whitespace(self):
        while self.ch in (' ', '\t', '\n', '\r'):
            self.read_char()

    def skip_comment(self):
        while self.ch != '\n' and self.ch != "":
            self.read_char()

    def read_string(self):
        start_line, start_column = self.line, self.column
        result = []
        while True:
            self.read_char()
            if self.ch == "":
                raise MonkeySyntaxError(
                    "Unterminated string literal",
                    line=start_line,
                    column=start_column,
                    filename=self.filename,
                    suggestion="Add a closing quote \" to terminate the string."
                )
            elif self.ch == '\\':
                self.read_char()
                if self.ch == "":
                    raise MonkeySyntaxError(
                        "Incomplete escape sequence at end of file",
                        line=self.line,
                        column=self.column,
                        filename=self.filename,
                        suggestion="Remove the backslash or complete the escape sequence."
                    )
                result.append(_ESCAPES.get(self.ch, self.ch))
            elif self.ch == '"':
                break
            else:
                result.append(self.ch)
        return ''.join(result)

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch) or self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z' or char == '_'

    def is_digit(self, char):
        return '0' <= char <= '9'
