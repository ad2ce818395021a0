# SPDX-License-Identifier: Apache-2.0
# Copyright © 2019-2022 Tensil AI Company

from waver.config import Constant, Keyword, ignored_blocks
from waver.errors import ParseError, ParseErrorCode
from waver.model import Change, Document, Header, Port, PortKind, ScopeKind
from waver.scope_tree import ScopeTreeBuilder
from waver.tokenizer import SENTINEL, Tokenizer
from waver.value_changes import ValueChangeLog


port_kinds = {
    Keyword.WIRE.value: PortKind.WIRE,
    Keyword.REG.value: PortKind.REGISTER,
}

scope_kinds = {
    Keyword.MODULE.value: ScopeKind.MODULE,
    Keyword.TASK.value: ScopeKind.TASK,
}

scope_keywords = [
    Keyword.SCOPE.value,
    Keyword.UPSCOPE.value,
]


def is_number(token):
    # ASCII digits only
    return token.isascii() and token.isdecimal()


def parse(source, debug=False):
    """
    Loads and parses a VCD in one go.

    source : os.PathLike or str
        Path to a VCD file, or the VCD text itself
    """
    parser = Parser(debug=debug)
    parser.load(source)
    return parser.parse()


class Parser:
    def __init__(self, debug=False):
        """
        Parser is a recursive descent parser over the tokens of one VCD. It
        builds the scope tree from the header section and the value change
        log from the body section.

        A Parser produces exactly one Document. Loading or parsing a second
        time raises instead of reusing state.

        Parameters
        ----------
        debug : bool (optional)
            Print every skipped token and every scope opened or closed
        """
        self.debug = debug
        self.tokenizer = Tokenizer()
        self.scopes = ScopeTreeBuilder(debug=debug)
        self.log = ValueChangeLog()
        self.version = None
        self.date = None
        self.timescale = None
        self.parsed = False

    def load(self, source):
        self.tokenizer.load(source)

    def parse(self):
        if self.parsed:
            raise ParseError(ParseErrorCode.ALREADY_PARSED)
        self.parsed = True
        self.tokenizer.tokenize()
        if self.debug:
            print("parsing {} tokens".format(len(self.tokenizer) - 1))
        self.parse_header()
        self.parse_body()
        initial_dump, timestamps = self.log.build()
        header = Header(
            roots=self.scopes.build(),
            version=self.version,
            date=self.date,
            timescale=self.timescale,
        )
        return Document(header, initial_dump, timestamps)

    def expect(self, after=None):
        """Consumes the next token, which must not be the end of input."""
        if self.tokenizer.current() == SENTINEL:
            raise ParseError(ParseErrorCode.UNEXPECTED_END_OF_FILE, after)
        return self.tokenizer.consume()

    def skip(self, token):
        if self.debug:
            print("skipping token {}".format(token))
        self.tokenizer.consume()

    def parse_header(self):
        while True:
            token = self.tokenizer.current()
            if token == Keyword.ENDDEFINITIONS.value:
                break
            if token == SENTINEL:
                raise ParseError(ParseErrorCode.UNEXPECTED_END_OF_FILE)
            if token == Keyword.VERSION.value:
                self.version = self.parse_block()
            elif token == Keyword.DATE.value:
                self.date = self.parse_block()
            elif token == Keyword.TIMESCALE.value:
                self.timescale = self.parse_block()
            elif token == Keyword.COMMENT.value:
                self.parse_block()
            elif token == Keyword.SCOPE.value:
                self.parse_scope()
            elif token == Keyword.UPSCOPE.value:
                # no scope is open at this level
                raise ParseError(ParseErrorCode.INVALID_SCOPE, token)
            else:
                self.skip(token)
        keyword = self.tokenizer.consume()
        token = self.expect(keyword)
        if token != Keyword.END.value:
            raise ParseError(ParseErrorCode.UNKNOWN_KEYWORD, token)

    def parse_block(self):
        """
        Consumes `$keyword ... $end` and returns the words in between joined
        by single spaces.
        """
        keyword = self.tokenizer.consume()
        words = list()
        while True:
            token = self.expect(keyword)
            if token == Keyword.END.value:
                return " ".join(words)
            words.append(token)

    def skip_block(self):
        keyword = self.tokenizer.current()
        self.parse_block()
        if self.debug:
            print("ignoring {} block".format(keyword))

    def parse_scope(self):
        keyword = self.tokenizer.consume()
        self.scopes.open()
        kind = scope_kinds.get(self.expect(keyword), ScopeKind.UNKNOWN)
        name = self.expect(keyword)
        token = self.expect(name)
        if token != Keyword.END.value:
            raise ParseError(ParseErrorCode.INVALID_SCOPE, token)
        self.scopes.describe(kind, name)

        while True:
            token = self.tokenizer.current()
            if token == Keyword.UPSCOPE.value:
                break
            if token == SENTINEL:
                raise ParseError(ParseErrorCode.UNEXPECTED_END_OF_FILE, name)
            if token == Keyword.VAR.value:
                port = self.parse_variable()
                if kind is ScopeKind.MODULE:
                    self.scopes.add_port(port)
                elif self.debug:
                    print("dropping {} from {} {}".format(port.name, kind.value, name))
            elif token == Keyword.SCOPE.value:
                self.parse_scope()
            elif token == Keyword.COMMENT.value:
                self.parse_block()
            else:
                self.skip(token)

        keyword = self.tokenizer.consume()
        token = self.expect(keyword)
        if token != Keyword.END.value:
            raise ParseError(ParseErrorCode.INVALID_SCOPE, token)
        self.scopes.close()

    def parse_variable(self):
        keyword = self.tokenizer.consume()

        token = self.expect(keyword)
        if token not in port_kinds:
            raise ParseError(ParseErrorCode.INVALID_SIGNAL_TYPE, token)
        kind = port_kinds[token]

        token = self.expect(token)
        if not is_number(token):
            raise ParseError(ParseErrorCode.INVALID_SIGNAL_WIDTH, token)
        width = int(token)

        identifier = self.expect(token)
        if len(identifier) != 1:
            raise ParseError(ParseErrorCode.INVALID_SIGNAL_WIDTH, identifier)

        name = self.expect(identifier)

        reference = list()
        token = self.expect(name)
        while token != Keyword.END.value:
            reference.append(token)
            token = self.expect(token)
        return Port(kind, width, identifier, name, "".join(reference))

    def parse_body(self):
        while True:
            token = self.tokenizer.current()
            if token == SENTINEL:
                break
            if token.startswith(Constant.TIME_PREFIX.value):
                self.parse_timechange()
            elif token == Keyword.DUMPVARS.value:
                self.parse_initial_dump()
            elif token in ignored_blocks:
                self.skip_block()
            elif token in scope_keywords:
                raise ParseError(ParseErrorCode.INVALID_SCOPE, token)
            else:
                self.skip(token)

    def parse_timechange(self):
        token = self.tokenizer.current()
        digits = token[len(Constant.TIME_PREFIX.value):]
        if not is_number(digits):
            raise ParseError(ParseErrorCode.INVALID_TIMESTAMP, token)
        self.tokenizer.consume()
        self.log.open(int(digits))

        while True:
            token = self.tokenizer.current()
            if token == SENTINEL or token.startswith(Constant.TIME_PREFIX.value):
                break
            if token == Keyword.DUMPVARS.value:
                self.parse_initial_dump()
            elif token in ignored_blocks:
                self.skip_block()
            elif token in scope_keywords:
                raise ParseError(ParseErrorCode.INVALID_SCOPE, token)
            elif token.startswith(Constant.KEYWORD_PREFIX.value):
                raise ParseError(ParseErrorCode.UNKNOWN_KEYWORD, token)
            else:
                self.log.append(self.parse_change())
        self.log.close()

    def parse_initial_dump(self):
        keyword = self.tokenizer.consume()
        while True:
            token = self.tokenizer.current()
            if token == Keyword.END.value:
                self.tokenizer.consume()
                return
            if token == SENTINEL:
                raise ParseError(ParseErrorCode.UNEXPECTED_END_OF_FILE, keyword)
            self.log.dump(self.parse_change())

    def parse_change(self):
        """
        A two character token is a complete one bit change, value then
        identifier. Anything else is a vector value whose identifier is the
        following token.
        """
        token = self.tokenizer.consume()
        if len(token) == 2:
            return Change(identifier=token[1], value=token[0])
        value = token
        if value[0] in Constant.RADIX_PREFIXES.value:
            value = value[1:]
        identifier = self.expect(token)
        return Change(identifier=identifier, value=value)
