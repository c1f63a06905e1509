"""Program, class, method and declaration productions."""

from __future__ import annotations

from minijava.parsing.statements import StatementParsingMixin
from minijava.tokens import TokenType

# Tokens that can begin a Type (and so a VarDecl)
TYPE_START = frozenset({TokenType.INT, TokenType.BOOLEAN, TokenType.ID})


class DeclarationParsingMixin(StatementParsingMixin):
    """Mixin recognizing the program structure.

    Grammar::

        Program    := MainClass ClassDecl* EOF
        MainClass  := 'class' ID '{' 'public' 'static' 'void' 'main'
                      '(' 'String' '[' ']' ID ')' '{' Statement '}' '}'
        ClassDecl  := 'class' ID ('extends' ID)? '{' VarDecl* Method* '}'
        Method     := 'public' Type ID '(' FormalList ')' '{'
                      (VarDecl | Statement)* 'return' Exp ';' '}'
        VarDecl    := Type ID ';'
        FormalList := (Type ID (',' Type ID)*)?
        Type       := 'int' ('[' ']')? | 'boolean' | ID

    """

    def _parse_program(self) -> None:
        self._parse_main_class()
        self._parse_class_decls()
        self._eat(TokenType.EOF)

    def _parse_main_class(self) -> None:
        for token_type in (
            TokenType.CLASS,
            TokenType.ID,
            TokenType.LBRACE,
            TokenType.PUBLIC,
            TokenType.STATIC,
            TokenType.VOID,
            TokenType.MAIN,
            TokenType.LPAREN,
            TokenType.STRING,
            TokenType.LBRACK,
            TokenType.RBRACK,
            TokenType.ID,
            TokenType.RPAREN,
            TokenType.LBRACE,
        ):
            self._eat(token_type)
        self._parse_statement()
        self._eat(TokenType.RBRACE)
        self._eat(TokenType.RBRACE)

    def _parse_class_decls(self) -> None:
        while self._at(TokenType.CLASS):
            self._parse_class_decl()

    def _parse_class_decl(self) -> None:
        self._eat(TokenType.CLASS)
        self._eat(TokenType.ID)
        if self._at(TokenType.EXTENDS):
            self._advance()
            self._eat(TokenType.ID)
        self._eat(TokenType.LBRACE)
        self._parse_var_decls()
        self._parse_method_decls()
        self._eat(TokenType.RBRACE)

    def _parse_var_decls(self) -> None:
        while self._current.type in TYPE_START:
            self._parse_var_decl()

    def _parse_var_decl(self) -> None:
        self._parse_type()
        self._eat(TokenType.ID)
        self._eat(TokenType.SEMI)

    def _parse_type(self) -> None:
        if self._at(TokenType.INT):
            self._advance()
            if self._at(TokenType.LBRACK):
                self._advance()
                self._eat(TokenType.RBRACK)
        elif self._at(TokenType.BOOLEAN, TokenType.ID):
            self._advance()
        else:
            self._error()

    def _parse_method_decls(self) -> None:
        while self._at(TokenType.PUBLIC):
            self._parse_method()

    def _parse_method(self) -> None:
        self._eat(TokenType.PUBLIC)
        self._parse_type()
        self._eat(TokenType.ID)
        self._eat(TokenType.LPAREN)
        self._parse_formal_list()
        self._eat(TokenType.RPAREN)
        self._eat(TokenType.LBRACE)
        self._parse_method_body()
        self._eat(TokenType.RETURN)
        self._parse_exp()
        self._eat(TokenType.SEMI)
        self._eat(TokenType.RBRACE)

    def _parse_method_body(self) -> None:
        """(VarDecl | Statement)* up to ``return``.

        ``int`` and ``boolean`` always start a declaration. An identifier
        starts a declaration only when the next token is another identifier
        (``Foo x;``); otherwise it starts an assignment (``x = ...;``,
        ``x[...] = ...;``).
        """
        while not self._at(TokenType.RETURN, TokenType.EOF):
            if self._at(TokenType.INT, TokenType.BOOLEAN):
                self._parse_var_decl()
            elif self._at(TokenType.ID) and self._peek_type() is TokenType.ID:
                self._parse_var_decl()
            else:
                self._parse_statement()

    def _parse_formal_list(self) -> None:
        if self._at(TokenType.RPAREN):
            return
        self._parse_type()
        self._eat(TokenType.ID)
        while self._at(TokenType.COMMA):
            self._advance()
            self._parse_type()
            self._eat(TokenType.ID)
