"""Pull tokens by hand and use peek() to tell declarations from assignments."""

from minijava import Lexer, TokenType

source = """
Foo x;      // identifier identifier: a declaration
x = new Foo();
y[0] = 1;   /* identifier then [ : an array assignment */
"""

lexer = Lexer(source, "snippet.java")
while True:
    token = lexer.next_token()
    if token.type is TokenType.EOF:
        break
    if token.type is TokenType.ID and token.col == 1:
        kind = "declaration" if lexer.peek().type is TokenType.ID else "statement"
        print(f"line {token.lineno}: {token.value!r} starts a {kind}")
