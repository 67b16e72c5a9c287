import logging

from numbux.tokenizer import Token, TokenType

logger = logging.getLogger(__name__)

BINARY_OP_PRECEDENCE = {
    "+": 2,
    "-": 2,
    "*": 3,
    "/": 3,
    "%": 3,
    "^": 4,
}

PREFIX_OP_PRECEDENCE = 5


def get_op_precedence(token: Token) -> int:
    if token.type in (TokenType.FUNCTION, TokenType.UNARY_MINUS):
        return PREFIX_OP_PRECEDENCE
    elif token.type is TokenType.OPERATOR:
        return BINARY_OP_PRECEDENCE[token.lexeme]
    else:
        # brackets on the stack stop any popping
        return 0


def is_rtl_op(token: Token) -> bool:
    return token.lexeme == "^"


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Shunting-yard conversion of infix tokens into postfix order.

    Always terminates; the result is not guaranteed to be evaluable when the
    input has missing operands or unbalanced brackets.
    """
    output: list[Token] = []
    stack: list[Token] = []
    for token in tokens:
        if token.type in (TokenType.NUMBER, TokenType.CONSTANT):
            output.append(token)
        elif token.type in (TokenType.FUNCTION, TokenType.UNARY_MINUS, TokenType.BRACKET_OPEN):
            stack.append(token)
        elif token.type is TokenType.BRACKET_CLOSE:
            while stack and stack[-1].type is not TokenType.BRACKET_OPEN:
                output.append(stack.pop())
            if stack:
                stack.pop()
            else:
                logger.debug("Unmatched closing bracket ignored")
            # function wraps the bracketed argument
            if stack and stack[-1].type is TokenType.FUNCTION:
                output.append(stack.pop())
        elif token.type is TokenType.OPERATOR:
            precedence = get_op_precedence(token)
            while stack:
                top_precedence = get_op_precedence(stack[-1])
                if top_precedence > precedence or (top_precedence == precedence and not is_rtl_op(token)):
                    output.append(stack.pop())
                else:
                    break
            stack.append(token)
        else:
            raise ValueError(f"Unexpected token type: {token.type}")

    while stack:
        token = stack.pop()
        if token.type is not TokenType.BRACKET_OPEN:
            output.append(token)
    return output
