"""Tokenize arithmetic with the bundled Calculator lexer."""

from rulelex.lexers import Calculator

for token in Calculator.tokenize("12 + (3*4)"):
    print(token)
