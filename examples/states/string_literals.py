"""String literals with escapes, using a lexer state pushed and popped by rules."""

from rulelex import Lexer, LexingError, rule


class Strings(Lexer):
    @rule(r'"')
    def open_quote(env, text):
        env.push_state("string")
        env.buffer = []

    @rule(r'[^"\\]+', state="string")
    def chars(env, text):
        env.buffer.append(text)

    @rule(r"\\.", state="string")
    def escape(env, text):
        env.buffer.append(text[1])

    @rule(r'"', state="string")
    def close_quote(env, text):
        env.pop_state()
        return "STRING", "".join(env.buffer)

    @rule(r"[A-Za-z_][A-Za-z0-9_]*")
    def name(env, text):
        return "NAME", text

    whitespace = rule(r"\s+")


print(Strings.tokenize(r'greet "hello \"world\"" done'))

try:
    Strings.tokenize("greet 'single'")
except LexingError as e:
    print(f"error at offset {e.stream_offset}: {e.remainder!r}")
