""" Lexical analysis for shell commands. """
from dataclasses import dataclass

from constants import DQUOTE_ESCAPABLE, EXPANSION_CHARS


@dataclass(frozen=True)
class Token:
    """ One word of input. Literal words are never variable-expanded. """
    value: str
    literal: bool = False


@dataclass
class LexState:
    in_single_quotes: bool = False
    in_double_quotes: bool = False
    escape_next: bool = False
    # the word still being built when the input ran out mid-quote
    word: str = ""
    literal: bool = False

    @property
    def incomplete(self) -> bool:
        """ True when more input is needed to finish the current word. """
        return self.escape_next or self.in_single_quotes or self.in_double_quotes


def lex(chunk: str, state: LexState | None = None) -> tuple[list[Token], LexState]:
    """
    Split ``chunk`` into tokens, one character at a time.

    Passing the state returned by a previous call resumes an open quote
    or a pending escape. A word left open at the end of an incomplete
    chunk stays in the returned state instead of being emitted.
    """
    st = LexState() if state is None else state
    tokens = []
    word = st.word
    literal = st.literal

    for ch in chunk:
        if st.escape_next:
            st.escape_next = False
            if ch == "\n":
                # line continuation
                continue
            if st.in_double_quotes and ch not in DQUOTE_ESCAPABLE:
                word += "\\"
            word += ch
            if ch in EXPANSION_CHARS:
                literal = True
            continue

        if ch == "\\":
            if st.in_single_quotes:
                word += ch
            else:
                st.escape_next = True
        elif ch == "'":
            if st.in_double_quotes:
                word += ch
            else:
                st.in_single_quotes = not st.in_single_quotes
                if st.in_single_quotes:
                    literal = True
        elif ch == '"':
            if st.in_single_quotes:
                word += ch
            else:
                st.in_double_quotes = not st.in_double_quotes
        elif ch == " " and not (st.in_single_quotes or st.in_double_quotes):
            if word:
                tokens.append(Token(word, literal))
            word = ""
            literal = False
        else:
            word += ch

    if st.incomplete:
        st.word, st.literal = word, literal
    else:
        if word:
            tokens.append(Token(word, literal))
        st.word, st.literal = "", False

    return tokens, st

