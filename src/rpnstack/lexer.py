import regex


class Lexer:
    '''
    Lexer for the RPN token grammar: anything between whitespace.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    TOKEN = r'\S+'
    FLAGS = regex.VERSION1

    def lex(self, line):
        '''
        Take a line and yield all tokens, left to right.

        Runs of whitespace separate tokens and are never yielded.
        '''
        for match in regex.finditer(type(self).TOKEN, line,
                                    flags=type(self).FLAGS):
            yield match.group(0)
