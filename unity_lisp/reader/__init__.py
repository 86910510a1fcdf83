from unity_lisp.reader.parser import lex, TokenStream, Token, ParseFailure, parse, read_program
