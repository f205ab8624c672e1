#!/usr/bin/env python
""" latin.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Generic latin script parser. Groups the lexer's tokens into sentences and
paragraphs. Knows nothing about Dutch, see parser.py for the corrections
"""

#__name__ = 'latin'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

import parsedutch.nlcst.nlcst as nlcst
import parsedutch.nlcst.lexer as lexer

# punctuation ending a sentence
TERMINALS = frozenset(['.','?','!','…','‽'])

# punctuation directly following a terminal that still belongs to the sentence
CLOSERS = frozenset([')',']','}','"',"'",'’','”','»','›'])

class LatinParser(object):
    """ tokenizes latin script text into nlcst trees """
    def __init__(self,position=True):
        """
        :param position: whether to attach positional information to nodes
        """
        self._position = position

    @property
    def position(self): return self._position

    def tokenize(self,txt):
        """ returns the flat list of tokens in txt """
        return lexer.tokenize(txt,self._locator(txt))

    def parse(self,txt):
        """
         parses txt into a root of paragraphs. Paragraphs are separated by white
         space containing a line break
        :param txt: the text
        :return: Root node
        """
        loc = self._locator(txt)
        children = []
        cur = []
        for tkn in lexer.tokenize(txt,loc):
            if tkn.type is nlcst.WHITESPACE and '\n' in tkn.value:
                if cur: children.append(_group_(nlcst.PARAGRAPH,sentences(cur)))
                children.append(tkn)
                cur = []
            else: cur.append(tkn)
        if cur: children.append(_group_(nlcst.PARAGRAPH,sentences(cur)))
        return nlcst.Node(nlcst.ROOT,children,position=_whole_(loc,txt))

    def tokenize_paragraph(self,txt):
        """ returns txt as a single paragraph """
        loc = self._locator(txt)
        return nlcst.Node(
            nlcst.PARAGRAPH,sentences(lexer.tokenize(txt,loc)),
            position=_whole_(loc,txt)
        )

    def tokenize_sentence(self,txt):
        """ returns txt as a single sentence """
        loc = self._locator(txt)
        return nlcst.Node(
            nlcst.SENTENCE,lexer.tokenize(txt,loc),position=_whole_(loc,txt)
        )

    def tokenize_word(self,txt):
        """ returns txt as a single word """
        loc = self._locator(txt)
        return nlcst.Node(
            nlcst.WORD,lexer.tokenize_word(txt,loc),position=_whole_(loc,txt)
        )

    def _locator(self,txt): return lexer.Locator(txt) if self._position else None

def sentences(tkns):
    """
     groups tokens into sentences. A sentence ends after a terminal and any
     closing punctuation directly following it. White space before, between and
     after sentences is not part of any sentence
    :param tkns: list of tokens
    :return: list of Sentence and WhiteSpace nodes
    """
    ls = []  # paragraph children
    cur = [] # tokens of the current sentence
    i = 0
    while i < len(tkns):
        tkn = tkns[i]
        i += 1
        if not cur and tkn.type is nlcst.WHITESPACE:
            ls.append(tkn)
            continue
        cur.append(tkn)
        if nlcst.is_leaf_value(tkn,nlcst.PUNCTUATION,TERMINALS):
            while i < len(tkns) and _is_closing_(tkns[i]):
                cur.append(tkns[i])
                i += 1
            ls.append(_group_(nlcst.SENTENCE,cur))
            cur = []

    # an unterminated last sentence, trailing white space goes to the paragraph
    if cur:
        j = len(cur)
        while cur[j-1].type is nlcst.WHITESPACE: j -= 1
        ls.append(_group_(nlcst.SENTENCE,cur[:j]))
        ls.extend(cur[j:])
    return ls

def _is_closing_(tkn):
    return nlcst.is_type(tkn,nlcst.PUNCTUATION,nlcst.SYMBOL) and\
           (tkn.value in TERMINALS or tkn.value in CLOSERS)

def _group_(ntype,nodes): return nlcst.Node(ntype,nodes,position=nlcst.span(nodes))

def _whole_(loc,txt): return loc.position(0,len(txt)) if loc else None
