#!/usr/bin/env python
""" lexer
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Tokenizes latin script text into a flat list of nlcst words, white space,
punctuation and symbols
"""

#__name__ = 'lexer'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

import bisect
import regex as re
import parsedutch.nlcst.nlcst as nlcst
import parsedutch.nlcst.list_util as ll

# symbols that join two words into one when there is no white space around them
# i.e. 's-Gravenhage, eedlen's, e.g, and/or
JOINERS = frozenset(["'",'’','-','‐','‑','&','/','.','_'])

# word characters (letters, combining marks and digits)
WD = r"\p{L}\p{M}\p{N}"

# matches one token, the group name gives the node type
re_tkn = re.compile(
    r"(?P<wd>[{wd}]+)|(?P<ws>\s+)|(?P<ap>['’])|(?P<pu>\p{{P}})|(?P<sy>.)".format(wd=WD),
    flags=re.DOTALL
)

# matches the contents of a single word
re_wd_tkn = re.compile(r"(?P<wd>[{wd}]+)|(?P<sy>.)".format(wd=WD),flags=re.DOTALL)

TKN_TYPES = {
    'ws':nlcst.WHITESPACE,
    'ap':nlcst.SYMBOL,
    'pu':nlcst.PUNCTUATION,
    'sy':nlcst.SYMBOL,
}

class Locator(object):
    """ converts offsets in a text to nlcst points """
    def __init__(self,txt):
        self._len = len(txt)
        self._ls = [0] + [i+1 for i,c in enumerate(txt) if c == '\n'] # line starts

    def point(self,offset):
        """
         returns the point for offset
        :param offset: 0-based offset in the text
        :return: nlcst.Point
        """
        if offset < 0 or offset > self._len:
            raise IndexError("offset {} out of range".format(offset))
        i = bisect.bisect_right(self._ls,offset) - 1
        return nlcst.Point(i+1,offset-self._ls[i]+1,offset)

    def position(self,start,end):
        """ returns the position from offset start to offset end """
        return nlcst.Position(self.point(start),self.point(end))

def tokenize(txt,locator=None):
    """
     tokenizes txt
    :param txt: the text
    :param locator: Locator for txt or None to omit positions
    :return: a list of Word, WhiteSpace, Punctuation and Symbol nodes
    """
    tkns = []
    for m in re_tkn.finditer(txt):
        pos = locator.position(m.start(),m.end()) if locator else None
        if m.lastgroup == 'wd':
            tkns.append(nlcst.Node(
                nlcst.WORD,[nlcst.Node(nlcst.TEXT,value=m.group(),position=pos)],
                position=pos
            ))
        else:
            tkns.append(
                nlcst.Node(TKN_TYPES[m.lastgroup],value=m.group(),position=pos)
            )
    return join_words(tkns)

def tokenize_word(txt,locator=None):
    """
     tokenizes txt as the contents of a single word
    :param txt: the text
    :param locator: Locator for txt or None to omit positions
    :return: a list of Text and Symbol nodes
    """
    return [
        nlcst.Node(
            nlcst.TEXT if m.lastgroup == 'wd' else nlcst.SYMBOL,
            value=m.group(),
            position=locator.position(m.start(),m.end()) if locator else None
        ) for m in re_wd_tkn.finditer(txt)
    ]

def is_joiner(tkn):
    return nlcst.is_type(tkn,nlcst.SYMBOL,nlcst.PUNCTUATION) and tkn.value in JOINERS

def join_words(tkns):
    """
     merges runs of words joined by a joiner symbol into a single word. Joiners
     inside the word become symbols
    :param tkns: list of tokens
    :return: list of tokens
    """
    ls = []
    i = 0
    while i < len(tkns):
        if tkns[i].type is not nlcst.WORD:
            ls.append(tkns[i])
            i += 1
            continue
        j = i + 1
        while ll.matchatl(tkns,[is_joiner,nlcst.WORD],j): j += 2
        if j == i + 1: ls.append(tkns[i])
        else:
            ls.append(nlcst.merge(nlcst.WORD,[
                tkn if tkn.type is nlcst.WORD else
                nlcst.Node(nlcst.SYMBOL,value=tkn.value,position=tkn.position)
                for tkn in tkns[i:j]
            ]))
        i = j
    return ls
