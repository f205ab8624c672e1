#!/usr/bin/env python
""" nlcst
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Natural language concrete syntax trees for Dutch. The latin parser splits text
into paragraphs, sentences and words, the Dutch parser then merges what the
latin parser wrongly split apart (elisions and abbreviations)

Contains:
 nlcst.py - defines the nlcst node, positions and tree helpers
 dutch.py - the Dutch exception tables (abbreviations, elisions)
 list_util.py - helper functions for lists of sibling nodes
 lexer.py - tokenizes text into words, white space, punctuation and symbols
 latin.py - groups tokens into sentences and paragraphs
 merger.py - merges elisions and abbreviations
 walker.py - applies a merge to every node of a type
 parser.py - the Dutch parser (DutchParser)
"""

#__name__ = 'nlcst'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'
