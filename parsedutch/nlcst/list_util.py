#!/usr/bin/env python
""" list_util.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines helper functions for processing lists of sibling nodes
"""

#__name__ = 'list_util'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

import parsedutch.nlcst.nlcst as nlcst

def _matches_(node,s):
    """
     determines if node matches the term s where s is one of
      a NodeType that node must be or
      a function that returns True or False
    """
    if isinstance(s,nlcst.NodeType): return node.type is s
    return bool(s(node))

def matchl(ls,ss,start=0,stop=None):
    """
     attempts to match the elements in ss to a sublist of the nodes in ls. If set,
     the values start and stop are used to limit the indexes of the list to look
     for a match to ls[start:stop+1]. The elements of ss can be functions (that
     return True or False) and/or NodeTypes
     NOTE: This is a node for node match so it cannot be used to find for
      example a list of any length beginning with a word and ending with a period
    :param ls: the list of nodes to match against
    :param ss: a list of functions and/or NodeTypes
    :param start: the first index in the list look for a match
    :param stop: the last index to look for a match. if present, matchl will not
     attempt to match after the index
    :return: starting index of ss in ls or -1 if there is no match
    """
    if len(ss) > len(ls) or len(ss) == 0: return -1 # don't bother with these
    if start < 0 or start >= len(ls): return -1
    if stop is not None and start > stop: return -1
    for i in range(start,len(ls)-len(ss)+1):
        if stop is not None and i > stop: return -1
        if all([_matches_(ls[i+j],s) for j,s in enumerate(ss)]): return i
    return -1

def matchatl(ls,ss,i):
    """ True if the elements of ss match the nodes in ls starting at index i """
    return matchl(ls,ss,start=i,stop=i) == i
