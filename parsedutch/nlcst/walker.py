#!/usr/bin/env python
""" walker.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Applies a merge function to the children of every node of a given type
"""

#__name__ = 'walker'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

def walk(node,ntype,fn):
    """
     walks the tree rooted at node depth-first in post-order (children before
     their parent), replacing the children of every node of type ntype with
     fn(children). Ancestors of changed nodes are rebuilt, unchanged subtrees are
     reused as is
    :param node: the root of the tree
    :param ntype: the NodeType whose children are passed to fn
    :param fn: function taking and returning a sequence of children
    :return: the new tree (node itself if nothing changed)
    """
    if node.is_leaf: return node
    children = [walk(child,ntype,fn) for child in node.children]
    if node.type is ntype: children = list(fn(tuple(children)))
    if _same_(children,node.children): return node
    return node.replace(children)

def _same_(ls,ss):
    # True if ls and ss hold the same node objects
    return len(ls) == len(ss) and all([a is b for a,b in zip(ls,ss)])
