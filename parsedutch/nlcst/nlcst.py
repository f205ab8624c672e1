#!/usr/bin/env python
""" nlcst.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the natural language concrete syntax tree (nlcst) node, its positional
information and helper functions (serialization, cleaning, inspection)
"""

#__name__ = 'nlcst'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

from collections import namedtuple
from enum import Enum
import parsedutch as pd

"""
 A nlcst tree is made of eight kinds of nodes. The four parents (Root, Paragraph,
 Sentence and Word) own an ordered tuple of children, the four leaves (Text,
 Symbol, Punctuation and WhiteSpace) own a string value. In document order, the
 leaf values concatenate to the original text.
  Root: Paragraph and WhiteSpace children
  Paragraph: Sentence and WhiteSpace children
  Sentence: Word, Punctuation, WhiteSpace and Symbol children
  Word: Text and Symbol children
 Nodes are never modified once created. A pass that needs a different tree
 builds new nodes for the changed spans and reuses everything else.
"""

class NodeType(Enum):
    ROOT = 'RootNode'
    PARAGRAPH = 'ParagraphNode'
    SENTENCE = 'SentenceNode'
    WORD = 'WordNode'
    PUNCTUATION = 'PunctuationNode'
    WHITESPACE = 'WhiteSpaceNode'
    SYMBOL = 'SymbolNode'
    TEXT = 'TextNode'

# shorthands
ROOT = NodeType.ROOT
PARAGRAPH = NodeType.PARAGRAPH
SENTENCE = NodeType.SENTENCE
WORD = NodeType.WORD
PUNCTUATION = NodeType.PUNCTUATION
WHITESPACE = NodeType.WHITESPACE
SYMBOL = NodeType.SYMBOL
TEXT = NodeType.TEXT

LEAVES = frozenset([PUNCTUATION,WHITESPACE,SYMBOL,TEXT])
PARENTS = frozenset([ROOT,PARAGRAPH,SENTENCE,WORD])

# line and column are 1-based, offset is 0-based
Point = namedtuple('Point',['line','column','offset'])
Position = namedtuple('Position',['start','end'])

#### PRINT SYMBOLS
SYM_CHILD      = '├'
SYM_2ND_ORDER  = '│'
SYM_LAST_CHILD = '└'
SYM_BRANCH     = '─'

class Node(object):
    """
     An immutable nlcst node. The type is one of NodeType and determines whether
     the node carries children (parents) or a value (leaves). The position is
     optional and is None when position tracking is disabled
    """
    __slots__ = ('_type','_children','_value','_position')

    def __init__(self,ntype,children=None,value=None,position=None):
        """
         creates a node, validating the variant
        :param ntype: the NodeType
        :param children: iterable of child Nodes (parents only)
        :param value: string value (leaves only)
        :param position: Position or None
        """
        if not isinstance(ntype,NodeType):
            raise pd.ParseDutchException(
                pd.EDATA,"Invalid node type {!r}".format(ntype)
            )
        if ntype in LEAVES:
            if not isinstance(value,str):
                raise pd.ParseDutchException(
                    pd.EDATA,"{} requires a string value".format(ntype.value)
                )
            if children:
                raise pd.ParseDutchException(
                    pd.EDATA,"{} cannot have children".format(ntype.value)
                )
            children = ()
        else:
            if value is not None:
                raise pd.ParseDutchException(
                    pd.EDATA,"{} cannot have a value".format(ntype.value)
                )
            children = tuple(children) if children is not None else ()
            for child in children:
                if not isinstance(child,Node):
                    raise pd.ParseDutchException(
                        pd.EDATA,"Invalid child {!r} of {}".format(child,ntype.value)
                    )
        if position is not None and not isinstance(position,Position):
            raise pd.ParseDutchException(
                pd.EDATA,"Invalid position {!r}".format(position)
            )
        self._type = ntype
        self._children = children
        self._value = value
        self._position = position

    ####
    # OP OVERLOADING
    ####

    def __eq__(self,other):
        if not isinstance(other,Node): return NotImplemented
        return self._type is other._type and\
               self._value == other._value and\
               self._position == other._position and\
               self._children == other._children

    def __hash__(self):
        return hash((self._type,self._value,self._position,self._children))

    def __repr__(self):
        if self.is_leaf: return "{}({!r})".format(self._type.value,self._value)
        return "{}{!r}".format(self._type.value,list(self._children))

    def __iter__(self): yield from self._children.__iter__()

    @property
    def type(self): return self._type

    @property
    def children(self): return self._children

    @property
    def value(self): return self._value

    @property
    def position(self): return self._position

    @property
    def is_leaf(self): return self._type in LEAVES

    def replace(self,children=None,position=False):
        """
         returns a new node of the same type with children and/or position
         substituted. NOTE: position=None removes the position, the default
         keeps it
        :param children: the new children or None to keep the current ones
        :param position: the new position
        :return: new Node
        """
        return Node(
            self._type,
            self._children if children is None else children,
            self._value,
            self._position if position is False else position
        )

    def to_dict(self):
        """ :returns the json-ready dict representation of this node """
        d = {'type':self._type.value}
        if self.is_leaf: d['value'] = self._value
        else: d['children'] = [child.to_dict() for child in self._children]
        if self._position is not None:
            d['position'] = {
                'start':dict(self._position.start._asdict()),
                'end':dict(self._position.end._asdict()),
            }
        return d

####
## HELPER FUNCTIONS
####

def is_type(node,*ntypes): return node.type in ntypes

def is_leaf_value(node,ntype,values):
    """ True if node is a leaf of type ntype whose value is in values """
    return node.type is ntype and node.value in values

def span(nodes):
    """
     returns the position from the start of the first node to the end of the
     last node or None if either is missing a position
    :param nodes: sequence of Nodes
    :return: Position or None
    """
    if not nodes: return None
    first,last = nodes[0].position,nodes[-1].position
    if first is None or last is None: return None
    return Position(first.start,last.end)

def merge(ntype,nodes):
    """
     creates a single node of type ntype from a contiguous span of nodes. Parent
     nodes of the same type contribute their children, all other nodes are
     added as is
    :param ntype: NodeType of the new node
    :param nodes: the span of nodes to merge (in document order)
    :return: new Node
    """
    children = []
    for node in nodes:
        if node.type is ntype: children.extend(node.children)
        else: children.append(node)
    return Node(ntype,children,position=span(nodes))

def to_string(node):
    """ returns the text of node (concatenation of its leaf values) """
    if node.is_leaf: return node.value
    return "".join([to_string(child) for child in node.children])

def clean(node):
    """ returns a copy of node (and its descendants) without positions """
    if node.is_leaf: return node.replace(position=None)
    return node.replace([clean(child) for child in node.children],None)

def walk_leaves(node):
    """ yields the leaves of node in document order """
    if node.is_leaf: yield node
    else:
        for child in node.children: yield from walk_leaves(child)

def from_dict(d):
    """
     creates a node (and its descendants) from a dict representation, i.e. a
     loaded json fixture
    :param d: the dict
    :return: Node
    """
    try:
        ntype = NodeType(d['type'])
        position = None
        if d.get('position') is not None:
            position = Position(
                Point(**d['position']['start']),Point(**d['position']['end'])
            )
        if ntype in LEAVES: return Node(ntype,value=d['value'],position=position)
        return Node(
            ntype,[from_dict(child) for child in d['children']],position=position
        )
    except (KeyError,TypeError,ValueError,AttributeError) as e:
        raise pd.ParseDutchException(pd.EDATA,"Invalid node data: {}".format(e))

def inspect(node):
    """
     returns a printable tree representation of node with each branch indented
     from its parent
    :param node: the Node to inspect
    :return: string
    """
    ls = []
    _inspect_(node,'',None,ls)
    return "\n".join(ls)

def _inspect_(node,indent,last,ls):
    # last is None for the top node, otherwise whether node is the last child
    if last is None:
        lsym,cindent = '',''
    else:
        lsym = (SYM_LAST_CHILD if last else SYM_CHILD) + SYM_BRANCH
        cindent = indent + (' ' if last else SYM_2ND_ORDER) + ' '

    if node.is_leaf: label = "{}: {!r}".format(node.type.value,node.value)
    else: label = "{}[{}]".format(node.type.value,len(node.children))
    if node.position is not None:
        s,e = node.position
        label += " ({}:{}-{}:{}, {}-{})".format(
            s.line,s.column,e.line,e.column,s.offset,e.offset
        )
    ls.append("{}{}{}".format(indent,lsym,label))

    for i,child in enumerate(node.children):
        _inspect_(child,cindent,i == len(node.children)-1,ls)
