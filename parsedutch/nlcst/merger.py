#!/usr/bin/env python
""" merger.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Merges sibling nodes the latin parser split apart but Dutch keeps together:
 1. elisions, an apostrophe and the word it belongs to i.e. 't Kofschip
 2. abbreviations, sentences split at the period of an abbreviation i.e. St.
Each merge function takes the children of one parent and returns them with
the merged spans replaced by new nodes, the given nodes are never modified
"""

#__name__ = 'merger'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

import logging
from itertools import islice
import parsedutch.nlcst.nlcst as nlcst
import parsedutch.nlcst.dutch as dutch

logger = logging.getLogger(__name__)

def is_apostrophe(node):
    return nlcst.is_type(node,nlcst.SYMBOL,nlcst.PUNCTUATION) and\
           node.value in dutch.APOSTROPHES

def is_period(node): return nlcst.is_leaf_value(node,nlcst.PUNCTUATION,[dutch.PER])
####
## ELISIONS
####

def merge_elisions(children,elisions=dutch.ELISIONS):
    """
     merges an apostrophe with the adjacent word when together they form a listed
     elision. Scans left to right looking at two nodes at a time:
      initial: an apostrophe not preceded by a word, followed by a word whose
       leading text completes the elision i.e. ' + s-Gravenhage
      final: a word whose trailing text followed by an apostrophe not followed
       by a word forms the elision i.e. D + '
     Any other apostrophe is left as is (a quotation mark, not an elision). A
     merged word is checked again against the node after it
    :param children: the children of a sentence
    :param elisions: dict of position (dutch.INITIAL,dutch.FINAL) -> compiled regex
    :return: the merged children (children itself if nothing was merged)
    """
    ls = []    # merged children
    cur = None # merged word standing in for children[i]
    changed = False
    for i in range(len(children)):
        node = children[i] if cur is None else cur
        nxt = children[i+1] if i+1 < len(children) else None
        cur = None
        if nxt is None: pass # last node
        elif is_apostrophe(node) and nxt.type is nlcst.WORD and\
             not (ls and ls[-1].type is nlcst.WORD) and\
             _is_initial_elision_(node,nxt,elisions):
            logger.debug("merging initial elision at %d",i)
            cur = nlcst.merge(nlcst.WORD,[node,nxt])
        elif node.type is nlcst.WORD and is_apostrophe(nxt) and\
             not _is_word_at_(children,i+2) and\
             _is_final_elision_(node,nxt,elisions):
            logger.debug("merging final elision at %d",i)
            cur = nlcst.merge(nlcst.WORD,[node,nxt])
        if cur is None: ls.append(node)
        else: changed = True
    return tuple(ls) if changed else children

def _is_word_at_(ls,i): return 0 <= i < len(ls) and ls[i].type is nlcst.WORD

def _is_initial_elision_(apos,word,elisions):
    if not word.children or word.children[0].type is not nlcst.TEXT: return False
    return dutch.is_elision(
        dutch.INITIAL,apos.value + word.children[0].value,elisions
    )

def _is_final_elision_(word,apos,elisions):
    if not word.children or word.children[-1].type is not nlcst.TEXT: return False
    return dutch.is_elision(
        dutch.FINAL,word.children[-1].value + apos.value,elisions
    )

####
## ABBREVIATIONS
####

def merge_abbreviations(children,abbreviations=dutch.ABBREVIATIONS):
    """
     merges sentences that were split at the period of an abbreviation. For each
     pair of sentences separated only by white space, the end of the first is
     checked for a listed abbreviation followed by its period. Abbreviations of
     several words are matched backwards, word by word, and must match entirely.
     Sentences to merge are collected in runs, each run becomes one sentence
     holding the white space between them. A run is checked again against the
     sentence that follows
    :param children: the children of a paragraph
    :param abbreviations: dict of last word -> abbreviations ending with it
    :return: the merged children (children itself if nothing was merged)
    """
    runs = [] # each run of children becomes one node
    gap = []  # children since the last sentence
    changed = False
    ntail = _tail_length_(abbreviations)
    for node in children:
        if node.type is not nlcst.SENTENCE:
            gap.append(node)
            continue
        k = None
        if runs and runs[-1][0].type is nlcst.SENTENCE and\
           all([n.type is nlcst.WHITESPACE for n in gap]):
            k = _abbreviation_start_(runs,abbreviations,ntail)
        if k is None:
            runs.extend([[n] for n in gap])
            runs.append([node])
        else:
            logger.debug("merging sentences from run %d at an abbreviation",k)
            for run in runs[k+1:]: runs[k].extend(run)
            del runs[k+1:]
            runs[k].extend(gap)
            runs[k].append(node)
            changed = True
        gap = []
    if not changed: return children
    runs.extend([[n] for n in gap])
    return tuple([
        run[0] if len(run) == 1 else nlcst.merge(nlcst.SENTENCE,run) for run in runs
    ])

def _tail_length_(abbreviations):
    # nodes needed to match the longest abbreviation: a word, period and white
    # space for each word plus the terminal period
    n = max([a.count(dutch.PER) + 1 for ls in abbreviations.values() for a in ls] or [0])
    return 3 * n + 1

def _tail_(runs):
    """
     yields (node,index) pairs for the nodes of the runs, last node first.
     Sentences yield their children. index is the index of the run the node
     belongs to
    """
    for r in range(len(runs)-1,-1,-1):
        for node in reversed(runs[r]):
            if node.type is nlcst.SENTENCE:
                for child in reversed(node.children): yield child,r
            elif node.type is nlcst.WHITESPACE: yield node,r
            else: return

def _abbreviation_start_(runs,abbreviations,ntail):
    """
     determines if the last run ends with an abbreviation and its period
    :return: index of the run the abbreviation starts in or None
    """
    tail = list(islice(_tail_(runs),ntail))
    if len(tail) < 2 or not is_period(tail[0][0]): return None
    if tail[1][0].type is not nlcst.WORD: return None
    nodes = [node for node,_ in tail[1:]]
    for abbr in dutch.abbreviations_for(nlcst.to_string(nodes[0]),abbreviations):
        k = _match_abbreviation_(nodes,abbr)
        if k > -1: return tail[1+k][1]
    return None

def _match_abbreviation_(nodes,abbr):
    """
     matches abbr against nodes (last node first) consuming one word at a time
     from the end of abbr. Words of abbr are separated in nodes by a period and
     optionally white space
    :param nodes: the nodes preceding the terminal period, last node first
    :param abbr: the abbreviation
    :return: the index in nodes of the first word of abbr or -1
    """
    rest = abbr
    k = 0
    while k < len(nodes) and nodes[k].type is nlcst.WORD:
        txt = nlcst.to_string(nodes[k]).lower()
        if not txt or not rest.endswith(txt): return -1
        rest = rest[:-len(txt)]
        if not rest: return k
        if not rest.endswith(dutch.PER): return -1 # partial word
        rest = rest[:-1]
        k += 1
        if k < len(nodes) and nodes[k].type is nlcst.WHITESPACE: k += 1
        if k >= len(nodes) or not is_period(nodes[k]): return -1
        k += 1
    return -1
