#!/usr/bin/env python
""" dutch.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Defines the Dutch exception tables: abbreviations whose period does not end a
sentence and elided forms whose apostrophe belongs to the word
"""

#__name__ = 'dutch'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

import regex as re
from types import MappingProxyType

####
# SYMBOLS
####

APS = "'"       # straight apostrophe
RSQ = '\u2019'  # right single quotation mark (curly apostrophe)
APOSTROPHES = frozenset([APS,RSQ])
PER = '.'       # period

####
## ABBREVIATIONS
## lowercased, without the trailing period. Multi-word abbreviations separate
## their words with a period i.e. 'd.w.z' matches "d.w.z.", "d. w. z." and
## "D.w. z."
####

abbreviations = (
    # forms of address and titles
    'dhr','hr','mevr','mw','mej','mr','dr','drs','ir','ing','prof','ds','pr',
    'br','zr','jhr','jkvr','kard','mgr','st','em','z','kol','lt','kapt',
    'mrs','ms','jr','sr',
    # honorifics i.e. Z. Em., Z.H., H.M., H.K.H.
    'z.em','z.h','z.m','z.exc','z.k.h','h.m','h.k.h','h.h','h.e',
    # references and enumerations
    'nr','nrs','blz','pag','art','afd','hfd','hfdst','vgl','bijl','fig','tab',
    'dl','jrg','ed','resp','evt','incl','excl','ca','cf',
    'vs','bijv','bv','vnl','zgn','mv','ev','adr','tel','fa','fam','jl',
    # multi-word abbreviations
    'a.s','d.w.z','e.a','e.d','e.v','i.p.v','i.s.m','m.a.w','m.b.t','m.i',
    'n.a.v','n.l','o.a','o.b.v','t.a.v','t.o.v','t.z.t','z.g.a.n','z.s.m',
)
abbreviations = tuple(sorted(set(abbreviations)))

def last_stem(abbr): return abbr.rsplit(PER,1)[-1]

# abbreviations keyed on their last word i.e. 'z' -> ('d.w.z','z'), longest first
ABBREVIATIONS = MappingProxyType({
    stem:tuple(sorted(
        [a for a in abbreviations if last_stem(a) == stem],key=len,reverse=True
    )) for stem in set([last_stem(a) for a in abbreviations])
})

####
## ELISIONS
## elided forms are written without apostrophe. Initial elisions are preceded by
## an apostrophe ('s, 't) final elisions followed by one (d'). Both the straight
## and the curly apostrophe are accepted, case is ignored
####

INITIAL = 'initial'
FINAL = 'final'

elisions_initial = ('s','t','n','ns','er','em','ie','tis','twas')
elisions_final = ('d',)

# decades i.e. '70s
re_decade = r"[0-9]{2}s"

re_elision_initial = re.compile(
    r"^[{}](?:{}|{})$".format(
        "".join(APOSTROPHES),'|'.join([re.escape(e) for e in elisions_initial]),re_decade
    ),re.IGNORECASE
)
re_elision_final = re.compile(
    r"^(?:{})[{}]$".format(
        '|'.join([re.escape(e) for e in elisions_final]),"".join(APOSTROPHES)
    ),re.IGNORECASE
)

ELISIONS = MappingProxyType({
    INITIAL:re_elision_initial,
    FINAL:re_elision_final,
})

def is_elision(position,literal,elisions=ELISIONS):
    """
     determines if literal, including its apostrophe, is an elided form
    :param position: one of {INITIAL,FINAL}
    :param literal: the apostrophe and word text i.e. "'t" or "d'"
    :param elisions: dict of position -> compiled regex
    :return: True if literal is listed for position
    """
    return elisions[position].match(literal) is not None

def abbreviations_for(word,abbreviations=ABBREVIATIONS):
    """
     returns the abbreviations whose last word is the last word of word
    :param word: text preceding a period i.e. "St", "z" or "d.w.z"
    :param abbreviations: dict of last word -> abbreviations ending with it
    :return: tuple of candidate abbreviations, longest first
    """
    return abbreviations.get(last_stem(word.lower()),())
