#!/usr/bin/env python
""" parser.py
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Parses Dutch text into nlcst trees and resolves latin parser errors using
contextual information (elisions and abbreviations)
"""

#__name__ = 'parser'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

import logging
from collections.abc import Mapping
from functools import partial
import parsedutch as pd
import parsedutch.nlcst.nlcst as nlcst
import parsedutch.nlcst.dutch as dutch
import parsedutch.nlcst.latin as latin
import parsedutch.nlcst.merger as merger
import parsedutch.nlcst.walker as walker

logger = logging.getLogger(__name__)

# recognized options and their defaults
DEFAULTS = {
    'position':True, # attach positional information to nodes
}

# (name, type of the node whose children are merged, merge function) in the
# order they are applied
PASSES = (
    ('elision',nlcst.SENTENCE,partial(
        merger.merge_elisions,elisions=dutch.ELISIONS
    )),
    ('abbreviation',nlcst.PARAGRAPH,partial(
        merger.merge_abbreviations,abbreviations=dutch.ABBREVIATIONS
    )),
)

class DutchParser(object):
    """
     Dutch nlcst parser. Tokenizing is delegated to the latin parser, the
     resulting tree is then corrected by each of the passes
    """
    def __init__(self,doc=None,options=None):
        """
         initializes the parser
        :param doc: optional default document (string or file-like). A mapping
         passed here is taken as options
        :param options: mapping of options, see DEFAULTS
        """
        if options is None and isinstance(doc,Mapping): doc,options = None,doc
        self._doc = doc
        self._position = configure(options)['position']
        self._latin = latin.LatinParser(position=self._position)
        self._passes = PASSES

    @property
    def position(self): return self._position

    @property
    def passes(self): return tuple([name for name,_,_ in self._passes])

    def parse(self,source=None):
        """
         parses source into a root of paragraphs, sentences and words
        :param source: string or file-like, defaults to the document given at
         initialization
        :return: Root node
        """
        return self._correct_(self._latin.parse(self._read_(source)))

    def tokenize_paragraph(self,source=None):
        """ parses source as a single paragraph, returns a Paragraph node """
        return self._correct_(self._latin.tokenize_paragraph(self._read_(source)))

    def tokenize_sentence(self,source=None):
        """ parses source as a single sentence, returns a Sentence node """
        return self._correct_(self._latin.tokenize_sentence(self._read_(source)))

    def tokenize_word(self,source=None):
        """ parses source as a single word, returns a Word node """
        return self._correct_(self._latin.tokenize_word(self._read_(source)))

    def _read_(self,source):
        if source is None: source = '' if self._doc is None else self._doc
        return read(source)

    def _correct_(self,tree):
        """ applies the passes in order to tree """
        for name,ntype,fn in self._passes:
            try:
                tree = walker.walk(tree,ntype,fn)
            except pd.ParseDutchException:
                raise
            except Exception as e:
                raise pd.ParseDutchException(
                    pd.EUNDEF,"Unexpected error in {} pass due to {}".format(name,e)
                ) from e
        return tree

def configure(options=None):
    """
     validates options and fills in the defaults
    :param options: mapping of options or None
    :return: dict of options
    """
    if options is None: options = {}
    if not isinstance(options,Mapping):
        raise pd.ParseDutchException(
            pd.ECONFIG,"options must be a mapping not {}".format(type(options).__name__)
        )
    for key in options:
        if key not in DEFAULTS: logger.debug("ignoring unknown option %r",key)

    conf = dict(DEFAULTS)
    conf.update({k:v for k,v in options.items() if k in DEFAULTS})
    if not isinstance(conf['position'],bool):
        raise pd.ParseDutchException(
            pd.ECONFIG,"position must be a bool not {!r}".format(conf['position'])
        )
    return conf

def read(source):
    """
     returns the text of source
    :param source: a string, bytes (utf-8), a file-like object with read() or a
     virtual file with a contents attribute
    :return: string
    """
    if isinstance(source,str): return source
    if isinstance(source,(bytes,bytearray)):
        try:
            return bytes(source).decode('utf-8')
        except UnicodeDecodeError as e:
            raise pd.ParseDutchException(pd.EIOIN,"Source is not utf-8: {}".format(e))
    if hasattr(source,'read'):
        try:
            txt = source.read()
        except (OSError,ValueError) as e: # text mode decode errors are ValueErrors
            raise pd.ParseDutchException(pd.EIOIN,"Failed reading source: {}".format(e))
        if isinstance(txt,(str,bytes,bytearray)): return read(txt)
    elif hasattr(source,'contents'):
        if isinstance(source.contents,(str,bytes,bytearray)): return read(source.contents)
    raise pd.ParseDutchException(
        pd.EIOIN,"Cannot read source of type {}".format(type(source).__name__)
    )
