#!/usr/bin/env python
""" parsedutch
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Dutch post-processing of natural language concrete syntax trees (nlcst)
Contains:
 /nlcst - tree model, exception tables, latin tokenizer and the dutch parser

Defines the package wide exception and its error codes
"""

#__name__ = 'parsedutch'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'

# ERROR CODES
EUNDEF  = 0 # undefined/unexpected error
ECONFIG = 1 # invalid configuration
EDATA   = 2 # invalid node or tree data
EIOIN   = 3 # unreadable input source

ERRMSG = {
    EUNDEF:'Undefined error',
    ECONFIG:'Configuration error',
    EDATA:'Data error',
    EIOIN:'Input error',
}

class ParseDutchException(Exception):
    """ exception carrying one of the error codes above """
    def __init__(self,errno,message):
        self.errno = errno
        self.message = message
        Exception.__init__(
            self,"{}: {}".format(ERRMSG.get(errno,ERRMSG[EUNDEF]),message)
        )
