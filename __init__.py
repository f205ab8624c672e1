#!/usr/bin/env python
""" ParseDutch A Python 3.x Dutch Natural Language Concrete Syntax Tree Parser
Copyright (C) 2019  Temporal Inept (temporalinept@mail.com)

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.

Root distribution directory ParseDutch
Contains:
 /parsedutch - program files
 /tests - pytest test suite

Do not import from this directory
To install, from this directory run
  pip install -e .
and for the tests
  pip install -e .[test]
  pytest
"""

__name__ = 'ParseDutch'
__license__ = 'GPLv3'
__version__ = '0.1.0'
__date__ = 'October 2020'
__author__ = 'Temporal Inept'
__maintainer__ = 'Temporal Inept'
__email__ = 'temporalinept@mail.com'
__status__ = 'Development'
