"""An implementation of Python PEP 249 for CQL servers.

(C) Copyright 2013-2025 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

__version__ = '1.0.0'

from .connection import *  # pylint: disable=wildcard-import
from .datatype import *    # pylint: disable=wildcard-import
from .exception import *   # pylint: disable=wildcard-import, redefined-builtin
from .protocol import (ONE, QUORUM, LOCAL_QUORUM, EACH_QUORUM, ALL, ANY,  # pylint: disable=unused-import
                       TWO, THREE, SERIAL, LOCAL_SERIAL, LOCAL_ONE)
