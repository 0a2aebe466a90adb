# FILE INFO ###################################################
# Author: Jason Liu <jasonxliu2010@gmail.com>
# Created on October 3, 2026
# Last Update: Time-stamp: <2026-10-16 11:02:50 liux>
###############################################################

"""Queuesim is a discrete-event simulator of multi-server queues."""

import sys

if sys.version_info[:2] < (3, 6):
    raise ImportError("Queuesim requires Python 3.6 and above (%d.%d detected)." %
                      sys.version_info[:2])

from .errors import *
from .event import *
from .variate import *
from .customer import *
from .schedule import *
from .server import *
from .line import *
from .stats import *
from .config import *
from .simulator import *

__version__ = '0.1.0'
