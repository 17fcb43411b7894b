
__copyright__ = 'discordkit.py contributors 2021-present'
__version__ = '0.1.0'

import logging

from . import utils as utils
from .activity import *
from .audit_log import *
from .channel import *
from .emoji import *
from .enums import *
from .errors import *
from .flags import *
from .gateway import *
from .guild import *
from .http import *
from .intents import *
from .integration import *
from .invite import *
from .permissions import *
from .presence import *
from .role import *
from .scheduled_event import *
from .session import *
from .user import *
from .utils import channel_mention, member_mention, role_mention, user_mention
from .voice import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
