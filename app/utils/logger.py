import inspect
import logging
from colorlog import ColoredFormatter, StreamHandler, getLogger

from core.config import CFG

# below DEBUG; request timings from the middleware
LEIF = 5
logging.addLevelName(LEIF, 'LEIF')

formatter = ColoredFormatter(
    '%(log_color)s%(levelname)s%(reset)s:%(asctime)s:%(purple)s%(name)s%(reset)s:%(log_color)s%(message)s%(reset)s',
    reset=True,
    log_colors={
        'LEIF':     'white,bg_green',
        'DEBUG':    'cyan',
        'INFO':     'green',
        'WARNING':  'yellow',
        'ERROR':    'red',
        'CRITICAL': 'red,bg_white',
    },
)
handler = StreamHandler()
handler.setFormatter(formatter)

logger = getLogger('crowdfund')
logger.setLevel(CFG.logLevel)
logger.addHandler(handler)

# uvicorn logs requests itself
logging.getLogger('uvicorn.error').propagate = False
logger.propagate = False

# name of the calling function, used to tag log lines
myself = lambda: inspect.stack()[1][3]
