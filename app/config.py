import os
import time

class dotdict(dict):
    """dot.notation access to dictionary attributes"""
    __getattr__ = dict.get
    __setattr__ = dict.__setitem__
    __delattr__ = dict.__delitem__

class Stopwatch(object):
    def __init__(self):
        self.start_time = None
        self.stop_time = None

    def start(self):
        self.start_time = time.time()

    def stop(self):
        self.stop_time = time.time()

    @property
    def total_run_time(self):
        return self.stop_time - self.start_time

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, *exc):
        self.stop()

Environment = os.getenv('CROWDFUND_ENV', default='development')
Config = {
  'development': dotdict({
    'jwtSecret'             : os.getenv('JWT_SECRET_KEY', 'crowdfund-development-secret-not-for-production'),
    'accessTokenMinutes'    : int(os.getenv('ACCESS_TOKEN_EXPIRE_MINUTES', 120)),
    'adminEmail'            : os.getenv('ADMIN_EMAIL', 'Admin123'),
    'adminPassword'         : os.getenv('ADMIN_PASSWORD', 'admin321'),
    'minPasswordLength'     : 6,
    'currency'              : 'LKR',
    'projectsPerPage'       : 12,
    'fundingRangeMax'       : 1e6, # slider ceiling
    'allLocations'          : 'All Locations',
    'suggestProjects'       : 5,
    'suggestCategories'     : 3,
    'suggestCreators'       : 3,
    'suggestMinLength'      : 2,
    'recentSearches'        : 5,
    'featuredLimit'         : 6,
    'debug'                 : True,
    'logLevel'              : os.getenv('LOG_LEVEL', 'LEIF'),
  }),
  'production': dotdict({
    'jwtSecret'             : os.getenv('JWT_SECRET_KEY'),
    'accessTokenMinutes'    : int(os.getenv('ACCESS_TOKEN_EXPIRE_MINUTES', 60)),
    'adminEmail'            : os.getenv('ADMIN_EMAIL'),
    'adminPassword'         : os.getenv('ADMIN_PASSWORD'),
    'minPasswordLength'     : 6,
    'currency'              : 'LKR',
    'projectsPerPage'       : 12,
    'fundingRangeMax'       : 1e6, # slider ceiling
    'allLocations'          : 'All Locations',
    'suggestProjects'       : 5,
    'suggestCategories'     : 3,
    'suggestCreators'       : 3,
    'suggestMinLength'      : 2,
    'recentSearches'        : 5,
    'featuredLimit'         : 6,
    'debug'                 : False,
    'logLevel'              : os.getenv('LOG_LEVEL', 'INFO'),
  })
}
