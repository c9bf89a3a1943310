# ==================================================
# keyed_hash_table/config.py
# ==================================================
import os

LOG_LEVEL      = os.getenv("KEYED_HASH_TABLE_LOG_LEVEL", "WARNING").upper()
REHASH_ON_GROW = os.getenv("KEYED_HASH_TABLE_REHASH_ON_GROW", "false").lower() in ("1", "true", "yes")

# the library never installs handlers itself; callers (the demo) apply this
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        }
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'level': 'DEBUG',
            'formatter': 'simple',
            'stream': 'ext://sys.stdout'
        }
    },
    'loggers': {
        'keyed_hash_table': {
            'level': LOG_LEVEL,
            'handlers': ['console'],
            'propagate': False
        }
    }
}
