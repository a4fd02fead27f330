SECRET_KEY = 'timedistance-testsite'
DEBUG = True
USE_TZ = True
TIME_ZONE = 'UTC'

INSTALLED_APPS = [
    'timedistance',
]

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
    },
]

# Dotted path to a callable returning today's date; unset means date.today
TIME_DISTANCE_CLOCK = None

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
        },
    },
    'loggers': {
        'timedistance': {
            'handlers': ['console'],
            'level': 'WARNING',
        },
    },
}
