import os

from apps.common.settings.base import *

DEBUG = True
SECRET_KEY = "Test secret"
ALLOWED_HOSTS = ["*"]

# Event Bus Configuration
EVENT_BUS = {
    'BACKEND': 'apps.event_hub.services.backends.django_q.DjangoQBackend',
    'LOGGING_ENABLED': True,
}

if os.getenv("TEST_DB_ENGINE") == "postgres":
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.postgresql',
            'NAME': 'test_db',
            'USER': 'postgres',
            'PASSWORD': 'postgres',
            'HOST': 'localhost',
            'PORT': '5432',
            'TEST': {
                'NAME': 'test_db',
            },
        }
    }
else:
    DATABASES = {
        'default': {
            'ENGINE': 'django.db.backends.sqlite3',
            'NAME': ':memory:',
        }
    }

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

# Django Q Configuration
Q_CLUSTER = {
    'name': 'test_cluster',
    'workers': 4,
    'timeout': 30,
    'orm': 'default',  # Use Django ORM as broker
    'sync': True,  # Run tasks synchronously in tests
    'testing': True
}
