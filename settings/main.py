import sys
from datetime import timedelta

from .base import *

INSTALLED_APPS += [
    'django_extensions',
    'corsheaders',
    'rest_framework',
    'rest_framework_simplejwt',
    'drf_spectacular',
    'apps.shared',  # management commands and storage tasks
    'apps.events',
    'apps.content',
    'apps.workshops',
    'apps.contracts',
]

REST_FRAMEWORK = {
    'DEFAULT_PERMISSION_CLASSES': [
        'rest_framework.permissions.IsAuthenticated',
        'rest_framework.permissions.IsAdminUser',
    ],
    'DEFAULT_SCHEMA_CLASS': 'drf_spectacular.openapi.AutoSchema',
    'DEFAULT_AUTHENTICATION_CLASSES': [
        'rest_framework_simplejwt.authentication.JWTAuthentication',
    ],
    'DEFAULT_PARSER_CLASSES': [
        'rest_framework.parsers.JSONParser',
        'rest_framework.parsers.MultiPartParser',
        'rest_framework.parsers.FormParser',
    ],
    'EXCEPTION_HANDLER': 'apps.shared.exceptions.api_handler.custom_exception_handler',
}

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.contrib.auth.middleware.AuthenticationMiddleware',
    'django.contrib.messages.middleware.MessageMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'middleware.storage_exception_middleware.StorageExceptionMiddleware',
]

# Environment
TESTING_ENVIRONMENT = 'testing'
PRODUCTION_ENVIRONMENT = 'production'
STAGING_ENVIRONMENT = 'staging'
DEVELOPMENT_ENVIRONMENT = 'development'

if 'test' in sys.argv:  # noqa: SIM108
    ENVIRONMENT = TESTING_ENVIRONMENT
else:
    ENVIRONMENT = env('ENVIRONMENT')

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.redis.RedisCache',
        'LOCATION': env.str('REDIS_URL', default='redis://localhost:6379/2'),
        'TIMEOUT': 3600,
        'KEY_PREFIX': 'workshop_backoffice',
    }
}

# Testing environment optimizations
if ENVIRONMENT == TESTING_ENVIRONMENT:
    PASSWORD_HASHERS = [
        'django.contrib.auth.hashers.MD5PasswordHasher',
    ]
    CACHES = {
        'default': {
            'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
            'LOCATION': 'test-cache',
        }
    }

# CORS
CORS_ALLOW_CREDENTIALS = True
CORS_ALLOWED_ORIGINS = [
    'http://localhost:5173',
    'http://127.0.0.1:5173',
    'http://localhost:3000',
    env('FRONTEND_URL', default='http://localhost:5173'),
]

if DEBUG:
    CORS_ALLOW_ALL_ORIGINS = True

CORS_ALLOW_HEADERS = [
    'accept',
    'accept-encoding',
    'authorization',
    'content-type',
    'dnt',
    'origin',
    'user-agent',
    'x-csrftoken',
    'x-requested-with',
]

CSRF_TRUSTED_ORIGINS = [
    'http://localhost:8000',
    'http://127.0.0.1:8000',
    env('FRONTEND_URL', default='http://localhost:5173'),
]

# Swagger
SPECTACULAR_SETTINGS = {
    'TITLE': 'Workshop Back-Office API',
    'DESCRIPTION': 'Workshops, trainer and client contracts, public site content',
    'VERSION': 'v1',
    'SERVE_INCLUDE_SCHEMA': False,
}

# Object storage (S3 or any S3-compatible provider)
STORAGE_PROVIDER = env.str('STORAGE_PROVIDER', default='s3')
S3_ENDPOINT_URL = env.str('S3_ENDPOINT_URL', default='')
AWS_ACCESS_KEY_ID = env.str('AWS_ACCESS_KEY_ID', default='')
AWS_SECRET_ACCESS_KEY = env.str('AWS_SECRET_ACCESS_KEY', default='')
AWS_S3_REGION_NAME = env.str('AWS_S3_REGION_NAME', default='eu-west-3')
STORAGE_PUBLIC_BASE_URL = env.str('STORAGE_PUBLIC_BASE_URL', default='')
STORAGE_SIGNED_URL_EXPIRATION = env.int('STORAGE_SIGNED_URL_EXPIRATION', default=3600)
STORAGE_MAX_IMAGE_SIZE = 5 * 1024 * 1024

# Logical bucket name -> bucket in the provider
STORAGE_BUCKETS = {
    'event_photos': env.str('BUCKET_EVENT_PHOTOS', default='event-photos'),
    'testimonials': env.str('BUCKET_TESTIMONIALS', default='testimonials'),
    'initiatives': env.str('BUCKET_INITIATIVES', default='initiatives'),
    'press_articles': env.str('BUCKET_PRESS_ARTICLES', default='press-articles'),
    'media_highlights': env.str('BUCKET_MEDIA_HIGHLIGHTS', default='media-highlights'),
    'partners': env.str('BUCKET_PARTNERS', default='partners'),
    'trainer_documents': env.str('BUCKET_TRAINER_DOCUMENTS', default='trainer-documents'),
}

# Buckets served without signed URLs
STORAGE_PRIVATE_BUCKETS = ['trainer_documents']

# Contract rendering
CONTRACT_DATE_LANGUAGE = env.str('CONTRACT_DATE_LANGUAGE', default='fr')

# Simple JWT Authentication Configuration
SIMPLE_JWT = {
    'ACCESS_TOKEN_LIFETIME': timedelta(minutes=60),
    'REFRESH_TOKEN_LIFETIME': timedelta(days=7),
    'ROTATE_REFRESH_TOKENS': True,
    'UPDATE_LAST_LOGIN': True,
    'ALGORITHM': 'HS256',
    'SIGNING_KEY': env.str('JWT_SIGNING_KEY', default=SECRET_KEY),
    'ISSUER': 'workshop-backoffice-api',
    'AUTH_HEADER_TYPES': ('Bearer',),
    'USER_ID_FIELD': 'id',
    'USER_ID_CLAIM': 'user_id',
}

# Email Configuration
EMAIL_BACKEND = env.str('EMAIL_BACKEND', default='django.core.mail.backends.console.EmailBackend')
EMAIL_HOST = env.str('EMAIL_HOST', default='smtp.gmail.com')
EMAIL_PORT = env.int('EMAIL_PORT', default=587)
EMAIL_USE_TLS = env.bool('EMAIL_USE_TLS', default=True)
EMAIL_HOST_USER = env.str('EMAIL_HOST_USER', default='')
EMAIL_HOST_PASSWORD = env.str('EMAIL_HOST_PASSWORD', default='')
DEFAULT_FROM_EMAIL = env.str('DEFAULT_FROM_EMAIL', default='Ateliers <noreply@ateliers.local>')
EMAIL_SUBJECT_PREFIX = '[Ateliers] '

# Celery Configuration
CELERY_BROKER_URL = env.str('CELERY_BROKER_URL', default='redis://localhost:6379/0')
CELERY_RESULT_BACKEND = env.str('CELERY_RESULT_BACKEND', default='redis://localhost:6379/1')

CELERY_TASK_SERIALIZER = 'json'
CELERY_ACCEPT_CONTENT = ['json']
CELERY_RESULT_SERIALIZER = 'json'
CELERY_TIMEZONE = TIME_ZONE
CELERY_ENABLE_UTC = True

CELERY_TASK_ALWAYS_EAGER = False
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_TASK_IGNORE_RESULT = False

CELERY_WORKER_PREFETCH_MULTIPLIER = 1
CELERY_WORKER_MAX_TASKS_PER_CHILD = 1000

CELERY_TASK_SOFT_TIME_LIMIT = 300  # 5 minutes
CELERY_TASK_TIME_LIMIT = 600  # 10 minutes
CELERY_TASK_ACKS_LATE = True
CELERY_TASK_REJECT_ON_WORKER_LOST = True

CELERY_TASK_ROUTES = {
    'apps.contracts.tasks.send_signature_code_email_task': {'queue': 'emails'},
    'apps.shared.tasks.delete_storage_objects_task': {'queue': 'maintenance'},
}

CELERY_TASK_ANNOTATIONS = {
    'apps.contracts.tasks.send_signature_code_email_task': {
        'rate_limit': '10/m',
        'time_limit': 30,
    },
    'apps.shared.tasks.delete_storage_objects_task': {
        'time_limit': 120,
    },
}

CELERY_RESULT_EXPIRES = 3600  # 1 hour
