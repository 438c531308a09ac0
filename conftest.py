import django
from django.conf import settings


def pytest_configure():
    settings.configure(
        DEBUG=False,
        INSTALLED_APPS=['base62'],
        ROOT_URLCONF='base62.tests.urls',
        TEMPLATES=[{
            'BACKEND': 'django.template.backends.django.DjangoTemplates',
            'APP_DIRS': True,
        }],
    )
    django.setup()
