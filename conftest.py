# seotemplates/conftest.py
from django.conf import settings


def pytest_configure():
    settings.configure(
        DEBUG=False,
        SECRET_KEY="seo-tests",
        DATABASES={
            'default': {
                'ENGINE': 'django.db.backends.sqlite3',
                'NAME': ':memory:',
            }
        },
        INSTALLED_APPS=[
            'seo',
            'tests.testapp',
        ],
        TEMPLATES=[
            {
                'BACKEND': 'django.template.backends.django.DjangoTemplates',
                'DIRS': [],
                'APP_DIRS': True,
                'OPTIONS': {
                    'context_processors': [
                        'seo.context_processors.seo_context',
                    ],
                },
            }
        ],
        DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
        USE_TZ=True,
        SEO_COLLECTION='tests.sample_site.collection',
    )
