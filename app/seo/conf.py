# seotemplates/app/seo/conf.py
from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

DEFAULT_GLOBAL_SETTING_NAME = "SeoGlobalSettings"


def global_setting_name():
    """The reserved repository key the global record is stored under."""
    if not settings.configured:
        return DEFAULT_GLOBAL_SETTING_NAME
    return getattr(settings, 'SEO_GLOBAL_SETTING_NAME', DEFAULT_GLOBAL_SETTING_NAME)


def get_collection():
    """
    Imports the host's SeoCollection from the SEO_COLLECTION dotted path.
    """
    from .collection import SeoCollection

    path = getattr(settings, 'SEO_COLLECTION', None)
    if not path:
        raise ImproperlyConfigured("SEO_COLLECTION must name the project's SeoCollection instance.")
    try:
        collection = import_string(path)
    except ImportError as e:
        raise ImproperlyConfigured(f"SEO_COLLECTION '{path}' could not be imported: {e}") from e

    if not isinstance(collection, SeoCollection):
        raise ImproperlyConfigured(f"SEO_COLLECTION '{path}' is not a SeoCollection.")
    return collection
