# seotemplates/app/seo/context_processors.py
import logging

from django.core.exceptions import ImproperlyConfigured

from .conf import get_collection

logger = logging.getLogger(__name__)


def seo_context(request):
    """
    Context processor that makes the SEO collection and the merged global
    variables (SiteName etc.) available to every template.
    """
    try:
        collection = get_collection()
    except ImproperlyConfigured as e:
        logger.error(f"[seo_context] {e}")
        return {
            'seo_collection': None,
            'seo_globals': {},
        }

    try:
        seo_globals = collection.global_variables()
    except Exception:
        # Fail safe: a broken settings store must not take the page down.
        logger.exception("[seo_context] Could not load global SEO variables.")
        seo_globals = {}

    return {
        'seo_collection': collection,
        'seo_globals': seo_globals,
    }
