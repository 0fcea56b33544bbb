# seotemplates/app/seo/templatetags/seo_tags.py
from django import template

from ..conf import get_collection
from ..microdata import render_microdata

register = template.Library()


@register.simple_tag(takes_context=True)
def render_seo(context, page_type, *objects, override=None):
    """
    Renders the <title> and <meta> tags for a registered page type.
    Usage: {% render_seo "CategoryPage" category category.get_absolute_url override=category.seo %}

    Uses `seo_collection` from the template context when present (see the
    seo_context context processor), otherwise SEO_COLLECTION.
    """
    collection = context.get('seo_collection') or get_collection()
    return collection.render(page_type, *objects, override=override)


@register.simple_tag
def microdata(value):
    """
    Renders a structured data snippet.
    Usage: {% microdata product_microdata %}
    """
    if value is None or value == "":
        return ""
    return render_microdata(value)
