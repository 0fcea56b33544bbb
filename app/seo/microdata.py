# seotemplates/app/seo/microdata.py
"""
schema.org structured data snippets.

Each variant renders itself; pick the variant in your view or template and
call render(), or pass any of them to render_microdata(). Empty fields still
produce their tag (an empty name renders <span itemprop="name"></span>).
"""
import json
from dataclasses import dataclass

from django.utils.html import format_html
from django.utils.safestring import mark_safe

# Characters that must not appear raw inside a <script> block. Forward
# slashes are escaped too, so "</script>" can never be closed early.
_JSON_SCRIPT_ESCAPES = {
    ord('/'): '\\/',
    ord('<'): '\\u003C',
    ord('>'): '\\u003E',
    ord('&'): '\\u0026',
}


def json_ld(payload):
    """Wraps `payload` in an application/ld+json script tag."""
    data = json.dumps(payload, indent=2, ensure_ascii=False).translate(_JSON_SCRIPT_ESCAPES)
    return mark_safe(f'<script type="application/ld+json">\n{data}\n</script>')


class MicroData:
    """Base for structured data variants."""

    def render(self):
        raise NotImplementedError

    def __html__(self):
        return self.render()

    def __str__(self):
        return self.render()


@dataclass
class MicroProduct(MicroData):
    name: str = ""
    image: str = ""
    description: str = ""
    brand_name: str = ""
    sku: str = ""
    rating_value: float = 0
    review_count: int = 0
    price_currency: str = ""
    price: float = 0
    price_valid_until: str = ""
    seller_name: str = ""
    availability: str = ""  # schema.org ItemAvailability, e.g. "InStock"

    def render(self):
        return format_html(
            '<div itemscope itemtype="http://schema.org/Product">\n'
            '  <span itemprop="name">{}</span>\n'
            '  <img itemprop="image" src="{}" />\n'
            '  <span itemprop="description">{}</span>\n'
            '  <span itemprop="brand">{}</span>\n'
            '  <span itemprop="sku">{}</span>\n'
            '  <div itemprop="aggregateRating" itemscope itemtype="http://schema.org/AggregateRating">\n'
            '    <span itemprop="ratingValue">{}</span>\n'
            '    <span itemprop="reviewCount">{}</span>\n'
            '  </div>\n'
            '  <div itemprop="offers" itemscope itemtype="http://schema.org/Offer">\n'
            '    <meta itemprop="priceCurrency" content="{}" />\n'
            '    <span itemprop="price">{}</span>\n'
            '    <span itemprop="priceValidUntil">{}</span>\n'
            '    <span itemprop="seller" itemscope itemtype="http://schema.org/Organization">\n'
            '      <span itemprop="name">{}</span>\n'
            '    </span>\n'
            '    <link itemprop="availability" href="http://schema.org/{}" />\n'
            '  </div>\n'
            '</div>',
            self.name, self.image, self.description, self.brand_name, self.sku,
            self.rating_value, self.review_count,
            self.price_currency, self.price, self.price_valid_until,
            self.seller_name, self.availability,
        )


@dataclass
class MicroSearch(MicroData):
    """Sitelinks search box: `target` holds a {search_term} style placeholder."""
    url: str = ""
    target: str = ""
    query_input: str = ""

    def render(self):
        return json_ld({
            "@context": "http://schema.org",
            "@type": "WebSite",
            "url": self.url,
            "potentialAction": {
                "@type": "SearchAction",
                "target": self.target,
                "query-input": self.query_input,
            },
        })


@dataclass
class MicroContact(MicroData):
    url: str = ""
    telephone: str = ""
    contact_type: str = ""

    def render(self):
        return json_ld({
            "@context": "http://schema.org",
            "@type": "Organization",
            "url": self.url,
            "contactPoint": [{
                "@type": "ContactPoint",
                "telephone": self.telephone,
                "contactType": self.contact_type,
            }],
        })


def render_microdata(value):
    """Renders any object with a render() method, e.g. a MicroData variant."""
    render = getattr(value, 'render', None)
    if not callable(render):
        raise TypeError(f"{type(value).__name__} cannot be rendered as microdata.")
    return render()
