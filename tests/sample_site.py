"""
A small host site used across the tests: a global record with SiteName and
BrandName, and a CategoryPage page type taking (name, url_title) objects.
"""
from seo import GlobalSetting, SeoCollection, SeoDefinition, Setting, context_value


class Category:
    def __init__(self, name, seo=None):
        self.name = name
        self.seo = seo if seo is not None else Setting()


def category_context(*objects):
    context = {}
    name = context_value(objects, 0)
    if name is not None:
        context["Name"] = name
    url_title = context_value(objects, 1)
    if url_title is not None:
        context["URLTitle"] = url_title
    return context


def build_collection(repository=None):
    collection = SeoCollection(repository=repository)
    collection.register_global_setting(GlobalSetting(SiteName="Qor SEO", BrandName="Qor"))
    collection.register_page_type(SeoDefinition(name="Default Page"))
    collection.register_page_type(SeoDefinition(
        name="CategoryPage",
        settings=["Name", "URLTitle"],
        context=category_context,
    ))
    return collection


# Referenced by SEO_COLLECTION in conftest.py. Tests must not mutate it.
collection = build_collection()
collection.save_page_setting("CategoryPage", Setting(title="{{SiteName}} {{Name}}", description="{{URLTitle}}"))
