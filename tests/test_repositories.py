"""
Tests for seo/repositories.py and the SeoSetting model.
"""
import pytest

from seo.models import SeoSetting
from seo.repositories import InMemorySettingsRepository, ModelSettingsRepository
from seo.setting import Setting
from tests.sample_site import build_collection


class TestInMemorySettingsRepository:
    """Tests for InMemorySettingsRepository."""

    def test_missing_returns_none(self):
        assert InMemorySettingsRepository().find_setting("CategoryPage") is None

    def test_save_and_find(self):
        repository = InMemorySettingsRepository()
        repository.save_setting("CategoryPage", Setting(title="{{Name}}"))
        assert repository.find_setting("CategoryPage") == Setting(title="{{Name}}")

    def test_stored_copy_is_isolated(self):
        """Mutating a saved or returned Setting does not change what is stored."""
        repository = InMemorySettingsRepository()
        setting = Setting(title="Before", global_setting={"SiteName": "Qor"})
        repository.save_setting("CategoryPage", setting)
        setting.title = "After"
        setting.global_setting["SiteName"] = "Changed"

        found = repository.find_setting("CategoryPage")
        assert found.title == "Before"
        found.global_setting["SiteName"] = "Changed again"
        assert repository.find_setting("CategoryPage").global_setting == {"SiteName": "Qor"}

    def test_initial_settings(self):
        repository = InMemorySettingsRepository({"CategoryPage": {"title": "{{SiteName}}"}})
        assert repository.find_setting("CategoryPage").title == "{{SiteName}}"
        assert repository.names() == ["CategoryPage"]


@pytest.mark.django_db
class TestModelSettingsRepository:
    """Tests for ModelSettingsRepository against the database."""

    def test_missing_returns_none(self):
        assert ModelSettingsRepository().find_setting("CategoryPage") is None

    def test_save_creates_then_updates(self):
        repository = ModelSettingsRepository()
        repository.save_setting("CategoryPage", Setting(title="{{Name}}", enabled_customize=True))
        repository.save_setting("CategoryPage", Setting(title="{{SiteName}} {{Name}}", keywords="shop"))

        assert SeoSetting.objects.count() == 1
        record = SeoSetting.objects.get(name="CategoryPage")
        assert record.title == "{{SiteName}} {{Name}}"
        assert record.keywords == "shop"
        assert record.enabled_customize is False
        assert str(record) == "CategoryPage"

    def test_round_trip_global_setting(self):
        repository = ModelSettingsRepository()
        repository.save_setting("SeoGlobalSettings", Setting(global_setting={"SiteName": "Qor"}))
        assert repository.find_setting("SeoGlobalSettings").global_setting == {"SiteName": "Qor"}
        assert repository.names() == ["SeoGlobalSettings"]

    def test_collection_renders_from_database(self):
        collection = build_collection(repository=ModelSettingsRepository())
        collection.save_global_setting_override({"SiteName": "ThePlant Qor"})
        collection.save_page_setting("CategoryPage", Setting(title="{{SiteName}} {{Name}}", description="{{URLTitle}}"))

        html = collection.render("CategoryPage", "Clothing", "/clothing")
        assert html == '<title>ThePlant Qor Clothing</title><meta name="description" content="/clothing"><meta name="keywords" content=""/>'
