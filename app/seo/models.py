# seotemplates/app/seo/models.py
from django.db import models

from .setting import Setting


class SeoSetting(models.Model):
    """
    A stored Setting: one row per page type, plus one row for the global
    variable overrides (see SEO_GLOBAL_SETTING_NAME).
    """
    name = models.CharField(max_length=255, unique=True, help_text="Page type name, e.g. 'CategoryPage', or the global settings key.")
    title = models.CharField(max_length=255, blank=True, help_text="Title template, e.g. '{{SiteName}} {{Name}}'.")
    description = models.TextField(blank=True, help_text="Meta description template.")
    keywords = models.TextField(blank=True, help_text="Meta keywords template.")
    enabled_customize = models.BooleanField(default=False)
    global_setting = models.JSONField(default=dict, blank=True, help_text="Overrides for global variables, e.g. {'SiteName': 'Shop'}.")
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = "SEO setting"

    def __str__(self):
        return self.name

    def to_setting(self):
        return Setting(
            title=self.title,
            description=self.description,
            keywords=self.keywords,
            enabled_customize=self.enabled_customize,
            global_setting=dict(self.global_setting or {}),
        )


class SettingField(models.JSONField):
    """
    Embeds an entity's own Setting on a host model:

        class Category(models.Model):
            seo = SettingField()

    Values read back as Setting instances.
    """

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('default', dict)
        kwargs.setdefault('blank', True)
        super().__init__(*args, **kwargs)

    def from_db_value(self, value, expression, connection):
        value = super().from_db_value(value, expression, connection)
        return Setting.from_dict(value)

    def to_python(self, value):
        if isinstance(value, Setting):
            return value
        return Setting.from_dict(super().to_python(value))

    def get_prep_value(self, value):
        if isinstance(value, Setting):
            value = value.to_dict()
        return super().get_prep_value(value)

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        if isinstance(value, Setting):
            value = value.to_dict()
        return self.get_prep_value(value)
