from django.db import migrations
from django.db import models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="SeoSetting",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Page type name, e.g. 'CategoryPage', or the global settings key.",
                        max_length=255,
                        unique=True,
                    ),
                ),
                (
                    "title",
                    models.CharField(
                        blank=True,
                        help_text="Title template, e.g. '{{SiteName}} {{Name}}'.",
                        max_length=255,
                    ),
                ),
                (
                    "description",
                    models.TextField(blank=True, help_text="Meta description template."),
                ),
                (
                    "keywords",
                    models.TextField(blank=True, help_text="Meta keywords template."),
                ),
                ("enabled_customize", models.BooleanField(default=False)),
                (
                    "global_setting",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Overrides for global variables, e.g. {'SiteName': 'Shop'}.",
                    ),
                ),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "SEO setting",
                "ordering": ["name"],
            },
        ),
    ]
