# seotemplates/app/seo/variables.py
from collections.abc import Mapping

from django.core.exceptions import ImproperlyConfigured


def stringify(value):
    return "" if value is None else str(value)


def as_variable_map(record):
    """
    Turns the host's global settings record into {variable name: string}.

    The record either implements `as_variable_map()` or is itself a mapping.
    A record of any other shape is a configuration mistake.
    """
    if record is None:
        return {}

    if hasattr(record, 'as_variable_map'):
        variables = record.as_variable_map()
    elif isinstance(record, Mapping):
        variables = record
    else:
        raise ImproperlyConfigured(
            f"Global SEO settings of type {type(record).__name__} must be a mapping "
            "or implement as_variable_map()."
        )

    return {str(name): stringify(value) for name, value in variables.items()}


class GlobalSetting:
    """
    A plain global settings record for sites without their own model.

    Every keyword becomes a global template variable:
        GlobalSetting(SiteName="Shop", BrandName="Acme")
    """

    def __init__(self, **variables):
        self.variables = {name: stringify(value) for name, value in variables.items()}

    def as_variable_map(self):
        return dict(self.variables)

    def __repr__(self):
        return f"GlobalSetting({self.variables!r})"
