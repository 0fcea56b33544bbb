# seotemplates/app/seo/setting.py
from collections.abc import Mapping
from dataclasses import dataclass, field, replace


@dataclass
class Setting:
    """
    The Title/Description/Keywords template triple for one page type or one
    entity.

    `enabled_customize` only matters on an entity's own Setting: when it is
    False the page-type default is rendered instead, even if the templates
    here are filled in. `global_setting` overrides global variables
    (e.g. SiteName) for renders that resolve to this Setting.
    """
    title: str = ""
    description: str = ""
    keywords: str = ""
    enabled_customize: bool = False
    global_setting: dict = field(default_factory=dict)

    @property
    def templates(self):
        return (self.title, self.description, self.keywords)

    def is_empty(self):
        return not any(self.templates) and not self.global_setting

    def copy(self, **changes):
        changes.setdefault("global_setting", dict(self.global_setting))
        return replace(self, **changes)

    def to_dict(self):
        return {
            "title": self.title,
            "description": self.description,
            "keywords": self.keywords,
            "enabled_customize": self.enabled_customize,
            "global_setting": dict(self.global_setting),
        }

    @classmethod
    def from_dict(cls, data):
        if isinstance(data, cls):
            return data
        # An unset override (None, "" from a missing template variable, {}) is an empty Setting.
        if not data:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError(f"Cannot build a Setting from {type(data).__name__}.")
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            keywords=data.get("keywords") or "",
            enabled_customize=bool(data.get("enabled_customize", False)),
            global_setting={
                str(key): "" if value is None else str(value)
                for key, value in (data.get("global_setting") or {}).items()
            },
        )
