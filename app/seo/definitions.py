# seotemplates/app/seo/definitions.py
from dataclasses import dataclass, field

from .setting import Setting
from .substitution import find_variables


def empty_context(*objects):
    return {}


def context_value(objects, index, expected_type=str):
    """
    Returns objects[index] if that slot exists and holds an `expected_type`,
    otherwise None.

    Context functions use this so a missing slot, a None or an object of the
    wrong type simply produces no binding.
    """
    if index >= len(objects):
        return None
    value = objects[index]
    if value is None or not isinstance(value, expected_type):
        return None
    return value


@dataclass(frozen=True)
class SeoDefinition:
    """
    A page type registration, e.g. "CategoryPage".

    `settings` lists the variable names the page type offers to template
    authors. It is advisory: whatever `context` returns is bound, listed or
    not. `context` receives the objects passed to render() and returns
    {variable name: value}.
    """
    name: str
    settings: tuple = ()
    context: object = empty_context
    default_setting: Setting = field(default_factory=Setting)

    def __post_init__(self):
        object.__setattr__(self, 'settings', tuple(self.settings))
        if self.context is None:
            object.__setattr__(self, 'context', empty_context)

    def unsupported_variables(self, setting, global_names=()):
        """
        Names used by `setting`'s templates that neither this page type nor
        the global record declares.
        """
        known = set(self.settings) | set(global_names) | set(setting.global_setting)
        unknown = []
        for template in setting.templates:
            for name in find_variables(template):
                if name not in known and name not in unknown:
                    unknown.append(name)
        return unknown
