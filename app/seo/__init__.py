# seotemplates/app/seo/__init__.py
from .collection import SeoCollection
from .definitions import SeoDefinition, context_value
from .exceptions import DuplicatePageType, SeoError, UnknownPageType
from .microdata import MicroContact, MicroData, MicroProduct, MicroSearch, render_microdata
from .repositories import InMemorySettingsRepository, ModelSettingsRepository, SettingsRepository
from .setting import Setting
from .substitution import find_variables, substitute
from .variables import GlobalSetting
