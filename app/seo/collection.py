# seotemplates/app/seo/collection.py
import logging
from collections.abc import Mapping

from django.utils.safestring import mark_safe

from . import conf
from .definitions import SeoDefinition
from .exceptions import DuplicatePageType, UnknownPageType
from .repositories import InMemorySettingsRepository
from .setting import Setting
from .substitution import substitute
from .variables import as_variable_map, stringify

logger = logging.getLogger(__name__)

TAGS_TEMPLATE = '<title>{title}</title><meta name="description" content="{description}"><meta name="keywords" content="{keywords}"/>'


class SeoCollection:
    """
    Registry of page types plus the global settings record, and the
    resolver that renders a page type's <title> and <meta> tags.

    Build one at startup, register the global record and every page type,
    then call render() per page view:

        collection = SeoCollection(repository=ModelSettingsRepository())
        collection.register_global_setting(GlobalSetting(SiteName="Shop"))
        collection.register_page_type(SeoDefinition(
            name="CategoryPage",
            settings=["Name"],
            context=lambda *objects: {"Name": objects[0].name},
        ))
        collection.render("CategoryPage", category, override=category.seo)

    Registration is not synchronised and is expected to finish before
    concurrent rendering starts.
    """

    def __init__(self, repository=None, global_setting=None, global_setting_name=None):
        self.repository = repository if repository is not None else InMemorySettingsRepository()
        self.global_setting = global_setting
        self._global_setting_name = global_setting_name
        self._definitions = {}

    @property
    def global_setting_name(self):
        return self._global_setting_name or conf.global_setting_name()

    # --- Registration ---

    def register_global_setting(self, record):
        # Validate the shape now rather than on the first page view.
        as_variable_map(record)
        self.global_setting = record
        logger.info(f"[register] Global SEO settings registered ({type(record).__name__}).")

    def register_page_type(self, definition=None, **kwargs):
        """
        Registers a SeoDefinition, or builds one from keyword arguments.
        """
        if definition is None:
            definition = SeoDefinition(**kwargs)
        elif kwargs:
            raise TypeError("Pass either a SeoDefinition or keyword arguments, not both.")

        if definition.name == self.global_setting_name:
            raise DuplicatePageType(f"'{definition.name}' is reserved for the global SEO settings.")
        if definition.name in self._definitions:
            raise DuplicatePageType(f"SEO page type '{definition.name}' is already registered.")

        self._definitions[definition.name] = definition
        logger.info(f"[register] SEO page type '{definition.name}' registered with variables {list(definition.settings)}.")
        return definition

    def get_definition(self, name):
        try:
            return self._definitions[name]
        except KeyError:
            raise UnknownPageType(name) from None

    def definitions(self):
        return list(self._definitions.values())

    def __contains__(self, name):
        return name in self._definitions

    # --- Stored settings ---

    def page_setting(self, name):
        """The stored Setting for a page type, or its registered default."""
        definition = self.get_definition(name)
        stored = self.repository.find_setting(definition.name)
        if stored is None:
            return definition.default_setting.copy()
        return stored

    def save_page_setting(self, name, setting):
        definition = self.get_definition(name)
        self.repository.save_setting(definition.name, setting)

    def global_setting_override(self):
        stored = self.repository.find_setting(self.global_setting_name)
        if stored is None:
            return {}
        return dict(stored.global_setting)

    def save_global_setting_override(self, variables):
        setting = Setting(global_setting={name: stringify(value) for name, value in variables.items()})
        self.repository.save_setting(self.global_setting_name, setting)

    def global_variables(self):
        """Registered global record values with the stored overrides applied."""
        variables = as_variable_map(self.global_setting)
        variables.update(self.global_setting_override())
        return variables

    # --- Resolution ---

    def resolve_setting(self, definition, override=None):
        """
        Picks the Setting to render: `override` when it has customisation
        enabled, otherwise the page type's stored or default Setting.
        """
        if not override:
            override = None
        elif not isinstance(override, Setting):
            override = Setting.from_dict(override)
        if override is not None and override.enabled_customize:
            logger.debug(f"[resolve] '{definition.name}' uses a customised setting.")
            return override
        return self.page_setting(definition.name)

    def build_bindings(self, definition, objects=(), setting=None):
        """
        Merges variable bindings, later layers winning: global record,
        stored global overrides, `setting.global_setting`, then whatever the
        definition's context function returns for `objects`.
        """
        bindings = self.global_variables()
        if setting is not None:
            bindings.update({name: stringify(value) for name, value in setting.global_setting.items()})

        try:
            context = definition.context(*objects) or {}
        except Exception:
            logger.exception(f"[render] Context function for '{definition.name}' failed; rendering without its variables.")
            context = {}

        if not isinstance(context, Mapping):
            logger.error(f"[render] Context function for '{definition.name}' returned {type(context).__name__}, not a mapping; ignoring it.")
            context = {}

        bindings.update({str(name): stringify(value) for name, value in context.items()})
        return bindings

    # --- Rendering ---

    def render_setting(self, definition, setting, objects=()):
        """Renders `setting` as-is against `definition`, e.g. for admin previews."""
        bindings = self.build_bindings(definition, objects, setting)
        html = TAGS_TEMPLATE.format(
            title=substitute(setting.title, bindings),
            description=substitute(setting.description, bindings),
            keywords=substitute(setting.keywords, bindings),
        )
        # Templates are administrator-authored; the output is trusted markup.
        return mark_safe(html)

    def render(self, name, *objects, override=None):
        """
        Renders the <title>, description and keywords tags for page type
        `name`. Raises UnknownPageType if `name` was never registered.
        """
        definition = self.get_definition(name)
        setting = self.resolve_setting(definition, override)
        logger.debug(f"[render] '{name}' with {len(objects)} object(s).")
        return self.render_setting(definition, setting, objects)
