# seotemplates/app/seo/repositories.py
import logging
import threading

from .setting import Setting

logger = logging.getLogger(__name__)


class SettingsRepository:
    """
    Where page-type and global Settings are stored, keyed by name.

    find_setting() returns None when nothing is stored under `name`.
    """

    def find_setting(self, name):
        raise NotImplementedError

    def save_setting(self, name, setting):
        raise NotImplementedError


class InMemorySettingsRepository(SettingsRepository):
    """Process-local repository. Stored Settings are copied in and out."""

    def __init__(self, settings=None):
        self._lock = threading.Lock()
        self._settings = {}
        for name, setting in (settings or {}).items():
            self._settings[name] = Setting.from_dict(setting).copy()

    def find_setting(self, name):
        with self._lock:
            setting = self._settings.get(name)
        return setting.copy() if setting is not None else None

    def save_setting(self, name, setting):
        with self._lock:
            self._settings[name] = setting.copy()
        logger.info(f"[save_setting] Stored SEO setting '{name}' in memory.")

    def names(self):
        with self._lock:
            return sorted(self._settings)


class ModelSettingsRepository(SettingsRepository):
    """Repository backed by the SeoSetting model."""

    @property
    def model(self):
        from .models import SeoSetting
        return SeoSetting

    def find_setting(self, name):
        record = self.model.objects.filter(name=name).first()
        if record is None:
            return None
        return record.to_setting()

    def save_setting(self, name, setting):
        _, created = self.model.objects.update_or_create(
            name=name,
            defaults={
                'title': setting.title,
                'description': setting.description,
                'keywords': setting.keywords,
                'enabled_customize': setting.enabled_customize,
                'global_setting': dict(setting.global_setting),
            }
        )
        logger.info(f"[save_setting] {'Created' if created else 'Updated'} SEO setting '{name}'.")

    def names(self):
        return list(self.model.objects.order_by('name').values_list('name', flat=True))
