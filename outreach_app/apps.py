from django.apps import AppConfig, apps
from django.conf import settings


class OutreachAppConfig(AppConfig):
    name = 'outreach_app'
    verbose_name = 'Community outreach projects'

    store = None

    def ready(self):
        self.reset_store()

    def reset_store(self, seed=None):
        """Replace the process-wide store with a fresh empty or seeded one."""
        from .store import ProjectStore

        if seed is None:
            seed = getattr(settings, 'OUTREACH_SEED_DATA', True)
        delay = getattr(settings, 'OUTREACH_SIMULATED_DELAY', 0)
        self.store = ProjectStore.seeded(delay=delay) if seed else ProjectStore(delay=delay)
        return self.store


def get_store():
    return apps.get_app_config('outreach_app').store
