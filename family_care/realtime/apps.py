from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class RealtimeConfig(AppConfig):
    name = "family_care.realtime"
    verbose_name = _("Realtime")

    def ready(self):
        from .socketio import RealtimeGateway  # noqa: PLC0415
        from .socketio import socketio_cors_origins  # noqa: PLC0415

        self.gateway = RealtimeGateway(cors_allowed_origins=socketio_cors_origins())
