from django.conf import settings
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    """runserver que por defecto escucha en HOST:PORT de la configuración"""

    default_addr = settings.HOST
    default_port = str(settings.PORT)
