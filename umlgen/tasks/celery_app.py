from celery import Celery
from celery.signals import setup_logging
from umlgen.core.config import settings
from umlgen.core.logging import configure_logging

celery_app = Celery("uml_spring_generator", broker=settings.redis_url, backend=settings.redis_url, include=["umlgen.tasks.exports"])
celery_app.conf.update(task_track_started=True, result_expires=3600, broker_connection_retry_on_startup=True,)


@setup_logging.connect
def _configure_worker_logging(**kwargs):
    configure_logging()
