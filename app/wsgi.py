"""
WSGI config for app project.

It exposes the WSGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/5.2/howto/deployment/wsgi/
"""

import logging
import os

from django.core.management import call_command
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'app.settings')

logger = logging.getLogger(__name__)


def _truthy(value: str) -> bool:
	return value.strip().lower() in {"1", "true", "yes", "on"}


def _claim_startup_lock() -> bool:
	"""Return True for the one worker that should run the startup tasks.

	We use an atomic lock file create on Linux (/tmp) so multiple gunicorn
	workers don't race migrations.
	"""
	lock_path = os.environ.get("STARTUP_TASK_LOCKFILE", "/tmp/wellness_ads_startup.lock")
	try:
		lock_fd = os.open(lock_path, os.O_CREAT | os.O_EXCL | os.O_WRONLY)
	except FileExistsError:
		return False
	except OSError:
		logger.warning("Could not create startup lock %s; running startup tasks anyway", lock_path)
		return True

	try:
		os.write(lock_fd, str(os.getpid()).encode("utf-8"))
	finally:
		os.close(lock_fd)
	return True


def _maybe_run_startup_tasks() -> None:
	"""Optional startup tasks for demo deployments.

	NOTE: Running migrations at import time is not recommended for real production.
	For a demo deploy (single service), it prevents "no such table" errors when the
	platform doesn't run `manage.py migrate` as part of the start command.
	"""
	auto_migrate = _truthy(os.environ.get("AUTO_MIGRATE_ON_STARTUP", ""))
	auto_seed = _truthy(os.environ.get("AUTO_SEED_DEMO_ON_STARTUP", ""))
	if not (auto_migrate or auto_seed):
		return
	if not _claim_startup_lock():
		return

	try:
		if auto_migrate:
			call_command("migrate", interactive=False, verbosity=1)
		if auto_seed:
			call_command("seed_demo", verbosity=1)
	except Exception:
		# Demo convenience only; never prevent the server from starting.
		logger.exception("Startup tasks failed")


application = get_wsgi_application()

# Run demo startup tasks only after Django is fully initialized.
_maybe_run_startup_tasks()
